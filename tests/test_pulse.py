import itertools

import pytest

from wiringcore.common import PinStatus
from wiringcore.pulse import pulse_in, pulse_in_long

LOW = PinStatus.LOW
HIGH = PinStatus.HIGH


def _reader(levels):
    it = iter(levels)
    return lambda: next(it)


def _clock():
    return itertools.count().__next__


@pytest.mark.parametrize("func", [pulse_in, pulse_in_long])
def test_measures_high_pulse(func):
    levels = [LOW, LOW, HIGH, HIGH, HIGH, LOW]
    assert func(_reader(levels), HIGH, 1000, _clock()) == 3


def test_longer_pulse_measures_longer():
    short = [LOW, HIGH, HIGH, LOW]
    long_ = [LOW, HIGH] + [HIGH] * 20 + [LOW]
    a = pulse_in_long(_reader(short), HIGH, 1000, _clock())
    b = pulse_in_long(_reader(long_), HIGH, 1000, _clock())
    assert b > a


def test_skips_pulse_in_progress():
    in_progress = [HIGH, HIGH, LOW, LOW, HIGH, HIGH, HIGH, LOW]
    fresh = [LOW, LOW, HIGH, HIGH, HIGH, LOW]
    assert pulse_in_long(_reader(in_progress), HIGH, 1000, _clock()) == pulse_in_long(
        _reader(fresh), HIGH, 1000, _clock()
    )


def test_timeout_while_stuck_in_state():
    assert pulse_in(lambda: HIGH, HIGH, 10, _clock()) == 0


def test_timeout_waiting_for_pulse():
    assert pulse_in(lambda: LOW, HIGH, 10, _clock()) == 0


def test_timeout_during_pulse():
    levels = itertools.chain([LOW], itertools.repeat(HIGH))
    assert pulse_in_long(levels.__next__, HIGH, 50, _clock()) == 0


def test_pulse_in_matches_pulse_in_long():
    levels = [HIGH, LOW, LOW, LOW, HIGH]
    assert pulse_in(_reader(levels), LOW, 1000, _clock()) == pulse_in_long(
        _reader(levels), LOW, 1000, _clock()
    )