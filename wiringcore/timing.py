"""Monotonic time keeping, delays and the setup/loop sketch runner."""

import time
from typing import Callable

_origin_ns = 0


def _now_ns() -> int:
    return time.monotonic_ns()


def init_time() -> None:
    """Mark the current moment as time zero for millis() and micros()."""
    global _origin_ns
    _origin_ns = _now_ns()


def millis() -> int:
    """Milliseconds elapsed since init_time()."""
    return _now_ns() // 1_000_000 - _origin_ns // 1_000_000


def micros() -> int:
    """Microseconds elapsed since init_time()."""
    return _now_ns() // 1_000 - _origin_ns // 1_000


def delay(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError("delay must not be negative")
    time.sleep(ms / 1000)


def delay_microseconds(us: int) -> None:
    """Wait ``us`` microseconds; short waits spin for better precision."""
    if us < 0:
        raise ValueError("delay must not be negative")
    if us > 200:
        time.sleep(us / 1_000_000)
        return
    end = _now_ns() + us * 1_000
    while _now_ns() < end:
        pass


def yield_control() -> None:
    """Give other threads a chance to run."""
    time.sleep(0)


def run_sketch(
    setup: Callable[[], None],
    loop: Callable[[], None],
    cycles: int | None = None,
) -> None:
    """Reset the clock, call ``setup`` once, then call ``loop`` repeatedly.

    With ``cycles`` of None the loop runs forever.
    """
    if cycles is not None and cycles < 0:
        raise ValueError("cycles must not be negative")
    init_time()
    setup()
    if cycles is None:
        while True:
            loop()
    for _ in range(cycles):
        loop()