"""Measure the length of a pulse on a pin."""

from typing import Callable

from .timing import micros

DEFAULT_TIMEOUT_US = 1_000_000


def pulse_in_long(
    read: Callable[[], int],
    state: int,
    timeout: int = DEFAULT_TIMEOUT_US,
    clock: Callable[[], int] = micros,
) -> int:
    """Return the length in microseconds of the next pulse at ``state``.

    ``read`` samples the pin level and ``clock`` gives the time in
    microseconds. Any pulse already in progress is skipped. Returns 0 if
    the whole measurement exceeds ``timeout`` microseconds.
    """
    start_total = clock()

    def timed_out() -> bool:
        return clock() - start_total > timeout

    while read() == state:
        if timed_out():
            return 0
    while read() != state:
        if timed_out():
            return 0
    start = clock()
    while read() == state:
        if timed_out():
            return 0
    return clock() - start


def pulse_in(
    read: Callable[[], int],
    state: int,
    timeout: int = DEFAULT_TIMEOUT_US,
    clock: Callable[[], int] = micros,
) -> int:
    """Same as pulse_in_long()."""
    return pulse_in_long(read, state, timeout, clock)