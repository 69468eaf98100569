"""Pin enumerations, math helpers, bit helpers and random numbers."""

import random as _random
from enum import IntEnum

PI = 3.1415926535897932384626433832795
HALF_PI = 1.5707963267948966192313216916398
TWO_PI = 6.283185307179586476925286766559
DEG_TO_RAD = 0.017453292519943295769236907684886
RAD_TO_DEG = 57.295779513082320876798154814105
EULER = 2.718281828459045235360287471352

SERIAL = 0x0
DISPLAY = 0x1


class PinStatus(IntEnum):
    LOW = 0
    HIGH = 1
    CHANGE = 2
    FALLING = 3
    RISING = 4


class PinMode(IntEnum):
    INPUT = 0x0
    OUTPUT = 0x1
    INPUT_PULLUP = 0x2
    INPUT_PULLDOWN = 0x3


class BitOrder(IntEnum):
    LSBFIRST = 0
    MSBFIRST = 1


def constrain(amt, low, high):
    """Clamp ``amt`` to the range [low, high]."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def radians(deg):
    return deg * DEG_TO_RAD


def degrees(rad):
    return rad * RAD_TO_DEG


def sq(x):
    return x * x


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` from one integer range to another, truncating toward zero."""
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def make_word(high: int, low: int | None = None) -> int:
    """Build a 16-bit word from two bytes, or truncate a single value."""
    if low is None:
        return high & 0xFFFF
    return ((high & 0xFF) << 8) | (low & 0xFF)


def low_byte(w: int) -> int:
    return w & 0xFF


def high_byte(w: int) -> int:
    return (w >> 8) & 0xFF


def bit(b: int) -> int:
    return 1 << b


def bit_read(value: int, bit_index: int) -> int:
    return (value >> bit_index) & 0x01


def bit_set(value: int, bit_index: int) -> int:
    """Return ``value`` with the given bit set."""
    return value | (1 << bit_index)


def bit_clear(value: int, bit_index: int) -> int:
    """Return ``value`` with the given bit cleared."""
    return value & ~(1 << bit_index)


def bit_write(value: int, bit_index: int, bitvalue) -> int:
    """Return ``value`` with the given bit set or cleared."""
    return bit_set(value, bit_index) if bitvalue else bit_clear(value, bit_index)


_rng = _random.Random()


def random_seed(seed: int) -> None:
    """Seed the generator; a seed of zero leaves it untouched."""
    if seed != 0:
        _rng.seed(seed)


def _raw_random() -> int:
    return _rng.getrandbits(31)


def _random_below(howbig: int) -> int:
    if howbig == 0:
        return 0
    return _raw_random() % abs(howbig)


def random_number(a: int, b: int | None = None) -> int:
    """With one argument, a value in [0, a); with two, a value in [a, b).

    An empty range returns its lower bound.
    """
    if b is None:
        return _random_below(a)
    if a >= b:
        return a
    return _random_below(b - a) + a