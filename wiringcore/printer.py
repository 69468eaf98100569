"""Formatted output of numbers and text onto a byte sink."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .wstring_base import StringBase

DEC = 10
HEX = 16
OCT = 8
BIN = 2

_ULONG_MASK = (1 << 64) - 1
_FLOAT_LIMIT = 4294967040.0
_NEWLINE = "\r\n"
_DEFAULT_DIGITS = 2
_NOTHING = object()


def _unsigned_digits(value: int, base: int) -> str:
    base &= 0xFF
    if base < 2:
        base = DEC
    out = []
    while True:
        value, digit = divmod(value, base)
        out.append(chr(ord("0") + digit) if digit < 10 else chr(ord("A") + digit - 10))
        if not value:
            break
    return "".join(reversed(out))


def format_number(value: int, base: int = DEC) -> str:
    """Render an integer with upper-case digits.

    Negative numbers get a minus sign in base 10 and appear as their
    64-bit two's complement in any other base. Base 1 means base 10.
    """
    if base == 0:
        raise ValueError("base 0 sends a raw byte, it has no text form")
    if base == DEC and value < 0:
        return "-" + _unsigned_digits(-value & _ULONG_MASK, DEC)
    return _unsigned_digits(value & _ULONG_MASK, base)


def format_float(value: float, digits: int = _DEFAULT_DIGITS) -> str:
    """Render ``value`` rounded to ``digits`` decimals.

    Yields "nan", "inf" or "ovf" for values that cannot be shown.
    """
    digits &= 0xFF
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    if value > _FLOAT_LIMIT or value < -_FLOAT_LIMIT:
        return "ovf"
    parts = []
    if value < 0.0:
        parts.append("-")
        value = -value
    rounding = 0.5
    for _ in range(digits):
        rounding /= 10.0
    value += rounding
    int_part = int(value)
    remainder = value - int_part
    parts.append(format_number(int_part))
    if digits > 0:
        parts.append(".")
    for _ in range(digits):
        remainder *= 10.0
        digit = int(remainder)
        parts.append(str(digit))
        remainder -= digit
    return "".join(parts)


class Print(ABC):
    """Base for byte sinks; subclasses supply write_byte()."""

    def __init__(self) -> None:
        self.write_error = 0

    @abstractmethod
    def write_byte(self, value: int) -> int:
        """Send one byte; return 1 if it was accepted, 0 otherwise."""

    def write(self, data) -> int:
        """Send bytes, text (UTF-8) or a single byte value; return the count accepted.

        Stops at the first byte that is not accepted.
        """
        if data is None:
            return 0
        if isinstance(data, int):
            return self.write_byte(data & 0xFF)
        if isinstance(data, str):
            data = data.encode("utf-8")
        written = 0
        for byte in bytes(data):
            if not self.write_byte(byte):
                break
            written += 1
        return written

    def print(self, value, fmt: int | None = None) -> int:
        """Print ``value``; return the number of bytes written.

        For integers ``fmt`` is the base (0 sends the value as a raw
        byte); for floats it is the number of decimals.
        """
        if isinstance(value, (StringBase, str)):
            return self.write(str(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.write(value)
        if isinstance(value, int):
            base = DEC if fmt is None else fmt
            if base == 0:
                return self.write_byte(value & 0xFF)
            return self.write(format_number(value, base))
        if isinstance(value, float):
            return self.write(format_float(value, _DEFAULT_DIGITS if fmt is None else fmt))
        print_to = getattr(value, "print_to", None)
        if callable(print_to):
            return print_to(self)
        raise TypeError(f"cannot print {type(value).__name__}")

    def println(self, value=_NOTHING, fmt: int | None = None) -> int:
        """Print ``value`` (if given) followed by CR LF."""
        written = 0 if value is _NOTHING else self.print(value, fmt)
        return written + self.write(_NEWLINE)

    def clear_write_error(self) -> None:
        self.write_error = 0