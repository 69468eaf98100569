"""Searching, editing and numeric conversion for the mutable text type."""

from __future__ import annotations

import math
import re
import string
import struct
from typing import Union

from .wstring_base import StringBase, _cstr

_C_SPACE = " \t\n\v\f\r"
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_HEX_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP]([+-]?[0-9]+))?"
)
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_SPECIAL_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)(infinity|inf|nan)", re.IGNORECASE)

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

Text = Union[StringBase, str]


class ArduinoString(StringBase):
    """Mutable text with search, in-place editing and number parsing."""

    def _visible(self) -> str:
        return _cstr(self._text) if self._text is not None else ""

    def index_of(self, target: Text, from_index: int = 0) -> int:
        """Position of the first ``target`` at or after ``from_index``, or -1."""
        if from_index < 0 or from_index >= len(self):
            return -1
        return self._visible().find(_cstr(str(target)), from_index)

    def last_index_of(self, target: Text, from_index: int | None = None) -> int:
        """Position of the last ``target`` starting at or before ``from_index``, or -1.

        A one-character ``str`` is searched as a single character.
        """
        if isinstance(target, str) and len(target) == 1:
            return self._last_index_of_char(target, from_index)
        needle = str(target)
        size = len(self)
        if not needle or size == 0 or len(needle) > size:
            return -1
        if from_index is None:
            from_index = size - len(needle)
        if from_index < 0 or from_index >= size:
            from_index = size - 1
        needle = _cstr(needle)
        return self._visible().rfind(needle, 0, from_index + len(needle))

    def _last_index_of_char(self, char: str, from_index: int | None) -> int:
        if from_index is None:
            from_index = len(self) - 1
        if from_index < 0 or from_index >= len(self):
            return -1
        return self._visible()[: from_index + 1].rfind(char)

    def substring(self, begin: int, end: int | None = None) -> "ArduinoString":
        """Characters from ``begin`` up to ``end``; the bounds may be given in either order."""
        if end is None:
            end = len(self)
        if begin < 0 or end < 0:
            raise ValueError("substring bounds must not be negative")
        if begin > end:
            begin, end = end, begin
        if begin >= len(self):
            return ArduinoString()
        end = min(end, len(self))
        return ArduinoString(_cstr(self._text[begin:end]))

    def replace(self, find: Text, replacement: Text) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place."""
        if not self._text:
            return
        find_text = str(find)
        new_text = str(replacement)
        if not find_text:
            return
        if len(new_text) <= len(find_text):
            self._text = self._text.replace(find_text, new_text)
            return
        if find_text not in self._visible():
            return
        # Growing replacements are applied from the end backwards.
        index = len(self) - 1
        while index >= 0:
            index = self.last_index_of(find_text, index)
            if index < 0:
                break
            self._text = (
                self._text[:index] + new_text + self._text[index + len(find_text):]
            )
            index -= 1

    def remove(self, index: int, count: int | None = None) -> None:
        """Delete ``count`` characters (default: all) starting at ``index``."""
        if index < 0 or (count is not None and count < 0):
            raise ValueError("index and count must not be negative")
        size = len(self)
        if index >= size:
            return
        if count is None:
            count = size - index
        if count == 0:
            return
        count = min(count, size - index)
        self._text = self._text[:index] + self._text[index + count:]

    def _translate(self, table) -> None:
        if self._text is None:
            return
        visible = _cstr(self._text)
        self._text = visible.translate(table) + self._text[len(visible):]

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        self._translate(_TO_LOWER)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        self._translate(_TO_UPPER)

    def trim(self) -> None:
        """Strip leading and trailing whitespace in place."""
        if not self._text:
            return
        self._text = self._text.strip(_C_SPACE)

    def to_int(self) -> int:
        """The leading decimal integer, or 0 when there is none."""
        match = _INT_RE.match(self._visible())
        if match is None:
            return 0
        return max(_LONG_MIN, min(_LONG_MAX, int(match.group(1))))

    def to_double(self) -> float:
        """The leading floating-point number, or 0.0 when there is none."""
        text = self._visible()
        match = _HEX_FLOAT_RE.match(text)
        if match is not None:
            sign, mantissa, exponent = match.groups()
            literal = f"{sign}0x{mantissa.rstrip('.') or '0'}"
            if exponent:
                literal += f"p{exponent}"
            try:
                return float.fromhex(literal)
            except OverflowError:
                return -math.inf if sign == "-" else math.inf
        match = _FLOAT_RE.match(text)
        if match is not None:
            return float(match.group(1))
        match = _SPECIAL_RE.match(text)
        if match is not None:
            return float(match.group(1) + match.group(2))
        return 0.0

    def to_float(self) -> float:
        """Like to_double(), rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)