"""Core of the mutable text type: construction, concatenation and comparison.

Text behaves like a C character string: comparisons stop at the first
NUL character, and a string built from ``None`` is *invalid* (false in
a boolean context) until something non-empty is appended to it.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Union

from .itoa import itoa

_NUL = "\0"
_DEFAULT_BASE = 10
_DEFAULT_PLACES = 2
_CONCAT_FLOAT_WIDTH = 4
_CONCAT_FLOAT_PLACES = 2


def format_fixed(value: float, width: int, precision: int) -> str:
    """Format ``value`` with ``precision`` decimals, padded to ``width``.

    A positive width right-justifies the text, a negative width
    left-justifies it to the absolute width.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    align = "<" if width < 0 else ">"
    return f"{float(value):{align}{abs(width)}.{precision}f}"


def _cstr(text: str) -> str:
    """The part of ``text`` a C string function would see."""
    cut = text.find(_NUL)
    return text if cut < 0 else text[:cut]


def _strcmp(a: str, b: str) -> int:
    a, b = _cstr(a), _cstr(b)
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(a) < len(b):
        return -ord(b[len(a)])
    return 0


def _ascii_lower(ch: str) -> str:
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def _render(value, fmt) -> str | None:
    """Convert a value accepted by StringBase/concat into text (None = invalid)."""
    if value is None:
        return None
    if isinstance(value, StringBase):
        return value._text
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return itoa(value, _DEFAULT_BASE if fmt is None else fmt)
    if isinstance(value, float):
        places = _DEFAULT_PLACES if fmt is None else fmt
        return format_fixed(value, places + 2, places)
    raise TypeError(f"cannot build a string from {type(value).__name__}")


Operand = Union["StringBase", str, int, float, None]


@total_ordering
class StringBase:
    """A mutable string with C-string comparison semantics."""

    def __init__(self, value: Operand = "", fmt: int | None = None) -> None:
        # fmt is the base for integers and the number of decimals for floats.
        self._text: str | None = _render(value, fmt)

    def _invalidate(self) -> None:
        self._text = None

    def __len__(self) -> int:
        return len(self._text) if self._text is not None else 0

    def __str__(self) -> str:
        return self._text or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def __bool__(self) -> bool:
        return self._text is not None

    def __eq__(self, other) -> bool:
        if isinstance(other, (StringBase, str)):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # mutable

    def __lt__(self, other) -> bool:
        if isinstance(other, (StringBase, str)):
            return self.compare_to(other) < 0
        return NotImplemented

    def __iadd__(self, value: Operand) -> "StringBase":
        self.concat(value)
        return self

    def __add__(self, value: Operand) -> "StringBase":
        result = type(self)(self)
        if not result.concat(value):
            result._invalidate()
        return result

    def __getitem__(self, index: int) -> str:
        return self.char_at(index)

    def concat(self, value: Operand) -> bool:
        """Append ``value``; return False (leaving the text unchanged) on failure.

        Integers are appended in decimal, floats with two decimals.
        """
        if isinstance(value, float):
            text = format_fixed(value, _CONCAT_FLOAT_WIDTH, _CONCAT_FLOAT_PLACES)
        elif isinstance(value, bool):
            text = itoa(int(value))
        else:
            text = _render(value, None)
        if text is None:
            return False
        if not text:
            return True
        self._text = (self._text or "") + text
        return True

    def compare_to(self, other: Union["StringBase", str, None]) -> int:
        """Negative, zero or positive as this text sorts before, with or after ``other``."""
        if isinstance(other, StringBase):
            if self._text is None or other._text is None:
                if other._text:
                    return -ord(other._text[0])
                if self._text:
                    return ord(self._text[0])
                return 0
            return _strcmp(self._text, other._text)
        if self._text is None or other is None:
            if other is not None and other == "":
                return 0
            if self._text:
                return ord(self._text[0])
            return 0
        return _strcmp(self._text, other)

    def equals(self, other: Union["StringBase", str, None]) -> bool:
        if isinstance(other, StringBase):
            return len(self) == len(other) and self.compare_to(other) == 0
        if len(self) == 0:
            return other is None or other == "" or other.startswith(_NUL)
        if other is None:
            return self._text.startswith(_NUL)
        return _strcmp(self._text, other) == 0

    def equals_ignore_case(self, other: Union["StringBase", str]) -> bool:
        if other is self:
            return True
        other_text = str(other)
        if len(self) != len(other_text):
            return False
        if len(self) == 0:
            return True
        mine = _cstr(self._text)
        return all(
            _ascii_lower(a) == _ascii_lower(b) for a, b in zip(mine, other_text)
        )

    def starts_with(
        self, prefix: Union["StringBase", str], offset: int | None = None
    ) -> bool:
        """True if ``prefix`` occurs at ``offset`` (default: the start)."""
        prefix_text = prefix._text if isinstance(prefix, StringBase) else prefix
        plen = len(prefix_text) if prefix_text is not None else 0
        if offset is None:
            if len(self) < plen:
                return False
            offset = 0
        if offset > len(self) - plen or self._text is None or prefix_text is None:
            return False
        return _cstr(self._text[offset:])[:plen] == _cstr(prefix_text)[:plen]

    def ends_with(self, suffix: Union["StringBase", str]) -> bool:
        suffix_text = suffix._text if isinstance(suffix, StringBase) else suffix
        if self._text is None or suffix_text is None:
            return False
        if len(self) < len(suffix_text):
            return False
        return _strcmp(self._text[len(self) - len(suffix_text):], suffix_text) == 0

    def char_at(self, index: int) -> str:
        """The character at ``index``, or NUL when out of range."""
        if self._text is None or not 0 <= index < len(self._text):
            return _NUL
        return self._text[index]

    def set_char_at(self, index: int, char: str) -> None:
        """Replace the character at ``index``; out-of-range indexes are ignored."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("a single character is required")
        if self._text is not None and 0 <= index < len(self._text):
            self._text = self._text[:index] + char + self._text[index + 1:]

    def get_bytes(self, bufsize: int, index: int = 0) -> str:
        """At most ``bufsize - 1`` characters from ``index``, as a buffer that size would hold."""
        if bufsize <= 0:
            return ""
        if self._text is None or index >= len(self._text) or index < 0:
            return ""
        return _cstr(self._text[index:index + bufsize - 1])