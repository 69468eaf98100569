"""Character streams with timed reads, searching and number parsing."""

from __future__ import annotations

from abc import abstractmethod
from collections import deque
from enum import Enum
from typing import Iterable, Union

from .printer import Print
from .timing import millis
from .wstring import ArduinoString

DEFAULT_TIMEOUT_MS = 1000
NO_IGNORE_CHAR = "\x01"

_WHITESPACE = frozenset(b" \t\r\n")
_MINUS = ord("-")
_DOT = ord(".")
_ZERO = ord("0")
_NINE = ord("9")

Needle = Union[str, bytes, bytearray, int]


class LookaheadMode(Enum):
    """How parse_int() and parse_float() skip characters before a number."""

    SKIP_ALL = 0
    SKIP_NONE = 1
    SKIP_WHITESPACE = 2


def _as_bytes(value: Needle) -> bytes:
    if isinstance(value, int):
        return bytes([value & 0xFF])
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def _as_byte(value: Union[str, int]) -> int:
    if isinstance(value, int):
        return value & 0xFF
    if len(value) != 1:
        raise ValueError("a single character is required")
    return ord(value) & 0xFF


def _is_digit(c: int) -> bool:
    return _ZERO <= c <= _NINE


class Stream(Print):
    """A readable byte source that can also be printed to.

    Subclasses supply available(), read(), peek(), flush() and
    write_byte(); read() and peek() return -1 when nothing is waiting.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT_MS) -> None:
        super().__init__()
        self._timeout = 0
        self.set_timeout(timeout)

    @abstractmethod
    def available(self) -> int:
        """Number of bytes ready to be read."""

    @abstractmethod
    def read(self) -> int:
        """Consume and return the next byte, or -1 if none is waiting."""

    @abstractmethod
    def peek(self) -> int:
        """Return the next byte without consuming it, or -1 if none is waiting."""

    @abstractmethod
    def flush(self) -> None:
        """Wait until pending output has been sent."""

    @property
    def timeout(self) -> int:
        """Milliseconds to wait for the next byte before giving up."""
        return self._timeout

    def set_timeout(self, timeout: int) -> None:
        if timeout < 0:
            raise ValueError("timeout must not be negative")
        self._timeout = timeout

    def _timed(self, operation) -> int:
        start = millis()
        while True:
            c = operation()
            if c >= 0:
                return c
            if millis() - start >= self._timeout:
                return -1

    def _timed_read(self) -> int:
        return self._timed(self.read)

    def _timed_peek(self) -> int:
        return self._timed(self.peek)

    def _peek_next_digit(self, lookahead: LookaheadMode, detect_decimal: bool) -> int:
        while True:
            c = self._timed_peek()
            if c < 0 or c == _MINUS or _is_digit(c) or (detect_decimal and c == _DOT):
                return c
            if lookahead is LookaheadMode.SKIP_NONE:
                return -1
            if lookahead is LookaheadMode.SKIP_WHITESPACE and c not in _WHITESPACE:
                return -1
            self.read()

    def find(self, target: Needle) -> bool:
        """Read until ``target`` has been seen; False on timeout."""
        return self.find_multi([target]) == 0

    def find_until(self, target: Needle, terminator: Needle | None = None) -> bool:
        """Like find(), but also stop (returning False) once ``terminator`` is seen."""
        if terminator is None:
            return self.find_multi([target]) == 0
        return self.find_multi([target, terminator]) == 0

    def find_multi(self, targets: Iterable[Needle]) -> int:
        """Read until one of ``targets`` has been seen; return its index, or -1 on timeout.

        An empty target matches at once without reading anything.
        """
        needles = [_as_bytes(t) for t in targets]
        for position, needle in enumerate(needles):
            if not needle:
                return position
        indexes = [0] * len(needles)
        while True:
            c = self._timed_read()
            if c < 0:
                return -1
            for position, needle in enumerate(needles):
                idx = indexes[position]
                if c == needle[idx]:
                    idx += 1
                    indexes[position] = idx
                    if idx == len(needle):
                        return position
                    continue
                if idx == 0:
                    continue
                # Fall back to the longest shorter prefix that still matches.
                original = idx
                while True:
                    idx -= 1
                    if c == needle[idx]:
                        diff = original - idx
                        if idx == 0 or needle[:idx] == needle[diff:diff + idx]:
                            idx += 1
                            break
                    if idx == 0:
                        break
                indexes[position] = idx

    def parse_int(
        self,
        lookahead: LookaheadMode = LookaheadMode.SKIP_ALL,
        ignore: Union[str, int] = NO_IGNORE_CHAR,
    ) -> int:
        """Read the next integer; 0 if none arrives before the timeout.

        ``ignore`` is a character skipped inside the number.
        """
        skip = _as_byte(ignore)
        c = self._peek_next_digit(lookahead, False)
        if c < 0:
            return 0
        negative = False
        value = 0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif _is_digit(c):
                value = value * 10 + c - _ZERO
            self.read()
            c = self._timed_peek()
            if not (c >= 0 and (_is_digit(c) or c == skip)):
                break
        return -value if negative else value

    def parse_float(
        self,
        lookahead: LookaheadMode = LookaheadMode.SKIP_ALL,
        ignore: Union[str, int] = NO_IGNORE_CHAR,
    ) -> float:
        """Read the next decimal number; 0.0 if none arrives before the timeout."""
        skip = _as_byte(ignore)
        c = self._peek_next_digit(lookahead, True)
        if c < 0:
            return 0.0
        negative = False
        fractional = False
        value = 0
        fraction = 1.0
        while True:
            if c == skip:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                fractional = True
            elif _is_digit(c):
                value = value * 10 + c - _ZERO
                if fractional:
                    fraction *= 0.1
            self.read()
            c = self._timed_peek()
            if not (
                c >= 0
                and (_is_digit(c) or (c == _DOT and not fractional) or c == skip)
            ):
                break
        if negative:
            value = -value
        return value * fraction if fractional else float(value)

    def read_bytes(self, length: int) -> bytes:
        """Read up to ``length`` bytes, stopping early on timeout."""
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0:
                break
            out.append(c)
        return bytes(out)

    def read_bytes_until(self, terminator: Union[str, int], length: int) -> bytes:
        """Like read_bytes(), but stop at ``terminator``, which is consumed and dropped."""
        stop = _as_byte(terminator)
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0 or c == stop:
                break
            out.append(c)
        return bytes(out)

    def read_string(self) -> ArduinoString:
        """Read until timeout; each byte becomes one character."""
        chars = []
        c = self._timed_read()
        while c >= 0:
            chars.append(chr(c))
            c = self._timed_read()
        return ArduinoString("".join(chars))

    def read_string_until(self, terminator: Union[str, int]) -> ArduinoString:
        """Read until ``terminator`` (consumed, not included) or timeout."""
        stop = _as_byte(terminator)
        chars = []
        c = self._timed_read()
        while c >= 0 and c != stop:
            chars.append(chr(c))
            c = self._timed_read()
        return ArduinoString("".join(chars))


class BytesStream(Stream):
    """An in-memory first-in first-out stream: written bytes become readable."""

    def __init__(self, data: Union[bytes, bytearray, str] = b"") -> None:
        super().__init__()
        self._buffer: deque[int] = deque(_as_bytes(data))

    def write_byte(self, value: int) -> int:
        self._buffer.append(value & 0xFF)
        return 1

    def available(self) -> int:
        return len(self._buffer)

    def read(self) -> int:
        return self._buffer.popleft() if self._buffer else -1

    def peek(self) -> int:
        return self._buffer[0] if self._buffer else -1

    def flush(self) -> None:
        """Output lands in the buffer immediately, so there is nothing to wait for."""