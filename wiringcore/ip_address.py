"""IPv4 addresses held as four octets."""

from __future__ import annotations

from typing import Iterable, Union

from .printer import DEC, Print
from .wstring_base import StringBase

_OCTETS = 4
_DWORD_MAX = (1 << 32) - 1


def _check_octet(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"octet out of range: {value!r}")
    return value


class IPAddress:
    """An IPv4 address.

    It can be built with no arguments (0.0.0.0), from four octets, from a
    32-bit integer whose lowest byte is the first octet, or from a
    four-byte sequence.
    """

    def __init__(self, *args: Union[int, bytes, bytearray, Iterable[int]]) -> None:
        if not args:
            octets = [0, 0, 0, 0]
        elif len(args) == _OCTETS:
            octets = [_check_octet(a) for a in args]
        elif len(args) == 1 and isinstance(args[0], int):
            dword = args[0]
            if not 0 <= dword <= _DWORD_MAX:
                raise ValueError(f"address out of range: {dword}")
            octets = list(dword.to_bytes(_OCTETS, "little"))
        elif len(args) == 1:
            octets = [_check_octet(a) for a in bytes(args[0])]
            if len(octets) != _OCTETS:
                raise ValueError("an address needs exactly four bytes")
        else:
            raise TypeError("expected no arguments, one or four")
        self._octets = octets

    @classmethod
    def from_string(cls, text: Union[str, StringBase]) -> "IPAddress":
        """Parse dotted-quad text; raise ValueError if it is malformed.

        Exactly three dots are required; an empty part counts as zero.
        """
        source = str(text).partition("\0")[0]
        octets: list[int] = []
        acc = 0
        for ch in source:
            if "0" <= ch <= "9":
                acc = acc * 10 + (ord(ch) - ord("0"))
                if acc > 0xFF:
                    raise ValueError(f"octet out of range in {source!r}")
            elif ch == ".":
                if len(octets) == _OCTETS - 1:
                    raise ValueError(f"too many dots in {source!r}")
                octets.append(acc)
                acc = 0
            else:
                raise ValueError(f"invalid character {ch!r} in {source!r}")
        if len(octets) != _OCTETS - 1:
            raise ValueError(f"too few dots in {source!r}")
        octets.append(acc)
        return cls(*octets)

    def __int__(self) -> int:
        return int.from_bytes(bytes(self._octets), "little")

    def __bytes__(self) -> bytes:
        return bytes(self._octets)

    def __eq__(self, other) -> bool:
        if isinstance(other, IPAddress):
            return self._octets == other._octets
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(other)[:_OCTETS] == bytes(self._octets)
        return NotImplemented

    __hash__ = None  # octets can be changed in place

    def __getitem__(self, index: int) -> int:
        return self._octets[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._octets[index] = _check_octet(value)

    def __str__(self) -> str:
        return ".".join(str(octet) for octet in self._octets)

    def __repr__(self) -> str:
        return f"IPAddress({', '.join(str(o) for o in self._octets)})"

    def print_to(self, printer: Print) -> int:
        """Print the dotted form on ``printer``; return the bytes written."""
        written = 0
        for octet in self._octets[:-1]:
            written += printer.print(octet, DEC)
            written += printer.print(".")
        written += printer.print(self._octets[-1], DEC)
        return written


INADDR_NONE = IPAddress(0, 0, 0, 0)