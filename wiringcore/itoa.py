"""Integer-to-text conversion in bases 2 to 16."""

_DIGITS = "0123456789abcdef"
_MIN_RADIX = 2
_MAX_RADIX = 16


def _digits(magnitude: int, radix: int) -> str:
    out = []
    while True:
        magnitude, remainder = divmod(magnitude, radix)
        out.append(_DIGITS[remainder])
        if not magnitude:
            break
    return "".join(reversed(out))


def _radix_ok(radix: int) -> bool:
    return _MIN_RADIX <= radix <= _MAX_RADIX


def itoa(value: int, radix: int = 10) -> str:
    """Render a signed integer in ``radix`` with lower-case digits.

    A radix outside 2..16 yields an empty string.
    """
    if not _radix_ok(radix):
        return ""
    text = _digits(abs(value), radix)
    return "-" + text if value < 0 else text


def utoa(value: int, radix: int = 10) -> str:
    """Render an unsigned integer in ``radix`` with lower-case digits.

    A radix outside 2..16 yields an empty string; a negative value is
    rejected with ``ValueError``.
    """
    if value < 0:
        raise ValueError(f"unsigned conversion of negative value {value}")
    if not _radix_ok(radix):
        return ""
    return _digits(value, radix)