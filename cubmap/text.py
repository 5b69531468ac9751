"""Small string helpers with the semantics the scene parser relies on."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Wrap a value to a signed 32-bit integer, as the C int type does."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def c_atoi(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, then
    digits are read until the first non-digit. Anything else yields 0.
    The result wraps around like a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(value * sign)


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop empty fields."""
    return [field for field in text.split(sep) if field]


def trim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def filler(char: str, size: int) -> str:
    """Return ``char`` repeated ``size`` times, at least once."""
    return char * max(size, 1)