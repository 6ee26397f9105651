"""Conversion between text and 32-bit signed integers."""

from __future__ import annotations

_WHITESPACE = " \f\r\n\t\v"
_INT_BITS = 32


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range, two's complement."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps to the signed 32-bit range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Render ``n`` in decimal, after wrapping it to the signed 32-bit range."""
    return str(_to_int32(n))