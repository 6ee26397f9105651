"""Rendering single values as text for the printf conversions.

Integer conversions wrap their argument the way the matching machine type
would: ``%d``/``%i`` to a signed 32-bit value, ``%u``/``%x``/``%X`` to an
unsigned 32-bit value, and ``%p`` to an unsigned 64-bit address.
"""

from __future__ import annotations

from typing import Optional, Union

from printfkit.numbers import itoa

_UINT_MASK = (1 << 32) - 1
_ADDRESS_MASK = (1 << 64) - 1


def _require_int(value: object, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{spec} expects an int, got {type(value).__name__}")
    return value


def format_char(c: Union[int, str]) -> str:
    """One character: a byte code reduced to 0-255, or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c, "%c") & 0xFF)


def format_string(s: Optional[str]) -> str:
    """The string up to its first NUL, or ``(null)`` for None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s expects a str, got {type(s).__name__}")
    return s.split("\0", 1)[0]


def format_pointer(address: Optional[int]) -> str:
    """``0x`` and the address in lower-case hex, or ``(nil)`` for a null address."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "%p") & _ADDRESS_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def format_unsigned(n: int) -> str:
    """``n`` as an unsigned 32-bit decimal."""
    return str(_require_int(n, "%u") & _UINT_MASK)


def format_hex(n: int, upper: bool = False) -> str:
    """``n`` as unsigned 32-bit hex, in upper-case digits when ``upper`` is set."""
    value = _require_int(n, "%x") & _UINT_MASK
    return f"{value:X}" if upper else f"{value:x}"


def format_int(n: int) -> str:
    """``n`` as a signed 32-bit decimal."""
    return itoa(_require_int(n, "%d"))