"""Byte-buffer operations over ``bytearray`` and other bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = (1 << 64) - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length(n, buf)
    buf[:n] = bytes(n)


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` reduced to a byte."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if SIZE_MAX // size < count:
        raise MemoryError(f"{count} * {size} bytes overflows the size range")
    return bytearray(count * size)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf