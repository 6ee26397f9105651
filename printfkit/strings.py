"""Searching, comparing and bounded copying of strings.

The search and compare functions work on ``str``. They treat the position
just past the end of a string as a NUL character, so searching for NUL finds
the end of the string. The bounded copies, ``strlcpy`` and ``strlcat``, write
NUL-terminated byte strings into a ``bytearray`` buffer.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def _c_string(data) -> bytes:
    """The bytes of ``data`` up to, not including, its first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer of {len(dest)} bytes")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, ``len(s)`` for NUL, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, ``len(s)`` for NUL, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch, or
    0 when the strings agree on the first ``n`` characters or both end first.
    """
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    for i in range(n):
        a = _code_at(s1, i)
        b = _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes with the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated. Nothing is written when ``size`` is 0.
    """
    _check_size(dest, size)
    source = _c_string(src)
    if size == 0:
        return len(source)
    copied = source[:size - 1]
    dest[:len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` within ``size`` bytes.

    Returns the length of the string it tried to build: the initial length of
    ``dest`` (counted no further than ``size``) plus the length of ``src``.
    """
    _check_size(dest, size)
    source = _c_string(src)
    dest_len = len(_c_string(dest[:size]))
    room = size - dest_len
    if room == 0:
        return size + len(source)
    copied = source[:room - 1]
    dest[dest_len:dest_len + len(copied) + 1] = copied + b"\0"
    return dest_len + len(source)