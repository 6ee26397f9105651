"""Building new strings: substrings, joins, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, Optional


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: Optional[str]) -> str:
    """``s`` with characters from ``charset`` removed from both ends.

    With no charset nothing is removed.
    """
    if not charset:
        return s
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> List[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``.

    ``sep`` is a single character. No string gives no pieces.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if s is None:
        return []
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: Optional[str], f: Callable[[int, str], Optional[str]]) -> Optional[str]:
    """Call ``f(index, char)`` on each character of ``s`` in order.

    ``f`` may return a replacement character, or None to keep the character.
    Returns the resulting string, or None when ``s`` is None.
    """
    if s is None:
        return None
    out = []
    for i, ch in enumerate(s):
        replacement = f(i, ch)
        out.append(ch if replacement is None else replacement)
    return "".join(out)