"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from printfkit.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character string or a byte code."""
    if isinstance(c, int):
        ch = chr(c & 0xFF)
    elif isinstance(c, str) and len(c) == 1:
        ch = c
    else:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(ch)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s``."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal, after wrapping it to the signed 32-bit range."""
    _target(stream).write(itoa(n))