"""A small printf supporting the conversions ``c s p d i u x X %``.

No flags, widths or precisions are understood. A ``%`` not followed by one
of the supported conversion characters is copied to the output unchanged.
The format string ends at its first NUL character.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Optional, TextIO

from printfkit.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)

CONVERSIONS = "cspdiuxX%"

_SPEC = re.compile(r"%([cspdiuxX%])")


class FormatError(ValueError):
    """A format string cannot be rendered with the arguments given."""


def convert(spec: str, value: Any = None) -> str:
    """Render ``value`` for the conversion character ``spec``."""
    if spec == "c":
        return format_char(value)
    if spec == "s":
        return format_string(value)
    if spec == "p":
        return format_pointer(value)
    if spec in ("d", "i"):
        return format_int(value)
    if spec == "u":
        return format_unsigned(value)
    if spec == "x":
        return format_hex(value, upper=False)
    if spec == "X":
        return format_hex(value, upper=True)
    if spec == "%":
        return "%"
    raise FormatError(f"unsupported conversion {spec!r}")


def render(fmt: str, *args: Any) -> str:
    """The text ``printf`` would write for ``fmt`` and ``args``.

    Raises FormatError when the format asks for more arguments than given.
    Extra arguments are ignored.
    """
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    pieces = []
    last = 0
    for match in _SPEC.finditer(fmt):
        pieces.append(fmt[last:match.start()])
        spec = match.group(1)
        if spec == "%":
            pieces.append(convert(spec))
        else:
            try:
                value = next(remaining)
            except StopIteration:
                raise FormatError(
                    f"missing argument for %{spec} at offset {match.start()}"
                ) from None
            pieces.append(convert(spec, value))
        last = match.end()
    pieces.append(fmt[last:])
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered format to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)