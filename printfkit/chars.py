"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a one-character
string. Classification functions return a bool. Case conversions return a
value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) < 127


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)