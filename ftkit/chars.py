"""Character classification and case conversion for ASCII code points.

Every function accepts either a one-character string or an integer code
point. The classifiers return a bool; the converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code point of a character or code."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an int, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a single character or an int, got {type(c).__name__}")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for the printable ASCII range, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper_code(code):
        code += _CASE_OFFSET
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower_code(code):
        code -= _CASE_OFFSET
    return _convert(c, code)