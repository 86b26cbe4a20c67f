"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap_int32(value: int) -> int:
    """Reduce value to a 32-bit two's complement signed integer."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading blanks (space, tab, newline, vertical tab, form feed and carriage
    return) are skipped, one optional sign is read, then digits up to the
    first non-digit. Text with no digits gives 0. The result wraps around
    like a 32-bit signed integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    negative = False
    if position < length and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    start = position
    while position < length and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    magnitude = -n if n < 0 else n
    digits = []
    while True:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append("0123456789"[remainder])
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))