"""Writing characters, strings and numbers, and a small printf-style formatter.

Writers take a text stream; when none is given they write to standard output.
The formatter understands %c, %s, %p, %d, %i, %u, %x, %X and %%.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO, Union

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_number",
    "format_number",
    "format_pointer",
    "render",
    "printf",
]

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a single character or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a single character or an int, got {type(c).__name__}")


def _as_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return int(value)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_as_char(c))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write text as it is."""
    _stream(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline."""
    _stream(stream).write(text + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(format_number(_as_int(n), DECIMAL))


def format_number(nbr: int, digits: str = DECIMAL) -> str:
    """Return nbr written in the base whose digit symbols are digits.

    The base is len(digits); negative numbers get a leading minus sign.
    """
    if len(digits) < 2:
        raise ValueError("a base needs at least two digit symbols")
    base = len(digits)
    magnitude = -nbr if nbr < 0 else nbr
    out = []
    while True:
        magnitude, remainder = divmod(magnitude, base)
        out.append(digits[remainder])
        if magnitude == 0:
            break
    if nbr < 0:
        out.append("-")
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return an address as 0x followed by lower-case hex, or (nil) for zero."""
    if address is None:
        return _NULL_POINTER
    value = _as_int(address) & (2**64 - 1)
    if value == 0:
        return _NULL_POINTER
    return "0x" + format_number(value, HEX_LOWER)


def _signed32(value: object) -> int:
    return (_as_int(value) + 2**31) % 2**32 - 2**31


def _unsigned32(value: object) -> int:
    return _as_int(value) & 0xFFFFFFFF


def _convert_string(value: object) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


_CONVERSIONS: Dict[str, Callable[[object], str]] = {
    "c": lambda value: _as_char(value),  # type: ignore[arg-type]
    "s": _convert_string,
    "p": lambda value: format_pointer(value),  # type: ignore[arg-type]
    "d": lambda value: format_number(_signed32(value), DECIMAL),
    "i": lambda value: format_number(_signed32(value), DECIMAL),
    "u": lambda value: format_number(_unsigned32(value), DECIMAL),
    "x": lambda value: format_number(_unsigned32(value), HEX_LOWER),
    "X": lambda value: format_number(_unsigned32(value), HEX_UPPER),
}


def render(template: str, *args: object) -> str:
    """Return template with each conversion replaced by the next argument.

    Raises ValueError for an unknown conversion, a lone trailing '%' or a
    missing argument. Extra arguments are ignored.
    """
    out = []
    pending = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("template ends with a lone '%'")
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise ValueError(f"unknown conversion %{spec}")
        try:
            value = next(pending)
        except StopIteration:
            raise ValueError(f"missing argument for %{spec}") from None
        out.append(convert(value))
    return "".join(out)


def printf(template: str, *args: object) -> int:
    """Write the rendered template to standard output; return the number of characters written."""
    text = render(template, *args)
    sys.stdout.write(text)
    return len(text)