"""String helpers: splitting, trimming, searching, bounded copies and mapping.

Searches return an index, or None when nothing is found. Character arguments
may be a one-character string or an integer code. An integer code is reduced
to a single byte value, modulo 256. The NUL character stands for the end of
the text.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

CharLike = Union[str, int]

__all__ = [
    "split",
    "strtrim",
    "substr",
    "strjoin",
    "find_char",
    "rfind_char",
    "find_within",
    "compare_prefix",
    "bounded_copy",
    "bounded_concat",
    "map_indexed",
    "iter_indexed",
]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a single character or an int, got {type(c).__name__}")


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: CharLike) -> List[str]:
    """Split text on a separator character, dropping empty segments."""
    separator = _char(sep)
    if separator == _NUL:
        return [text] if text else []
    return [part for part in text.split(separator) if part]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return first followed by second."""
    return first + second


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for NUL finds the end of the text and returns len(text).
    """
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def rfind_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for NUL finds the end of the text and returns len(text).
    """
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of the first occurrence of needle that lies within the first limit characters.

    An empty needle is found at index 0.
    """
    _non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most n characters of first and second.

    Returns the difference of the code points at the first position that
    differs. The end of a string counts as code point 0. Returns 0 when the
    first n characters match.
    """
    _non_negative(n, "n")
    for index in range(n):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, one of which is the terminator.

    Returns the copied text, at most size - 1 characters, and the full length of src.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters, one of which is the terminator.

    Returns the resulting text and the length the result would have had
    without the bound. When size does not exceed len(dest), dest is returned
    unchanged and the length reported is size + len(src).
    """
    _non_negative(size, "size")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of text."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for each character of text, in order."""
    for index, char in enumerate(text):
        func(index, char)