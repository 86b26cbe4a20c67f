"""Byte-buffer helpers: zeroing, allocation, searching, comparing and copying.

Buffers are bytes-like objects; functions that write need a mutable one such
as a bytearray. Lengths that reach past the end of a buffer raise ValueError.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "zero",
    "allocate_zeroed",
    "mem_find",
    "mem_compare",
    "mem_copy",
    "mem_move",
    "mem_set",
]

SIZE_MAX = 2**64 - 1


def _check_span(data, offset: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"offset of {name} must not be negative, got {offset}")
    if offset + n > len(data):
        raise ValueError(
            f"{name} holds {len(data)} bytes; cannot reach {n} bytes from offset {offset}"
        )


def zero(buffer, n: int) -> None:
    """Set the first n bytes of buffer to zero, in place."""
    _check_span(buffer, 0, n, "buffer")
    buffer[:n] = bytes(n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled bytearray of count elements of size bytes each.

    Raises OverflowError when the total size would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def mem_find(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c (mod 256) among the first n, or None."""
    _check_span(data, 0, n, "data")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def mem_compare(a, b, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(a, 0, n, "a")
    _check_span(b, 0, n, "b")
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def mem_copy(dest, src, n: int):
    """Copy the first n bytes of src into the start of dest; return dest."""
    _check_span(src, 0, n, "src")
    _check_span(dest, 0, n, "dest")
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer, dest_offset: int, src_offset: int, n: int):
    """Copy n bytes within buffer from src_offset to dest_offset, safe for overlap; return buffer."""
    _check_span(buffer, src_offset, n, "source span")
    _check_span(buffer, dest_offset, n, "destination span")
    buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def mem_set(dest, filler: int, n: int):
    """Fill the first n bytes of dest with filler (mod 256); return dest."""
    _check_span(dest, 0, n, "dest")
    dest[:n] = bytes([filler & 0xFF]) * n
    return dest