"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Iterator, List, Optional, Union

__all__ = ["LineReader", "BUFFER_SIZE"]

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from a stream that offers read(size).

    The stream may be binary or text; lines come back as bytes or str to
    match. Each line keeps its trailing newline; the last line of the stream
    may lack one. Data past a newline is held for the next call.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _read_chunk(self) -> Optional[Chunk]:
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return None
        if isinstance(chunk, (bytearray, memoryview)):
            chunk = bytes(chunk)
        return chunk

    @staticmethod
    def _join(parts: List[Chunk]) -> Chunk:
        return parts[0][:0].join(parts)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None when the stream has nothing left."""
        parts: List[Chunk] = []
        chunk = self._pending
        self._pending = None
        while True:
            if chunk is None:
                chunk = self._read_chunk()
                if chunk is None:
                    break
            newline = "\n" if isinstance(chunk, str) else b"\n"
            index = chunk.find(newline)
            if index >= 0:
                parts.append(chunk[: index + 1])
                rest = chunk[index + 1 :]
                self._pending = rest if rest else None
                return self._join(parts)
            parts.append(chunk)
            chunk = None
        if not parts:
            return None
        return self._join(parts)

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line