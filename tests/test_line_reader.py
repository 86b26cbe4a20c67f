import io

import pytest

from ftkit.line_reader import BUFFER_SIZE, LineReader

SAMPLE = b"first line\nsecond\n\nthird without end"


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.BytesIO(data)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._inner.read(size)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 10, 42, 1000])
def test_lines_match_splitlines(size):
    reader = LineReader(io.BytesIO(SAMPLE), size)
    assert list(reader) == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 42])
def test_joined_lines_reproduce_input(size):
    data = b"a\nbb\nccc\n" * 20
    reader = LineReader(io.BytesIO(data), size)
    assert b"".join(reader) == data


def test_last_line_without_newline():
    reader = LineReader(io.BytesIO(b"x\ny"), 4)
    assert reader.read_line() == b"x\n"
    assert reader.read_line() == b"y"
    assert reader.read_line() is None


def test_empty_stream():
    reader = LineReader(io.BytesIO(b""), 8)
    assert reader.read_line() is None
    assert list(reader) == []


def test_none_repeats_after_end():
    reader = LineReader(io.BytesIO(b"only\n"), 3)
    assert reader.read_line() == b"only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_text_stream():
    text = "alpha\nbeta\ngamma"
    reader = LineReader(io.StringIO(text), 3)
    assert list(reader) == text.splitlines(keepends=True)


def test_every_line_but_last_ends_with_newline():
    data = b"one\ntwo\nthree\nfour"
    lines = list(LineReader(io.BytesIO(data), 2))
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert not lines[-1].endswith(b"\n")


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(SAMPLE), size)


def test_default_buffer_size():
    stream = _RecordingStream(SAMPLE)
    reader = LineReader(stream)
    assert reader.read_line() == b"first line\n"
    assert stream.sizes[0] == 42
    assert BUFFER_SIZE == 42


def test_bytearray_chunks_are_accepted():
    class _ArrayStream:
        def __init__(self, data):
            self._inner = io.BytesIO(data)

        def read(self, size):
            return bytearray(self._inner.read(size))

    reader = LineReader(_ArrayStream(b"ab\ncd"), 2)
    assert list(reader) == [b"ab\n", b"cd"]