import io

import pytest

from minishell.lines import LineReader

SAMPLE = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1000])
def test_lines_rejoin_to_original(size):
    lines = list(LineReader(io.StringIO(SAMPLE), size))
    assert "".join(lines) == SAMPLE
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines == SAMPLE.splitlines(keepends=True)


def test_readline_sequence_then_none():
    reader = LineReader(io.StringIO("a\nb\nc"), 4)
    assert reader.readline() == "a\n"
    assert reader.readline() == "b\n"
    assert reader.readline() == "c"
    assert reader.readline() is None
    assert reader.readline() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).readline() is None


def test_empty_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


def test_binary_stream_yields_bytes():
    data = b"alpha\nbeta\n"
    lines = list(LineReader(io.BytesIO(data), 3))
    assert lines == [b"alpha\n", b"beta\n"]


def test_line_longer_than_buffer():
    text = "x" * 500 + "\n" + "y"
    lines = list(LineReader(io.StringIO(text), 5))
    assert lines == ["x" * 500 + "\n", "y"]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingStream(), 8)
    with pytest.raises(OSError):
        reader.readline()