import io

import pytest

from solong.lines import LineReader, read_lines

MAP_TEXT = "1111111\n1P0C0E1\n1000001\n1111111\n"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 32, 1000])
def test_lines_rejoin_to_input(size):
    lines = list(LineReader(io.StringIO(MAP_TEXT), size))
    assert "".join(lines) == MAP_TEXT
    assert lines == MAP_TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 32])
def test_last_line_without_newline(size):
    text = "abc\ndef"
    lines = list(LineReader(io.StringIO(text), size))
    assert lines == ["abc\n", "def"]


def test_binary_stream():
    data = MAP_TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), 4))
    assert lines == data.splitlines(keepends=True)


def test_empty_stream_gives_no_lines():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_read_line_after_end_stays_none():
    reader = LineReader(io.StringIO("x\n"), 1)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_kept():
    text = "a\n\nb\n"
    assert list(LineReader(io.StringIO(text), 3)) == ["a\n", "\n", "b\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(MAP_TEXT.encode())
    assert read_lines(path) == MAP_TEXT.splitlines(keepends=True)


def test_read_lines_keeps_carriage_returns(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"11\r\n11\r\n")
    lines = read_lines(path)
    assert "".join(lines) == "11\r\n11\r\n"
    assert len(lines) == 2


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")