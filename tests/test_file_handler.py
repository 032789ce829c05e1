import pytest

from searcher.errors import InputReadError, OutputWriteError
from searcher.file_handler import FileHandler


def test_read_returns_raw_bytes(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"line one\r\nline two\n\xff")
    assert FileHandler().read_file(str(source)) == b"line one\r\nline two\n\xff"


def test_read_missing_file(tmp_path):
    with pytest.raises(InputReadError) as excinfo:
        FileHandler().read_file(str(tmp_path / "nope.txt"))
    assert excinfo.value.details["filename"].endswith("nope.txt")


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "a" / "b" / "out.txt"
    FileHandler().write_file(str(target), b"data")
    assert target.read_bytes() == b"data"


def test_write_into_directory_fails(tmp_path):
    with pytest.raises(OutputWriteError):
        FileHandler().write_file(str(tmp_path), b"data")
