"""
Tests for line-oriented file loading.
"""

import pytest

from word_replacer_engine.core.word_replacer.exceptions import FileAccessError, InputReadError
from word_replacer_engine.core.word_replacer.file_loader import ensure_readable, read_lines
from word_replacer_engine.core.word_replacer.utils import split_lines


@pytest.mark.parametrize("text, expected", [
    ("", []),
    ("one", ["one"]),
    ("one\n", ["one"]),
    ("one\ntwo", ["one", "two"]),
    ("one\r\ntwo\r\n", ["one", "two"]),
    ("one\rtwo", ["one", "two"]),
    ("\n", [""]),
    ("a\n\nb\n", ["a", "", "b"]),
    ("a\n\n", ["a", ""]),
])
def test_split_lines(text, expected):
    assert split_lines(text) == expected


class TestFileLoader:
    """Test cases for opening and reading files."""

    def test_read_lines(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_bytes(b"first line\r\nsecond\rthird\n")
        assert read_lines(path) == ["first line", "second", "third"]

    def test_read_lines_accepts_str_path(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("x\ny\n", encoding="utf-8")
        assert read_lines(str(path)) == ["x", "y"]

    def test_read_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert read_lines(path) == []

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(FileAccessError) as exc_info:
            read_lines(missing)
        assert exc_info.value.message == f"Error: Cannot open file '{missing}' for input."

    def test_directory_cannot_be_opened(self, tmp_path):
        with pytest.raises(FileAccessError):
            ensure_readable(tmp_path)

    def test_ensure_readable_returns_path(self, tmp_path):
        path = tmp_path / "rules.txt"
        path.write_text("a -> b\n", encoding="utf-8")
        assert ensure_readable(str(path)) == path

    def test_undecodable_content_is_a_read_error(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("café\n".encode("latin-1"))
        with pytest.raises(InputReadError) as exc_info:
            read_lines(path)
        assert exc_info.value.message == f"Error: An I/O error occurred reading '{path}'."

    def test_alternative_encoding(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("café\n".encode("latin-1"))
        assert read_lines(path, encoding="latin-1") == ["café"]
