"""Unit tests for file reading and display paths."""

import os

import pytest

from sdir.exceptions import FileReadError
from sdir.file_reader import format_file, read_content, read_file, read_text, to_display_path


def test_display_path_in_working_directory(tmp_path):
    assert to_display_path("notes.txt", cwd=tmp_path) == "./notes.txt"
    assert to_display_path("./notes.txt", cwd=tmp_path) == "./notes.txt"
    assert to_display_path(tmp_path / "docs" / "a.md", cwd=tmp_path) == "./docs/a.md"


def test_display_path_outside_working_directory(tmp_path):
    cwd = tmp_path / "work"
    cwd.mkdir()
    assert to_display_path(tmp_path / "other" / "a.md", cwd=cwd) == "../other/a.md"


def test_display_path_defaults_to_process_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert to_display_path("src/main.x") == "./src/main.x"


def test_read_text_preserves_content(tmp_path):
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"one\r\ntwo\r\n")
    assert read_text(target) == "one\r\ntwo\r\n"


def test_read_text_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    assert read_text(target) == ""


def test_read_text_rejects_invalid_utf8(tmp_path):
    target = tmp_path / "latin1.txt"
    target.write_bytes("café".encode("latin-1"))

    with pytest.raises(FileReadError) as exc_info:
        read_text(target)

    assert exc_info.value.path == os.fspath(target)
    assert "not valid UTF-8" in exc_info.value.reason


def test_read_text_missing_file(tmp_path):
    with pytest.raises(FileReadError) as exc_info:
        read_text(tmp_path / "missing.txt")
    assert "Error reading file" in str(exc_info.value)


def test_read_file_and_format(tmp_path):
    (tmp_path / "notes.txt").write_text("hello")
    display_path, content = read_file(tmp_path / "notes.txt", cwd=tmp_path)

    assert (display_path, content) == ("./notes.txt", "hello")
    assert format_file(display_path, content) == "./notes.txt\nhello"


def test_format_file_keeps_trailing_newline():
    assert format_file("./a.txt", "x\n") == "./a.txt\nx\n"
    assert format_file("./empty.txt", "") == "./empty.txt\n"


def test_read_content_returns_marker_on_failure(tmp_path):
    target = tmp_path / "blob.bin"
    target.write_bytes(b"\x80\x81")

    content = read_content(target)

    assert content.startswith("[unreadable: not valid UTF-8")
    assert content.endswith("]")


def test_read_content_returns_text(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("fine")
    assert read_content(target) == "fine"
