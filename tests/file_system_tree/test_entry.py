"""Unit tests for path classification."""

import os
from pathlib import Path

import pytest

from sdir.exceptions import NotADirectoryTraversalError, PathNotFoundError
from sdir.file_system_tree.entry import Entry, classify, classify_root, display_name, join_relative
from sdir.types import FileType


def test_join_relative():
    assert join_relative("./", "src") == "./src"
    assert join_relative("./src", "main.py") == "./src/main.py"
    assert join_relative("./a/b", "c") == "./a/b/c"


def test_match_path():
    directory = Entry("src", "./src", FileType.DIRECTORY, 1, Path("src"))
    file = Entry("main.py", "./src/main.py", FileType.FILE, 2, Path("src/main.py"))
    root = Entry("proj", "./", FileType.DIRECTORY, 0, Path("."))

    assert directory.match_path == "src/"
    assert file.match_path == "src/main.py"
    assert root.match_path == ""


def test_classify_file_and_directory(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "notes.txt").write_text("hello")

    directory = classify(tmp_path / "src", "./src", 1)
    file = classify(tmp_path / "notes.txt", "./notes.txt", 1)

    assert directory.kind is FileType.DIRECTORY
    assert directory.is_dir
    assert directory.name == "src"
    assert file.kind is FileType.FILE
    assert not file.is_symlink
    assert file.depth == 1


def test_classify_directory_symlink_is_a_leaf(tmp_path):
    (tmp_path / "src").mkdir()
    try:
        os.symlink(tmp_path / "src", tmp_path / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    entry = classify(tmp_path / "link", "./link", 1)
    assert entry.kind is FileType.FILE
    assert entry.is_symlink
    assert entry.symlink_target == str(tmp_path / "src")


def test_classify_root_directory(tmp_path):
    entry = classify_root(tmp_path)
    assert entry.kind is FileType.DIRECTORY
    assert entry.relative_path == "./"
    assert entry.depth == 0
    assert entry.name == tmp_path.name


def test_classify_root_file(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("hello")
    assert classify_root(target).kind is FileType.FILE


def test_classify_root_missing(tmp_path):
    with pytest.raises(PathNotFoundError) as exc_info:
        classify_root(tmp_path / "missing")
    assert exc_info.value.path == str(tmp_path / "missing")


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported on this platform")
def test_classify_root_special_file(tmp_path):
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)
    with pytest.raises(NotADirectoryTraversalError):
        classify_root(fifo)


def test_display_name_resolves_dot(tmp_path, monkeypatch):
    project = tmp_path / "myproject"
    project.mkdir()
    monkeypatch.chdir(project)

    assert display_name(".") == "myproject"
    assert display_name("./") == "myproject"
    assert display_name("..") == tmp_path.name


def test_display_name_uses_last_component():
    assert display_name("some/where/demo") == "demo"
    assert display_name("some/where/demo/") == "demo"
