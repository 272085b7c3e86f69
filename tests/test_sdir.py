"""Tests for file and directory snapshots."""

import json
import os
from unittest.mock import patch

import pytest

from sdir.config import Configuration, OutputFormat
from sdir.document import Role
from sdir.exceptions import FileReadError, NotADirectoryTraversalError, PathNotFoundError, RenderError
from sdir.file_system_tree.tree_node import TreeNode
from sdir.sdir import Mode, render_file, render_tree, snapshot


@pytest.fixture
def proj(tmp_path):
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.x").write_text("fn main() {}\n")
    (root / "Cargo.lock").write_text("# lock\n")
    return root


def test_file_mode_output(tmp_path, monkeypatch):
    (tmp_path / "notes.txt").write_text("hello")
    monkeypatch.chdir(tmp_path)

    result = snapshot(Configuration(root_path="notes.txt"))

    assert result.mode is Mode.FILE
    assert result.tree is None
    assert result.errors == []
    assert result.document.plain == "./notes.txt\nhello"


def test_render_file_roles(tmp_path):
    (tmp_path / "notes.txt").write_text("hello\nworld")
    document = render_file(tmp_path / "notes.txt", cwd=tmp_path)
    assert [line[0].role for line in document.lines] == [Role.HEADER, Role.CONTENT, Role.CONTENT]


def test_file_mode_ignores_directory_options(tmp_path):
    (tmp_path / "Cargo.lock").write_text("lock")
    config = Configuration(root_path=tmp_path / "Cargo.lock", dirs_only=True, output_format=OutputFormat.JSON)
    assert snapshot(config, cwd=tmp_path).document.plain == "./Cargo.lock\nlock"


def test_file_mode_unreadable(tmp_path):
    (tmp_path / "blob.bin").write_bytes(b"\xff\xfe")
    with pytest.raises(FileReadError):
        snapshot(Configuration(root_path=tmp_path / "blob.bin"))


def test_directory_mode_text(proj):
    result = snapshot(Configuration(root_path=proj))

    assert result.mode is Mode.DIRECTORY
    assert result.tree is not None
    assert result.document.plain == (
        "# tree structure of directory `proj`\n" f"📁 {proj}\n" "└── 📁 src\n" "    └── 📄 main.x\n"
    )


def test_directory_mode_include_locks(proj):
    output = snapshot(Configuration(root_path=proj, include_locks=True, icons=False)).document.plain
    assert output.splitlines()[2:] == ["├── src", "│   └── main.x", "└── Cargo.lock"]


def test_directory_mode_dirs_only(proj):
    output = snapshot(Configuration(root_path=proj, dirs_only=True, icons=False)).document.plain
    assert output.splitlines()[2:] == ["└── src"]


def test_directory_mode_json(proj):
    result = snapshot(Configuration(root_path=proj, output_format=OutputFormat.JSON))
    data = json.loads(result.document.plain)
    assert data["name"] == "proj"
    assert [child["path"] for child in data["children"]] == ["./src"]


def test_directory_mode_errors(proj, monkeypatch):
    real_listdir = os.listdir

    def fake_listdir(path):
        if os.fspath(path) == os.fspath(proj / "src"):
            raise PermissionError(13, "Permission denied")
        return real_listdir(path)

    monkeypatch.setattr(os, "listdir", fake_listdir)

    result = snapshot(Configuration(root_path=proj))

    assert [node.relative_path for node in result.errors] == ["./src"]
    assert "[error: Permission denied]" in result.document.plain


def test_missing_root():
    with pytest.raises(PathNotFoundError):
        snapshot(Configuration(root_path="/non/existent/path"))


def test_render_tree_wraps_encoding_failures():
    root = TreeNode("bad\udcffname", is_dir=True, origin="bad")
    with pytest.raises(RenderError):
        render_tree(root, Configuration())


def test_render_tree_wraps_renderer_failures():
    root = TreeNode("proj", is_dir=True)
    with patch("sdir.sdir.json_renderer.render_document", side_effect=ValueError("Circular reference detected")):
        with pytest.raises(RenderError, match="Circular reference detected"):
            render_tree(root, Configuration(output_format=OutputFormat.JSON))


def test_special_root_rejected(tmp_path):
    if not hasattr(os, "mkfifo"):
        pytest.skip("FIFOs not supported on this platform")
    os.mkfifo(tmp_path / "pipe")
    with pytest.raises(NotADirectoryTraversalError):
        snapshot(Configuration(root_path=tmp_path / "pipe"))
