"""Unit tests for the invocation configuration."""

import dataclasses

import pytest

from sdir.config import Configuration, IgnoreSource, IgnoreSourceKind, OutputFormat


def test_defaults():
    config = Configuration()
    assert config.root_path == "."
    assert config.max_depth is None
    assert config.output_format is OutputFormat.TREE
    assert config.copy_to_clipboard
    assert config.use_ignore_files
    assert not config.include_locks
    assert not config.dirs_only
    assert not config.embed_content
    assert config.ignore_sources == ()


def test_configuration_is_immutable():
    config = Configuration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_depth = 3  # type: ignore


def test_negative_max_depth_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        Configuration(max_depth=-1)


def test_zero_max_depth_allowed():
    assert Configuration(max_depth=0).max_depth == 0


def test_output_format_from_string():
    assert OutputFormat("json") is OutputFormat.JSON
    assert OutputFormat.TREE == "tree"


def test_ignore_source():
    source = IgnoreSource(IgnoreSourceKind.PATTERN, "*.log")
    assert source.kind is IgnoreSourceKind.PATTERN
    assert source.value == "*.log"
