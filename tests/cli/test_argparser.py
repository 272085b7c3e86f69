"""Unit tests for the argument parser module in sdir CLI."""

import argparse

import pytest

from sdir.cli.argparser import IgnoreSourceAction, config_from_args, create_parser, validate_args
from sdir.config import IgnoreSource, IgnoreSourceKind, OutputFormat


@pytest.fixture
def parser():
    """Create a fresh parser for each test."""
    return create_parser()


def test_defaults(parser):
    """Test parsing with no arguments."""
    args = parser.parse_args([])
    config = config_from_args(args)

    assert config.root_path == "."
    assert config.max_depth is None
    assert config.output_format is OutputFormat.TREE
    assert config.copy_to_clipboard
    assert not config.include_locks
    assert not config.dirs_only
    assert not config.embed_content
    assert config.use_ignore_files
    assert config.color
    assert config.icons


def test_all_flags(parser):
    """Test that every flag reaches the configuration."""
    args = parser.parse_args(
        [
            "--dirs-only",
            "--max-depth",
            "2",
            "--output",
            "json",
            "--no-copy",
            "--include-locks",
            "-c",
            "--no-ignore-files",
            "-H",
            "--no-color",
            "--no-icons",
            "some/dir",
        ]
    )
    config = config_from_args(args)

    assert config.root_path == "some/dir"
    assert config.dirs_only
    assert config.max_depth == 2
    assert config.output_format is OutputFormat.JSON
    assert not config.copy_to_clipboard
    assert config.include_locks
    assert config.embed_content
    assert not config.use_ignore_files
    assert config.hide_hidden
    assert not config.color
    assert not config.icons


def test_ignore_sources_keep_command_line_order(parser):
    """Test that -e and -i accumulate in the order given."""
    args = parser.parse_args(["-i", "*.log", "-e", "rules.txt", "--ignore", "!keep.log", "--exclude", "more.txt"])
    assert config_from_args(args).ignore_sources == (
        IgnoreSource(IgnoreSourceKind.PATTERN, "*.log"),
        IgnoreSource(IgnoreSourceKind.FILE, "rules.txt"),
        IgnoreSource(IgnoreSourceKind.PATTERN, "!keep.log"),
        IgnoreSource(IgnoreSourceKind.FILE, "more.txt"),
    )


def test_ignore_source_action_directly():
    """Test IgnoreSourceAction on a bare namespace."""
    action = IgnoreSourceAction(option_strings=["-i", "--ignore"], dest="ignore_sources")
    namespace = argparse.Namespace()

    action(argparse.ArgumentParser(), namespace, "*.tmp", "-i")
    action(argparse.ArgumentParser(), namespace, None, "-i")

    assert namespace.ignore_sources == [IgnoreSource(IgnoreSourceKind.PATTERN, "*.tmp")]


def test_invalid_output_format(parser, capsys):
    """Test that an unknown output format is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--output", "xml"])
    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_non_integer_max_depth(parser):
    """Test that a non-integer depth is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--max-depth", "deep"])
    assert exc_info.value.code == 2


def test_validate_negative_max_depth(parser):
    """Test that a negative depth fails validation."""
    args = parser.parse_args(["--max-depth", "-1"])
    with pytest.raises(ValueError, match="--max-depth must be a non-negative integer"):
        validate_args(args)


def test_validate_accepts_zero_depth(parser):
    """Test that depth 0 is valid."""
    validate_args(parser.parse_args(["--max-depth", "0"]))


def test_version(parser, capsys):
    """Test the version flag."""
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("sdir ")
