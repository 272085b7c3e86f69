"""Command-line argument parsing for sdir.

This module defines the command-line interface for sdir, handling argument
parsing, validation, and conversion into a Configuration.
"""

import argparse
from typing import Any, List, Optional, Sequence, Union

from sdir import __version__
from sdir.config import Configuration, IgnoreSource, IgnoreSourceKind, OutputFormat


class IgnoreSourceAction(argparse.Action):
    """Action recording ignore files and patterns in command-line order.

    -e/--exclude and -i/--ignore both append to the shared ``ignore_sources``
    list, so that a negation pattern given after a rules file overrides it.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return
        kind = IgnoreSourceKind.FILE if option_string in ("-e", "--exclude") else IgnoreSourceKind.PATTERN

        sources = getattr(namespace, "ignore_sources", None) or []
        sources.append(IgnoreSource(kind, str(values)))
        namespace.ignore_sources = sources


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with sdir's options.
    """
    description = """
    sdir: show a file or a directory tree and copy it to the clipboard.

    Given a file, sdir prints its path relative to the working directory followed
    by its content. Given a directory, it prints the directory structure as a tree
    (or JSON), honoring .gitignore files and hiding dependency lock files.
    The printed text is copied to the system clipboard.
    """

    epilog = """
    Examples:
      # Tree of the current directory, copied to the clipboard
      sdir

      # A single file, prefixed with its relative path
      sdir src/main.rs

      # Two levels deep, directories only, without touching the clipboard
      sdir --max-depth 2 --dirs-only --no-copy path/to/project

      # JSON output including lock files
      sdir --output json --include-locks path/to/project

      # Tree with every file's content embedded beneath it
      sdir -c path/to/project

      # Extra ignore rules, applied in the order given
      sdir -e .dockerignore -i "*.log" -i "!keep.log" path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="sdir",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"sdir {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Root directory or file path (default: current directory).",
    )
    parser.add_argument("--dirs-only", action="store_true", help="Show only directories.")
    parser.add_argument("--max-depth", type=int, metavar="N", help="Limit recursion depth.")
    parser.add_argument(
        "--output",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TREE.value,
        help="Output format for directories (default: tree).",
    )
    parser.add_argument("--no-copy", action="store_true", help="Disable clipboard copy.")
    parser.add_argument(
        "--include-locks", action="store_true", help="Include dependency lock files (ignored by default)."
    )
    parser.add_argument(
        "-c",
        "--contents",
        action="store_true",
        help="Embed the content of every file in the directory output.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="FILE",
        dest="ignore_sources",
        action=IgnoreSourceAction,
        help="Path to a gitignore-style rules file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        dest="ignore_sources",
        action=IgnoreSourceAction,
        help=(
            "Individual gitignore-style pattern to exclude files and directories. Can be specified "
            "multiple times; patterns are processed in the order they appear, mixed with -e/--exclude."
        ),
    )
    parser.add_argument(
        "--no-ignore-files",
        action="store_true",
        help="Do not honor .gitignore and .ignore files found in the directory tree.",
    )
    parser.add_argument(
        "-H", "--hide-hidden", action="store_true", help="Hide files and directories starting with a dot."
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored terminal output.")
    parser.add_argument("--no-icons", action="store_true", help="Omit the directory and file glyphs.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < 0:
        raise ValueError(f"--max-depth must be a non-negative integer, got {args.max_depth}")


def config_from_args(args: argparse.Namespace) -> Configuration:
    """Convert parsed arguments into the immutable invocation configuration."""
    return Configuration(
        root_path=args.path,
        dirs_only=args.dirs_only,
        max_depth=args.max_depth,
        output_format=OutputFormat(args.output),
        include_locks=args.include_locks,
        copy_to_clipboard=not args.no_copy,
        embed_content=args.contents,
        ignore_sources=tuple(args.ignore_sources or ()),
        use_ignore_files=not args.no_ignore_files,
        hide_hidden=args.hide_hidden,
        color=not args.no_color,
        icons=not args.no_icons,
    )
