"""Resolved configuration for a single sdir invocation.

The configuration is an immutable snapshot of plain values. It is produced by the
command-line layer and consumed by the filter policy, the tree builder, and the
renderers; none of them know how the values were obtained.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from sdir.types import PathType


class OutputFormat(str, Enum):
    """Output format for directory mode.

    Values:
        TREE: Glyph-based indented tree (default)
        JSON: Structured JSON document
    """

    TREE = "tree"
    JSON = "json"


class IgnoreSourceKind(str, Enum):
    """Kind of a user-supplied ignore source.

    Values:
        FILE: Path to a gitignore-style rules file
        PATTERN: A single gitignore-style pattern
    """

    FILE = "file"
    PATTERN = "pattern"


class IgnoreSource(NamedTuple):
    """One user-supplied ignore source, kept in command-line order."""

    kind: IgnoreSourceKind
    value: str


@dataclass(frozen=True)
class Configuration:
    """Immutable snapshot of everything that parameterizes an invocation.

    Attributes:
        root_path: File or directory to process, as given by the user.
        dirs_only: Hide files, showing directories only.
        max_depth: Maximum recursion depth, or None for unlimited. The root is depth 0.
        output_format: Renderer used in directory mode.
        include_locks: Show dependency lock files (hidden by default).
        copy_to_clipboard: Hand the rendered document to the clipboard sink.
        embed_content: Attach file contents to file nodes in directory mode.
        ignore_sources: Ordered ignore files and patterns supplied by the user.
        use_ignore_files: Honor .gitignore and .ignore files found in the walked tree.
        hide_hidden: Hide entries whose name starts with a dot.
        color: Colorize console output.
        icons: Prefix tree entries with directory and file glyphs.
    """

    root_path: PathType = "."
    dirs_only: bool = False
    max_depth: Optional[int] = None
    output_format: OutputFormat = OutputFormat.TREE
    include_locks: bool = False
    copy_to_clipboard: bool = True
    embed_content: bool = False
    ignore_sources: Tuple[IgnoreSource, ...] = ()
    use_ignore_files: bool = True
    hide_hidden: bool = False
    color: bool = True
    icons: bool = True

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
