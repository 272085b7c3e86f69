"""File and directory snapshots.

This module ties the pieces together for one invocation: it classifies the root
path, reads the file (file mode) or builds and renders the tree (directory mode),
and returns the finished document. Nothing is written anywhere until the caller
hands the document to its output sinks, so a failure at any step leaves no
partial artifact behind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from sdir.config import Configuration, OutputFormat
from sdir.document import Document, Role
from sdir.exceptions import RenderError
from sdir.file_reader import format_file, read_file
from sdir.file_system_tree.entry import classify_root
from sdir.file_system_tree.tree_builder import TreeBuilder, iter_errors
from sdir.file_system_tree.tree_node import TreeNode
from sdir.renderers import json_renderer, text_renderer
from sdir.types import PathType


class Mode(str, Enum):
    """Processing mode selected by the kind of the root path."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Snapshot:
    """Result of processing one root path.

    Attributes:
        mode: FILE or DIRECTORY.
        document: The rendered output.
        tree: The built tree in directory mode, None in file mode.
    """

    mode: Mode
    document: Document
    tree: Optional[TreeNode] = None

    @property
    def errors(self) -> List[TreeNode]:
        """Nodes whose directory could not be listed."""
        if self.tree is None:
            return []
        return list(iter_errors(self.tree))


def render_file(path: PathType, cwd: Optional[PathType] = None) -> Document:
    """Read a file and render it as its display path followed by its content.

    Raises:
        FileReadError: If the file cannot be read or decoded.
    """
    display_path, content = read_file(path, cwd)
    return Document.from_text(format_file(display_path, content), role=Role.CONTENT, first_line_role=Role.HEADER)


def render_tree(tree: TreeNode, config: Configuration) -> Document:
    """Render a built tree with the configured renderer.

    Raises:
        RenderError: If the tree cannot be rendered, for instance when an entry
            name cannot be represented as UTF-8 text.
    """
    try:
        if config.output_format is OutputFormat.JSON:
            document = json_renderer.render_document(tree)
        else:
            document = text_renderer.render_document(tree, icons=config.icons)
        document.plain.encode("utf-8")
    except (UnicodeError, ValueError, RecursionError) as e:
        raise RenderError(f"Cannot render tree of '{tree.origin or tree.name}': {e}") from e
    return document


def snapshot(config: Configuration, cwd: Optional[PathType] = None) -> Snapshot:
    """Process the configured root path.

    Args:
        config: The invocation configuration.
        cwd: Working directory file-mode display paths are relative to.

    Returns:
        The snapshot holding the rendered document.

    Raises:
        TraversalError: If the root path cannot be resolved or walked.
        FileReadError: If the root is a file that cannot be read.
        RenderError: If the tree cannot be rendered.
        FileNotFoundError: If a configured rules file does not exist.

    Example:
        >>> result = snapshot(Configuration(root_path="notes.txt"))  # doctest: +SKIP
        >>> result.document.plain  # doctest: +SKIP
        './notes.txt\\nhello'
    """
    root = classify_root(config.root_path)
    if not root.is_dir:
        return Snapshot(Mode.FILE, render_file(config.root_path, cwd))

    tree = TreeBuilder(config).build(config.root_path)
    return Snapshot(Mode.DIRECTORY, render_tree(tree, config), tree)
