"""Glyph-based tree rendering.

The text renderer walks a built tree in pre-order and draws each node on its own
line, prefixed by the guides of its ancestors and a branch connector, much like
the Unix ``tree`` command:

    # tree structure of directory `proj`
    📁 proj
    ├── 📁 src
    │   └── 📄 main.py
    └── 📄 README.md
"""

from typing import Iterator, List

from anytree import ContStyle, RenderTree

from sdir.document import Document, Line, Role, Span
from sdir.file_system_tree.tree_node import TreeNode

HEADER_TEMPLATE = "# tree structure of directory `{name}`"
DIRECTORY_ICON = "📁"
FILE_ICON = "📄"
CONTENT_GUTTER = "┆ "


def _label(node: TreeNode, icons: bool) -> List[Span]:
    role = Role.DIRECTORY if node.is_dir else Role.FILE
    icon = DIRECTORY_ICON if node.is_dir else FILE_ICON
    spans = [Span(f"{icon} {node.name}" if icons else node.name, role)]

    if node.is_symlink:
        target = f" -> {node.symlink_target}" if node.symlink_target else " [symlink]"
        spans.append(Span(target, Role.SYMLINK))
    if node.error is not None:
        spans.append(Span(f"  [error: {node.error}]", Role.ERROR))
    return spans


def _content_lines(content: str) -> List[str]:
    # Only "\n" ends a line; other line separators are part of the content
    lines = content.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def stream_lines(tree: TreeNode, icons: bool = True) -> Iterator[Line]:
    """Generate the rendered lines of a tree one at a time.

    Args:
        tree: Root of a built tree.
        icons: Prefix labels with directory and file glyphs.

    Yields:
        Lines as tuples of role-tagged spans, without line terminators.
    """
    yield (Span(HEADER_TEMPLATE.format(name=tree.name), Role.HEADER),)
    origin = tree.origin if tree.origin is not None else tree.name
    yield (Span(f"{DIRECTORY_ICON} {origin}" if icons else origin, Role.DIRECTORY),)

    for pre, fill, node in RenderTree(tree, style=ContStyle()):
        if node is tree:
            continue
        yield (Span(pre, Role.GUIDE), *_label(node, icons))

        if node.content is not None:
            for content_line in _content_lines(node.content):
                yield (Span(fill + CONTENT_GUTTER, Role.GUIDE), Span(content_line, Role.CONTENT))


def render_document(tree: TreeNode, icons: bool = True) -> Document:
    """Render a tree into a Document whose plain text ends with a newline."""
    lines = list(stream_lines(tree, icons))
    lines.append((Span(""),))
    return Document.from_lines(lines)


def render(tree: TreeNode, icons: bool = True) -> str:
    """Render a tree as plain text.

    The output depends only on the tree: rendering the same tree twice yields
    byte-identical text.

    Example:
        >>> root = TreeNode("proj", is_dir=True, origin="proj")
        >>> _ = TreeNode("src", parent=root, relative_path="./src", is_dir=True)
        >>> _ = TreeNode("a.txt", parent=root, relative_path="./a.txt")
        >>> print(render(root, icons=False), end="")
        # tree structure of directory `proj`
        proj
        ├── src
        └── a.txt
    """
    return render_document(tree, icons).plain
