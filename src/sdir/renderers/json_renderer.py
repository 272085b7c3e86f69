"""JSON rendering of a built tree.

Each node becomes an object of the form:

    {
        "name": "src",
        "path": "./src",
        "is_dir": true,
        "children": [...]
    }

``children`` is present on every directory, empty when nothing below it is visible
or the depth bound stopped the walk, and absent on files. Files carry ``content``
when content embedding was requested. Symlinks add ``symlink_target`` and
directories that could not be listed add ``error``. Children appear in the same
order as in the text rendering.
"""

import json
from typing import Any, Dict

from sdir.document import Document
from sdir.file_system_tree.tree_node import TreeNode


def to_dict(node: TreeNode) -> Dict[str, Any]:
    """Convert a node and its descendants into plain dictionaries.

    Example:
        >>> root = TreeNode("proj", is_dir=True)
        >>> _ = TreeNode("a.txt", parent=root, relative_path="./a.txt")
        >>> to_dict(root)["children"]
        [{'name': 'a.txt', 'path': './a.txt', 'is_dir': False}]
    """
    data: Dict[str, Any] = {"name": node.name, "path": node.relative_path, "is_dir": node.is_dir}
    if node.is_symlink:
        data["symlink_target"] = node.symlink_target
    if node.error is not None:
        data["error"] = node.error

    if node.is_dir:
        data["children"] = [to_dict(child) for child in node.children]
    elif node.content is not None:
        data["content"] = node.content
    return data


def render(tree: TreeNode, indent: int = 2) -> str:
    """Render a tree as a JSON document, keeping non-ASCII names and content readable."""
    return json.dumps(to_dict(tree), indent=indent, ensure_ascii=False)


def render_document(tree: TreeNode) -> Document:
    return Document.from_text(render(tree))
