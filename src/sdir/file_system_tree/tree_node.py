"""Node representation for entries in the built tree."""

from typing import Any, Optional

from anytree import Node, PreOrderIter

from sdir.exceptions import TreeFrozenError

# Private attributes anytree maintains lazily, even on read access
_ANYTREE_PRIVATE_PREFIX = "_NodeMixin__"


class TreeNode(Node):  # type: ignore
    """Node class representing a visible file or directory in the built tree.

    Extends anytree.Node with the classification of the entry it was built from.
    Tree traversal (children, depth, pre-order iteration) is inherited from anytree;
    ``depth`` is 0 for the root.

    Nodes are assembled top-down by the tree builder and then frozen. A frozen node
    rejects attribute assignment, and no node can be attached to or detached from a
    frozen parent.

    Attributes:
        name (str): Base name of the entry (display name for the root).
        relative_path (str): "./"-prefixed, forward-slash path relative to the root.
        is_dir (bool): True for directories, False for files and symlinks.
        is_symlink (bool): True if the entry is a symbolic link.
        symlink_target (Optional[str]): Target of the link, if known.
        content (Optional[str]): Embedded file content or an unreadable marker.
        error (Optional[str]): Annotation recorded when a directory could not be listed.
        origin (Optional[str]): The root path as given by the user (root node only).

    Example:
        >>> root = TreeNode("proj", relative_path="./", is_dir=True)
        >>> child = TreeNode("main.py", parent=root, relative_path="./main.py")
        >>> child.depth
        1
        >>> root.freeze()
        >>> child.name = "other.py"
        Traceback (most recent call last):
        ...
        sdir.exceptions.TreeFrozenError: Cannot modify 'main.py': the tree is frozen
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        relative_path: str = "./",
        is_dir: bool = False,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        content: Optional[str] = None,
        error: Optional[str] = None,
        origin: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        object.__setattr__(self, "_frozen", False)
        super().__init__(name, parent, **kwargs)
        self.relative_path = relative_path
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target
        self.content = content
        self.error = error
        self.origin = origin

    @property
    def frozen(self) -> bool:
        return self.__dict__.get("_frozen", False)

    def freeze(self) -> None:
        """Freeze this node and all of its descendants."""
        for node in PreOrderIter(self):
            # Reading children materializes anytree's lazy child list before locking.
            node.children
            object.__setattr__(node, "_frozen", True)

    def __setattr__(self, key: str, value: Any) -> None:
        if self.frozen and not key.startswith(_ANYTREE_PRIVATE_PREFIX):
            raise TreeFrozenError(f"Cannot modify '{self.name}': the tree is frozen")
        super().__setattr__(key, value)

    def _pre_attach(self, parent: "TreeNode") -> None:
        if self.frozen or getattr(parent, "frozen", False):
            raise TreeFrozenError(f"Cannot attach '{self.name}' to '{parent.name}': the tree is frozen")

    def _pre_detach(self, parent: "TreeNode") -> None:
        if self.frozen or getattr(parent, "frozen", False):
            raise TreeFrozenError(f"Cannot detach '{self.name}' from '{parent.name}': the tree is frozen")
