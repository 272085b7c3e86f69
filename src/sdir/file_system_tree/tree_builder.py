"""Recursive construction of the filtered directory tree.

This module walks a directory, asks the filter policy about every entry it finds,
and assembles the visible entries into a frozen tree of TreeNode objects, ordered
directories first and then by name.
"""

import os
from typing import Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from sdir.config import Configuration, IgnoreSourceKind
from sdir.exceptions import NotADirectoryTraversalError, RootPermissionError, TraversalError
from sdir.exclusion_rules.base_rules import BaseExclusionRules
from sdir.exclusion_rules.composite_rules import CompositeExclusionRules
from sdir.exclusion_rules.git_rules import GitIgnoreExclusionRules
from sdir.file_reader import read_content
from sdir.file_system_tree.entry import Entry, classify, classify_root, join_relative
from sdir.file_system_tree.tree_node import TreeNode
from sdir.filter_policy import is_visible
from sdir.types import PathType

# Version control metadata is never part of the rendered tree
ALWAYS_IGNORED = (".git/",)

HIDDEN_PATTERN = ".*"


def rules_from_config(config: Configuration) -> GitIgnoreExclusionRules:
    """Build the invocation-wide ignore rules.

    Built-in rules come first, so that user patterns (including negations) given
    with -e and -i can override them. User sources keep their command-line order.

    Raises:
        FileNotFoundError: If a user-supplied rules file does not exist.
    """
    rules = GitIgnoreExclusionRules()
    for pattern in ALWAYS_IGNORED:
        rules.add_rule(pattern)
    if config.hide_hidden:
        rules.add_rule(HIDDEN_PATTERN)

    for source in config.ignore_sources:
        if source.kind is IgnoreSourceKind.FILE:
            rules.load_rules(source.value)
        else:
            rules.add_rule(source.value)
    return rules


def sort_key(entry: Entry) -> tuple:
    """Directories before files, then case-sensitive by name."""
    return (not entry.is_dir, entry.name)


ScopedRules = Tuple[BaseExclusionRules, ...]


class TreeBuilder:
    """Builds the filtered, ordered tree for one directory-mode invocation.

    The walk is single-threaded and depth-first. Every directory is listed,
    filtered, sorted, and fully built before its next sibling is visited. Each
    recursive call assembles its children detached and hands them to its own node,
    so no subtree is shared.

    Failure handling:
        - A missing root, a root that is not a directory, or a root that cannot be
          listed raises TraversalError; no partial tree is returned.
        - A descendant directory that cannot be listed becomes an empty node with
          an ``error`` annotation, and the walk continues.
        - With content embedding, an unreadable file gets an unreadable marker.

    Symbolic links below the root are leaves and are never followed.

    Ignore precedence: the invocation-wide rules decide first. Ignore files found
    in the tree come next, innermost directory first, so a nested .gitignore can
    re-include what a parent's rules ignore.

    Attributes:
        config (Configuration): The invocation configuration.
        exclusion_rules (BaseExclusionRules): Invocation-wide ignore rules.

    Example:
        >>> builder = TreeBuilder(Configuration(max_depth=1))  # doctest: +SKIP
        >>> tree = builder.build("src")  # doctest: +SKIP
        >>> [child.name for child in tree.children]  # doctest: +SKIP
        ['utils', 'main.py']
    """

    def __init__(self, config: Configuration, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        """Initialize a TreeBuilder.

        Args:
            config: The invocation configuration.
            exclusion_rules: Ignore rules to apply everywhere. Defaults to the rules
                derived from the configuration.

        Raises:
            FileNotFoundError: If a rules file named in the configuration does not exist.
        """
        self.config = config
        self.exclusion_rules = exclusion_rules if exclusion_rules is not None else rules_from_config(config)

    def build(self, root_path: Optional[PathType] = None) -> TreeNode:
        """Walk a directory and return the root of its frozen tree.

        Args:
            root_path: Directory to walk. Defaults to the configured root path.

        Returns:
            The root node. Its name is the directory's display name and its
            ``origin`` is the path as given.

        Raises:
            PathNotFoundError: If the root does not exist.
            NotADirectoryTraversalError: If the root is not a directory.
            RootPermissionError: If the root cannot be listed.
            TraversalError: If listing the root fails for another reason.
        """
        if root_path is None:
            root_path = self.config.root_path

        root_entry = classify_root(root_path)
        if not root_entry.is_dir:
            raise NotADirectoryTraversalError(str(root_path), f"'{root_path}' is not a directory.")

        try:
            names = os.listdir(root_entry.path)
        except PermissionError as e:
            raise RootPermissionError(str(root_path), e.strerror or str(e)) from e
        except OSError as e:
            raise TraversalError(str(root_path), f"Cannot read '{root_path}': {e.strerror or e}") from e

        root = TreeNode(
            root_entry.name,
            relative_path=root_entry.relative_path,
            is_dir=True,
            origin=str(root_path),
        )
        if self._may_expand(root_entry.depth):
            root.children = self._build_children(root_entry, names, ())
        root.freeze()
        return root

    def _may_expand(self, depth: int) -> bool:
        return self.config.max_depth is None or depth < self.config.max_depth

    def _rules_for(self, scoped: ScopedRules) -> BaseExclusionRules:
        """Combine the invocation-wide rules with in-tree rules, innermost last in ``scoped``."""
        if not scoped:
            return self.exclusion_rules
        return CompositeExclusionRules([self.exclusion_rules, *reversed(scoped)])

    def _build_children(self, entry: Entry, names: List[str], scoped: ScopedRules) -> List[TreeNode]:
        """List, filter, sort, and build the children of a directory entry.

        Args:
            entry: The directory entry.
            names: Names listed in the directory.
            scoped: Ignore files of the enclosing directories, outermost first.
        """
        if self.config.use_ignore_files:
            local = GitIgnoreExclusionRules.from_directory(entry.path, base=entry.match_path.rstrip("/"))
            if local is not None:
                scoped = scoped + (local,)
        rules = self._rules_for(scoped)

        visible = []
        for name in names:
            child = classify(entry.path / name, join_relative(entry.relative_path, name), entry.depth + 1)
            if is_visible(child, self.config, rules):
                visible.append(child)
        visible.sort(key=sort_key)

        return [self._create_node(child, scoped) for child in visible]

    def _create_node(self, entry: Entry, scoped: ScopedRules) -> TreeNode:
        """Recursively create the node for a visible entry."""
        node = TreeNode(
            entry.name,
            relative_path=entry.relative_path,
            is_dir=entry.is_dir,
            is_symlink=entry.is_symlink,
            symlink_target=entry.symlink_target,
        )

        if not entry.is_dir:
            if self.config.embed_content:
                node.content = read_content(entry.path)
            return node

        if not self._may_expand(entry.depth):
            return node

        try:
            names = os.listdir(entry.path)
        except OSError as e:
            # The directory stays in the tree with no children
            node.error = e.strerror or str(e)
            return node

        node.children = self._build_children(entry, names, scoped)
        return node


def build(
    root_path: PathType, config: Configuration, exclusion_rules: Optional[BaseExclusionRules] = None
) -> TreeNode:
    """Build the frozen tree for a directory.

    Shorthand for ``TreeBuilder(config, exclusion_rules).build(root_path)``.
    """
    return TreeBuilder(config, exclusion_rules).build(root_path)


def iter_errors(tree: TreeNode) -> Iterator[TreeNode]:
    """Yield the nodes that carry an error annotation, in pre-order."""
    yield from PreOrderIter(tree, filter_=lambda node: node.error is not None)
