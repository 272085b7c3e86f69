"""Visibility predicate applied to every entry below the traversal root."""

from typing import Optional

from sdir.config import Configuration
from sdir.exclusion_rules.base_rules import BaseExclusionRules
from sdir.file_system_tree.entry import Entry
from sdir.types import FileType

# Dependency lock files, hidden unless include_locks is set
LOCK_FILE_NAMES = frozenset(
    {
        "Cargo.lock",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "bun.lockb",
        "poetry.lock",
        "Pipfile.lock",
        "uv.lock",
        "pdm.lock",
        "Gemfile.lock",
        "composer.lock",
        "go.sum",
        "mix.lock",
        "pubspec.lock",
        "Podfile.lock",
        "flake.lock",
        "packages.lock.json",
    }
)


def is_lock_file(name: str) -> bool:
    """Return True if a base name is a reserved dependency lock file name.

    Example:
        >>> is_lock_file("Cargo.lock"), is_lock_file("cargo.lock"), is_lock_file("lock.rs")
        (True, False, False)
    """
    return name in LOCK_FILE_NAMES


def is_visible(entry: Entry, config: Configuration, ignore_rules: Optional[BaseExclusionRules] = None) -> bool:
    """Decide whether an entry below the root appears in the tree.

    Rules are checked in order and the first match rejects the entry:

    1. a lock file while ``include_locks`` is off;
    2. a file while ``dirs_only`` is on;
    3. a path matched by ``ignore_rules``.

    The function has no side effects. The traversal root is never passed in.

    Args:
        entry: The classified entry.
        config: Invocation configuration.
        ignore_rules: Ignore-rule source in effect for the entry's directory.

    Returns:
        True if the entry is visible.
    """
    if not config.include_locks and is_lock_file(entry.name):
        return False
    if config.dirs_only and entry.kind is FileType.FILE:
        return False
    if ignore_rules is not None and ignore_rules.exclude(entry.match_path):
        return False
    return True
