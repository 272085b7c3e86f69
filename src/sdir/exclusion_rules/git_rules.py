"""Ignore rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from sdir.types import PathType

from .base_rules import BaseExclusionRules

# Per-directory ignore files honored during traversal, in load order, inside a
# git repository or not
IGNORE_FILE_NAMES = (".gitignore", ".ignore")


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Ignore rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them:
    basic globs, directory-only patterns ending in "/", negations starting with "!",
    "**" matching, and comment lines.

    A rule set may be scoped to a directory through ``base``. Scoped rules only
    apply to paths below that directory and match them relative to it, which is how
    a .gitignore file nested in a subdirectory behaves.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.
        base (str): Root-relative directory the patterns are anchored to ("" for the root).

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/build/")
        True
        >>> scoped = GitIgnoreExclusionRules(base="docs")
        >>> scoped.add_rule("/draft.md")
        >>> scoped.exclude("docs/draft.md")
        True
        >>> scoped.exclude("draft.md")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base: str = "",
    ) -> None:
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.
            base: Root-relative directory the patterns are anchored to.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.base = base.strip("/")

        if rules_files is not None:
            self.load_rules(rules_files)

    @classmethod
    def from_directory(cls, directory: PathType, base: str = "") -> Optional["GitIgnoreExclusionRules"]:
        """Build rules from the ignore files present in a directory.

        Args:
            directory: Directory to look for .gitignore and .ignore files in.
            base: Root-relative path of that directory.

        Returns:
            The scoped rules, or None when the directory holds no readable ignore file.
        """
        rules_files: List[Path] = []
        for file_name in IGNORE_FILE_NAMES:
            candidate = Path(directory) / file_name
            if candidate.is_file():
                rules_files.append(candidate)
        if not rules_files:
            return None

        rules = cls(base=base)
        try:
            rules.load_rules(rules_files)
        except (OSError, UnicodeDecodeError):
            return None
        return rules

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Root-relative path with forward slashes; directories end in "/".

        Returns:
            bool: True if the last matching pattern is a non-negated one.
        """
        return bool(self.decide(path))

    def decide(self, path: str) -> Optional[bool]:
        """Return the verdict of the last pattern matching a path.

        Args:
            path: Root-relative path with forward slashes; directories end in "/".

        Returns:
            True if the last matching pattern ignores the path, False if it is a
            negation, None if no pattern matches or the path is outside ``base``.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("!keep.log")
            >>> rules.decide("keep.log"), rules.decide("other.log")
            (False, None)
        """
        if self.base:
            prefix = self.base + "/"
            if not path.startswith(prefix):
                return None
            path = path[len(prefix) :]  # noqa: E203
            if not path:
                return None

        decision = None
        for pattern in self.spec.patterns:
            if pattern.include is not None and pattern.match_file(path) is not None:
                decision = pattern.include
        return decision

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Later patterns can override earlier ones, in particular through negation.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                gitignore_content = f.read().splitlines()

            new_patterns = PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns

            if not hasattr(self.spec.patterns, "extend"):
                self.spec.patterns = list(self.spec.patterns)

            self.spec.patterns.extend(new_patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "node_modules/", "!keep.txt").
        """
        new_pattern = GitWildMatchPattern(rule)

        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(new_pattern)

    def has_rules(self) -> bool:
        """Return True if at least one pattern is loaded."""
        return len(self.spec.patterns) > 0
