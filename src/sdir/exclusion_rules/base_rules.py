from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from sdir.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for ignore-rule sources consulted by the filter policy.

    A rule source answers a single question: is this root-relative path ignored?
    Paths are given without the leading "./" and with forward slashes; directory
    paths carry a trailing slash so that directory-only patterns can match them.
    Loading rules from files and adding individual rules are optional capabilities.

    Example:
        >>> from sdir.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path is ignored by this rule source.

        Args:
            path (str): Root-relative path using forward slashes, with a trailing
                slash for directories.

        Returns:
            bool: True if the path should be hidden, False otherwise.
        """
        pass

    def decide(self, path: str) -> Optional[bool]:
        """
        Report this source's verdict on a path, or None if it has no opinion.

        Sources that can re-include paths (negated patterns) override this to return
        False for an explicit re-inclusion. By default a path that is not excluded
        is left to other sources.

        Returns:
            Optional[bool]: True if ignored, False if explicitly kept, None otherwise.
        """
        return True if self.exclude(path) else None

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
