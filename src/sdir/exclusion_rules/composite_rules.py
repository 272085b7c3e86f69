"""Composite ignore rules for combining several rule sources."""

from typing import List, Optional, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Ignore rules combining several rule sources in precedence order.

    Sources are consulted in order and the first one with a verdict on a path
    decides it, the way Git lets a nested .gitignore override its parent's rules,
    including re-inclusion through a negated pattern. Sources without negations
    only ever say "ignored", so for them the composite is a logical OR.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rule sources, highest precedence first.

    Example:
        >>> from sdir.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> outer = GitIgnoreExclusionRules()
        >>> outer.add_rule("*.log")
        >>> inner = GitIgnoreExclusionRules(base="sub")
        >>> inner.add_rule("!keep.log")
        >>> composite = CompositeExclusionRules([inner, outer])
        >>> composite.exclude("sub/keep.log"), composite.exclude("sub/app.log"), composite.exclude("main.py")
        (False, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite rules.

        Args:
            rules: Rule sources to combine, highest precedence first.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if the deciding source ignores a path.

        Evaluation stops at the first source with a verdict.
        """
        return bool(self.decide(path))

    def decide(self, path: str) -> Optional[bool]:
        for rule in self.rules:
            decision = rule.decide(path)
            if decision is not None:
                return decision
        return None

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
