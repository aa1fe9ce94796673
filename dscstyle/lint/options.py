"""Lint run configuration."""

from __future__ import annotations

from dataclasses import dataclass

from dscstyle.lint.rules import LintRule
from dscstyle.localisation import DEFAULT_CULTURE


@dataclass(frozen=True, slots=True)
class LintOptions:
    culture: str = DEFAULT_CULTURE
    include_rules: tuple[str, ...] = ()
    exclude_rules: tuple[str, ...] = ()
    include_parse_diagnostics: bool = True

    def select(
        self,
        rules: tuple[LintRule, ...],
        *,
        default_names: frozenset[str] | None = None,
    ) -> tuple[LintRule, ...]:
        """Filter `rules` by the include and exclude lists.

        An empty include list keeps the rules named in `default_names`, or every
        rule when it is `None`. Names that match none of `rules` raise
        `ValueError`.
        """
        known = {rule.name for rule in rules}
        unknown = sorted(
            name for name in (*self.include_rules, *self.exclude_rules) if name not in known
        )
        if unknown:
            raise ValueError(f"Unknown lint rule(s): {', '.join(unknown)}")

        if self.include_rules:
            selected = tuple(rule for rule in rules if rule.name in self.include_rules)
        elif default_names is not None:
            selected = tuple(rule for rule in rules if rule.name in default_names)
        else:
            selected = rules
        return tuple(rule for rule in selected if rule.name not in self.exclude_rules)
