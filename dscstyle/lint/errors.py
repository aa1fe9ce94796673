"""Lint runner errors."""

from __future__ import annotations


class LintRuleFault(RuntimeError):
    """A rule raised while checking a script.

    The original exception is chained as `__cause__`.
    """

    def __init__(self, rule_name: str, source_path: str | None) -> None:
        location = source_path if source_path is not None else "<memory>"
        super().__init__(f"Lint rule `{rule_name}` failed on {location}")
        self.rule_name = rule_name
        self.source_path = source_path
