"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from dscstyle.diagnostics import Diagnostic, has_errors
from dscstyle.parser import ScriptParseResult


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules from a shared parse result."""

    parse: ScriptParseResult
    diagnostics: list[Diagnostic]
    rule_names: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(frozen=True, slots=True)
class FileLintResult:
    """Lint result for one file on disk."""

    path: str
    result: LintRunResult

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.result.diagnostics
