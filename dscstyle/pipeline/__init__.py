"""Run result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from dscstyle.pipeline.results import FileLintResult, LintRunResult

if TYPE_CHECKING:
    from dscstyle.lint.options import LintOptions
    from dscstyle.lint.rules import LintRule
    from dscstyle.parser import ScriptParseResult


def run_lint(
    text: str,
    *,
    parse: ScriptParseResult | None = None,
    options: LintOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    source_path: str | None = None,
) -> LintRunResult:
    from dscstyle.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, parse=parse, options=options, rules=rules, source_path=source_path)


def lint_file(
    path: str | Path,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> FileLintResult:
    from dscstyle.pipeline.entrypoints import lint_file as _lint_file

    return _lint_file(path, options, rules=rules)


def lint_paths(
    paths: Iterable[str | Path],
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> Iterator[FileLintResult]:
    from dscstyle.pipeline.entrypoints import lint_paths as _lint_paths

    return _lint_paths(paths, options, rules=rules)


__all__ = [
    "FileLintResult",
    "LintRunResult",
    "lint_file",
    "lint_paths",
    "run_lint",
]
