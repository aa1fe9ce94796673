"""Entrypoints that lint in-memory text, single files and directory trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from dscstyle.lint import LintOptions
from dscstyle.lint import run_lint as _run_lint
from dscstyle.parser import ScriptParseResult
from dscstyle.pipeline.results import FileLintResult, LintRunResult

if TYPE_CHECKING:
    from dscstyle.lint.rules import LintRule

logger = logging.getLogger(__name__)

SCRIPT_SUFFIXES: tuple[str, ...] = (".ps1", ".psm1")


def run_lint(
    text: str,
    *,
    parse: ScriptParseResult | None = None,
    options: LintOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    source_path: str | None = None,
) -> LintRunResult:
    """Run linting over one parse lifecycle."""
    return _run_lint(text, parse=parse, options=options, rules=rules, source_path=source_path)


def lint_file(
    path: str | Path,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> FileLintResult:
    """Read one script (UTF-8, BOM tolerated) and lint it."""
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8-sig")
    logger.debug("Linting %s", file_path)
    result = _run_lint(text, options=options, rules=rules, source_path=str(file_path))
    return FileLintResult(path=str(file_path), result=result)


def expand_script_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Files are kept as given; directories expand to their scripts, sorted."""
    expanded: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            expanded.extend(
                sorted(
                    candidate
                    for candidate in path.rglob("*")
                    if candidate.is_file() and candidate.suffix.lower() in SCRIPT_SUFFIXES
                )
            )
        else:
            expanded.append(path)
    return expanded


def lint_paths(
    paths: Iterable[str | Path],
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> Iterator[FileLintResult]:
    for path in expand_script_paths(paths):
        yield lint_file(path, options, rules=rules)
