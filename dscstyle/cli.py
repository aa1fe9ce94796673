"""Command line entrypoint for the style checker."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import json
import logging
import sys
from typing import TextIO

from tqdm import tqdm

from dscstyle.diagnostics import Diagnostic
from dscstyle.lint import LintOptions, LintRuleFault, all_lint_rules
from dscstyle.localisation import DEFAULT_CULTURE
from dscstyle.pipeline import FileLintResult
from dscstyle.pipeline.entrypoints import expand_script_paths, lint_file

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_FAULT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dscstyle",
        description="Check PowerShell scripts against the DSC community style guidelines",
    )
    parser.add_argument("paths", nargs="+", help="Script files or directories (*.ps1, *.psm1)")
    parser.add_argument(
        "--culture",
        default=DEFAULT_CULTURE,
        help=f"Culture of the diagnostic messages (default: {DEFAULT_CULTURE})",
    )
    parser.add_argument(
        "--rule",
        dest="include_rules",
        action="append",
        default=[],
        metavar="NAME",
        help="Only run this rule; may be repeated",
    )
    parser.add_argument(
        "--exclude-rule",
        dest="exclude_rules",
        action="append",
        default=[],
        metavar="NAME",
        help="Skip this rule; may be repeated",
    )
    parser.add_argument(
        "--all-rules",
        action="store_true",
        help="Also run the generic statement block rule",
    )
    parser.add_argument(
        "--no-parse-diagnostics",
        action="store_true",
        help="Do not report problems found while reading the scripts",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the tqdm progress bar",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format (default: text)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    out = stdout if stdout is not None else sys.stdout

    include_rules = tuple(args.include_rules)
    if args.all_rules and not include_rules:
        include_rules = tuple(rule.name for rule in all_lint_rules())
    options = LintOptions(
        culture=args.culture,
        include_rules=include_rules,
        exclude_rules=tuple(args.exclude_rules),
        include_parse_diagnostics=not args.no_parse_diagnostics,
    )

    files = expand_script_paths(args.paths)
    results: list[FileLintResult] = []
    try:
        with tqdm(files, desc="Linting", unit="file", disable=args.no_progress) as progress:
            for path in progress:
                results.append(lint_file(path, options))
    except LintRuleFault as exc:
        logger.error("%s: %s", exc, exc.__cause__)
        return EXIT_FAULT
    except ValueError as exc:
        logger.error("%s", exc)
        return EXIT_FAULT
    except OSError as exc:
        logger.error("Cannot read %s: %s", exc.filename, exc.strerror)
        return EXIT_FAULT

    diagnostics = [(result.path, diagnostic) for result in results for diagnostic in result.diagnostics]
    if args.format == "json":
        json.dump([_as_json(path, diagnostic) for path, diagnostic in diagnostics], out, indent=2)
        out.write("\n")
    else:
        for path, diagnostic in diagnostics:
            out.write(format_diagnostic(path, diagnostic) + "\n")

    logger.debug("Checked %d file(s), %d diagnostic(s)", len(results), len(diagnostics))
    return EXIT_DIAGNOSTICS if diagnostics else EXIT_CLEAN


def format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    extent = diagnostic.extent
    return (
        f"{path}:{extent.start_line}:{extent.start_column}: "
        f"{diagnostic.severity} {diagnostic.rule_name} [{diagnostic.code}] {diagnostic.message}"
    )


def _as_json(path: str, diagnostic: Diagnostic) -> dict[str, object]:
    extent = diagnostic.extent
    return {
        "path": path,
        "ruleName": diagnostic.rule_name,
        "code": diagnostic.code,
        "severity": diagnostic.severity,
        "message": diagnostic.message,
        "startLine": extent.start_line,
        "startColumn": extent.start_column,
        "endLine": extent.end_line,
        "endColumn": extent.end_column,
        "text": extent.text,
    }
