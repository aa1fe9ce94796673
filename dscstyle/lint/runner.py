"""Lint runner over a shared script parse result."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from dscstyle.diagnostics import collect_diagnostics, sort_diagnostics
from dscstyle.lint.errors import LintRuleFault
from dscstyle.lint.options import LintOptions
from dscstyle.lint.rules import (
    LintRule,
    all_lint_rules,
    default_lint_rules,
    validate_lint_rules,
)
from dscstyle.localisation import load_string_table
from dscstyle.parser import ScriptParseResult, parse_script
from dscstyle.pipeline.results import LintRunResult

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    *,
    parse: ScriptParseResult | None = None,
    options: LintOptions | None = None,
    rules: Sequence[LintRule] | None = None,
    source_path: str | None = None,
) -> LintRunResult:
    """Run the style rules from a single parse lifecycle."""
    resolved_options = options if options is not None else LintOptions()
    resolved_parse = _resolve_parse(text, parse=parse, source_path=source_path)
    resolved_rules = _resolve_rules(rules, resolved_options)
    validate_lint_rules(resolved_rules)
    strings = load_string_table(resolved_options.culture)

    diagnostics = collect_diagnostics(resolved_parse.diagnostics if resolved_options.include_parse_diagnostics else ())
    for rule in resolved_rules:
        try:
            found = rule.run(resolved_parse, strings=strings)
        except Exception as exc:
            raise LintRuleFault(rule.name, resolved_parse.source_path) from exc
        logger.debug("Rule %s reported %d diagnostic(s)", rule.name, len(found))
        diagnostics.extend(found)

    return LintRunResult(
        parse=resolved_parse,
        diagnostics=sort_diagnostics(diagnostics),
        rule_names=tuple(rule.name for rule in resolved_rules),
    )


def _resolve_parse(
    text: str,
    *,
    parse: ScriptParseResult | None,
    source_path: str | None,
) -> ScriptParseResult:
    if parse is not None:
        if parse.source_text != text:
            raise ValueError("Provided parse result must come from the same source text")
        return parse
    return parse_script(text, source_path=source_path)


def _resolve_rules(rules: Sequence[LintRule] | None, options: LintOptions) -> tuple[LintRule, ...]:
    if rules is not None:
        return options.select(tuple(rules))
    # Opt-in rules are only reachable through an explicit include list.
    default_names = frozenset(rule.name for rule in default_lint_rules())
    return options.select(all_lint_rules(), default_names=default_names)
