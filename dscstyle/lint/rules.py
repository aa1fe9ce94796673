"""Lint rule contracts and the style rule set."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias

from dscstyle.ast import SyntaxNode, is_kind
from dscstyle.diagnostics import Diagnostic
from dscstyle.lint.braces import (
    CATCH_CLAUSE_CONSTRUCT,
    DO_UNTIL_STATEMENT_CONSTRUCT,
    DO_WHILE_STATEMENT_CONSTRUCT,
    FOR_STATEMENT_CONSTRUCT,
    FOREACH_STATEMENT_CONSTRUCT,
    FUNCTION_CONSTRUCT,
    IF_STATEMENT_CONSTRUCT,
    STATEMENT_BLOCK_CONSTRUCT,
    SWITCH_STATEMENT_CONSTRUCT,
    TRY_STATEMENT_CONSTRUCT,
    WHILE_STATEMENT_CONSTRUCT,
    BraceConstruct,
    check_catch_clause_braces,
    check_do_until_statement_braces,
    check_do_while_statement_braces,
    check_for_statement_braces,
    check_foreach_statement_braces,
    check_function_braces,
    check_if_statement_braces,
    check_statement_block_braces,
    check_switch_statement_braces,
    check_try_statement_braces,
    check_while_statement_braces,
)
from dscstyle.lint.parameters import PARAMETER_ATTRIBUTE_RULE_NAME, check_parameter_attributes
from dscstyle.localisation import StringTable
from dscstyle.parser import ScriptParseResult

LintCategory: TypeAlias = Literal["style"]
NodeCheck: TypeAlias = Callable[..., list[Diagnostic]]


class LintRule(Protocol):
    """Style rule contract."""

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    def run(self, parse: ScriptParseResult, *, strings: StringTable | None = None) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class ScriptTreeRule:
    """Rule whose check function walks the whole script tree itself."""

    name: str
    check: Callable[..., list[Diagnostic]]
    category: LintCategory = "style"

    def run(self, parse: ScriptParseResult, *, strings: StringTable | None = None) -> list[Diagnostic]:
        return self.check(parse.root, strings=strings)


@dataclass(frozen=True, slots=True)
class NodeBraceRule:
    """Runs a per-construct check on every node of the construct's kind."""

    construct: BraceConstruct
    check: NodeCheck
    category: LintCategory = "style"

    @property
    def name(self) -> str:
        return self.construct.rule_name

    def run(self, parse: ScriptParseResult, *, strings: StringTable | None = None) -> list[Diagnostic]:
        if self.construct.kind is None:
            raise ValueError(f"Lint rule `{self.name}` has no node kind to match")
        diagnostics: list[Diagnostic] = []
        nodes: list[SyntaxNode] = list(parse.root.find_all(is_kind(self.construct.kind), recurse=True))
        for node in nodes:
            diagnostics.extend(self.check(node, strings=strings))
        return diagnostics


def default_lint_rules() -> tuple[LintRule, ...]:
    return (
        ScriptTreeRule(name=PARAMETER_ATTRIBUTE_RULE_NAME, check=check_parameter_attributes),
        ScriptTreeRule(name=FUNCTION_CONSTRUCT.rule_name, check=check_function_braces),
        NodeBraceRule(IF_STATEMENT_CONSTRUCT, check_if_statement_braces),
        NodeBraceRule(FOREACH_STATEMENT_CONSTRUCT, check_foreach_statement_braces),
        NodeBraceRule(WHILE_STATEMENT_CONSTRUCT, check_while_statement_braces),
        NodeBraceRule(DO_UNTIL_STATEMENT_CONSTRUCT, check_do_until_statement_braces),
        NodeBraceRule(DO_WHILE_STATEMENT_CONSTRUCT, check_do_while_statement_braces),
        NodeBraceRule(FOR_STATEMENT_CONSTRUCT, check_for_statement_braces),
        NodeBraceRule(SWITCH_STATEMENT_CONSTRUCT, check_switch_statement_braces),
        NodeBraceRule(TRY_STATEMENT_CONSTRUCT, check_try_statement_braces),
        NodeBraceRule(CATCH_CLAUSE_CONSTRUCT, check_catch_clause_braces),
    )


def all_lint_rules() -> tuple[LintRule, ...]:
    """Default rules plus the generic statement-block rule."""
    return (
        *default_lint_rules(),
        ScriptTreeRule(name=STATEMENT_BLOCK_CONSTRUCT.rule_name, check=check_statement_block_braces),
    )


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.category != "style":
            raise ValueError(f"Lint rule `{rule.name}` has invalid category `{rule.category}`; expected style.")
        if rule.name in seen:
            raise ValueError(f"Lint rule `{rule.name}` is registered more than once.")
        seen.add(rule.name)
