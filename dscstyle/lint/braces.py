"""Opening brace placement checks.

Every construct is checked the same way over its source text, split into
lines with carriage returns removed:

- line 0 of the introducer text must not contain `{`;
- the brace line must not carry content after `{`;
- the line after the brace line must not be blank.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from dscstyle.ast import SyntaxNode, is_kind
from dscstyle.diagnostics import (
    CATCH_CLAUSE_BRACES,
    DO_UNTIL_STATEMENT_BRACES,
    DO_WHILE_STATEMENT_BRACES,
    FOR_STATEMENT_BRACES,
    FOREACH_STATEMENT_BRACES,
    FUNCTION_BRACES,
    IF_STATEMENT_BRACES,
    STATEMENT_BRACES,
    SWITCH_STATEMENT_BRACES,
    TRY_STATEMENT_BRACES,
    WHILE_STATEMENT_BRACES,
    BraceMessageIds,
    Diagnostic,
)
from dscstyle.lint.messages import resolve_string_table
from dscstyle.localisation import StringTable
from dscstyle.syntax import ScriptSyntaxKind
from dscstyle.text import SourceExtent

_CONTENT_AFTER_BRACE = re.compile(r"\{\s*\S")


@dataclass(frozen=True, slots=True)
class BraceConstruct:
    """Rule name and message identifiers for one brace-checked construct."""

    rule_name: str
    message_ids: BraceMessageIds
    kind: ScriptSyntaxKind | None = None
    exclusive_same_line: bool = False


FUNCTION_CONSTRUCT = BraceConstruct("functionBlockBraces", FUNCTION_BRACES, ScriptSyntaxKind.FUNCTION_DEFINITION)
STATEMENT_BLOCK_CONSTRUCT = BraceConstruct("statementBlockBraces", STATEMENT_BRACES, ScriptSyntaxKind.STATEMENT_BLOCK)
IF_STATEMENT_CONSTRUCT = BraceConstruct("ifStatementBraces", IF_STATEMENT_BRACES, ScriptSyntaxKind.IF_STATEMENT)
FOREACH_STATEMENT_CONSTRUCT = BraceConstruct(
    "forEachStatementBraces", FOREACH_STATEMENT_BRACES, ScriptSyntaxKind.FOREACH_STATEMENT
)
WHILE_STATEMENT_CONSTRUCT = BraceConstruct("whileStatementBraces", WHILE_STATEMENT_BRACES, ScriptSyntaxKind.WHILE_STATEMENT)
DO_UNTIL_STATEMENT_CONSTRUCT = BraceConstruct(
    "doUntilStatementBraces", DO_UNTIL_STATEMENT_BRACES, ScriptSyntaxKind.DO_UNTIL_STATEMENT
)
DO_WHILE_STATEMENT_CONSTRUCT = BraceConstruct(
    "doWhileStatementBraces", DO_WHILE_STATEMENT_BRACES, ScriptSyntaxKind.DO_WHILE_STATEMENT
)
FOR_STATEMENT_CONSTRUCT = BraceConstruct("forStatementBraces", FOR_STATEMENT_BRACES, ScriptSyntaxKind.FOR_STATEMENT)
SWITCH_STATEMENT_CONSTRUCT = BraceConstruct(
    "switchStatementBraces",
    SWITCH_STATEMENT_BRACES,
    ScriptSyntaxKind.SWITCH_STATEMENT,
    exclusive_same_line=True,
)
TRY_STATEMENT_CONSTRUCT = BraceConstruct("tryStatementBraces", TRY_STATEMENT_BRACES, ScriptSyntaxKind.TRY_STATEMENT)
CATCH_CLAUSE_CONSTRUCT = BraceConstruct("catchClauseBraces", CATCH_CLAUSE_BRACES, ScriptSyntaxKind.CATCH_CLAUSE)


def check_brace_formatting(
    construct: BraceConstruct,
    extent: SourceExtent,
    *,
    parent_extent: SourceExtent | None = None,
    brace_line: int = 1,
    exclusive_same_line: bool = False,
    strings: StringTable | None = None,
) -> list[Diagnostic]:
    """Run the three brace checks for one construct occurrence.

    Every diagnostic carries `extent`. `parent_extent` supplies the text for
    the same-line check when it differs from the construct's own text.
    """
    table = resolve_string_table(strings)
    lines = _split_lines(extent.text)
    introducer = _split_lines(parent_extent.text)[0] if parent_extent is not None else lines[0]
    ids = construct.message_ids
    exclusive = exclusive_same_line or construct.exclusive_same_line

    diagnostics: list[Diagnostic] = []
    same_line = "{" in introducer
    if same_line:
        diagnostics.append(_diagnostic(construct, ids.not_on_same_line, extent, table))

    if not (exclusive and same_line) and brace_line < len(lines):
        if _CONTENT_AFTER_BRACE.search(lines[brace_line]):
            diagnostics.append(_diagnostic(construct, ids.followed_by_new_line, extent, table))

    if brace_line + 1 < len(lines) and not lines[brace_line + 1].strip():
        diagnostics.append(_diagnostic(construct, ids.followed_by_only_one_new_line, extent, table))

    return diagnostics


def check_function_braces(script_tree: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    """Check every function definition in the tree, nested ones included."""
    _require_node(script_tree)
    table = resolve_string_table(strings)
    diagnostics: list[Diagnostic] = []
    for function in script_tree.find_all(is_kind(ScriptSyntaxKind.FUNCTION_DEFINITION), recurse=True):
        diagnostics.extend(check_brace_formatting(FUNCTION_CONSTRUCT, function.extent, strings=table))
    return diagnostics


def check_statement_block_braces(script_tree: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    """Check every statement block against the construct that owns it."""
    _require_node(script_tree)
    table = resolve_string_table(strings)
    diagnostics: list[Diagnostic] = []
    for block in script_tree.find_all(is_kind(ScriptSyntaxKind.STATEMENT_BLOCK), recurse=True):
        parent = block.parent
        diagnostics.extend(
            check_brace_formatting(
                STATEMENT_BLOCK_CONSTRUCT,
                block.extent,
                parent_extent=parent.extent if parent is not None else None,
                brace_line=0,
                strings=table,
            )
        )
    return diagnostics


def check_construct_braces(
    construct: BraceConstruct, node: SyntaxNode, *, strings: StringTable | None = None
) -> list[Diagnostic]:
    _require_node(node, construct.kind)
    return check_brace_formatting(construct, node.extent, strings=strings)


def check_if_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(IF_STATEMENT_CONSTRUCT, node, strings=strings)


def check_foreach_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(FOREACH_STATEMENT_CONSTRUCT, node, strings=strings)


def check_while_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(WHILE_STATEMENT_CONSTRUCT, node, strings=strings)


def check_do_until_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(DO_UNTIL_STATEMENT_CONSTRUCT, node, strings=strings)


def check_do_while_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(DO_WHILE_STATEMENT_CONSTRUCT, node, strings=strings)


def check_for_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(FOR_STATEMENT_CONSTRUCT, node, strings=strings)


def check_switch_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    """Switch statements never report a trailing-content brace when the brace is on the same line."""
    return check_construct_braces(SWITCH_STATEMENT_CONSTRUCT, node, strings=strings)


def check_try_statement_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(TRY_STATEMENT_CONSTRUCT, node, strings=strings)


def check_catch_clause_braces(node: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    return check_construct_braces(CATCH_CLAUSE_CONSTRUCT, node, strings=strings)


def _split_lines(text: str) -> list[str]:
    return text.replace("\r", "").split("\n")


def _require_node(node: SyntaxNode | None, kind: ScriptSyntaxKind | None = None) -> None:
    if node is None:
        raise ValueError("A syntax node is required")
    if kind is not None and node.kind != kind:
        raise ValueError(f"Expected a {kind.name} node, got {node.kind.name}")


def _diagnostic(construct: BraceConstruct, message_id: str, extent: SourceExtent, strings: StringTable) -> Diagnostic:
    return Diagnostic(
        code=message_id,
        message=strings.message(message_id),
        extent=extent,
        rule_name=construct.rule_name,
        severity="Warning",
    )
