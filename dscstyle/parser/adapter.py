"""Adapter from the tree-sitter PowerShell grammar to the rule syntax tree."""

from __future__ import annotations

from functools import lru_cache

import tree_sitter_powershell
from tree_sitter import Language, Node, Parser

from dscstyle.ast import AstNode
from dscstyle.diagnostics import Diagnostic
from dscstyle.diagnostics.codes import PARSER_MISSING_TOKEN, PARSER_SYNTAX_ERROR, DiagnosticSpec
from dscstyle.syntax import ScriptSyntaxKind
from dscstyle.text import ZERO, LineIndex, SourceExtent, TextRange, TextSize

POWERSHELL_LANGUAGE = Language(tree_sitter_powershell.language())

# Grammar nodes missing from this table are dropped; their children move up
# to the nearest converted ancestor.
GRAMMAR_NODE_KINDS: dict[str, ScriptSyntaxKind] = {
    "script_block": ScriptSyntaxKind.SCRIPT_BLOCK,
    "named_block": ScriptSyntaxKind.NAMED_BLOCK,
    "statement_block": ScriptSyntaxKind.STATEMENT_BLOCK,
    "script_block_expression": ScriptSyntaxKind.SCRIPT_BLOCK_EXPRESSION,
    "hash_literal_expression": ScriptSyntaxKind.HASHTABLE,
    "sub_expression": ScriptSyntaxKind.SUB_EXPRESSION,
    "array_expression": ScriptSyntaxKind.SUB_EXPRESSION,
    "parenthesized_expression": ScriptSyntaxKind.SUB_EXPRESSION,
    "function_statement": ScriptSyntaxKind.FUNCTION_DEFINITION,
    "param_block": ScriptSyntaxKind.PARAM_BLOCK,
    "script_parameter": ScriptSyntaxKind.PARAMETER,
    "attribute": ScriptSyntaxKind.ATTRIBUTE,
    "pipeline": ScriptSyntaxKind.COMMAND,
    "if_statement": ScriptSyntaxKind.IF_STATEMENT,
    "foreach_statement": ScriptSyntaxKind.FOREACH_STATEMENT,
    "while_statement": ScriptSyntaxKind.WHILE_STATEMENT,
    "for_statement": ScriptSyntaxKind.FOR_STATEMENT,
    "switch_statement": ScriptSyntaxKind.SWITCH_STATEMENT,
    "try_statement": ScriptSyntaxKind.TRY_STATEMENT,
    "catch_clause": ScriptSyntaxKind.CATCH_CLAUSE,
}


@lru_cache(maxsize=1)
def powershell_parser() -> Parser:
    return Parser(POWERSHELL_LANGUAGE)


class TreeConverter:
    """Builds `AstNode`s from one tree-sitter parse tree.

    Offsets are converted from UTF-8 bytes to string indices. `ERROR` and
    missing nodes become `ParseError` diagnostics; the nodes recovered inside
    an `ERROR` node are still converted.
    """

    def __init__(self, source: str, *, source_path: str | None = None) -> None:
        self._source = source
        self._source_path = source_path
        self._line_index = LineIndex(source)
        self._char_offsets = _char_offsets(source)
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def convert(self, root: Node) -> AstNode:
        children = self._convert_children(root, inside_error=False)
        extent = self._extent(TextRange.new(ZERO, TextSize(len(self._source))))
        return AstNode(ScriptSyntaxKind.SCRIPT_BLOCK, extent, tuple(children))

    def _convert_children(self, node: Node, *, inside_error: bool) -> list[AstNode]:
        converted: list[AstNode] = []
        for child in node.children:
            converted.extend(self._convert(child, inside_error=inside_error))
        return converted

    def _convert(self, node: Node, *, inside_error: bool) -> list[AstNode]:
        if node.is_missing:
            self._error(PARSER_MISSING_TOKEN, node, message=f"Missing `{node.type}`.")
            return []
        if node.is_error:
            if not inside_error:
                self._error(PARSER_SYNTAX_ERROR, node)
            return self._convert_children(node, inside_error=True)

        kind = self._kind_of(node)
        children = self._convert_children(node, inside_error=inside_error)
        if kind is None:
            return children
        return [AstNode(kind, self._node_extent(node), tuple(children), name=self._name_of(kind, node))]

    def _kind_of(self, node: Node) -> ScriptSyntaxKind | None:
        if node.type == "do_statement":
            keywords = {self._text(child).lower() for child in node.children}
            if "until" in keywords:
                return ScriptSyntaxKind.DO_UNTIL_STATEMENT
            return ScriptSyntaxKind.DO_WHILE_STATEMENT
        return GRAMMAR_NODE_KINDS.get(node.type)

    def _name_of(self, kind: ScriptSyntaxKind, node: Node) -> str | None:
        if kind == ScriptSyntaxKind.FUNCTION_DEFINITION:
            return self._child_text(node, "function_name")
        if kind == ScriptSyntaxKind.PARAMETER:
            variable = self._child_text(node, "variable")
            return variable.lstrip("$").strip("{}") if variable is not None else None
        if kind == ScriptSyntaxKind.ATTRIBUTE:
            return attribute_type_name(self._text(node))
        if kind == ScriptSyntaxKind.NAMED_BLOCK and node.children:
            return self._text(node.children[0]).lower()
        return None

    def _child_text(self, node: Node, grammar_type: str) -> str | None:
        for child in node.children:
            if child.type == grammar_type:
                return self._text(child)
        return None

    def _text(self, node: Node) -> str:
        return self._source[self._char(node.start_byte) : self._char(node.end_byte)]

    def _char(self, byte_offset: int) -> int:
        if self._char_offsets is None:
            return byte_offset
        return self._char_offsets[byte_offset]

    def _node_extent(self, node: Node) -> SourceExtent:
        return self._extent(TextRange(self._char(node.start_byte), self._char(node.end_byte)))

    def _extent(self, range: TextRange) -> SourceExtent:
        return SourceExtent.of(self._source, range, index=self._line_index, file=self._source_path)

    def _error(self, spec: DiagnosticSpec, node: Node, *, message: str | None = None) -> None:
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=message if message is not None else spec.message,
                extent=self._node_extent(node),
                rule_name="parser",
                severity=spec.severity,
            )
        )


def attribute_type_name(text: str) -> str:
    """`[Parameter(Mandatory)]` -> `Parameter`; `[System.String[]]` -> `System.String[]`."""
    inner = text.strip()[1:-1]
    return inner.split("(", 1)[0].strip()


def _char_offsets(source: str) -> list[int] | None:
    """String index for every UTF-8 byte offset, or `None` for ASCII text."""
    if source.isascii():
        return None
    offsets: list[int] = []
    for index, char in enumerate(source):
        offsets.extend([index] * len(char.encode("utf-8")))
    offsets.append(len(source))
    return offsets
