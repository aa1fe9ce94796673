"""Syntax tree over PowerShell source."""

from dscstyle.ast.model import AstNode, NodePredicate, SyntaxNode, is_kind

__all__ = [
    "AstNode",
    "NodePredicate",
    "SyntaxNode",
    "is_kind",
]
