"""Syntax kinds."""

from dscstyle.syntax.kind import ScriptSyntaxKind

__all__ = ["ScriptSyntaxKind"]
