"""Syntax tree model consumed by the style rules."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Protocol, TypeAlias

from dscstyle.syntax import ScriptSyntaxKind
from dscstyle.text import SourceExtent

NodePredicate: TypeAlias = Callable[["SyntaxNode"], bool]


class SyntaxNode(Protocol):
    """Capability interface the rules rely on.

    Any parser adapter that exposes these members can feed the rule functions.
    """

    @property
    def kind(self) -> ScriptSyntaxKind: ...

    @property
    def extent(self) -> SourceExtent: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    @property
    def children(self) -> tuple[SyntaxNode, ...]: ...

    @property
    def name(self) -> str | None: ...

    @property
    def attributes(self) -> tuple[SyntaxNode, ...]: ...

    @property
    def parameters(self) -> tuple[SyntaxNode, ...]: ...

    def find_all(self, predicate: NodePredicate, *, recurse: bool = True) -> Iterator[SyntaxNode]: ...


class AstNode:
    """Immutable-by-convention node converted from a tree-sitter parse tree.

    `name` carries the function name, the parameter variable name, or the
    attribute type name exactly as written in the source.
    """

    __slots__ = ("kind", "extent", "name", "parent", "_children")

    def __init__(
        self,
        kind: ScriptSyntaxKind,
        extent: SourceExtent,
        children: tuple[AstNode, ...] = (),
        *,
        name: str | None = None,
    ) -> None:
        self.kind = kind
        self.extent = extent
        self.name = name
        self.parent: AstNode | None = None
        self._children = children
        for child in children:
            child.parent = self

    @property
    def children(self) -> tuple[AstNode, ...]:
        return self._children

    @property
    def text(self) -> str:
        return self.extent.text

    @property
    def attributes(self) -> tuple[AstNode, ...]:
        return tuple(child for child in self._children if child.kind == ScriptSyntaxKind.ATTRIBUTE)

    @property
    def parameters(self) -> tuple[AstNode, ...]:
        return tuple(child for child in self._children if child.kind == ScriptSyntaxKind.PARAMETER)

    def child_of_kind(self, kind: ScriptSyntaxKind) -> AstNode | None:
        for child in self._children:
            if child.kind == kind:
                return child
        return None

    def find_all(self, predicate: NodePredicate, *, recurse: bool = True) -> Iterator[AstNode]:
        """Yield this node and its descendants that match, in document order.

        With `recurse=False` nested script blocks (script block expressions and
        nested function definitions) are matched themselves but not entered.
        """
        stack: list[tuple[AstNode, bool]] = [(self, True)]
        while stack:
            node, enter = stack.pop()
            if predicate(node):
                yield node
            if not enter:
                continue
            for child in reversed(node._children):
                stack.append((child, recurse or not child.kind.opens_nested_script_block))

    def find_first(self, predicate: NodePredicate, *, recurse: bool = True) -> AstNode | None:
        return next(self.find_all(predicate, recurse=recurse), None)

    def ancestors(self) -> Iterator[AstNode]:
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def __repr__(self) -> str:
        start, end = self.extent.range.as_tuple()
        name = f" name={self.name!r}" if self.name is not None else ""
        return f"AstNode({self.kind.name}, {start}..{end}{name})"


def is_kind(*kinds: ScriptSyntaxKind) -> NodePredicate:
    """Build a `find_all` predicate matching any of the given node kinds."""
    wanted = frozenset(kinds)
    return lambda node: node.kind in wanted
