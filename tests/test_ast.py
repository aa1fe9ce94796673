from dscstyle.ast import AstNode, SyntaxNode, is_kind
from dscstyle.parser import parse_script
from dscstyle.syntax import ScriptSyntaxKind
from tests._shared_cases import NESTED_SCOPES_SOURCE


def _root() -> AstNode:
    return parse_script(NESTED_SCOPES_SOURCE).root


def test_find_all_recurses_in_document_order() -> None:
    found = list(_root().find_all(is_kind(ScriptSyntaxKind.IF_STATEMENT)))

    assert [node.text.splitlines()[0].strip() for node in found] == ["if ($a)", "if ($c)", "if ($e)"]
    assert [node.extent.start_offset for node in found] == sorted(node.extent.start_offset for node in found)


def test_find_all_without_recursion_skips_nested_script_blocks() -> None:
    root = _root()

    ifs = list(root.find_all(is_kind(ScriptSyntaxKind.IF_STATEMENT), recurse=False))
    functions = list(root.find_all(is_kind(ScriptSyntaxKind.FUNCTION_DEFINITION), recurse=False))
    script_blocks = list(root.find_all(is_kind(ScriptSyntaxKind.SCRIPT_BLOCK_EXPRESSION), recurse=False))

    assert [node.text.splitlines()[0] for node in ifs] == ["if ($a)"]
    assert [node.name for node in functions] == ["Get-Thing"]
    assert len(script_blocks) == 1


def test_find_all_includes_the_starting_node() -> None:
    root = _root()

    assert next(root.find_all(lambda node: True)) is root
    assert root.find_first(is_kind(ScriptSyntaxKind.SWITCH_STATEMENT)) is None


def test_parent_links_and_ancestors() -> None:
    root = _root()
    inner_if = list(root.find_all(is_kind(ScriptSyntaxKind.IF_STATEMENT)))[2]

    ancestors = list(inner_if.ancestors())

    assert root.parent is None
    assert ancestors[-1] is root
    assert any(node.kind == ScriptSyntaxKind.FUNCTION_DEFINITION for node in ancestors)
    assert all(child.parent is root for child in root.children)


def test_ast_node_satisfies_syntax_node_protocol() -> None:
    node: SyntaxNode = _root()

    assert node.kind == ScriptSyntaxKind.SCRIPT_BLOCK
    assert node.attributes == ()
    assert node.parameters == ()
    assert node.name is None


def test_repr_shows_kind_range_and_name() -> None:
    function = _root().find_first(is_kind(ScriptSyntaxKind.FUNCTION_DEFINITION))

    assert function is not None
    assert repr(function).startswith("AstNode(FUNCTION_DEFINITION, ")
    assert repr(function).endswith("name='Get-Thing')")
