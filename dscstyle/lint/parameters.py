"""Parameter attribute placement check."""

from __future__ import annotations

from dscstyle.ast import SyntaxNode, is_kind
from dscstyle.diagnostics import (
    PARAMETER_ATTRIBUTE_LOWER_CASE,
    PARAMETER_ATTRIBUTE_MISSING,
    PARAMETER_ATTRIBUTE_WRONG_PLACE,
    Diagnostic,
)
from dscstyle.lint.messages import resolve_string_table
from dscstyle.localisation import StringTable
from dscstyle.syntax import ScriptSyntaxKind

PARAMETER_ATTRIBUTE_RULE_NAME = "parameterBlockParameterAttribute"


def check_parameter_attributes(script_tree: SyntaxNode, *, strings: StringTable | None = None) -> list[Diagnostic]:
    """Require `[Parameter()]` as the first attribute of every declared parameter.

    Each param block is searched from every function that encloses it, so a
    nested function's parameters are reported once per enclosing function.
    """
    if script_tree is None:
        raise ValueError("A syntax node is required")
    table = resolve_string_table(strings)

    diagnostics: list[Diagnostic] = []
    for function in script_tree.find_all(is_kind(ScriptSyntaxKind.FUNCTION_DEFINITION), recurse=True):
        for param_block in function.find_all(is_kind(ScriptSyntaxKind.PARAM_BLOCK), recurse=True):
            for parameter in param_block.parameters:
                message_id = _parameter_attribute_violation(parameter)
                if message_id is None:
                    continue
                diagnostics.append(
                    Diagnostic(
                        code=message_id,
                        message=table.message(message_id),
                        extent=parameter.extent,
                        rule_name=PARAMETER_ATTRIBUTE_RULE_NAME,
                        severity="Warning",
                    )
                )
    return diagnostics


def _parameter_attribute_violation(parameter: SyntaxNode) -> str | None:
    names = [attribute.name or "" for attribute in parameter.attributes]
    if not any(name.lower() == "parameter" for name in names):
        return PARAMETER_ATTRIBUTE_MISSING
    if names[0].lower() != "parameter":
        return PARAMETER_ATTRIBUTE_WRONG_PLACE
    if names[0] != "Parameter":
        return PARAMETER_ATTRIBUTE_LOWER_CASE
    return None
