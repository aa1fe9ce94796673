"""Syntax node kinds the tree-sitter adapter produces."""

from enum import IntEnum


class ScriptSyntaxKind(IntEnum):
    """PowerShell node vocabulary understood by the style rules."""

    # Containers
    SCRIPT_BLOCK = 1000
    NAMED_BLOCK = 1001  # begin / process / end / dynamicparam
    STATEMENT_BLOCK = 1002
    SCRIPT_BLOCK_EXPRESSION = 1003
    HASHTABLE = 1004
    SUB_EXPRESSION = 1005  # ( ... ), $( ... ), @( ... )

    # Definitions
    FUNCTION_DEFINITION = 1010
    PARAM_BLOCK = 1011
    PARAMETER = 1012
    ATTRIBUTE = 1013  # [Parameter()] and [string] type constraints

    # Statements
    COMMAND = 1020  # pipelines, including assignments and bare expressions
    IF_STATEMENT = 1021
    FOREACH_STATEMENT = 1022
    WHILE_STATEMENT = 1023
    DO_UNTIL_STATEMENT = 1024
    DO_WHILE_STATEMENT = 1025
    FOR_STATEMENT = 1026
    SWITCH_STATEMENT = 1027
    TRY_STATEMENT = 1028
    CATCH_CLAUSE = 1029

    @property
    def opens_nested_script_block(self) -> bool:
        return self in (
            ScriptSyntaxKind.SCRIPT_BLOCK_EXPRESSION,
            ScriptSyntaxKind.FUNCTION_DEFINITION,
        )
