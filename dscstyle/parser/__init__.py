"""PowerShell syntax trees from the tree-sitter grammar."""

from dscstyle.parser.adapter import (
    GRAMMAR_NODE_KINDS,
    POWERSHELL_LANGUAGE,
    TreeConverter,
    attribute_type_name,
    powershell_parser,
)
from dscstyle.parser.script import ScriptParseResult, parse_script, parse_script_file

__all__ = [
    "GRAMMAR_NODE_KINDS",
    "POWERSHELL_LANGUAGE",
    "ScriptParseResult",
    "TreeConverter",
    "attribute_type_name",
    "parse_script",
    "parse_script_file",
    "powershell_parser",
]
