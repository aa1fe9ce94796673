"""Diagnostics."""

from dscstyle.diagnostics.codes import (
    BRACE_MESSAGE_IDS,
    CATCH_CLAUSE_BRACES,
    DO_UNTIL_STATEMENT_BRACES,
    DO_WHILE_STATEMENT_BRACES,
    FOR_STATEMENT_BRACES,
    FOREACH_STATEMENT_BRACES,
    FUNCTION_BRACES,
    IF_STATEMENT_BRACES,
    PARAMETER_ATTRIBUTE_LOWER_CASE,
    PARAMETER_ATTRIBUTE_MISSING,
    PARAMETER_ATTRIBUTE_WRONG_PLACE,
    STATEMENT_BRACES,
    STYLE_MESSAGE_IDS,
    SWITCH_STATEMENT_BRACES,
    TRY_STATEMENT_BRACES,
    WHILE_STATEMENT_BRACES,
    BraceMessageIds,
    DiagnosticSpec,
)
from dscstyle.diagnostics.diagnostic import Diagnostic, Severity
from dscstyle.diagnostics.report import collect_diagnostics, has_errors, sort_diagnostics

__all__ = [
    "BRACE_MESSAGE_IDS",
    "CATCH_CLAUSE_BRACES",
    "DO_UNTIL_STATEMENT_BRACES",
    "DO_WHILE_STATEMENT_BRACES",
    "FOREACH_STATEMENT_BRACES",
    "FOR_STATEMENT_BRACES",
    "FUNCTION_BRACES",
    "IF_STATEMENT_BRACES",
    "PARAMETER_ATTRIBUTE_LOWER_CASE",
    "PARAMETER_ATTRIBUTE_MISSING",
    "PARAMETER_ATTRIBUTE_WRONG_PLACE",
    "STATEMENT_BRACES",
    "STYLE_MESSAGE_IDS",
    "SWITCH_STATEMENT_BRACES",
    "TRY_STATEMENT_BRACES",
    "WHILE_STATEMENT_BRACES",
    "BraceMessageIds",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
