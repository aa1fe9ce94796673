"""Diagnostic codes.

Style rule codes are message identifiers; their text comes from the localized
string table. Parse diagnostics carry a fixed English message.
"""

from dataclasses import dataclass
from typing import Final

from dscstyle.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    severity: Severity = "ParseError"


@dataclass(frozen=True, slots=True)
class BraceMessageIds:
    """Message identifier triple for one brace-checked construct kind."""

    not_on_same_line: str
    followed_by_new_line: str
    followed_by_only_one_new_line: str

    @staticmethod
    def for_prefix(prefix: str) -> "BraceMessageIds":
        return BraceMessageIds(
            not_on_same_line=f"{prefix}OpeningBraceNotOnSameLine",
            followed_by_new_line=f"{prefix}OpeningBraceShouldBeFollowedByNewLine",
            followed_by_only_one_new_line=f"{prefix}OpeningBraceShouldBeFollowedByOnlyOneNewLine",
        )

    def as_tuple(self) -> tuple[str, str, str]:
        return (
            self.not_on_same_line,
            self.followed_by_new_line,
            self.followed_by_only_one_new_line,
        )


PARAMETER_ATTRIBUTE_MISSING: Final[str] = "ParameterBlockParameterAttributeMissing"
PARAMETER_ATTRIBUTE_WRONG_PLACE: Final[str] = "ParameterBlockParameterAttributeWrongPlace"
PARAMETER_ATTRIBUTE_LOWER_CASE: Final[str] = "ParameterBlockParameterAttributeLowerCase"

FUNCTION_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("Function")
STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("Statement")
IF_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("IfStatement")
FOREACH_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("ForEachStatement")
DO_UNTIL_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("DoUntilStatement")
DO_WHILE_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("DoWhileStatement")
WHILE_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("WhileStatement")
FOR_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("ForStatement")
SWITCH_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("SwitchStatement")
TRY_STATEMENT_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("TryStatement")
CATCH_CLAUSE_BRACES: Final[BraceMessageIds] = BraceMessageIds.for_prefix("CatchClause")

BRACE_MESSAGE_IDS: Final[tuple[BraceMessageIds, ...]] = (
    FUNCTION_BRACES,
    STATEMENT_BRACES,
    IF_STATEMENT_BRACES,
    FOREACH_STATEMENT_BRACES,
    DO_UNTIL_STATEMENT_BRACES,
    DO_WHILE_STATEMENT_BRACES,
    WHILE_STATEMENT_BRACES,
    FOR_STATEMENT_BRACES,
    SWITCH_STATEMENT_BRACES,
    TRY_STATEMENT_BRACES,
    CATCH_CLAUSE_BRACES,
)

STYLE_MESSAGE_IDS: Final[tuple[str, ...]] = (
    PARAMETER_ATTRIBUTE_MISSING,
    PARAMETER_ATTRIBUTE_WRONG_PLACE,
    PARAMETER_ATTRIBUTE_LOWER_CASE,
    *(message_id for ids in BRACE_MESSAGE_IDS for message_id in ids.as_tuple()),
)
"""Every message identifier the style rules can emit."""

PARSER_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_SYNTAX_ERROR",
    message="Unexpected syntax; the script could not be read here.",
)

PARSER_MISSING_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_TOKEN",
    message="Missing token",
)

STRING_DATA_INVALID_ENTRY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STRING_DATA_INVALID_ENTRY",
    message="Invalid string data entry. Expected `<Key> = <Value>`.",
    severity="Error",
)

STRING_DATA_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STRING_DATA_DUPLICATE_KEY",
    message="Duplicate string data key in file.",
    severity="Warning",
)
