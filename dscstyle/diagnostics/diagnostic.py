"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from dscstyle.text import SourceExtent

Severity = Literal["Information", "Warning", "Error", "ParseError"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser adapter and the style rules."""

    code: str
    message: str
    extent: SourceExtent
    rule_name: str
    severity: Severity = "Warning"
    suggested_corrections: tuple[str, ...] = ()
