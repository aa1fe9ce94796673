"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from dscstyle.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity in ("Error", "ParseError") for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.extent.start_offset,
            diagnostic.extent.end_offset,
            diagnostic.rule_name,
            diagnostic.code,
        ),
    )
