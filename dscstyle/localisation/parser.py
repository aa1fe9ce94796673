"""Line parser for `Key = Value` string data files."""

from __future__ import annotations

import re

from dscstyle.diagnostics import Diagnostic, DiagnosticSpec
from dscstyle.diagnostics.codes import STRING_DATA_DUPLICATE_KEY, STRING_DATA_INVALID_ENTRY
from dscstyle.localisation.model import StringDataEntry, StringDataParseResult
from dscstyle.text import LineIndex, SourceExtent, TextRange

_ENTRY = re.compile(r"[ \t]*(?P<key>[A-Za-z_][A-Za-z0-9_.]*)[ \t]*=[ \t]*(?P<value>.*?)[ \t]*$")


def parse_string_data(source_text: str, *, source_path: str = "<memory>") -> StringDataParseResult:
    """Parse string data lines.

    Blank lines and `#` comments are skipped. Anything else must be a
    `Key = Value` pair; values run to the end of the line and are not quoted.
    """
    if source_text.startswith("\ufeff"):
        source_text = source_text[1:]
    line_index = LineIndex(source_text)
    diagnostics: list[Diagnostic] = []
    entries: list[StringDataEntry] = []
    seen: set[str] = set()

    offset = 0
    for number, raw_line in enumerate(source_text.split("\n"), start=1):
        start = offset
        offset += len(raw_line) + 1
        line = raw_line.removesuffix("\r")
        end = start + len(line)
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        match = _ENTRY.match(line)
        if match is None:
            diagnostics.append(_diagnostic(STRING_DATA_INVALID_ENTRY, source_text, start, end, line_index, source_path))
            continue

        key = match.group("key")
        key_range = TextRange(start + match.start("key"), start + match.end("key"))
        if key in seen:
            diagnostics.append(
                _diagnostic(
                    STRING_DATA_DUPLICATE_KEY,
                    source_text,
                    key_range.start.value,
                    key_range.end.value,
                    line_index,
                    source_path,
                    detail=f"Key `{key}` is already defined.",
                )
            )
        seen.add(key)
        entries.append(
            StringDataEntry(
                key=key,
                value=match.group("value"),
                key_range=key_range,
                value_range=TextRange(start + match.start("value"), start + match.end("value")),
                line=number,
            )
        )

    return StringDataParseResult(
        source_path=source_path,
        source_text=source_text,
        entries=tuple(entries),
        diagnostics=tuple(diagnostics),
    )


def _diagnostic(
    spec: DiagnosticSpec,
    source_text: str,
    start: int,
    end: int,
    line_index: LineIndex,
    source_path: str,
    *,
    detail: str | None = None,
) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message if detail is None else f"{spec.message} {detail}",
        extent=SourceExtent.of(source_text, TextRange(start, end), index=line_index, file=source_path),
        rule_name="stringData",
        severity=spec.severity,
    )
