"""Script parse entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dscstyle.ast import AstNode
from dscstyle.diagnostics import Diagnostic, has_errors
from dscstyle.parser.adapter import TreeConverter, powershell_parser


@dataclass(frozen=True, slots=True)
class ScriptParseResult:
    """Parsed script: source text, syntax tree root and parse diagnostics."""

    source_text: str
    root: AstNode
    diagnostics: tuple[Diagnostic, ...]
    source_path: str | None = None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def parse_script(text: str, *, source_path: str | None = None) -> ScriptParseResult:
    """Parse one script with tree-sitter and convert it to the rule syntax tree."""
    tree = powershell_parser().parse(text.encode("utf-8"))
    converter = TreeConverter(text, source_path=source_path)
    root = converter.convert(tree.root_node)
    return ScriptParseResult(
        source_text=text,
        root=root,
        diagnostics=tuple(converter.diagnostics),
        source_path=source_path,
    )


def parse_script_file(path: str | Path) -> ScriptParseResult:
    """Read a script from disk (UTF-8, BOM tolerated) and parse it."""
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8-sig")
    return parse_script(text, source_path=str(file_path))
