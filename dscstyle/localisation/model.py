"""Models for localized string tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from dscstyle.diagnostics import Diagnostic
from dscstyle.text import TextRange


class MissingMessageError(LookupError):
    """Raised when a string table has no entry for a message identifier."""

    def __init__(self, message_id: str, culture: str) -> None:
        super().__init__(f"No localized message `{message_id}` for culture `{culture}`")
        self.message_id = message_id
        self.culture = culture


@dataclass(frozen=True, slots=True)
class StringDataEntry:
    """One `Key = Value` line."""

    key: str
    value: str
    key_range: TextRange
    value_range: TextRange
    line: int


@dataclass(frozen=True, slots=True)
class StringDataParseResult:
    """Parse result for a single string data file."""

    source_path: str
    source_text: str
    entries: tuple[StringDataEntry, ...]
    diagnostics: tuple[Diagnostic, ...]

    def as_mapping(self) -> Mapping[str, str]:
        # First definition wins; duplicates are reported as diagnostics.
        values: dict[str, str] = {}
        for entry in self.entries:
            values.setdefault(entry.key, entry.value)
        return MappingProxyType(values)


@dataclass(frozen=True, slots=True)
class StringTable:
    """Read-only message lookup for one culture."""

    culture: str
    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    source_path: str | None = None

    def __contains__(self, message_id: object) -> bool:
        return message_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def message(self, message_id: str) -> str:
        try:
            return self.entries[message_id]
        except KeyError:
            raise MissingMessageError(message_id, self.culture) from None
