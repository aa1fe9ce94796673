"""Message lookup shared by the style rules."""

from __future__ import annotations

from dscstyle.localisation import DEFAULT_CULTURE, StringTable, load_string_table


def resolve_string_table(strings: StringTable | None = None, culture: str = DEFAULT_CULTURE) -> StringTable:
    return strings if strings is not None else load_string_table(culture)
