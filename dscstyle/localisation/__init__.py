"""Localized message tables for the style rules."""

from dscstyle.localisation.load import (
    DEFAULT_CULTURE,
    available_cultures,
    culture_fallbacks,
    load_string_table,
)
from dscstyle.localisation.model import (
    MissingMessageError,
    StringDataEntry,
    StringDataParseResult,
    StringTable,
)
from dscstyle.localisation.parser import parse_string_data

__all__ = [
    "DEFAULT_CULTURE",
    "MissingMessageError",
    "StringDataEntry",
    "StringDataParseResult",
    "StringTable",
    "available_cultures",
    "culture_fallbacks",
    "load_string_table",
    "parse_string_data",
]
