"""Packaged string table loading with culture fallback."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
import logging
from types import MappingProxyType

from dscstyle.localisation.model import StringTable
from dscstyle.localisation.parser import parse_string_data

logger = logging.getLogger(__name__)

DEFAULT_CULTURE = "en-US"
STRING_TABLE_FILE = "StyleRules.strings"


def culture_fallbacks(culture: str) -> tuple[str, ...]:
    """Cultures to try in order, e.g. `de-DE`, `de`, `en-US`."""
    candidates: list[str] = []
    name = culture.strip()
    while name:
        candidates.append(name)
        name = name.rpartition("-")[0]
    if DEFAULT_CULTURE not in candidates:
        candidates.append(DEFAULT_CULTURE)
    return tuple(candidates)


def available_cultures() -> tuple[str, ...]:
    root = resources.files("dscstyle.localisation")
    return tuple(
        sorted(entry.name for entry in root.iterdir() if entry.is_dir() and entry.joinpath(STRING_TABLE_FILE).is_file())
    )


@lru_cache(maxsize=None)
def load_string_table(culture: str = DEFAULT_CULTURE) -> StringTable:
    """Load the style rule messages for `culture`.

    Culture names are matched case-insensitively against the packaged
    directories. Problems in the resource are logged, not raised.
    """
    known = {name.lower(): name for name in available_cultures()}
    for candidate in culture_fallbacks(culture):
        resolved = known.get(candidate.lower())
        if resolved is None:
            continue
        if resolved.lower() != culture.lower():
            logger.debug("No string table for culture %s; falling back to %s", culture, resolved)
        resource = resources.files("dscstyle.localisation").joinpath(resolved, STRING_TABLE_FILE)
        source_path = f"{resolved}/{STRING_TABLE_FILE}"
        parsed = parse_string_data(resource.read_text(encoding="utf-8-sig"), source_path=source_path)
        for diagnostic in parsed.diagnostics:
            logger.warning(
                "%s:%d: %s", source_path, diagnostic.extent.start_line, diagnostic.message
            )
        logger.debug("Loaded %d messages from %s", len(parsed.entries), source_path)
        return StringTable(culture=resolved, entries=parsed.as_mapping(), source_path=source_path)

    logger.warning("No string table found for culture %s", culture)
    return StringTable(culture=culture, entries=MappingProxyType({}))
