import pytest

from dscstyle.diagnostics import STYLE_MESSAGE_IDS
from dscstyle.localisation import (
    MissingMessageError,
    StringTable,
    available_cultures,
    culture_fallbacks,
    load_string_table,
    parse_string_data,
)


def test_parses_key_value_lines_and_skips_comments() -> None:
    source = "# header\n\nFirstMessage = Hello {0}\r\n  Second.Message=World  \n"

    parsed = parse_string_data(source, source_path="Test.strings")

    assert parsed.diagnostics == ()
    assert [(entry.key, entry.value, entry.line) for entry in parsed.entries] == [
        ("FirstMessage", "Hello {0}", 3),
        ("Second.Message", "World", 4),
    ]
    first = parsed.entries[0]
    assert source[first.key_range.start.value : first.key_range.end.value] == "FirstMessage"
    assert source[first.value_range.start.value : first.value_range.end.value] == "Hello {0}"


def test_value_may_contain_hash_and_equals() -> None:
    parsed = parse_string_data("Link = See https://example.org/a=b#anchor\n")

    assert parsed.as_mapping()["Link"] == "See https://example.org/a=b#anchor"


def test_invalid_line_is_reported() -> None:
    parsed = parse_string_data("Good = yes\nthis line has no separator\n", source_path="Bad.strings")

    assert [entry.key for entry in parsed.entries] == ["Good"]
    assert len(parsed.diagnostics) == 1
    diagnostic = parsed.diagnostics[0]
    assert diagnostic.code == "STRING_DATA_INVALID_ENTRY"
    assert diagnostic.severity == "Error"
    assert diagnostic.extent.start_line == 2
    assert diagnostic.extent.text == "this line has no separator"
    assert diagnostic.extent.file == "Bad.strings"


def test_duplicate_key_is_reported_and_first_value_wins() -> None:
    parsed = parse_string_data("Key = first\nKey = second\n")

    assert [diagnostic.code for diagnostic in parsed.diagnostics] == ["STRING_DATA_DUPLICATE_KEY"]
    assert parsed.diagnostics[0].severity == "Warning"
    assert parsed.diagnostics[0].extent.start_line == 2
    assert parsed.as_mapping()["Key"] == "first"


def test_byte_order_mark_is_ignored() -> None:
    parsed = parse_string_data("\ufeffKey = value\n")

    assert parsed.as_mapping() == {"Key": "value"}


def test_culture_fallbacks() -> None:
    assert culture_fallbacks("de-DE") == ("de-DE", "de", "en-US")
    assert culture_fallbacks("en-US") == ("en-US", "en")
    assert culture_fallbacks("zh-Hant-TW") == ("zh-Hant-TW", "zh-Hant", "zh", "en-US")


def test_en_us_table_has_every_style_message() -> None:
    table = load_string_table("en-US")

    assert "en-US" in available_cultures()
    assert table.culture == "en-US"
    assert table.source_path == "en-US/StyleRules.strings"
    missing = [message_id for message_id in STYLE_MESSAGE_IDS if message_id not in table]
    assert missing == []
    assert len(table) == len(STYLE_MESSAGE_IDS)
    assert table.message("FunctionOpeningBraceNotOnSameLine").startswith(
        "Function opening brace should not be on the same line as the function keyword."
    )


def test_string_table_is_cached_per_culture() -> None:
    assert load_string_table("en-US") is load_string_table("en-US")


def test_unknown_culture_falls_back_to_en_us() -> None:
    assert load_string_table("de-DE").culture == "en-US"
    assert load_string_table("EN-us").culture == "en-US"


def test_missing_message_raises_lookup_error() -> None:
    table = StringTable(culture="xx", entries={"Known": "text"})

    assert table.message("Known") == "text"
    with pytest.raises(MissingMessageError) as excinfo:
        table.message("Unknown")
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.message_id == "Unknown"
    assert excinfo.value.culture == "xx"
