from dataclasses import dataclass
from pathlib import Path

import pytest

from dscstyle.diagnostics import Diagnostic
from dscstyle.lint import (
    LintOptions,
    LintRuleFault,
    ScriptTreeRule,
    all_lint_rules,
    check_function_braces,
    default_lint_rules,
    validate_lint_rules,
)
from dscstyle.parser import ScriptParseResult, parse_script
from dscstyle.pipeline import lint_file, lint_paths, run_lint
from tests._shared_cases import GET_SOMETHING_SOURCE, SIBLING_FUNCTIONS_SOURCE


@dataclass(frozen=True, slots=True)
class ExplodingRule:
    name: str = "explodingRule"
    category: str = "style"

    def run(self, parse: ScriptParseResult, *, strings: object = None) -> list[Diagnostic]:
        raise KeyError("boom")


def test_default_rules_are_deterministic() -> None:
    names = [rule.name for rule in default_lint_rules()]

    assert names == [
        "parameterBlockParameterAttribute",
        "functionBlockBraces",
        "ifStatementBraces",
        "forEachStatementBraces",
        "whileStatementBraces",
        "doUntilStatementBraces",
        "doWhileStatementBraces",
        "forStatementBraces",
        "switchStatementBraces",
        "tryStatementBraces",
        "catchClauseBraces",
    ]
    assert [rule.name for rule in all_lint_rules()] == [*names, "statementBlockBraces"]
    validate_lint_rules(all_lint_rules())


def test_validate_rejects_duplicates_and_other_categories() -> None:
    rule = ScriptTreeRule(name="functionBlockBraces", check=check_function_braces)

    with pytest.raises(ValueError, match="more than once"):
        validate_lint_rules((rule, rule))
    with pytest.raises(ValueError, match="invalid category"):
        validate_lint_rules((ScriptTreeRule(name="x", check=check_function_braces, category="semantic"),))  # type: ignore[arg-type]


def test_run_lint_reports_sorted_style_diagnostics() -> None:
    result = run_lint(GET_SOMETHING_SOURCE)

    assert [diagnostic.code for diagnostic in result.diagnostics] == [
        "FunctionOpeningBraceNotOnSameLine",
        "ParameterBlockParameterAttributeMissing",
    ]
    offsets = [(d.extent.start_offset, d.extent.end_offset) for d in result.diagnostics]
    assert offsets == sorted(offsets)
    assert result.has_errors is False


def test_run_lint_reuses_provided_parse_result() -> None:
    parsed = parse_script(SIBLING_FUNCTIONS_SOURCE)

    result = run_lint(SIBLING_FUNCTIONS_SOURCE, parse=parsed)

    assert result.parse is parsed
    assert len(result.diagnostics) == 2


def test_run_lint_rejects_parse_of_other_text() -> None:
    parsed = parse_script("$a = 1\n")

    with pytest.raises(ValueError, match="same source text"):
        run_lint("$b = 2\n", parse=parsed)


def test_run_lint_ties_break_on_rule_name() -> None:
    source = "if ($x) { 'x' }\n"

    result = run_lint(source, options=LintOptions(include_rules=("ifStatementBraces", "statementBlockBraces")))

    assert [diagnostic.rule_name for diagnostic in result.diagnostics] == [
        "ifStatementBraces",
        "statementBlockBraces",
        "statementBlockBraces",
    ]
    assert result.rule_names == ("ifStatementBraces", "statementBlockBraces")


def test_include_and_exclude_rules() -> None:
    only_parameters = run_lint(GET_SOMETHING_SOURCE, options=LintOptions(include_rules=("parameterBlockParameterAttribute",)))
    without_parameters = run_lint(GET_SOMETHING_SOURCE, options=LintOptions(exclude_rules=("parameterBlockParameterAttribute",)))

    assert [d.code for d in only_parameters.diagnostics] == ["ParameterBlockParameterAttributeMissing"]
    assert [d.code for d in without_parameters.diagnostics] == ["FunctionOpeningBraceNotOnSameLine"]
    assert "statementBlockBraces" not in without_parameters.rule_names


def test_unknown_rule_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="noSuchRule"):
        run_lint("$a = 1\n", options=LintOptions(include_rules=("noSuchRule",)))


def test_parse_diagnostics_can_be_omitted() -> None:
    source = "function Get-Thing {\n    $x = 1"

    with_parse = run_lint(source)
    without_parse = run_lint(source, options=LintOptions(include_parse_diagnostics=False))

    parse_codes = {"PARSER_SYNTAX_ERROR", "PARSER_MISSING_TOKEN"}
    assert with_parse.has_errors is True
    assert any(d.code in parse_codes and d.severity == "ParseError" for d in with_parse.diagnostics)
    assert without_parse.has_errors is False
    assert all(d.severity != "ParseError" for d in without_parse.diagnostics)
    assert [d for d in with_parse.diagnostics if d.severity != "ParseError"] == list(without_parse.diagnostics)


def test_excluding_an_opt_in_rule_keeps_the_defaults() -> None:
    result = run_lint("if ($a) {\n 1\n}\n", options=LintOptions(exclude_rules=("statementBlockBraces",)))

    assert [d.code for d in result.diagnostics] == ["IfStatementOpeningBraceNotOnSameLine"]
    assert "statementBlockBraces" not in result.rule_names
    assert set(result.rule_names) == {rule.name for rule in default_lint_rules()}


def test_unknown_excluded_rule_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="noSuchRule"):
        run_lint("$a = 1\n", options=LintOptions(exclude_rules=("noSuchRule",)))


def test_rule_fault_is_wrapped_with_rule_and_source() -> None:
    parsed = parse_script("$a = 1\n", source_path="Fault.ps1")

    with pytest.raises(LintRuleFault) as excinfo:
        run_lint("$a = 1\n", parse=parsed, rules=(ExplodingRule(),))

    assert excinfo.value.rule_name == "explodingRule"
    assert excinfo.value.source_path == "Fault.ps1"
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_run_lint_passes_source_path_to_the_parse() -> None:
    result = run_lint("$a = 1\n", source_path="Thing.ps1")

    with pytest.raises(LintRuleFault) as excinfo:
        run_lint("$a = 1\n", rules=(ExplodingRule(),), source_path="Fault.ps1")

    assert result.parse.source_path == "Thing.ps1"
    assert excinfo.value.source_path == "Fault.ps1"


def test_lint_file_reads_utf8_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "Get-Something.ps1"
    path.write_bytes(b"\xef\xbb\xbf" + GET_SOMETHING_SOURCE.encode("utf-8"))

    result = lint_file(path)

    assert result.path == str(path)
    assert result.result.parse.source_text == GET_SOMETHING_SOURCE
    assert result.diagnostics[0].extent.file == str(path)
    assert result.diagnostics[0].extent.start_column == 1


def test_lint_paths_expands_directories_in_sorted_order(tmp_path: Path) -> None:
    (tmp_path / "nested").mkdir()
    (tmp_path / "b.ps1").write_text(GET_SOMETHING_SOURCE, encoding="utf-8")
    (tmp_path / "a.psm1").write_text("$a = 1\n", encoding="utf-8")
    (tmp_path / "nested" / "c.PS1").write_text("$c = 1\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("function x {", encoding="utf-8")

    results = list(lint_paths([tmp_path]))

    assert [Path(result.path).name for result in results] == ["a.psm1", "b.ps1", "c.PS1"]
    assert [len(result.diagnostics) for result in results] == [0, 2, 0]
