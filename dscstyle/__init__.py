"""DSC community style rules for PowerShell scripts."""

from dscstyle.lint import LintOptions, LintRuleFault, all_lint_rules, default_lint_rules
from dscstyle.parser import ScriptParseResult, parse_script
from dscstyle.pipeline import FileLintResult, LintRunResult, lint_file, lint_paths, run_lint

__all__ = [
    "FileLintResult",
    "LintOptions",
    "LintRuleFault",
    "LintRunResult",
    "ScriptParseResult",
    "all_lint_rules",
    "default_lint_rules",
    "lint_file",
    "lint_paths",
    "parse_script",
    "run_lint",
]
