"""Style rules for PowerShell scripts."""

from dscstyle.lint.braces import (
    BraceConstruct,
    check_brace_formatting,
    check_catch_clause_braces,
    check_do_until_statement_braces,
    check_do_while_statement_braces,
    check_for_statement_braces,
    check_foreach_statement_braces,
    check_function_braces,
    check_if_statement_braces,
    check_statement_block_braces,
    check_switch_statement_braces,
    check_try_statement_braces,
    check_while_statement_braces,
)
from dscstyle.lint.errors import LintRuleFault
from dscstyle.lint.options import LintOptions
from dscstyle.lint.parameters import check_parameter_attributes
from dscstyle.lint.rules import (
    LintRule,
    NodeBraceRule,
    ScriptTreeRule,
    all_lint_rules,
    default_lint_rules,
    validate_lint_rules,
)
from dscstyle.lint.runner import run_lint

__all__ = [
    "BraceConstruct",
    "LintOptions",
    "LintRule",
    "LintRuleFault",
    "NodeBraceRule",
    "ScriptTreeRule",
    "all_lint_rules",
    "check_brace_formatting",
    "check_catch_clause_braces",
    "check_do_until_statement_braces",
    "check_do_while_statement_braces",
    "check_for_statement_braces",
    "check_foreach_statement_braces",
    "check_function_braces",
    "check_if_statement_braces",
    "check_parameter_attributes",
    "check_statement_block_braces",
    "check_switch_statement_braces",
    "check_try_statement_braces",
    "check_while_statement_braces",
    "default_lint_rules",
    "run_lint",
    "validate_lint_rules",
]
