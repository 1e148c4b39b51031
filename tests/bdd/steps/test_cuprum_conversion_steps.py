"""BDD steps for converting git commands into cuprum commands."""

from __future__ import annotations

import typing as typ

from cuprum import Program
from pytest_bdd import given, parsers, scenarios, then, when

from gitwrapper import GitCommand, execution
from tests.bdd.steps.quoting import parse_quoted_args

if typ.TYPE_CHECKING:
    from cuprum import SafeCmd

scenarios("../features/cuprum_conversion.feature")


@given(
    parsers.re(
        r'a git command "(?P<name>[^"]*)" with the option "(?P<option>[^"]*)" '
        r'set to "(?P<value>[^"]*)"'
    ),
    target_fixture="git_command",
)
def given_git_command_with_option(name: str, option: str, value: str) -> GitCommand:
    """Provide a structured command with one option."""
    return GitCommand(name).set_option(option, value)


@given(
    parsers.re(r'the raw git command "(?P<text>[^"]*)"'),
    target_fixture="git_command",
)
def given_raw_git_command(text: str) -> GitCommand:
    """Provide a command rendered verbatim from ``text``."""
    return GitCommand(text).execute_raw()


@when(
    "I convert the git command to a cuprum command",
    target_fixture="safe_cmd",
)
def when_convert(git_command: GitCommand) -> SafeCmd:
    """Convert using the default git executable."""
    return execution.to_safe_cmd(git_command)


@when(
    parsers.re(
        r"I convert the git command to a cuprum command for program "
        r'"(?P<program>[^"]+)"'
    ),
    target_fixture="safe_cmd",
)
def when_convert_for_program(git_command: GitCommand, program: str) -> SafeCmd:
    """Convert using a configured executable."""
    return execution.to_safe_cmd(git_command, Program(program))


@when(
    "I attempt to convert the git command to a cuprum command",
    target_fixture="conversion_error",
)
def when_attempt_convert(git_command: GitCommand) -> Exception | None:
    """Convert and capture the execution error, if any."""
    try:
        execution.to_safe_cmd(git_command)
    except execution.GitExecutionError as exc:
        return exc
    return None


@then(parsers.re(r"the cuprum argv should be (?P<expected>.+)"))
def then_argv_matches(safe_cmd: SafeCmd, expected: str) -> None:
    """Assert the full argv, executable included."""
    assert safe_cmd.argv_with_program == parse_quoted_args(expected)


@then(parsers.re(r'the conversion should fail mentioning "(?P<text>[^"]*)"'))
def then_conversion_fails(conversion_error: Exception | None, text: str) -> None:
    """Assert a ``GitExecutionError`` mentioning ``text`` was raised."""
    assert isinstance(conversion_error, execution.GitExecutionError)
    assert text in str(conversion_error)
