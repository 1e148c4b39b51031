"""Command-line interface for the :mod:`gitwrapper` toolkit."""

from __future__ import annotations

import logging
import os
import shlex
import sys
import typing as typ
from pathlib import Path

import msgspec
from cyclopts import App, Parameter

from . import config, execution
from .command import GitCommand, GitCommandError
from .utils import normalise_directory

DIRECTORY_ENV_VAR = "GITWRAPPER_DIRECTORY"
LOG_LEVEL_ENV_VAR = "GITWRAPPER_LOG_LEVEL"

_OPTION_PARAMETER = Parameter(
    name="option",
    help="Option as NAME=VALUE; repeat for more options or values.",
)
OptionList = typ.Annotated[list[str] | None, _OPTION_PARAMETER]

_FLAG_PARAMETER = Parameter(
    name="flag",
    help="Valueless option NAME, e.g. 'q' for -q; repeat for more flags.",
)
FlagList = typ.Annotated[list[str] | None, _FLAG_PARAMETER]

_RAW_PARAMETER = Parameter(
    name="raw",
    help="Use COMMAND verbatim and ignore arguments and options.",
)
RawFlag = typ.Annotated[bool, _RAW_PARAMETER]

_BYPASS_PARAMETER = Parameter(
    name="bypass",
    help="Log the command without running git.",
)
BypassFlag = typ.Annotated[bool, _BYPASS_PARAMETER]

_DIRECTORY_PARAMETER = Parameter(
    name="directory",
    env_var=DIRECTORY_ENV_VAR,
    help="Working copy to run git in; defaults to the current directory.",
)
DirectoryOption = typ.Annotated[Path | None, _DIRECTORY_PARAMETER]

OutputFormat = typ.Literal["shell", "plain", "json"]
_FORMAT_PARAMETER = Parameter(
    name="format",
    help="Output style: shell-quoted, space-joined, or a JSON value.",
)
FormatOption = typ.Annotated[OutputFormat, _FORMAT_PARAMETER]

_LOG_FORMAT = "%(levelname)s: %(message)s"
_HANDLER_NAME = "gitwrapper-cli-handler"

app = App(help="Build and run git command lines.")


def _resolve_log_level(value: str | None) -> int:
    """Return the level named by ``value``, defaulting to ``INFO``."""
    candidate = (value or "").strip().upper()
    if not candidate:
        return logging.INFO
    levels = logging.getLevelNamesMapping()
    if candidate not in levels:
        choices = ", ".join(sorted(levels))
        message = (
            f"Invalid {LOG_LEVEL_ENV_VAR} value {value!r}; expected one of: {choices}"
        )
        raise SystemExit(message)
    return levels[candidate]


def _configure_logging(stream: typ.TextIO | None = None) -> None:
    """Install the CLI's root handler, replacing one from an earlier call."""
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.name == _HANDLER_NAME:
            root_logger.removeHandler(existing)
    handler = logging.StreamHandler(stream)
    handler.name = _HANDLER_NAME
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_log_level(os.environ.get(LOG_LEVEL_ENV_VAR)))


def _parse_option_entries(entries: typ.Sequence[str]) -> dict[str, str | list[str]]:
    """Group ``NAME=VALUE`` entries, keeping repeated names as value lists."""
    grouped: dict[str, str | list[str]] = {}
    for entry in entries:
        name, separator, value = entry.partition("=")
        if not separator or not name:
            message = f"Invalid --option {entry!r}; expected NAME=VALUE."
            raise SystemExit(message)
        existing = grouped.get(name)
        if existing is None:
            grouped[name] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            grouped[name] = [existing, value]
    return grouped


def _assemble_command(
    command: str,
    arguments: typ.Sequence[str],
    options: typ.Sequence[str] | None,
    flags: typ.Sequence[str] | None,
    *,
    raw: bool,
) -> GitCommand:
    """Translate CLI parameters into a :class:`GitCommand`; flags go first."""
    git_command = GitCommand(command, args=arguments)
    for flag in flags or ():
        git_command.set_flag(flag)
    git_command.set_options(_parse_option_entries(options or ()))
    return git_command.execute_raw(raw)


def _render_output(git_command: GitCommand, output_format: OutputFormat) -> str:
    rendered = git_command.get_command_line()
    if output_format == "json":
        return msgspec.json.encode(rendered).decode("utf-8")
    if output_format == "plain" or isinstance(rendered, str):
        return git_command.get_command_string()
    return shlex.join(rendered)


@app.command
def render(
    command: str,
    *arguments: str,
    option: OptionList = None,
    flag: FlagList = None,
    raw: RawFlag = False,
    output_format: FormatOption = "shell",
) -> str:
    """Print the git command line assembled from COMMAND and ARGUMENTS."""
    git_command = _assemble_command(command, arguments, option, flag, raw=raw)
    return _render_output(git_command, output_format)


@app.command
def run(  # noqa: PLR0913 - mirrors the CLI surface
    command: str,
    *arguments: str,
    option: OptionList = None,
    flag: FlagList = None,
    raw: RawFlag = False,
    bypass: BypassFlag = False,
    directory: DirectoryOption = None,
) -> str | None:
    """Run git with COMMAND and ARGUMENTS and print its output.

    ``gitwrapper.toml`` is read from the working copy only here, so
    ``render`` never depends on it.
    """
    working_copy = normalise_directory(directory)
    configuration = config.load_configuration(working_copy)
    git_command = _assemble_command(command, arguments, option, flag, raw=raw)
    git_command.set_directory(working_copy).bypass(bypass)
    result = execution.run(
        git_command,
        options=execution.ExecutionOptions.from_configuration(configuration),
    )
    if result is None or not result.stdout:
        return None
    return result.stdout.rstrip("\n")


def _dispatch_and_print(tokens: typ.Sequence[str]) -> int:
    """Execute the Cyclopts app and print command results."""
    try:
        result = app(tokens)
    except SystemExit as err:
        code = err.code
        if code is None:
            return 0
        if isinstance(code, int):
            return code
        print(code, file=sys.stderr)
        return 1
    if result is not None:
        print(result)
    return 0


def main(argv: typ.Sequence[str] | None = None) -> int:
    """Entry point for ``python -m gitwrapper``.

    Exit codes: 0 on success, 1 for reported errors, 2 when no subcommand
    is given and 130 when interrupted.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    try:
        _configure_logging()
        if not tokens:
            _dispatch_and_print(tokens)  # Print usage message
            return 2
        return _dispatch_and_print(tokens)
    except config.ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
    except GitCommandError as exc:
        print(f"Command error: {exc}", file=sys.stderr)
    except execution.GitExecutionError as exc:
        print(f"Git error: {exc}", file=sys.stderr)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    return 1


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    raise SystemExit(main())
