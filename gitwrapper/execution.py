"""Hand rendered :class:`~gitwrapper.command.GitCommand` lines to cuprum."""

from __future__ import annotations

import dataclasses as dc
import logging
import shlex
import typing as typ

from cuprum import ExecutionContext, Program, sh

from gitwrapper.utils.commands import GIT, catalogue_for

if typ.TYPE_CHECKING:
    import os

    from cuprum import CommandResult, SafeCmd

    from gitwrapper.command import GitCommand
    from gitwrapper.config import GitWrapperConfig

LOGGER = logging.getLogger(__name__)


class GitExecutionError(RuntimeError):
    """Raised when a git command cannot be executed."""

    @classmethod
    def empty_command(cls) -> GitExecutionError:
        """Return an error for commands that render to no tokens."""
        return cls("Git command rendered to an empty argument list")

    @classmethod
    def unparsable_raw(cls, rendered: str, reason: str) -> GitExecutionError:
        """Return an error for raw command strings shell rules cannot split."""
        return cls(f"Cannot split raw git command {rendered!r}: {reason}")


class GitCommandFailedError(GitExecutionError):
    """Raised when git exits with a failure status."""

    def __init__(
        self,
        program: Program | str,
        argv: typ.Sequence[str],
        result: CommandResult,
    ) -> None:
        """Summarise the failing invocation for the caller."""
        self.program = str(program)
        self.argv = tuple(argv)
        self.result = result
        stderr = (result.stderr or "").strip()
        stdout = (result.stdout or "").strip()
        message = stderr or stdout or (
            f"{shlex.join((self.program, *self.argv))} exited with status "
            f"{result.exit_code}"
        )
        super().__init__(message)


@dc.dataclass(frozen=True, slots=True)
class ExecutionOptions:
    """Settings for running a git command through cuprum."""

    program: Program = GIT
    env: typ.Mapping[str, str] | None = None
    echo: bool = False
    capture: bool = True
    check: bool = True

    @classmethod
    def from_configuration(cls, configuration: GitWrapperConfig) -> ExecutionOptions:
        """Build options from the ``[git]`` and ``[execution]`` tables."""
        return cls(
            program=Program(configuration.git.program),
            env=dict(configuration.git.env) or None,
            echo=configuration.execution.echo,
            capture=configuration.execution.capture,
            check=configuration.execution.check,
        )


def to_argv(command: GitCommand) -> tuple[str, ...]:
    """Return the git arguments for ``command``, excluding the executable.

    Raw command strings are split with POSIX shell rules; unbalanced quotes
    raise :class:`GitExecutionError`.
    """
    rendered = command.get_command_line()
    if not isinstance(rendered, str):
        return tuple(rendered)
    try:
        return tuple(shlex.split(rendered))
    except ValueError as exc:
        raise GitExecutionError.unparsable_raw(rendered, str(exc)) from exc


def to_safe_cmd(command: GitCommand, program: Program = GIT) -> SafeCmd:
    """Return a cuprum command for ``command`` allowlisted for ``program``."""
    argv = to_argv(command)
    if not argv:
        raise GitExecutionError.empty_command()
    builder = sh.make(program, catalogue=catalogue_for(program))
    return builder(*argv)


def _log_invocation(
    argv_with_program: typ.Sequence[str],
    cwd: str | os.PathLike[str] | None,
) -> None:
    rendered = shlex.join(argv_with_program)
    if cwd is None:
        LOGGER.info("Running git command: %s", rendered)
    else:
        LOGGER.info("Running git command: %s (cwd=%s)", rendered, cwd)


def _build_context(
    command: GitCommand, options: ExecutionOptions
) -> ExecutionContext:
    """Return the execution context for ``command``."""
    context_kwargs: dict[str, typ.Any] = {}
    directory = command.get_directory()
    if directory is not None:
        context_kwargs["cwd"] = str(directory)
    if options.env is not None:
        context_kwargs["env"] = dict(options.env)
    return ExecutionContext(**context_kwargs)


def run(
    command: GitCommand,
    *,
    options: ExecutionOptions | None = None,
) -> CommandResult | None:
    """Execute ``command`` unless it has been bypassed.

    Returns ``None`` for bypassed commands. When ``options.check`` is set a
    non-zero exit raises :class:`GitCommandFailedError`.
    """
    opts = options or ExecutionOptions()
    argv = to_argv(command)
    if not command.not_bypassed():
        LOGGER.info(
            "Skipping bypassed git command: %s",
            shlex.join((str(opts.program), *argv)),
        )
        return None
    safe_cmd = to_safe_cmd(command, opts.program)
    _log_invocation((str(opts.program), *argv), command.get_directory())
    result = safe_cmd.run_sync(
        context=_build_context(command, opts),
        echo=opts.echo,
        capture=opts.capture,
    )
    if opts.check and not result.ok:
        raise GitCommandFailedError(opts.program, argv, result)
    return result


__all__ = [
    "ExecutionOptions",
    "GitCommandFailedError",
    "GitExecutionError",
    "run",
    "to_argv",
    "to_safe_cmd",
]
