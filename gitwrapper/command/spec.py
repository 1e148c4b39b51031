"""Builder that assembles a git invocation into an argument vector."""

from __future__ import annotations

import logging
import os
import types
import typing as typ

from .errors import InvalidArgumentError
from .values import (
    FLAG,
    coerce_option_value,
    iter_values,
    option_tokens,
    validate_option_name,
)

if typ.TYPE_CHECKING:
    from collections import abc as cabc

    from .values import StoredOption

LOGGER = logging.getLogger(__name__)

_MISSING = object()


def _coerce_argument(value: object, kind: str) -> str:
    """Return ``value`` as a string, converting path-like objects."""
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    raise InvalidArgumentError.bad_type(kind, value)


class GitCommand:
    """Ordered options and arguments for a single git invocation.

    The builder is mutated through chainable setters and rendered with
    :meth:`get_command_line`. Rendering depends only on the command name,
    the options, the positional arguments and the raw-mode switch; the
    working directory and the bypass switch are carried through for the
    executor.

    Empty tokens are removed from the rendered line. An empty command name,
    an empty argument, or an empty option value therefore disappears, while
    the option name itself is kept.
    """

    __slots__ = ("_args", "_bypass", "_command", "_directory", "_options", "_raw")

    def __init__(
        self,
        command: str = "",
        args: cabc.Iterable[str | os.PathLike[str]] = (),
        options: cabc.Mapping[str, object] | None = None,
    ) -> None:
        """Initialise the builder with ``command``, ``args`` and ``options``."""
        if not isinstance(command, str):
            raise InvalidArgumentError.bad_type("command name", command)
        if isinstance(args, str | bytes | os.PathLike):
            raise InvalidArgumentError.not_a_collection(args)
        self._command = command
        self._options: dict[str, StoredOption] = {}
        self._args: list[str] = []
        self._directory: str | os.PathLike[str] | None = None
        self._bypass = False
        self._raw = False
        if options is not None:
            self.set_options(options)
        for arg in args:
            self.add_argument(arg)

    def __repr__(self) -> str:
        """Return a debugging representation of the builder."""
        return (
            f"{type(self).__name__}(command={self._command!r}, "
            f"args={self._args!r}, options={self._options!r}, "
            f"directory={self._directory!r}, bypass={self._bypass!r}, "
            f"raw={self._raw!r})"
        )

    def __eq__(self, other: object) -> bool:
        """Compare builders field by field, including option order."""
        if not isinstance(other, GitCommand):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def _state(self) -> tuple[object, ...]:
        return (
            self._command,
            list(self._options.items()),
            self._args,
            self._directory,
            self._bypass,
            self._raw,
        )

    @property
    def command(self) -> str:
        """Return the git sub-command, e.g. ``"clone"``."""
        return self._command

    @property
    def args(self) -> tuple[str, ...]:
        """Return the positional arguments in insertion order."""
        return tuple(self._args)

    @property
    def options(self) -> cabc.Mapping[str, StoredOption]:
        """Return a read-only view of the options in insertion order."""
        return types.MappingProxyType(self._options)

    @property
    def directory(self) -> str | os.PathLike[str] | None:
        """Return the working copy directory, if one was set."""
        return self._directory

    @property
    def is_bypassed(self) -> bool:
        """Return ``True`` when execution should be skipped."""
        return self._bypass

    @property
    def is_raw(self) -> bool:
        """Return ``True`` when the command string is rendered verbatim."""
        return self._raw

    def set_directory(self, directory: str | os.PathLike[str] | None) -> GitCommand:
        """Set the directory the executor should run the command in."""
        self._directory = directory
        return self

    def get_directory(self) -> str | os.PathLike[str] | None:
        """Return the directory set through :meth:`set_directory`."""
        return self._directory

    def bypass(self, bypass: bool = True) -> GitCommand:  # noqa: FBT001, FBT002
        """Mark the command so the executor skips running it."""
        self._bypass = bool(bypass)
        return self

    def not_bypassed(self) -> bool:
        """Return ``True`` when the executor should run the command."""
        return not self._bypass

    def execute_raw(
        self,
        execute_raw: bool = True,  # noqa: FBT001, FBT002
    ) -> GitCommand:
        """Render the command string verbatim, ignoring options and arguments."""
        self._raw = bool(execute_raw)
        return self

    def set_option(self, option: str, value: object) -> GitCommand:
        """Insert or overwrite ``option``; pass ``True`` for a flag."""
        name = validate_option_name(option)
        self._options[name] = coerce_option_value(name, value)
        return self

    def set_options(self, options: cabc.Mapping[str, object]) -> GitCommand:
        """Apply :meth:`set_option` for every entry of ``options`` in order.

        Every entry is validated before any is stored, so a rejected batch
        leaves the builder untouched.
        """
        coerced: list[tuple[str, StoredOption]] = []
        for option, value in options.items():
            name = validate_option_name(option)
            coerced.append((name, coerce_option_value(name, value)))
        self._options.update(coerced)
        return self

    def set_flag(self, option: str) -> GitCommand:
        """Set ``option`` as a valueless flag, e.g. ``"q"`` for ``-q``."""
        return self.set_option(option, FLAG)

    def get_option(self, option: str, default: object = None) -> object:
        """Return the stored value for ``option`` or ``default`` when absent."""
        value = self._options.get(option, _MISSING)
        return default if value is _MISSING else value

    def unset_option(self, option: str) -> GitCommand:
        """Remove ``option`` if present."""
        self._options.pop(option, None)
        return self

    def add_argument(self, arg: str | os.PathLike[str]) -> GitCommand:
        """Append a positional argument such as a repository URL or path."""
        self._args.append(_coerce_argument(arg, "argument"))
        return self

    def build_options(self) -> list[str]:
        """Render the options into a flat token list in insertion order."""
        tokens: list[str] = []
        for option, stored in self._options.items():
            for value in iter_values(stored):
                tokens.extend(option_tokens(option, value))
        return tokens

    def get_command_line(self) -> list[str] | str:
        """Return the argument vector, or the raw command string in raw mode."""
        if self._raw:
            if self._options or self._args:
                LOGGER.debug(
                    "Rendering raw git command %r; ignoring %d option(s) and "
                    "%d argument(s)",
                    self._command,
                    len(self._options),
                    len(self._args),
                )
            return self._command
        assembled = [self._command, *self.build_options(), *self._args]
        return [token for token in assembled if token]

    def get_command_string(self) -> str:
        """Return :meth:`get_command_line` joined with spaces, without quoting."""
        rendered = self.get_command_line()
        if isinstance(rendered, str):
            return rendered
        return " ".join(rendered)

    def copy(self) -> GitCommand:
        """Return an independent copy of the builder."""
        clone = type(self)(self._command)
        clone._options = dict(self._options)
        clone._args = list(self._args)
        clone._directory = self._directory
        clone._bypass = self._bypass
        clone._raw = self._raw
        return clone


__all__ = ["GitCommand"]
