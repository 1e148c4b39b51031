"""Configuration loading for the :mod:`gitwrapper` toolkit.

``gitwrapper.toml`` is read with the Cyclopts TOML loader and validated by
converting the parsed tables into frozen :mod:`msgspec` structs. Unknown
sections or keys and values of the wrong type are rejected.
"""

from __future__ import annotations

import typing as typ

import msgspec
from cyclopts.config import Toml

from gitwrapper.utils import normalise_directory

if typ.TYPE_CHECKING:  # pragma: no cover - type checking only
    from pathlib import Path

CONFIG_FILENAME = "gitwrapper.toml"

# At least one non-whitespace character.
ProgramName = typ.Annotated[str, msgspec.Meta(pattern=r"\S")]


class ConfigurationError(RuntimeError):
    """Raised when the :mod:`gitwrapper` configuration is invalid."""


class GitConfig(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True):
    """The ``[git]`` table: executable name and extra environment."""

    program: ProgramName = "git"
    env: dict[str, str] = msgspec.field(default_factory=dict)


class ExecutionConfig(
    msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True
):
    """The ``[execution]`` table: flags forwarded to cuprum."""

    echo: bool = False
    capture: bool = True
    check: bool = True


class GitWrapperConfig(
    msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True
):
    """Strongly-typed representation of ``gitwrapper.toml``."""

    git: GitConfig = msgspec.field(default_factory=GitConfig)
    execution: ExecutionConfig = msgspec.field(default_factory=ExecutionConfig)


def build_loader(directory: Path) -> Toml:
    """Return a Cyclopts loader for ``gitwrapper.toml`` in ``directory``."""
    resolved = normalise_directory(directory)
    return Toml(
        path=resolved / CONFIG_FILENAME,
        must_exist=False,
        search_parents=False,
        allow_unknown=True,
        use_commands_as_keys=True,
    )


def load_from_loader(loader: Toml) -> GitWrapperConfig:
    """Load and validate configuration using ``loader``."""
    try:
        raw = loader.config
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    try:
        return msgspec.convert(raw or {}, type=GitWrapperConfig)
    except msgspec.ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def load_configuration(directory: Path) -> GitWrapperConfig:
    """Load configuration for ``directory`` using Cyclopts."""
    return load_from_loader(build_loader(directory))


__all__ = [
    "CONFIG_FILENAME",
    "ConfigurationError",
    "ExecutionConfig",
    "GitConfig",
    "GitWrapperConfig",
    "build_loader",
    "load_configuration",
    "load_from_loader",
]
