"""Git command-line assembly for :mod:`gitwrapper`."""

from __future__ import annotations

from .errors import GitCommandError, InvalidArgumentError, InvalidOptionError
from .factory import build_command
from .spec import GitCommand
from .values import FLAG, Flag, OptionValue, Value

__all__ = [
    "FLAG",
    "Flag",
    "GitCommand",
    "GitCommandError",
    "InvalidArgumentError",
    "InvalidOptionError",
    "OptionValue",
    "Value",
    "build_command",
]
