"""Assemble git command lines and hand them to an executor."""

from __future__ import annotations

from .command import (
    FLAG,
    Flag,
    GitCommand,
    GitCommandError,
    InvalidArgumentError,
    InvalidOptionError,
    Value,
    build_command,
)

__all__ = [
    "FLAG",
    "Flag",
    "GitCommand",
    "GitCommandError",
    "InvalidArgumentError",
    "InvalidOptionError",
    "Value",
    "build_command",
]
