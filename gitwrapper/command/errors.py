"""Exceptions raised while assembling git command lines."""

from __future__ import annotations


class GitCommandError(RuntimeError):
    """Raised when a :class:`~gitwrapper.command.GitCommand` is misused."""


class InvalidOptionError(GitCommandError):
    """Raised when an option name or value cannot be rendered."""

    @classmethod
    def bad_name(cls, name: object) -> InvalidOptionError:
        """Return an error for option names that are not strings."""
        return cls(f"Option names must be strings; received {type(name).__name__}.")

    @classmethod
    def bad_value(cls, name: str, value: object) -> InvalidOptionError:
        """Return an error for option values that cannot be rendered."""
        return cls(
            f"Option {name!r} must be a string, an integer, True, or a sequence "
            f"of those; received {type(value).__name__}."
        )

    @classmethod
    def false_value(cls, name: str) -> InvalidOptionError:
        """Return an error for options set to ``False``."""
        return cls(
            f"Option {name!r} cannot be False; use unset_option() to remove it."
        )


class InvalidArgumentError(GitCommandError):
    """Raised when a positional argument or command name is not a string."""

    @classmethod
    def bad_type(cls, kind: str, value: object) -> InvalidArgumentError:
        """Return an error for a ``kind`` value that is not a string or path."""
        return cls(
            f"The {kind} must be a string or path; received {type(value).__name__}."
        )

    @classmethod
    def not_a_collection(cls, value: object) -> InvalidArgumentError:
        """Return an error for a lone string passed where a sequence is expected."""
        return cls(
            "Arguments must be a sequence of strings or paths; received a single "
            f"{type(value).__name__} {value!r}."
        )


__all__ = ["GitCommandError", "InvalidArgumentError", "InvalidOptionError"]
