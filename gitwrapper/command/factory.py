"""Call-site convenience for building :class:`GitCommand` instances."""

from __future__ import annotations

from collections import abc as cabc

from .spec import GitCommand


def build_command(*parts: object) -> GitCommand:
    """Return a :class:`GitCommand` from loosely structured ``parts``.

    The first part names the git sub-command. When the last remaining part
    is a mapping it supplies the options; every other part becomes a
    positional argument in order::

        build_command("commit", "-m", {"a": True})
        # command="commit", args=("-m",), options={"a": FLAG}

    Calling ``build_command()`` with no parts yields an empty command name.
    """
    if not parts:
        return GitCommand()
    command, *remaining = parts
    options: cabc.Mapping[str, object] | None = None
    if remaining and isinstance(remaining[-1], cabc.Mapping):
        options = remaining.pop()
    return GitCommand(
        command,  # type: ignore[arg-type]
        args=remaining,  # type: ignore[arg-type]
        options=options,
    )


__all__ = ["build_command"]
