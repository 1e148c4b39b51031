"""Unit tests for :func:`gitwrapper.command.build_command`."""

from __future__ import annotations

from gitwrapper import FLAG, GitCommand, Value, build_command


def test_trailing_mapping_becomes_options() -> None:
    """A trailing mapping is consumed as options, the rest as arguments."""
    command = build_command("commit", "-m", {"a": True})

    assert command.command == "commit"
    assert dict(command.options) == {"a": FLAG}
    assert command.args == ("-m",)


def test_no_parts_yields_empty_command() -> None:
    """Without parts the command name defaults to an empty string."""
    command = build_command()

    assert command.command == ""
    assert command.get_command_line() == []


def test_command_only() -> None:
    """A single part names the command with no options or arguments."""
    command = build_command("status")

    assert command == GitCommand("status")


def test_mapping_only_when_last() -> None:
    """Mappings are only treated as options in the final position."""
    command = build_command("clone", "url", "dir", {"branch": "main", "q": True})

    assert command.args == ("url", "dir")
    assert command.get_option("branch") == Value("main")
    assert command.get_command_line() == [
        "clone",
        "--branch",
        "main",
        "-q",
        "url",
        "dir",
    ]


def test_empty_trailing_mapping_is_consumed() -> None:
    """An empty trailing mapping is still removed from the arguments."""
    command = build_command("gc", {})

    assert command.args == ()
    assert command.get_command_line() == ["gc"]
