"""Pytest configuration for the gitwrapper test-suite."""

from __future__ import annotations

import os
import textwrap
import typing as typ
from pathlib import Path

import pytest


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def _restore_directory_env() -> typ.Iterator[None]:
    """Ensure tests do not leak ``GITWRAPPER_DIRECTORY`` between runs."""
    from gitwrapper.cli import DIRECTORY_ENV_VAR

    original = os.environ.get(DIRECTORY_ENV_VAR)
    try:
        yield
    finally:
        if original is None:
            os.environ.pop(DIRECTORY_ENV_VAR, None)
        else:
            os.environ[DIRECTORY_ENV_VAR] = original


@pytest.fixture
def write_config(tmp_path: Path) -> typ.Callable[[str], Path]:
    """Return a helper that writes ``gitwrapper.toml`` into ``tmp_path``."""
    from gitwrapper import config as config_module

    def _write(body: str) -> Path:
        config_path = tmp_path / config_module.CONFIG_FILENAME
        config_path.write_text(textwrap.dedent(body).lstrip())
        return config_path

    return _write


@pytest.fixture
def minimal_config(write_config: typ.Callable[[str], Path]) -> Path:
    """Persist a representative configuration file for CLI exercises."""
    return write_config(
        """
        [git]
        program = "git"

        [execution]
        check = true
        """
    )
