"""Path helpers for :mod:`gitwrapper`."""

from __future__ import annotations

import os
from pathlib import Path


def normalise_directory(value: str | os.PathLike[str] | None) -> Path:
    """Return ``value`` as an absolute path, defaulting to the current directory."""
    if value is None:
        return Path.cwd().resolve()
    return Path(value).expanduser().resolve()


__all__ = ["normalise_directory"]
