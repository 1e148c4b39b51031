"""Utility helpers for the :mod:`gitwrapper` package."""

from __future__ import annotations

from .commands import GIT, GITWRAPPER_CATALOGUE, catalogue_for
from .path import normalise_directory

__all__ = ["GIT", "GITWRAPPER_CATALOGUE", "catalogue_for", "normalise_directory"]
