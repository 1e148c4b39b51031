"""Cuprum catalogue for gitwrapper command execution.

Every executable gitwrapper may spawn must be registered in a
:class:`cuprum.ProgramCatalogue` before ``sh.make()`` will build a command
for it. The default catalogue allowlists ``git``; deployments that point
``git.program`` at another executable receive a catalogue built for that
programme by :func:`catalogue_for`.
"""

from __future__ import annotations

from functools import cache

from cuprum import Program, ProgramCatalogue, ProjectSettings

PROJECT_NAME = "gitwrapper"
_DOCUMENTATION_LOCATIONS = ("DESIGN.md#execution",)

GIT = Program("git")


@cache
def catalogue_for(program: Program) -> ProgramCatalogue:
    """Return a cached catalogue whose allowlist contains only ``program``."""
    project = ProjectSettings(
        name=PROJECT_NAME,
        programs=(program,),
        documentation_locations=_DOCUMENTATION_LOCATIONS,
        noise_rules=(),
    )
    return ProgramCatalogue(projects=(project,))


# Shared catalogue for the default ``git`` executable.
GITWRAPPER_CATALOGUE = catalogue_for(GIT)

__all__ = ["GIT", "GITWRAPPER_CATALOGUE", "PROJECT_NAME", "catalogue_for"]
