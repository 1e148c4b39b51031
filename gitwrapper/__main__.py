"""Allow ``python -m gitwrapper`` to run the CLI."""

from __future__ import annotations

from gitwrapper.cli import main

raise SystemExit(main())
