"""Convert ``contents.xml`` menu exports into a typed contents tree.

This package exposes the CLI entry points used to turn the authoring tool's
``contents.xml`` into the contents module consumed by the app's renderer, along
with the extraction engine behind it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sab_contents import main
>>> main()  # doctest: +SKIP
>>> from sab_contents import app
>>> app.name  # doctest: +SKIP
("contents",)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
