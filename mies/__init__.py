"""Mies: less is more. A minimalist static blog generator.

This package turns a directory of markdown pages with YAML headers into a
static website rendered through a Jinja theme.

Exports
-------
- ``app``: Cyclopts application behind the ``mies`` console script.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from mies import main
>>> main(["blog"])  # doctest: +SKIP
0
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
