"""Cyclopts CLI entrypoint for building a mies site.

The ``mies`` console script takes a site directory containing ``site.yaml``,
builds every markdown page through the configured theme, and writes the result
into the site's output directory. Without a site directory it prints help and
exits successfully; any failure during the build exits with status 1.

Examples
--------
Build the site in ``blog/``:

>>> from mies.cli import main
>>> main(["blog"])  # doctest: +SKIP

Build only the first three pages with debug logging:

>>> from mies.cli import build
>>> build(Path("blog"), verbose=True, max_pages=3)  # doctest: +SKIP
0
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter

from ._constants import DEFAULT_SITE_FILE
from .config import GeneratorConfig
from .generator import UNLIMITED_PAGES, SiteGenerator
from .logging_setup import configure_logging

if typ.TYPE_CHECKING:
    import collections.abc as cabc

log = logging.getLogger(__name__)

app = App(name="mies", help="Less is more. A minimalist static blog generator.")


def make_generator_config(site_dir: Path, sitefile: str) -> GeneratorConfig:
    """Return the generator parameters for ``site_dir`` and its config file name."""
    log.debug("  Input directory: %s, exists = %s", site_dir.resolve(), site_dir.is_dir())
    return GeneratorConfig(site_directory=site_dir, site_config=site_dir / sitefile)


@app.default
def build(
    site_dir: typ.Annotated[
        Path | None,
        Parameter(help="Site directory that contains site.yaml file and other contents"),
    ] = None,
    *,
    sitefile: typ.Annotated[
        str, Parameter(help="Site config file name, defaults to site.yaml")
    ] = DEFAULT_SITE_FILE,
    verbose: typ.Annotated[
        bool, Parameter(name=["--verbose", "-v"], help="Enables verbose logging")
    ] = False,
    max_pages: typ.Annotated[
        int | None,
        Parameter(name="--max", help="If set, the max number of pages to be processed"),
    ] = None,
) -> int:
    """Build the site in ``site_dir``.

    Parameters
    ----------
    site_dir : Path or None, optional
        Site directory; when ``None`` the help text is printed instead.
    sitefile : str, optional
        Name of the site config file inside ``site_dir``.
    verbose : bool, optional
        Log at DEBUG level and include failure details.
    max_pages : int or None, optional
        Upper bound on the number of pages processed; unlimited when ``None``.

    Returns
    -------
    int
        ``0`` on success or when help was shown, ``1`` when the build failed.
    """
    configure_logging(verbose=verbose)

    if site_dir is None:
        app.help_print()
        return 0

    limit = UNLIMITED_PAGES if max_pages is None else max_pages
    try:
        config = make_generator_config(site_dir, sitefile)
        report = asyncio.run(SiteGenerator(config).execute(limit))
    except Exception as exc:  # noqa: BLE001
        if verbose:
            log.error("Failed to process site directory %s", site_dir)
        log.error("%s", exc)
        if exc.__cause__ is not None:
            log.error("%s", exc.__cause__)
        log.debug("Build failure traceback", exc_info=exc)
        return 1

    log.info("Generated website in %.3f seconds.", report.elapsed)
    return report.status


def main(tokens: cabc.Sequence[str] | None = None) -> int:
    """Invoke the Cyclopts application that powers the ``mies`` console command.

    Returns
    -------
    int
        Exit status returned by :func:`build`.
    """
    return int(app(tokens) or 0)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
