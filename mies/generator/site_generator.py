"""High-level orchestration for building a site from markdown pages.

:class:`SiteGenerator` loads ``site.yaml`` and the theme it references, then
runs the page pipeline strictly in order:

1. discover markdown files under the pages directory;
2. load each page (header, markdown, HTML body, shared references);
3. move index pages to the end of the run;
4. render every page through its template, one at a time;
5. delete and recreate the output directory and copy the theme's raw files;
6. write every page.

The output directory is only touched after every page has rendered, so a
template error leaves the previous build in place.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> from mies.config import GeneratorConfig
>>> from mies.generator import SiteGenerator
>>> config = GeneratorConfig(Path("blog"), Path("blog/site.yaml"))  # doctest: +SKIP
>>> report = asyncio.run(SiteGenerator(config).execute())  # doctest: +SKIP
>>> report.page_count  # doctest: +SKIP
12
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import time
import typing as typ

from mies.config import (
    find_theme_config,
    load_generator_site_config,
    load_theme_config,
)
from mies.header import extract_header

from .converter import MarkdownConverter
from .discovery import discover_pages
from .models import AllPages, PageLoadError, PageModel
from .output import copy_raw_tree, reset_output_directory, write_page
from .renderer import TemplateRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from mies.config import GeneratorConfig

    from .models import PageResult

log = logging.getLogger(__name__)

UNLIMITED_PAGES = sys.maxsize


@dc.dataclass(frozen=True, slots=True)
class BuildReport:
    """Outcome of a completed build."""

    status: int
    page_count: int
    elapsed: float
    pages: AllPages = dc.field(repr=False)


class SiteGenerator:
    """Build a static site from a site directory."""

    def __init__(self, config: GeneratorConfig) -> None:
        """Load site and theme configuration and prepare the renderers.

        Raises
        ------
        DirectoryNotFoundError
            If the site directory does not exist.
        FileNotFoundError
            If the site or theme config file does not exist.
        HeaderError
            If either config file cannot be decoded.
        """
        log.info("Initializing site: %s", config.site_directory)
        log.info("Loading site file: %s", config.site_config)

        self.config = config
        self.site = load_generator_site_config(config)
        self.theme = load_theme_config(
            find_theme_config(config.site_directory, self.site)
        )

        self.converter = MarkdownConverter()
        fallback = (
            self.site.site_path(self.site.templates_dir)
            if self.site.templates_dir
            else None
        )
        self.renderer = TemplateRenderer(
            self.theme.theme_path(self.theme.templates_dir),
            fallback_dir=fallback,
            stylesheet=self.converter.stylesheet,
        )

    @property
    def pages_dir(self) -> Path:
        return self.site.site_path(self.site.pages_dir)

    @property
    def outputs_dir(self) -> Path:
        return self.site.site_path(self.site.outputs_dir)

    @property
    def raw_files_dir(self) -> Path:
        return self.theme.theme_path(self.theme.raw_files_dir)

    async def execute(self, max_pages: int = UNLIMITED_PAGES) -> BuildReport:
        """Run the full pipeline and report the page count and elapsed time."""
        started = time.perf_counter()
        pages = await self.process_pages(max_pages)
        elapsed = time.perf_counter() - started
        return BuildReport(status=0, page_count=len(pages), elapsed=elapsed, pages=pages)

    async def process_pages(self, max_pages: int = UNLIMITED_PAGES) -> AllPages:
        """Discover, load, order, render, and write up to ``max_pages`` pages."""
        log.debug("  Theme: %s", self.theme.config_file)
        log.debug("  Input directory: %s", self.pages_dir)
        log.debug("  Output directory: %s", self.outputs_dir)

        all_pages = AllPages(discover_pages(self.pages_dir, self.outputs_dir, max_pages))

        log.info("Loading %d markdown pages...", len(all_pages))
        for page in all_pages:
            self.load_page(page, all_pages)
        all_pages.move_index_pages_to_end()

        log.info("Converting pages to HTML...")
        for page in all_pages:
            page.html_output = await self.renderer.render(page)

        log.info("Preparing the output directory...")
        reset_output_directory(self.outputs_dir)
        copy_raw_tree(self.raw_files_dir, self.outputs_dir)

        log.info("Writing HTML pages to disk...")
        for page in all_pages:
            write_page(page)

        log.info("Done. Processed %d pages.", len(all_pages))
        return all_pages

    def load_page(self, page: PageResult, all_pages: AllPages) -> None:
        """Read ``page`` from disk and attach its model.

        Raises
        ------
        PageLoadError
            If the file cannot be read, its header cannot be decoded, or the
            markdown cannot be converted.
        """
        log.debug("  Loading page %s", page.in_path.name)
        try:
            markdown = page.in_path.read_text(encoding="utf-8")
            model = extract_header(page.in_path, markdown, PageModel)
            contents = self.converter.convert(markdown)
        except (OSError, ValueError) as exc:
            msg = f"Error while loading page {page.in_path.name}: {exc}"
            raise PageLoadError(msg) from exc

        model.attach(
            markdown=markdown,
            contents=contents,
            page_link=page.out_path.name,
            site=self.site,
            all_pages=all_pages,
        )
        page.model = model


__all__ = ["UNLIMITED_PAGES", "BuildReport", "SiteGenerator"]
