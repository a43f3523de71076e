"""Shared dataclasses used by the page generation pipeline.

A :class:`PageResult` is created during discovery with only its paths, gains a
:class:`PageModel` during loading, receives its final HTML during rendering,
and is written to disk last. :class:`AllPages` holds every result for a run and
is handed to each page model so index templates can enumerate the others.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from mies.config.models import SiteConfig  # noqa: TC001 - used for runtime type metadata
from mies.header import DERIVED

from .ordering import move_index_pages_to_end


class PageLoadError(RuntimeError):
    """Raised when a markdown page cannot be read, decoded, or converted."""


class RenderError(RuntimeError):
    """Raised when a page template cannot be found or fails to render."""


@dc.dataclass(slots=True)
class PageModel:
    """Per-page metadata handed to the page template.

    Attributes
    ----------
    page_title : str
        Title shown in the browser title bar, metadata, and inbound links.
    template : str
        Name of the template used to render the page.
    page_desc : str
        One-line description for tables of contents and metadata.
    date : datetime or None
        Timestamp for the page; ``None`` when the page is undated.
    is_blog_post : bool
        Whether the page is listed chronologically alongside other posts.
    is_index : bool
        Whether the page is rendered after all others so it can index them.
    markdown : str
        Raw markdown text of the source file.
    contents : str
        Markdown converted to HTML, before templating.
    page_link : str
        File name of the generated page, e.g. ``"foo.html"``.
    site : SiteConfig or None
        Shared site configuration.
    all : AllPages or None
        Every page in the current run.
    """

    page_title: str
    template: str
    page_desc: str = ""
    date: dt.datetime | None = None
    is_blog_post: bool = False
    is_index: bool = False
    markdown: str = dc.field(default="", metadata={DERIVED: True})
    contents: str = dc.field(default="", metadata={DERIVED: True})
    page_link: str = dc.field(default="", metadata={DERIVED: True})
    site: SiteConfig | None = dc.field(default=None, repr=False, metadata={DERIVED: True})
    all: AllPages | None = dc.field(default=None, repr=False, metadata={DERIVED: True})

    @property
    def is_attached(self) -> bool:
        """Return whether the runtime fields have been filled in."""
        return self.site is not None

    def attach(
        self,
        *,
        markdown: str,
        contents: str,
        page_link: str,
        site: SiteConfig,
        all_pages: AllPages,
    ) -> None:
        """Fill in the runtime fields; may only be called once per model."""
        if self.is_attached:
            msg = f"Page model for {self.page_link or self.page_title!r} is already loaded."
            raise PageLoadError(msg)
        self.markdown = markdown
        self.contents = contents
        self.page_link = page_link
        self.site = site
        self.all = all_pages


@dc.dataclass(slots=True)
class PageResult:
    """A single page: its paths, its model, and its rendered HTML."""

    in_path: Path
    out_path: Path
    model: PageModel | None = None
    html_output: str | None = None

    def require_model(self) -> PageModel:
        """Return the loaded model or raise if the page has not been loaded."""
        if self.model is None:
            msg = f"Page {self.in_path.name} has not been loaded."
            raise ValueError(msg)
        return self.model


@dc.dataclass(slots=True)
class AllPages:
    """Every page processed in a run, in processing order."""

    pages: list[PageResult] = dc.field(default_factory=list)

    def __iter__(self) -> typ.Iterator[PageResult]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    @property
    def models(self) -> list[PageModel]:
        """Return the models of every loaded page."""
        return [page.model for page in self.pages if page.model is not None]

    def others(self, model: PageModel) -> list[PageModel]:
        """Return every loaded model except ``model``."""
        return [other for other in self.models if other is not model]

    def blog_posts(self) -> list[PageModel]:
        """Return dated blog posts, newest first."""
        posts = [m for m in self.models if m.is_blog_post and m.date is not None]
        return sorted(posts, key=_sort_timestamp, reverse=True)

    def recent_posts(self, count: int | None = None) -> list[PageModel]:
        """Return the newest ``count`` blog posts, defaulting to the site setting."""
        posts = self.blog_posts()
        if count is None:
            sites = [m.site for m in self.models if m.site is not None]
            count = sites[0].recent_posts if sites else len(posts)
        return posts[: max(count, 0)]

    def move_index_pages_to_end(self) -> None:
        """Reorder in place so index pages follow every other page."""
        self.pages[:] = move_index_pages_to_end(self.pages)


def _sort_timestamp(model: PageModel) -> float:
    """Return a comparable timestamp, treating naive datetimes as UTC."""
    stamp = typ.cast("dt.datetime", model.date)
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=dt.UTC)
    return stamp.timestamp()


__all__ = [
    "AllPages",
    "PageLoadError",
    "PageModel",
    "PageResult",
    "RenderError",
]
