"""Render page models through the theme's Jinja templates.

The environment runs in Jinja's async mode; callers await each page before
starting the next so index pages always see fully populated models.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import PurePosixPath

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    select_autoescape,
)

from mies._constants import TEMPLATE_SUFFIXES

from .models import RenderError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import BaseLoader

    from .models import PageResult

log = logging.getLogger(__name__)


def template_candidates(name: str) -> list[str]:
    """Return the template names tried for ``name``.

    Bare names such as ``"post"`` try ``post.jinja`` and ``post.html`` before
    the bare name itself; names that already carry a suffix are used as-is.
    """
    if PurePosixPath(name).suffix:
        return [name]
    return [f"{name}{suffix}" for suffix in TEMPLATE_SUFFIXES] + [name]


class TemplateRenderer:
    """Render pages with templates from the theme, falling back to the site."""

    def __init__(
        self,
        templates_dir: Path,
        *,
        fallback_dir: Path | None = None,
        stylesheet: str = "",
    ) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path
            Theme templates directory; searched first.
        fallback_dir : Path, optional
            Site-level templates directory searched when the theme lacks a
            template. Ignored when it does not exist.
        stylesheet : str, optional
            Pygments CSS exposed to templates as ``pygments_css``.
        """
        self.templates_dir = templates_dir
        self.stylesheet = stylesheet
        loaders: list[BaseLoader] = [FileSystemLoader(str(templates_dir))]
        if fallback_dir is not None and fallback_dir.is_dir():
            loaders.append(FileSystemLoader(str(fallback_dir)))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            enable_async=True,
        )

    async def render(self, page: PageResult) -> str:
        """Render ``page`` through the template named in its header.

        The template context exposes ``model`` (the page), ``site`` (the shared
        site config), ``all`` (every page in the run) and ``pygments_css``.

        Raises
        ------
        RenderError
            If the template cannot be found or raises while rendering.
        """
        log.debug("  Rendering page %s => %s", page.in_path.name, page.out_path.name)
        try:
            model = page.require_model()
            template = self.env.select_template(template_candidates(model.template))
            return await template.render_async(
                model=model,
                site=model.site,
                all=model.all,
                pygments_css=self.stylesheet,
            )
        except Exception as exc:  # noqa: BLE001
            msg = f"Error while rendering HTML for page {page.in_path.name}"
            raise RenderError(msg) from exc


__all__ = ["TemplateRenderer", "template_candidates"]
