"""Shared fixtures that lay out throwaway mies sites under ``tmp_path``.

The :class:`SiteLayout` helper writes ``site.yaml``, a theme file, Jinja
templates, raw assets, and markdown pages so each test can describe only the
pages it cares about.
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path
from textwrap import dedent

import pytest

from mies.config import GeneratorConfig

POST_TEMPLATE = dedent(
    """\
    <html><head><title>{{ model.page_title }} | {{ site.title }}</title></head>
    <body><article data-link="{{ model.page_link }}">{{ model.contents | safe }}</article></body>
    </html>
    """
)

INDEX_TEMPLATE = dedent(
    """\
    <html><head><title>{{ model.page_title }}</title></head>
    <body>
    <ul class="toc">
    {% for page in all.others(model) %}
      <li><a href="{{ page.page_link }}">{{ page.page_title }}</a></li>
    {% endfor %}
    </ul>
    <ul class="recent">
    {% for post in all.recent_posts() %}
      <li>{{ post.page_title }}</li>
    {% endfor %}
    </ul>
    </body>
    </html>
    """
)


def page_text(body: str = "Body text.", **header: object) -> str:
    """Return markdown with a ``---`` delimited header built from ``header``."""
    lines = ["---"]
    for key, value in header.items():
        rendered = str(value).lower() if isinstance(value, bool) else value
        lines.append(f"{key}: {rendered}")
    lines.extend(["---", "", body, ""])
    return "\n".join(lines)


@dc.dataclass(slots=True)
class SiteLayout:
    """A minimal site rooted at ``root`` with one theme."""

    root: Path

    @property
    def site_file(self) -> Path:
        return self.root / "site.yaml"

    @property
    def pages_dir(self) -> Path:
        return self.root / "pages"

    @property
    def output_dir(self) -> Path:
        return self.root / "output"

    @property
    def theme_dir(self) -> Path:
        return self.root / "theme"

    @property
    def templates_dir(self) -> Path:
        return self.theme_dir / "templates"

    @property
    def raw_dir(self) -> Path:
        return self.theme_dir / "raw"

    @property
    def generator_config(self) -> GeneratorConfig:
        return GeneratorConfig(site_directory=self.root, site_config=self.site_file)

    def write_config(self, **overrides: object) -> None:
        """Write ``site.yaml`` and ``theme/theme.yaml`` with optional overrides."""
        values: dict[str, object] = {
            "pagesDir": "pages",
            "outputsDir": "output",
            "themeFile": "theme/theme.yaml",
            "title": "Test Site",
            "author": "Tester",
            "recentPosts": 2,
        }
        values.update(overrides)
        self.site_file.write_text(
            "".join(f"{key}: {value}\n" for key, value in values.items()),
            encoding="utf-8",
        )
        self.theme_dir.mkdir(parents=True, exist_ok=True)
        (self.theme_dir / "theme.yaml").write_text(
            "templatesDir: templates\nrawFilesDir: raw\n", encoding="utf-8"
        )

    def write_template(self, name: str, text: str) -> Path:
        """Write a template into the theme templates directory."""
        self.templates_dir.mkdir(parents=True, exist_ok=True)
        path = self.templates_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    def write_raw(self, relative: str, text: str = "raw") -> Path:
        """Write a raw asset at ``relative`` under the theme raw directory."""
        path = self.raw_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def write_page(self, relative: str, text: str) -> Path:
        """Write a markdown page at ``relative`` under the pages directory."""
        path = self.pages_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path


@pytest.fixture
def site(tmp_path: Path) -> SiteLayout:
    """Return a site with config, post/index templates, and one raw asset."""
    layout = SiteLayout(tmp_path / "site")
    layout.root.mkdir()
    layout.pages_dir.mkdir()
    layout.write_config()
    layout.write_template("post.jinja", POST_TEMPLATE)
    layout.write_template("index.jinja", INDEX_TEMPLATE)
    layout.write_raw("css/site.css", "body {}\n")
    return layout


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Return every file under ``root`` keyed by its relative POSIX path."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
