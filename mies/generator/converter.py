"""Markdown to HTML conversion for page bodies.

Pages keep their YAML header inside the markdown text, so the converter strips
a leading ``---`` delimited block before Python-Markdown sees it. Fenced code is
highlighted with Pygments through the ``codehilite`` extension.
"""

from __future__ import annotations

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments.formatters.html import HtmlFormatter

from mies._constants import HEADER_DELIMITER

DEFAULT_EXTENSIONS = ("extra", "codehilite", "sane_lists", "toc")


class FrontMatterExtension(Extension):
    """Drop a leading YAML header block before markdown parsing."""

    def __init__(self, delimiter: str = HEADER_DELIMITER) -> None:
        super().__init__()
        self.delimiter = delimiter

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the front-matter preprocessor ahead of all others."""
        md.preprocessors.register(
            FrontMatterPreprocessor(md, self.delimiter), "mies_front_matter", 100
        )


class FrontMatterPreprocessor(Preprocessor):
    """Remove the lines from the opening delimiter through the closing one."""

    def __init__(self, md: Markdown, delimiter: str) -> None:
        super().__init__(md)
        self.delimiter = delimiter

    def run(self, lines: list[str]) -> list[str]:
        """Return ``lines`` without the header block, if one is present."""
        start = next((i for i, line in enumerate(lines) if line.strip()), None)
        if start is None or not lines[start].startswith(self.delimiter):
            return lines
        for end in range(start + 1, len(lines)):
            if lines[end].startswith(self.delimiter):
                return lines[end + 1 :]
        return lines


class MarkdownConverter:
    """Convert page markdown into HTML with consistent extensions."""

    def __init__(self, pygments_style: str = "default") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def convert(self, text: str) -> str:
        """Render ``text`` into HTML, skipping any leading header block."""
        md = Markdown(
            extensions=[*DEFAULT_EXTENSIONS, FrontMatterExtension()],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text)


__all__ = ["FrontMatterExtension", "FrontMatterPreprocessor", "MarkdownConverter"]
