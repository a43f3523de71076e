"""Find markdown sources and pair each with its output path."""

from __future__ import annotations

import itertools
import logging
import typing as typ

from mies._constants import HTML_SUFFIX, MARKDOWN_SUFFIX
from mies.config.loader import check_directory

from .models import PageResult

if typ.TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def output_path_for(in_path: Path, outputs_dir: Path) -> Path:
    """Return the HTML path in ``outputs_dir`` for the markdown file ``in_path``.

    Only the base name is kept, so ``pages/posts/a.md`` becomes
    ``outputs/a.html``.
    """
    return outputs_dir / in_path.with_suffix(HTML_SUFFIX).name


def discover_pages(
    pages_dir: Path, outputs_dir: Path, max_pages: int
) -> list[PageResult]:
    """Return empty page results for up to ``max_pages`` markdown files.

    Files are collected recursively and sorted by path before the limit is
    applied, so repeated runs see the same pages in the same order.

    Raises
    ------
    DirectoryNotFoundError
        If ``pages_dir`` does not exist.
    ValueError
        If ``max_pages`` is negative.
    """
    if max_pages < 0:
        msg = f"max_pages must not be negative, got {max_pages}"
        raise ValueError(msg)
    check_directory(pages_dir, "Pages directory")

    sources = sorted(
        path for path in pages_dir.rglob(f"*{MARKDOWN_SUFFIX}") if path.is_file()
    )
    results = [
        PageResult(in_path=path, out_path=output_path_for(path, outputs_dir))
        for path in itertools.islice(sources, max_pages)
    ]
    log.debug("  Found %d of %d markdown files", len(results), len(sources))
    return results


__all__ = ["discover_pages", "output_path_for"]
