"""Commit rendered pages and theme assets to the output directory."""

from __future__ import annotations

import logging
import shutil
import typing as typ

from mies.config.loader import check_directory

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import PageResult

log = logging.getLogger(__name__)


def reset_output_directory(path: Path) -> None:
    """Delete ``path`` if it exists, then recreate it empty."""
    if path.exists():
        log.info("Deleting output directory %s", path)
        shutil.rmtree(path)
    log.info("Creating output directory %s", path)
    path.mkdir(parents=True)


def copy_raw_tree(source_dir: Path, target_dir: Path) -> int:
    """Copy every file under ``source_dir`` into ``target_dir``.

    Subdirectories are recreated under ``target_dir`` with the same relative
    layout. Existing files in the target are overwritten.

    Returns
    -------
    int
        Number of files copied.

    Raises
    ------
    DirectoryNotFoundError
        If ``source_dir`` does not exist.
    OSError
        If any individual copy fails; files copied before the failure stay.
    """
    check_directory(source_dir, "Raw files directory")
    count = _copy_tree(source_dir, target_dir)
    log.debug("  Copied %d files from raw files directory %s", count, source_dir)
    return count


def _copy_tree(source_dir: Path, target_dir: Path) -> int:
    count = 0
    for entry in sorted(source_dir.iterdir()):
        if entry.is_dir():
            subdir = target_dir / entry.name
            subdir.mkdir(exist_ok=True)
            count += _copy_tree(entry, subdir)
        else:
            shutil.copy2(entry, target_dir / entry.name)
            count += 1
    return count


def write_page(page: PageResult) -> None:
    """Write the rendered HTML of ``page`` to its output path as UTF-8."""
    if page.html_output is None:
        msg = f"Page {page.in_path.name} has not been rendered."
        raise ValueError(msg)
    log.debug("  Writing page %s", page.out_path.name)
    page.out_path.write_text(page.html_output, encoding="utf-8")


__all__ = ["copy_raw_tree", "reset_output_directory", "write_page"]
