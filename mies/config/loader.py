"""Load site and theme configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import logging
from pathlib import Path

from mies.header import parse_structured

from .models import DirectoryNotFoundError, GeneratorConfig, SiteConfig, ThemeConfig

log = logging.getLogger(__name__)


def check_directory(path: Path, label: str) -> None:
    """Raise :class:`DirectoryNotFoundError` when ``path`` is not a directory."""
    if path.is_dir():
        return
    msg = f"{label} not found: {path.resolve()}"
    raise DirectoryNotFoundError(msg)


def check_file(path: Path, label: str) -> None:
    """Raise :class:`FileNotFoundError` when ``path`` is not a file."""
    if path.is_file():
        return
    msg = f"{label} not found: {path.resolve()}"
    raise FileNotFoundError(msg)


def load_site_config(site_directory: Path, site_config_file: Path) -> SiteConfig:
    """Load ``site.yaml`` from the site directory.

    Parameters
    ----------
    site_directory : Path
        Root of the site; must exist.
    site_config_file : Path
        Path to the site configuration file, usually
        ``site_directory / "site.yaml"``.

    Returns
    -------
    SiteConfig
        Parsed configuration stamped with the resolved ``config_file`` so
        relative directories anchor to the file's own folder.

    Raises
    ------
    DirectoryNotFoundError
        If ``site_directory`` does not exist.
    FileNotFoundError
        If ``site_config_file`` does not exist.
    HeaderParseError
        If the file is not a YAML mapping.
    HeaderSchemaError
        If required keys are missing or hold values of the wrong type.
    """
    check_directory(site_directory, "Site directory")
    check_file(site_config_file, "Site config file")

    path = site_config_file.resolve()
    contents = path.read_text(encoding="utf-8")
    site = parse_structured(path, contents, SiteConfig)
    log.debug("  Loaded site config %s", path)
    return dc.replace(site, config_file=path)


def load_generator_site_config(config: GeneratorConfig) -> SiteConfig:
    """Load the site config named by a :class:`GeneratorConfig`."""
    return load_site_config(config.site_directory, config.site_config)


def find_theme_config(site_directory: Path, site: SiteConfig) -> Path:
    """Return the theme config path declared by ``site`` inside the site directory."""
    return site_directory / site.theme_file


def load_theme_config(theme_file: Path) -> ThemeConfig:
    """Load the theme configuration file.

    Raises
    ------
    FileNotFoundError
        If ``theme_file`` does not exist.
    HeaderParseError
        If the file is not a YAML mapping.
    HeaderSchemaError
        If ``templatesDir`` or ``rawFilesDir`` is missing.
    """
    check_file(theme_file, "Theme config file")

    path = theme_file.resolve()
    contents = path.read_text(encoding="utf-8")
    theme = parse_structured(path, contents, ThemeConfig)
    log.debug("  Loaded theme config %s", path)
    return dc.replace(theme, config_file=path)


__all__ = [
    "check_directory",
    "check_file",
    "find_theme_config",
    "load_generator_site_config",
    "load_site_config",
    "load_theme_config",
]
