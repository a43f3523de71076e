"""Typed dataclasses describing mies site and theme configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from mies._constants import GENERATOR_NAME
from mies.header import DERIVED


class DirectoryNotFoundError(FileNotFoundError):
    """Raised when a required site or theme directory does not exist."""


@dc.dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Parameters handed to the generator by the command line."""

    site_directory: Path
    site_config: Path


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration read from ``site.yaml``.

    Directory names are relative to the folder that holds the config file,
    never to the process working directory; use :meth:`site_path` to resolve
    them.
    """

    pages_dir: str
    outputs_dir: str
    theme_file: str
    templates_dir: str | None = None
    raw_files_dir: str | None = None
    title: str = ""
    author: str = ""
    description: str = ""
    recent_posts: int = 5
    generator: str = dc.field(default=GENERATOR_NAME, metadata={DERIVED: True})
    config_file: Path | None = dc.field(default=None, metadata={DERIVED: True})

    @property
    def root(self) -> Path:
        """Return the directory containing the site config file."""
        if self.config_file is None:
            msg = "Site config has not been loaded from a file."
            raise RuntimeError(msg)
        return self.config_file.parent

    def site_path(self, name: str) -> Path:
        """Resolve ``name`` against the site config file's directory."""
        return self.root / name


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Theme configuration naming the template and raw-file directories."""

    templates_dir: str
    raw_files_dir: str
    config_file: Path | None = dc.field(default=None, metadata={DERIVED: True})

    @property
    def root(self) -> Path:
        """Return the directory containing the theme config file."""
        if self.config_file is None:
            msg = "Theme config has not been loaded from a file."
            raise RuntimeError(msg)
        return self.config_file.parent

    def theme_path(self, name: str) -> Path:
        """Resolve ``name`` against the theme config file's directory."""
        return self.root / name


__all__ = [
    "DirectoryNotFoundError",
    "GeneratorConfig",
    "SiteConfig",
    "ThemeConfig",
]
