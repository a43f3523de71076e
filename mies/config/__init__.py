"""Load and validate site and theme configuration for mies builds.

This subpackage reads ``site.yaml`` and the theme file it references, decodes
them case-insensitively into frozen dataclasses (:class:`SiteConfig`,
:class:`ThemeConfig`), and stamps each with its own file path so relative
directories resolve against the folder holding that file.

Examples
--------
>>> from pathlib import Path
>>> from mies.config import find_theme_config, load_site_config, load_theme_config
>>> site = load_site_config(Path("blog"), Path("blog/site.yaml"))  # doctest: +SKIP
>>> theme = load_theme_config(find_theme_config(Path("blog"), site))  # doctest: +SKIP
>>> theme.theme_path(theme.templates_dir)  # doctest: +SKIP
PosixPath('/home/me/blog/themes/plain/templates')
"""

from .loader import (
    check_directory,
    check_file,
    find_theme_config,
    load_generator_site_config,
    load_site_config,
    load_theme_config,
)
from .models import DirectoryNotFoundError, GeneratorConfig, SiteConfig, ThemeConfig

__all__ = [
    "DirectoryNotFoundError",
    "GeneratorConfig",
    "SiteConfig",
    "ThemeConfig",
    "check_directory",
    "check_file",
    "find_theme_config",
    "load_generator_site_config",
    "load_site_config",
    "load_theme_config",
]
