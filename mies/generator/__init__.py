"""Discover, load, order, render, and write the pages of a mies site."""

from .converter import FrontMatterExtension, MarkdownConverter
from .discovery import discover_pages, output_path_for
from .models import AllPages, PageLoadError, PageModel, PageResult, RenderError
from .ordering import move_index_pages_to_end
from .output import copy_raw_tree, reset_output_directory, write_page
from .renderer import TemplateRenderer
from .site_generator import UNLIMITED_PAGES, BuildReport, SiteGenerator

__all__ = [
    "UNLIMITED_PAGES",
    "AllPages",
    "BuildReport",
    "FrontMatterExtension",
    "MarkdownConverter",
    "PageLoadError",
    "PageModel",
    "PageResult",
    "RenderError",
    "SiteGenerator",
    "TemplateRenderer",
    "copy_raw_tree",
    "discover_pages",
    "move_index_pages_to_end",
    "output_path_for",
    "reset_output_directory",
    "write_page",
]
