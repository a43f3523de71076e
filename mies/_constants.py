"""Common literal values used across mies.

These constants keep file names, suffixes, and header markers centralized so the
loader, generator, CLI, and tests share the same values.

Examples
--------
>>> from mies import _constants
>>> _constants.DEFAULT_SITE_FILE
'site.yaml'
>>> "intro.md".removesuffix(_constants.MARKDOWN_SUFFIX) + _constants.HTML_SUFFIX
'intro.html'
"""

DEFAULT_SITE_FILE = "site.yaml"
HEADER_DELIMITER = "---"
MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"
GENERATOR_NAME = "MIES"
TEMPLATE_SUFFIXES = (".jinja", ".html")
