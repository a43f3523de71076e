"""Unit tests for header extraction and case-insensitive decoding.

Covers the ``---`` delimiter scan in :func:`mies.header.extract_header_text`,
YAML decoding into :class:`~mies.generator.PageModel`, and the three error
kinds raised for absent, unparseable, or ill-shaped headers.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from mies.config import SiteConfig
from mies.generator import PageModel
from mies.header import (
    HeaderParseError,
    HeaderSchemaError,
    MissingHeaderError,
    extract_header,
    extract_header_text,
    parse_structured,
)

SOURCE = Path("pages/hello.md")


def test_extract_header_text_returns_lines_between_delimiters() -> None:
    text = "\n\n---\ntitle: A\n\ntemplate: post\n---\nBody\n---\nmore"
    assert extract_header_text(SOURCE, text) == "title: A\ntemplate: post\n"


def test_extract_header_text_accepts_longer_delimiters() -> None:
    text = "-----\ntitle: A\n------ end\nBody"
    assert extract_header_text(SOURCE, text) == "title: A\n"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   \n\n",
        "# Title\n---\ntitle: A\n---\n",
        "---\ntitle: A\ntemplate: post\n",
        " ---\ntitle: A\n---\n",
    ],
    ids=["empty", "blank", "not-first", "unclosed", "indented"],
)
def test_missing_header_names_the_file(text: str) -> None:
    with pytest.raises(MissingHeaderError, match=r"hello\.md") as excinfo:
        extract_header_text(SOURCE, text)
    assert excinfo.value.path == SOURCE


@pytest.mark.parametrize(
    ("title_key", "flag_key", "template_key"),
    [
        ("pageTitle", "isIndex", "template"),
        ("PAGETITLE", "ISINDEX", "TEMPLATE"),
        ("page_title", "is_index", "Template"),
        ("PageTitle", "Is-Index", "tEmPlAtE"),
    ],
)
def test_header_round_trip_ignores_key_case(
    title_key: str, flag_key: str, template_key: str
) -> None:
    text = (
        "---\n"
        f"{title_key}: Home\n"
        "pageDesc: The landing page\n"
        "date: 2024-02-03T04:05:06\n"
        "isBlogPost: false\n"
        f"{flag_key}: true\n"
        f"{template_key}: index\n"
        "---\n"
        "# Body\n"
    )
    model = extract_header(SOURCE, text, PageModel)
    assert model.page_title == "Home"
    assert model.page_desc == "The landing page"
    assert model.date == dt.datetime(2024, 2, 3, 4, 5, 6)
    assert model.is_blog_post is False
    assert model.is_index is True
    assert model.template == "index"


def test_optional_header_fields_take_defaults() -> None:
    model = extract_header(SOURCE, "---\ntitle: x\npagetitle: A\ntemplate: post\n---\n", PageModel)
    assert model.page_desc == ""
    assert model.date is None
    assert model.is_blog_post is False
    assert model.is_index is False


def test_date_only_values_become_midnight() -> None:
    text = "---\npageTitle: A\ntemplate: post\ndate: 2023-12-31\n---\n"
    model = extract_header(SOURCE, text, PageModel)
    assert model.date == dt.datetime(2023, 12, 31)


def test_derived_fields_are_never_read_from_headers() -> None:
    text = "---\npageTitle: A\ntemplate: post\ncontents: <script>\npageLink: evil.html\n---\n"
    model = extract_header(SOURCE, text, PageModel)
    assert model.contents == ""
    assert model.page_link == ""
    assert model.site is None


def test_unparseable_yaml_raises_parse_error_with_cause() -> None:
    with pytest.raises(HeaderParseError, match=r"hello\.md") as excinfo:
        parse_structured(SOURCE, "title: [unclosed\n", PageModel)
    assert excinfo.value.__cause__ is not None


def test_non_mapping_yaml_raises_parse_error() -> None:
    with pytest.raises(HeaderParseError, match="expected a mapping"):
        parse_structured(SOURCE, "- a\n- b\n", PageModel)


def test_missing_required_field_raises_schema_error() -> None:
    with pytest.raises(HeaderSchemaError, match="template"):
        extract_header(SOURCE, "---\npageTitle: A\n---\n", PageModel)


@pytest.mark.parametrize(
    "line",
    ["isIndex: maybe", "date: not-a-date", "pageDesc: [a, b]"],
)
def test_wrongly_typed_value_raises_schema_error(line: str) -> None:
    text = f"---\npageTitle: A\ntemplate: post\n{line}\n---\n"
    with pytest.raises(HeaderSchemaError, match=r"hello\.md"):
        extract_header(SOURCE, text, PageModel)


def test_whole_file_decoding_coerces_integers() -> None:
    text = "PagesDir: pages\nOutputsDir: out\nThemeFile: t.yaml\nRecentPosts: '3'\n"
    site = parse_structured(Path("site.yaml"), text, SiteConfig)
    assert site.recent_posts == 3
    assert site.generator == "MIES"
    assert site.config_file is None


def test_boolean_is_not_accepted_as_integer() -> None:
    text = "pagesDir: pages\noutputsDir: out\nthemeFile: t.yaml\nrecentPosts: true\n"
    with pytest.raises(HeaderSchemaError, match="recent_posts"):
        parse_structured(Path("site.yaml"), text, SiteConfig)


@pytest.mark.parametrize("raw", ["--5", "+-3", "²", "1_000", "4.0"])
def test_malformed_integer_strings_raise_schema_error(raw: str) -> None:
    text = f"pagesDir: pages\noutputsDir: out\nthemeFile: t.yaml\nrecentPosts: '{raw}'\n"
    with pytest.raises(HeaderSchemaError, match="recent_posts"):
        parse_structured(Path("site.yaml"), text, SiteConfig)


def test_signed_integer_strings_are_accepted() -> None:
    text = "pagesDir: pages\noutputsDir: out\nthemeFile: t.yaml\nrecentPosts: ' +7 '\n"
    assert parse_structured(Path("site.yaml"), text, SiteConfig).recent_posts == 7


def test_exact_duplicate_keys_raise_parse_error() -> None:
    text = "---\npageTitle: A\ntemplate: post\npageTitle: B\n---\n"
    with pytest.raises(HeaderParseError, match=r"hello\.md") as excinfo:
        extract_header(SOURCE, text, PageModel)
    assert excinfo.value.__cause__ is not None


def test_differently_spelled_duplicate_keys_take_the_later_value() -> None:
    text = "---\npageTitle: A\ntemplate: post\npage_title: B\n---\n"
    assert extract_header(SOURCE, text, PageModel).page_title == "B"


def test_recent_posts_defaults_when_omitted() -> None:
    text = "pagesDir: pages\noutputsDir: out\nthemeFile: t.yaml\n"
    assert parse_structured(Path("site.yaml"), text, SiteConfig).recent_posts == 5
