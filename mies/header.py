r"""Extract and decode YAML header blocks into typed dataclasses.

Markdown pages start with a header delimited by ``---`` lines, and the site and
theme configuration files are plain YAML documents. Both end up in the same
decoder: the YAML is parsed with ``ruamel.yaml`` and the resulting mapping is
matched against the fields of a dataclass after normalizing the case of both
the YAML keys and the field names. ``PageTitle``, ``pagetitle``, ``pageTitle``
and ``page_title`` therefore all populate ``page_title``.

Fields whose metadata carries :data:`DERIVED` are filled in at runtime and are
never read from a header.

Example
-------
>>> import dataclasses as dc
>>> from pathlib import Path
>>> @dc.dataclass
... class Note:
...     title: str
...     draft: bool = False
>>> text = "---\nTitle: Hello\nDRAFT: true\n---\nBody"
>>> extract_header(Path("hello.md"), text, Note)
Note(title='Hello', draft=True)
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import re
import types
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import HEADER_DELIMITER

DERIVED = "mies_derived"
_KEY_NOISE = re.compile(r"[\s_-]+")
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)

T = typ.TypeVar("T")


class HeaderError(ValueError):
    """Base class for header extraction and decoding failures."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class MissingHeaderError(HeaderError):
    """Raised when a markdown file has no delimited header block."""


class HeaderParseError(HeaderError):
    """Raised when header text is not a YAML mapping."""


class HeaderSchemaError(HeaderError):
    """Raised when parsed header data cannot populate the target dataclass."""


def extract_header_text(
    path: Path, text: str, *, delimiter: str = HEADER_DELIMITER
) -> str:
    """Return the text between the first two delimiter lines of ``text``.

    Blank lines are ignored both when looking for delimiters and when
    collecting header lines. The first non-blank line must start with
    ``delimiter``; the header ends at the next line that does.

    Raises
    ------
    MissingHeaderError
        If the first non-blank line is not a delimiter or the header is never
        closed.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if lines and lines[0].startswith(delimiter):
        collected: list[str] = []
        for line in lines[1:]:
            if line.startswith(delimiter):
                return "".join(f"{entry}\n" for entry in collected)
            collected.append(line)
    msg = f"Markdown file missing a header block: {path.name}"
    raise MissingHeaderError(path, msg)


def parse_structured(path: Path, text: str, target: type[T]) -> T:
    """Parse ``text`` as YAML and decode the mapping into ``target``.

    Raises
    ------
    HeaderParseError
        If the text is not valid YAML or does not hold a mapping.
    HeaderSchemaError
        If required fields are missing or values have the wrong shape.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(text)
    except YAMLError as exc:
        msg = f"Error while parsing yaml header for {path.name}"
        raise HeaderParseError(path, msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = (
            f"Error while parsing yaml header for {path.name}: expected a "
            f"mapping, got {type(loaded).__name__}"
        )
        raise HeaderParseError(path, msg)
    return decode_record(path, loaded, target)


def extract_header(path: Path, text: str, target: type[T]) -> T:
    """Extract the delimited header from ``text`` and decode it into ``target``."""
    header = extract_header_text(path, text)
    return parse_structured(path, header, target)


def decode_record(
    path: Path, data: typ.Mapping[typ.Any, typ.Any], target: type[T]
) -> T:
    """Populate the dataclass ``target`` from ``data`` ignoring key case.

    Keys that match no field are ignored. When two distinct keys normalize to
    the same name, such as ``pageTitle`` and ``page_title``, the later one
    wins. Exact duplicate keys never get this far: the YAML loader rejects
    them and :func:`parse_structured` reports a :class:`HeaderParseError`.
    """
    normalized = {_normalize_key(str(key)): value for key, value in data.items()}
    hints = typ.get_type_hints(target)
    kwargs: dict[str, typ.Any] = {}
    for field in dc.fields(typ.cast("typ.Any", target)):
        if not field.init or field.metadata.get(DERIVED):
            continue
        key = _normalize_key(field.name)
        if key not in normalized:
            if field.default is dc.MISSING and field.default_factory is dc.MISSING:
                msg = (
                    f"Error recognizing header variables for {path.name}: "
                    f"missing required field '{field.name}'"
                )
                raise HeaderSchemaError(path, msg)
            continue
        kwargs[field.name] = _coerce(path, field.name, normalized[key], hints[field.name])
    try:
        return target(**kwargs)
    except (TypeError, ValueError) as exc:
        msg = f"Error recognizing header variables for {path.name}"
        raise HeaderSchemaError(path, msg) from exc


def _normalize_key(name: str) -> str:
    """Return ``name`` lower-cased with underscores, hyphens and spaces removed."""
    return _KEY_NOISE.sub("", name).lower()


def _coerce(path: Path, name: str, value: object, annotation: typ.Any) -> typ.Any:
    """Convert ``value`` to the type named by ``annotation`` or raise."""
    optional = False
    if typ.get_origin(annotation) in (types.UnionType, typ.Union):
        members = [arg for arg in typ.get_args(annotation) if arg is not type(None)]
        optional = len(members) < len(typ.get_args(annotation))
        annotation = members[0] if len(members) == 1 else typ.Any

    if value is None:
        if optional:
            return None
        return _schema_error(path, name, value)

    result: typ.Any
    if annotation is str:
        result = _as_str(value)
    elif annotation is bool:
        result = _as_bool(value)
    elif annotation is int:
        result = _as_int(value)
    elif annotation is dt.datetime:
        result = _as_datetime(value)
    else:
        return value
    if result is None:
        return _schema_error(path, name, value)
    return result


def _schema_error(path: Path, name: str, value: object) -> typ.NoReturn:
    msg = (
        f"Error recognizing header variables for {path.name}: "
        f"invalid value {value!r} for field '{name}'"
    )
    raise HeaderSchemaError(path, msg)


def _as_str(value: object) -> str | None:
    match value:
        case str():
            return value
        case bool() | int() | float() | dt.date():
            return str(value)
        case _:
            return None


def _as_bool(value: object) -> bool | None:
    match value:
        case bool():
            return value
        case str() as text if text.strip().lower() in _TRUE_WORDS:
            return True
        case str() as text if text.strip().lower() in _FALSE_WORDS:
            return False
        case _:
            return None


def _as_int(value: object) -> int | None:
    match value:
        case bool():
            return None
        case int():
            return value
        case str() as text if _INTEGER.fullmatch(text.strip()):
            return int(text)
        case _:
            return None


def _as_datetime(value: object) -> dt.datetime | None:
    """Return a datetime parsed from YAML timestamps, dates, or ISO strings."""
    match value:
        case dt.datetime():
            return value
        case dt.date():
            return dt.datetime.combine(value, dt.time())
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                return dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None


__all__ = [
    "DERIVED",
    "HeaderError",
    "HeaderParseError",
    "HeaderSchemaError",
    "MissingHeaderError",
    "decode_record",
    "extract_header",
    "extract_header_text",
    "parse_structured",
]
