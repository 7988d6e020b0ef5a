"""
Theme import/export.

Serializes a named custom theme to a portable document
(``{name, colors, borderRadius, timestamp}``) and parses such documents
back. JSON is the default format; YAML is accepted as well.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ErrorContext, ThemeImportError
from .ir import DEFAULT_THEME_NAME, ColorScheme, ThemeDocument

logger = logging.getLogger(__name__)

JSON_FORMAT = "json"
YAML_FORMAT = "yaml"
THEME_FORMATS: tuple[str, ...] = (JSON_FORMAT, YAML_FORMAT)

_REQUIRED_KEYS: tuple[str, ...] = ("colors", "borderRadius")
_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class ExportedTheme:
    """An exported theme ready to be written or downloaded."""

    filename: str
    document: ThemeDocument
    content: str


# =============================================================================
# Export
# =============================================================================


def theme_filename(name: str, fmt: str = JSON_FORMAT) -> str:
    """Suggested filename: the name lower-cased, whitespace runs -> ``-``."""
    slug = re.sub(r"\s+", "-", name.lower())
    return f"{slug}.{fmt}"


def dump_theme_document(document: ThemeDocument, fmt: str = JSON_FORMAT) -> str:
    """Serialize a theme document.

    Args:
        document: Document to serialize.
        fmt: ``"json"`` or ``"yaml"``.

    Returns:
        Document text.
    """
    data = document.model_dump(mode="json", by_alias=True)
    if fmt == YAML_FORMAT:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    if fmt == JSON_FORMAT:
        return json.dumps(data, indent=2)
    raise ValueError(f"Unknown theme format: {fmt!r}")


def export_theme(
    name: str | None,
    colors: ColorScheme,
    border_radius: float,
    *,
    fmt: str = JSON_FORMAT,
    timestamp: datetime | None = None,
) -> ExportedTheme:
    """Build and serialize a theme document stamped with the current time.

    Args:
        name: Theme name; blank names become "Custom Theme".
        colors: Color scheme to export.
        border_radius: Corner rounding in px.
        fmt: Output format.
        timestamp: Override for the export time (defaults to now, UTC).

    Returns:
        ExportedTheme with the suggested filename and serialized content.
    """
    document = ThemeDocument(
        name=name or DEFAULT_THEME_NAME,
        colors=colors,
        border_radius=border_radius,
        timestamp=timestamp or datetime.now(UTC),
    )
    return ExportedTheme(
        filename=theme_filename(document.name, fmt),
        document=document,
        content=dump_theme_document(document, fmt),
    )


def write_theme_file(exported: ExportedTheme, directory: Path) -> Path:
    """Write an exported theme under ``directory`` using its suggested filename."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / exported.filename
    path.write_text(exported.content, encoding="utf-8")
    logger.info("Exported theme %r to %s", exported.document.name, path)
    return path


# =============================================================================
# Import
# =============================================================================


def _load_raw(text: str, fmt: str, source: str) -> Any:
    try:
        if fmt == YAML_FORMAT:
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ThemeImportError(
            f"Invalid theme file format: {e}",
            reason=ThemeImportError.PARSE,
            context=ErrorContext(source=source),
        ) from e


def parse_theme_document(
    text: str, fmt: str = JSON_FORMAT, *, source: str = "<theme>"
) -> ThemeDocument:
    """Parse and validate a theme document.

    Args:
        text: Document text.
        fmt: ``"json"`` or ``"yaml"``.
        source: Label used in error messages (usually the file name).

    Returns:
        The validated ThemeDocument.

    Raises:
        ThemeImportError: ``reason="parse"`` when the text cannot be parsed,
            ``reason="invalid"`` when required fields are missing or malformed.
    """
    data = _load_raw(text, fmt, source)

    if not isinstance(data, dict):
        raise ThemeImportError(
            "Theme document must be an object",
            reason=ThemeImportError.INVALID,
            context=ErrorContext(source=source),
        )

    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise ThemeImportError(
            f"Theme document is missing required field(s): {', '.join(missing)}",
            reason=ThemeImportError.INVALID,
            context=ErrorContext(source=source, detail=missing[0]),
        )

    try:
        return ThemeDocument.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        detail = ".".join(str(part) for part in first["loc"])
        raise ThemeImportError(
            f"Invalid theme document: {first['msg']}",
            reason=ThemeImportError.INVALID,
            context=ErrorContext(source=source, detail=detail),
        ) from e


def format_for_path(path: Path) -> str:
    """Pick the document format from a file suffix (JSON unless .yaml/.yml)."""
    return YAML_FORMAT if path.suffix.lower() in _YAML_SUFFIXES else JSON_FORMAT


def read_theme_file(path: Path) -> ThemeDocument:
    """Read and parse a theme document from disk.

    Raises:
        ThemeImportError: If the file cannot be read, parsed, or validated.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ThemeImportError(
            f"Cannot read theme file: {e}",
            reason=ThemeImportError.PARSE,
            context=ErrorContext(source=str(path)),
        ) from e
    return parse_theme_document(text, format_for_path(path), source=path.name)
