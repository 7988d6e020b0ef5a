"""
Theme engine.

Owns the active :class:`ThemePreference`. Every mutation re-applies the
preference through a :class:`ThemeApplicationPort` and then persists it:

    user action -> preference' -> port.apply(preference') -> store

Persisted keys:
    theme-mode     "light" | "dark"
    theme-variant  preset name or "custom"
    theme-custom   JSON {name, colors, borderRadius} (written while custom)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from . import notices
from .errors import StoreWriteError
from .ir import (
    DEFAULT_COLOR_SCHEME,
    DEFAULT_RADIUS,
    DEFAULT_VARIANT,
    ColorScheme,
    ThemeDocument,
    ThemeMode,
    ThemePreference,
    ThemeVariant,
)
from .notices import Notice
from .store import Store
from .theme_io import (
    JSON_FORMAT,
    ExportedTheme,
    export_theme,
    parse_theme_document,
    read_theme_file,
)

logger = logging.getLogger(__name__)

MODE_KEY = "theme-mode"
VARIANT_KEY = "theme-variant"
CUSTOM_KEY = "theme-custom"


class ThemeApplicationPort(Protocol):
    """Receives every theme change; the only way the engine touches presentation state."""

    def apply(self, preference: ThemePreference) -> None: ...


# =============================================================================
# Loading
# =============================================================================


def _parse_enum(enum_cls: Any, raw: str | None, default: Any) -> Any:
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        logger.debug("Ignoring unknown stored %s %r", enum_cls.__name__, raw)
        return default


def _load_custom(store: Store) -> dict[str, Any]:
    """Read the stored custom scheme; corrupt or missing records yield {}."""
    raw = store.load(CUSTOM_KEY)
    if raw is None:
        return {}
    try:
        data = json.loads(raw)
        return {
            "scheme": ColorScheme.model_validate(data["colors"]),
            "radius": float(data.get("borderRadius", DEFAULT_RADIUS)),
            "name": data.get("name"),
        }
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, ValidationError):
        logger.debug("Corrupt %s record, ignoring", CUSTOM_KEY)
        return {}


def load_preference(
    store: Store,
    *,
    default_mode: ThemeMode = ThemeMode.LIGHT,
    default_variant: ThemeVariant = DEFAULT_VARIANT,
) -> ThemePreference:
    """Load the persisted theme preference, falling back to the defaults.

    Never fails: unknown or corrupt stored values are treated as absent.
    """
    mode = _parse_enum(ThemeMode, store.load(MODE_KEY), default_mode)
    variant = _parse_enum(ThemeVariant, store.load(VARIANT_KEY), default_variant)
    custom = _load_custom(store)

    try:
        return ThemePreference(mode=mode, variant=variant, **custom)
    except ValidationError:
        logger.debug("Stored custom theme out of range, ignoring")
        return ThemePreference(mode=mode, variant=variant)


# =============================================================================
# Engine
# =============================================================================


class ThemeEngine:
    """Applies and persists the active theme.

    Args:
        store: Key-value store for the persisted preference.
        port: Presentation context that receives every applied preference.
        default_mode: Mode used when nothing is persisted.
        default_variant: Variant used when nothing is persisted.
    """

    def __init__(
        self,
        store: Store,
        port: ThemeApplicationPort,
        *,
        default_mode: ThemeMode = ThemeMode.LIGHT,
        default_variant: ThemeVariant = DEFAULT_VARIANT,
    ) -> None:
        self.store = store
        self.port = port
        self.last_warning: str | None = None
        self.preference = load_preference(
            store, default_mode=default_mode, default_variant=default_variant
        )
        self.port.apply(self.preference)

    # -- mutations ------------------------------------------------------------

    def set_mode(self, mode: ThemeMode | str) -> ThemePreference:
        return self._update(mode=ThemeMode(mode))

    def set_variant(self, variant: ThemeVariant | str) -> ThemePreference:
        return self._update(variant=ThemeVariant(variant))

    def toggle_mode(self) -> ThemePreference:
        return self._update(mode=self.preference.mode.flipped())

    def apply_custom_scheme(
        self,
        scheme: ColorScheme,
        radius: float | None = None,
        name: str | None = None,
    ) -> ThemePreference:
        """Switch to the custom variant with ``scheme`` and ``radius``.

        ``radius`` defaults to the current radius; ``name`` to the current name.
        """
        return self._update(
            variant=ThemeVariant.CUSTOM,
            scheme=scheme,
            radius=self.preference.radius if radius is None else radius,
            name=self.preference.name if name is None else name,
        )

    def reset_custom_scheme(self) -> Notice:
        """Restore the default custom colors and radius."""
        self.apply_custom_scheme(DEFAULT_COLOR_SCHEME, DEFAULT_RADIUS)
        return notices.info("Theme Reset", "Theme has been reset to default values.")

    # -- import / export --------------------------------------------------------

    def export_theme(
        self,
        *,
        name: str | None = None,
        fmt: str = JSON_FORMAT,
        timestamp: datetime | None = None,
    ) -> ExportedTheme:
        """Export the active colors, radius and name as a portable document."""
        return export_theme(
            name or self.preference.name,
            self.preference.effective_scheme,
            self.preference.radius,
            fmt=fmt,
            timestamp=timestamp,
        )

    def import_theme(
        self, text: str, fmt: str = JSON_FORMAT, *, source: str = "<theme>"
    ) -> ThemeDocument:
        """Parse a theme document and make it the active custom theme.

        Raises:
            ThemeImportError: The document is malformed or invalid; the active
                theme is left unchanged.
        """
        document = parse_theme_document(text, fmt, source=source)
        self._adopt(document)
        return document

    def import_theme_file(self, path: Path) -> ThemeDocument:
        """Read a theme file and make it the active custom theme.

        Raises:
            ThemeImportError: As for :meth:`import_theme`.
        """
        document = read_theme_file(path)
        self._adopt(document)
        return document

    def _adopt(self, document: ThemeDocument) -> None:
        self.apply_custom_scheme(document.colors, document.border_radius, document.name)
        logger.info("Imported theme %r", document.name)

    # -- internals --------------------------------------------------------------

    def _update(self, **changes: Any) -> ThemePreference:
        self.preference = ThemePreference(**{**dict(self.preference), **changes})
        self.port.apply(self.preference)
        self._persist()
        return self.preference

    def _persist(self) -> None:
        # The variant is written last: a stored "custom" variant always has
        # its scheme record in place.
        pref = self.preference
        written: list[str] = []
        try:
            if pref.is_custom:
                record = {
                    "name": pref.name,
                    "colors": pref.effective_scheme.model_dump(),
                    "borderRadius": pref.radius,
                }
                self.store.save(CUSTOM_KEY, json.dumps(record))
                written.append(CUSTOM_KEY)
            self.store.save(MODE_KEY, pref.mode.value)
            written.append(MODE_KEY)
            self.store.save(VARIANT_KEY, pref.variant.value)
        except StoreWriteError as e:
            self.last_warning = f"Theme preference not saved: {e.message}"
            if written:
                self.last_warning += f" (partially stored: {', '.join(written)})"
            logger.warning(self.last_warning)
        else:
            self.last_warning = None
