"""
Theme IR types: mode, variant, color scheme, preference, and the portable
theme document used for import/export.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class ThemeMode(StrEnum):
    """Light or dark presentation mode."""

    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> ThemeMode:
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT


class ThemeVariant(StrEnum):
    """Named theme presets, plus ``custom`` for a user-built scheme."""

    PROFESSIONAL = "professional"
    MODERN = "modern"
    MINIMAL = "minimal"
    HIGH_CONTRAST = "high-contrast"
    CUSTOM = "custom"

    @property
    def is_preset(self) -> bool:
        return self is not ThemeVariant.CUSTOM


DEFAULT_VARIANT = ThemeVariant.PROFESSIONAL

# Corner rounding bounds, in px
MIN_RADIUS = 0.0
MAX_RADIUS = 24.0
DEFAULT_RADIUS = 8.0

DEFAULT_THEME_NAME = "Custom Theme"


# =============================================================================
# Color scheme
# =============================================================================


class ColorScheme(BaseModel):
    """
    The eight named color slots, each a hex triplet such as ``#2196f3``.

    Values are not validated as hex: an unparseable value converts to
    black when applied rather than being rejected.
    """

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    success: str
    warning: str
    destructive: str
    background: str
    foreground: str

    def items(self) -> list[tuple[str, str]]:
        """Slot name / value pairs in declaration order."""
        return [(name, getattr(self, name)) for name in COLOR_SLOTS]


COLOR_SLOTS: tuple[str, ...] = tuple(ColorScheme.model_fields)

DEFAULT_COLOR_SCHEME = ColorScheme(
    primary="#2196f3",
    secondary="#f5f5f5",
    accent="#9c27b0",
    success="#4caf50",
    warning="#ff9800",
    destructive="#f44336",
    background="#ffffff",
    foreground="#1a1a1a",
)

# Built-in palette per named preset
PRESET_SCHEMES: dict[ThemeVariant, ColorScheme] = {
    ThemeVariant.PROFESSIONAL: DEFAULT_COLOR_SCHEME,
    ThemeVariant.MODERN: ColorScheme(
        primary="#7c3aed",
        secondary="#ede9fe",
        accent="#ec4899",
        success="#10b981",
        warning="#f59e0b",
        destructive="#ef4444",
        background="#fafaff",
        foreground="#1e1b4b",
    ),
    ThemeVariant.MINIMAL: ColorScheme(
        primary="#334155",
        secondary="#f8fafc",
        accent="#64748b",
        success="#16a34a",
        warning="#ca8a04",
        destructive="#dc2626",
        background="#ffffff",
        foreground="#0f172a",
    ),
    ThemeVariant.HIGH_CONTRAST: ColorScheme(
        primary="#0000ff",
        secondary="#ffffff",
        accent="#ffff00",
        success="#008000",
        warning="#ff8c00",
        destructive="#ff0000",
        background="#ffffff",
        foreground="#000000",
    ),
}

VARIANT_DESCRIPTIONS: dict[ThemeVariant, tuple[str, str]] = {
    ThemeVariant.PROFESSIONAL: ("Professional", "Clean and corporate"),
    ThemeVariant.MODERN: ("Modern", "Vibrant and gradient-heavy"),
    ThemeVariant.MINIMAL: ("Minimal", "Clean and spacious"),
    ThemeVariant.HIGH_CONTRAST: ("High Contrast", "Maximum accessibility"),
    ThemeVariant.CUSTOM: ("Custom", "User-built color scheme"),
}


# =============================================================================
# Preference
# =============================================================================


class ThemePreference(BaseModel):
    """
    The active theme selection.

    Attributes:
        mode: Light or dark
        variant: Named preset or ``custom``
        scheme: User scheme; only meaningful when ``variant`` is custom
        radius: Corner rounding in px (0-24)
        name: Display name of the custom theme
    """

    model_config = ConfigDict(frozen=True)

    mode: ThemeMode = ThemeMode.LIGHT
    variant: ThemeVariant = DEFAULT_VARIANT
    scheme: ColorScheme | None = None
    radius: float = Field(default=DEFAULT_RADIUS, ge=MIN_RADIUS, le=MAX_RADIUS)
    name: str | None = None

    @property
    def is_custom(self) -> bool:
        return self.variant is ThemeVariant.CUSTOM

    @property
    def effective_scheme(self) -> ColorScheme:
        """Colors to apply: the user scheme when custom, else the preset palette."""
        if self.is_custom:
            return self.scheme or DEFAULT_COLOR_SCHEME
        return PRESET_SCHEMES[self.variant]

    @property
    def variant_marker(self) -> str | None:
        """Marker attached to the presentation root, or None for the default/custom look."""
        if self.variant.is_preset and self.variant is not DEFAULT_VARIANT:
            return self.variant.value
        return None


# =============================================================================
# Portable document
# =============================================================================


class ThemeDocument(BaseModel):
    """
    Export/import unit for a named custom theme.

    Serialized as ``{name, colors, borderRadius, timestamp}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = DEFAULT_THEME_NAME
    colors: ColorScheme
    border_radius: float = Field(..., ge=MIN_RADIUS, le=MAX_RADIUS, alias="borderRadius")
    timestamp: datetime | None = None
