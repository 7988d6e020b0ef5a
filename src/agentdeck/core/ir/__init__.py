"""
agentdeck Intermediate Representation (IR) types.

Layout and theme models shared by the engines, stores, and CLI.
"""

from .layout import (
    APPEND,
    GRID_COLUMNS,
    AppendPlacement,
    Layout,
    LayoutChange,
    Role,
    WidgetInstance,
)
from .theme import (
    COLOR_SLOTS,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_RADIUS,
    DEFAULT_THEME_NAME,
    DEFAULT_VARIANT,
    MAX_RADIUS,
    MIN_RADIUS,
    PRESET_SCHEMES,
    VARIANT_DESCRIPTIONS,
    ColorScheme,
    ThemeDocument,
    ThemeMode,
    ThemePreference,
    ThemeVariant,
)

__all__ = [
    # Layout
    "APPEND",
    "GRID_COLUMNS",
    "AppendPlacement",
    "Layout",
    "LayoutChange",
    "Role",
    "WidgetInstance",
    # Theme
    "COLOR_SLOTS",
    "DEFAULT_COLOR_SCHEME",
    "DEFAULT_RADIUS",
    "DEFAULT_THEME_NAME",
    "DEFAULT_VARIANT",
    "MAX_RADIUS",
    "MIN_RADIUS",
    "PRESET_SCHEMES",
    "VARIANT_DESCRIPTIONS",
    "ColorScheme",
    "ThemeDocument",
    "ThemeMode",
    "ThemePreference",
    "ThemeVariant",
]
