"""
agentdeck theme presentation.

The style context receives theme preferences from the theme engine and
renders them as CSS custom properties.
"""

from .style_context import (
    RADIUS_VARIABLE,
    ROW_HEIGHT_VARIABLE,
    VARIANT_ATTRIBUTE,
    StyleContext,
    format_radius,
)

__all__ = [
    "RADIUS_VARIABLE",
    "ROW_HEIGHT_VARIABLE",
    "VARIANT_ATTRIBUTE",
    "StyleContext",
    "format_radius",
]
