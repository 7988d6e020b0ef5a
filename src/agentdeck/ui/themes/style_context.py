"""
Presentation context for agentdeck themes.

Holds the global style-variable registry, the light/dark mode class, and
the variant marker of the presentation root, and renders them as CSS.
This is the production implementation of the theme application port.
"""

from __future__ import annotations

import logging

from agentdeck.core.hsl import hex_to_hsl_css
from agentdeck.core.ir import ThemeMode, ThemePreference

logger = logging.getLogger(__name__)

VARIANT_ATTRIBUTE = "data-theme"
RADIUS_VARIABLE = "--radius"
ROW_HEIGHT_VARIABLE = "--row-height"


def format_radius(radius: float) -> str:
    """Format a px radius without a trailing ``.0`` (``8.0`` -> ``"8px"``)."""
    return f"{radius:g}px"


class StyleContext:
    """The shared visual root receiving mode, variant, and variable writes."""

    def __init__(self, row_height: int | None = None) -> None:
        self.variables: dict[str, str] = {}
        self.classes: set[str] = set()
        self.attributes: dict[str, str] = {}
        if row_height is not None:
            # dashboard grid rows are sized from this variable
            self.variables[ROW_HEIGHT_VARIABLE] = f"{row_height}px"

    def apply(self, preference: ThemePreference) -> None:
        """Write a theme preference into the context.

        Each color slot becomes an HSL variable named after the slot, the
        radius gets its own variable, the mode class is swapped, and the
        variant marker is attached for non-default presets only.
        """
        for name, value in preference.effective_scheme.items():
            self.variables[f"--{name}"] = hex_to_hsl_css(value)
        self.variables[RADIUS_VARIABLE] = format_radius(preference.radius)

        self.classes.difference_update(m.value for m in ThemeMode)
        self.classes.add(preference.mode.value)

        marker = preference.variant_marker
        if marker:
            self.attributes[VARIANT_ATTRIBUTE] = marker
        else:
            self.attributes.pop(VARIANT_ATTRIBUTE, None)

        logger.debug(
            "Applied theme mode=%s variant=%s radius=%s",
            preference.mode.value,
            preference.variant.value,
            preference.radius,
        )

    @property
    def mode(self) -> ThemeMode | None:
        for mode in ThemeMode:
            if mode.value in self.classes:
                return mode
        return None

    @property
    def variant_marker(self) -> str | None:
        return self.attributes.get(VARIANT_ATTRIBUTE)

    def root_selector(self) -> str:
        """CSS selector matching the root in its current state."""
        selector = ":root"
        if self.mode:
            selector += f".{self.mode.value}"
        if self.variant_marker:
            selector += f'[{VARIANT_ATTRIBUTE}="{self.variant_marker}"]'
        return selector

    def to_css(self, name: str | None = None) -> str:
        """
        Render the style variables as a CSS block.

        Args:
            name: Optional theme name for the header comment

        Returns:
            CSS string with one custom property per variable
        """
        lines: list[str] = []

        lines.append(f"/* agentdeck theme: {name or 'active'} */")
        lines.append("/* Auto-generated - do not edit */")
        lines.append("")

        lines.append(f"{self.root_selector()} {{")
        for variable, value in self.variables.items():
            lines.append(f"  {variable}: {value};")
        lines.append("}")
        lines.append("")

        return "\n".join(lines)
