"""
Hex to HSL color conversion.

Produces the ``"H S% L%"`` triples written into the style-variable
registry. No external color libraries required.
"""

from __future__ import annotations

import re

_HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


def parse_hex(value: str) -> tuple[float, float, float] | None:
    """Parse a six-digit hex triplet into r, g, b in [0, 1].

    Args:
        value: Hex string, with or without leading ``#``.

    Returns:
        Normalized (r, g, b), or None if the string is not a hex triplet.
    """
    match = _HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        return None
    r, g, b = (int(group, 16) / 255 for group in match.groups())
    return r, g, b


def hex_to_hsl(value: str) -> tuple[int, int, int]:
    """Convert a hex triplet to hue/saturation/lightness.

    Args:
        value: Hex string such as ``#2196f3``.

    Returns:
        (hue degrees 0-360, saturation percent, lightness percent), each
        rounded to the nearest integer. Unparseable input yields (0, 0, 0).
    """
    rgb = parse_hex(value)
    if rgb is None:
        return 0, 0, 0

    r, g, b = rgb
    high = max(r, g, b)
    low = min(r, g, b)
    h = 0.0
    s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return _round_half_up(h * 360), _round_half_up(s * 100), _round_half_up(lightness * 100)


def hsl_to_css(h: int, s: int, lightness: int) -> str:
    """Format an HSL triple as a style-variable value (``"210 90% 54%"``)."""
    return f"{h} {s}% {lightness}%"


def hex_to_hsl_css(value: str) -> str:
    """Convert a hex triplet straight to its style-variable value."""
    return hsl_to_css(*hex_to_hsl(value))


def _round_half_up(value: float) -> int:
    # round() uses banker's rounding; 0.5 must go up
    return int(value + 0.5)
