"""
Widget palette surface.

Presents the widget registry grouped by category while editing and
forwards the user's choice as an "add widget" intent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from agentdeck.ui.layout_engine.registry import WIDGET_CATALOG, WidgetDefinition


@dataclass(frozen=True)
class PaletteGroup:
    """One category of the palette."""

    category: str
    widgets: tuple[WidgetDefinition, ...]


def group_by_category(catalog: Iterable[WidgetDefinition] = WIDGET_CATALOG) -> list[PaletteGroup]:
    """Group catalog entries by category, categories in order of first appearance."""
    groups: dict[str, list[WidgetDefinition]] = {}
    for definition in catalog:
        groups.setdefault(definition.category, []).append(definition)
    return [PaletteGroup(category, tuple(items)) for category, items in groups.items()]


class WidgetPalette:
    """Open/closed palette that emits add intents for catalog widgets.

    Args:
        on_add: Called with the chosen widget type id.
        catalog: Entries offered by the palette.
    """

    def __init__(
        self,
        on_add: Callable[[str], object],
        catalog: Iterable[WidgetDefinition] = WIDGET_CATALOG,
    ) -> None:
        self._on_add = on_add
        self._catalog = tuple(catalog)
        self.is_open = False

    @property
    def groups(self) -> list[PaletteGroup]:
        return group_by_category(self._catalog)

    def offers(self, widget_type: str) -> bool:
        return any(d.id == widget_type for d in self._catalog)

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def choose(self, widget_type: str) -> None:
        """Emit an add intent for ``widget_type``.

        Raises:
            ValueError: If the palette does not offer that widget type.
        """
        if not self.offers(widget_type):
            raise ValueError(f"Widget type not in palette: {widget_type}")
        self._on_add(widget_type)


__all__ = ["PaletteGroup", "WidgetPalette", "group_by_category"]
