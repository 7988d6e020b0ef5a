"""
agentdeck Dashboard Layout Engine.

Grid placement for role-based dashboards.

Key components:
- Widget registry (registry.py)
- Vertical compaction (compact.py)
- Layout operations (operations.py)
- Edit-mode lifecycle (editor.py)
- Per-role persistence and defaults (store.py, defaults.py)
- Widget palette (palette.py)
"""

from agentdeck.ui.layout_engine.compact import compact, find_collisions, is_compact
from agentdeck.ui.layout_engine.defaults import DEFAULT_LAYOUTS, get_default_layout
from agentdeck.ui.layout_engine.editor import DashboardEditor, EditMode
from agentdeck.ui.layout_engine.operations import (
    add_widget,
    move_or_resize,
    new_widget_id,
    remove_widget,
    reset_to_default,
)
from agentdeck.ui.layout_engine.palette import PaletteGroup, WidgetPalette, group_by_category
from agentdeck.ui.layout_engine.registry import (
    NO_RENDERER,
    WIDGET_CATALOG,
    WidgetDefinition,
    resolve_widget,
)
from agentdeck.ui.layout_engine.store import LayoutStore, layout_key

__all__ = [
    # Operations
    "add_widget",
    "remove_widget",
    "move_or_resize",
    "new_widget_id",
    "reset_to_default",
    # Compaction
    "compact",
    "find_collisions",
    "is_compact",
    # Editor
    "DashboardEditor",
    "EditMode",
    # Persistence
    "LayoutStore",
    "layout_key",
    "DEFAULT_LAYOUTS",
    "get_default_layout",
    # Registry & palette
    "WIDGET_CATALOG",
    "NO_RENDERER",
    "WidgetDefinition",
    "resolve_widget",
    "WidgetPalette",
    "PaletteGroup",
    "group_by_category",
]
