"""
Dashboard editor: the edit-mode lifecycle around one role's layout.

States:

    VIEWING --begin_edit()--> EDITING --save()--> VIEWING

There is no cancel; leaving edit mode always commits. While viewing,
layout-change events from the interaction surface are ignored and the
explicit mutating operations raise :class:`EditModeError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from agentdeck.core import notices
from agentdeck.core.errors import EditModeError, StoreWriteError
from agentdeck.core.ir import Layout, LayoutChange, Role, WidgetInstance
from agentdeck.core.notices import Notice
from agentdeck.ui.layout_engine.compact import compact
from agentdeck.ui.layout_engine.defaults import get_default_layout
from agentdeck.ui.layout_engine.operations import (
    add_widget,
    move_or_resize,
    new_widget_id,
    remove_widget,
    reset_to_default,
)
from agentdeck.ui.layout_engine.palette import WidgetPalette
from agentdeck.ui.layout_engine.registry import WidgetDefinition, resolve_widget
from agentdeck.ui.layout_engine.store import LayoutStore

logger = logging.getLogger(__name__)


class EditMode(StrEnum):
    VIEWING = "viewing"
    EDITING = "editing"


class DashboardEditor:
    """Holds the active role's in-memory layout and its edit state.

    Args:
        store: Layout store used to load and save layouts.
        role: Initially active role.
    """

    def __init__(self, store: LayoutStore, role: Role | str = Role.AGENT) -> None:
        self.store = store
        self.role = Role(role)
        self.layout: Layout = store.load(self.role)
        self.mode = EditMode.VIEWING
        self.palette = WidgetPalette(on_add=self.add_widget)

    @property
    def is_editing(self) -> bool:
        return self.mode is EditMode.EDITING

    def _require_editing(self, action: str) -> None:
        if not self.is_editing:
            raise EditModeError(f"Cannot {action} while viewing; enter edit mode first")

    # -- lifecycle --------------------------------------------------------------

    def begin_edit(self) -> None:
        """Enter edit mode. No effect on the layout."""
        if not self.is_editing:
            self.mode = EditMode.EDITING
            logger.debug("Editing %s layout", self.role.value)

    def save(self) -> Notice:
        """Persist the in-memory layout and leave edit mode.

        A write failure still leaves edit mode; the in-memory layout stays
        authoritative for the session and a warning notice is returned.
        """
        self._require_editing("save")
        self.mode = EditMode.VIEWING
        self.palette.close()

        try:
            self.store.save(self.role, self.layout)
        except StoreWriteError as e:
            logger.warning("Layout for %s not saved: %s", self.role.value, e.message)
            return notices.warning(
                "Layout Not Saved",
                "Your changes are kept for this session but could not be stored.",
            )
        return notices.info("Layout Saved", "Your dashboard layout has been saved successfully.")

    def switch_role(self, role: Role | str) -> Layout:
        """Make ``role`` active, loading its own layout.

        Unsaved edits of the previous role are discarded and the editor
        returns to viewing.
        """
        role = Role(role)
        if self.is_editing:
            logger.info("Discarding unsaved %s layout edits", self.role.value)
        self.role = role
        self.layout = self.store.load(role)
        self.mode = EditMode.VIEWING
        self.palette.close()
        return self.layout

    # -- edits ------------------------------------------------------------------

    def apply_layout_change(self, changes: Iterable[LayoutChange | Mapping[str, Any]]) -> bool:
        """Apply a drag/resize step from the interaction surface.

        Returns:
            True if applied, False if ignored because the editor is viewing.
        """
        if not self.is_editing:
            logger.debug("Ignoring layout change while viewing")
            return False
        self.layout = compact(move_or_resize(self.layout, changes))
        return True

    def add_widget(self, widget_type: str) -> WidgetInstance:
        """Add a widget below existing content, compact, and close the palette."""
        self._require_editing("add a widget")
        widget_id = new_widget_id(self.layout.ids())
        self.layout = add_widget(self.layout, widget_type, widget_id=widget_id)
        self.palette.close()

        return self.layout.widget(widget_id)

    def remove_widget(self, widget_id: str) -> bool:
        """Remove a widget. Returns False if no widget had that id."""
        self._require_editing("remove a widget")
        before = self.layout
        self.layout = remove_widget(self.layout, widget_id)
        return self.layout is not before

    def reset(self) -> Notice:
        """Replace the layout with the role's default and clear the stored record."""
        self._require_editing("reset the layout")
        try:
            self.layout = reset_to_default(self.role, self.store)
        except StoreWriteError as e:
            logger.warning("Stored %s layout not cleared: %s", self.role.value, e.message)
            self.layout = get_default_layout(self.role)
            return notices.warning(
                "Layout Reset",
                "The default layout is shown, but the saved layout could not be removed.",
            )
        return notices.info("Layout Reset", "Your dashboard has been reset to the default layout.")

    def toggle_palette(self) -> bool:
        """Open or close the widget palette. Returns the new open state."""
        self._require_editing("open the widget palette")
        return self.palette.toggle()

    # -- rendering support ------------------------------------------------------

    def slots(self) -> list[tuple[WidgetInstance, WidgetDefinition]]:
        """Widgets with their registry entries, in reading order (row, then column).

        Unknown widget types pair with NO_RENDERER and render as empty slots.
        """
        ordered = sorted(self.layout.widgets, key=lambda w: (w.y, w.x))
        return [(widget, resolve_widget(widget.widget_type)) for widget in ordered]


__all__ = ["DashboardEditor", "EditMode"]
