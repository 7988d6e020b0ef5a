"""
Per-role layout persistence.

Each role's layout is stored wholesale as a JSON array of widget
instances under ``dashboard-layout-<role>``. Loading never fails: a
missing or corrupt record yields the role's built-in default.
"""

from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from agentdeck.core.ir import Layout, Role, WidgetInstance
from agentdeck.core.store import Store
from agentdeck.ui.layout_engine.defaults import get_default_layout

logger = logging.getLogger(__name__)

LAYOUT_KEY_PREFIX = "dashboard-layout-"

_WIDGET_LIST = TypeAdapter(list[WidgetInstance])


def layout_key(role: Role | str) -> str:
    """Store key for a role's layout."""
    return f"{LAYOUT_KEY_PREFIX}{Role(role).value}"


class LayoutStore:
    """Role-scoped layout persistence over a key-value store.

    Args:
        store: Backing key-value store.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    def load(self, role: Role | str) -> Layout:
        """Load a role's layout.

        Returns:
            The persisted layout if present and valid, otherwise the role's
            built-in default.
        """
        role = Role(role)
        raw = self.store.load(layout_key(role))
        if raw is None:
            return get_default_layout(role)

        try:
            widgets = _WIDGET_LIST.validate_json(raw)
            return Layout(role=role, widgets=widgets)
        except ValidationError:
            logger.debug("Corrupt %s record, using default layout", layout_key(role))
            return get_default_layout(role)

    def has_saved(self, role: Role | str) -> bool:
        return self.store.load(layout_key(role)) is not None

    def save(self, role: Role | str, layout: Layout) -> None:
        """Persist a layout, overwriting any prior value for the role.

        Raises:
            StoreWriteError: If the backing store cannot be written.
        """
        role = Role(role)
        if layout.role is not role:
            raise ValueError(f"Cannot save a {layout.role.value} layout as {role.value}")
        self.store.save(layout_key(role), json.dumps(layout.to_records()))
        logger.info("Saved %s layout (%d widgets)", role.value, len(layout.widgets))

    def clear(self, role: Role | str) -> None:
        """Remove the persisted layout for a role."""
        self.store.clear(layout_key(role))


__all__ = ["LayoutStore", "layout_key", "LAYOUT_KEY_PREFIX"]
