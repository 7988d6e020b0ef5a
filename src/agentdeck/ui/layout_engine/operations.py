"""
Layout operations.

Pure functions over :class:`Layout`: each returns a new layout and leaves
its input untouched. The editor decides when they are allowed.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from agentdeck.core.ir import (
    APPEND,
    GRID_COLUMNS,
    AppendPlacement,
    Layout,
    LayoutChange,
    Role,
    WidgetInstance,
)
from agentdeck.ui.layout_engine.compact import compact
from agentdeck.ui.layout_engine.defaults import get_default_layout
from agentdeck.ui.layout_engine.registry import resolve_widget

if TYPE_CHECKING:
    from agentdeck.ui.layout_engine.store import LayoutStore

logger = logging.getLogger(__name__)


def new_widget_id(existing: Iterable[str] = ()) -> str:
    """Generate a widget id not present in ``existing``."""
    taken = set(existing)
    while True:
        candidate = f"widget-{uuid.uuid4().hex[:12]}"
        if candidate not in taken:
            return candidate


def add_widget(
    layout: Layout,
    widget_type: str,
    *,
    widget_id: str | None = None,
    placement: AppendPlacement = APPEND,
) -> Layout:
    """
    Add a new instance of ``widget_type``.

    The instance gets the registry's initial size, ``x=0`` and a ``y``
    below all existing content; compaction then pulls it up to the first
    free row. Unknown widget types get the fallback sizes.

    Args:
        layout: Layout to add to
        widget_type: Registry identifier of the widget
        widget_id: Id for the new instance (generated when omitted)
        placement: Where the widget starts before compaction

    Returns:
        Compacted layout including the new instance
    """
    definition = resolve_widget(widget_type)
    w, h = definition.initial_size

    widget = WidgetInstance(
        id=widget_id or new_widget_id(layout.ids()),
        x=0,
        y=placement.resolve_y(layout),
        w=w,
        h=h,
        min_w=definition.min_w,
        min_h=definition.min_h,
        widget_type=widget_type,
    )
    logger.debug("Adding %s as %s to %s layout", widget_type, widget.id, layout.role.value)

    return compact(layout.with_widgets([*layout.widgets, widget]))


def remove_widget(layout: Layout, widget_id: str) -> Layout:
    """Remove the instance with ``widget_id``; absent ids are a no-op.

    Remaining widgets keep their positions.
    """
    if layout.get(widget_id) is None:
        return layout
    return layout.with_widgets(w for w in layout.widgets if w.id != widget_id)


def clamp_geometry(widget: WidgetInstance, x: int, y: int, w: int, h: int) -> WidgetInstance:
    """Apply new geometry, clamped to the widget's minimum size and the grid."""
    w = min(max(w, widget.min_w), GRID_COLUMNS)
    h = max(h, widget.min_h)
    x = min(max(x, 0), GRID_COLUMNS - w)
    y = max(y, 0)
    return widget.model_copy(update={"x": x, "y": y, "w": w, "h": h})


def _as_change(change: LayoutChange | Mapping[str, Any]) -> LayoutChange:
    if isinstance(change, LayoutChange):
        return change
    return LayoutChange.model_validate(change)


def move_or_resize(
    layout: Layout, changes: Iterable[LayoutChange | Mapping[str, Any]]
) -> Layout:
    """
    Apply geometry reported by the interaction surface.

    Each change overwrites x/y/w/h of the instance with the same id (the
    last change for an id wins). Instances without a change keep their
    geometry; changes for unknown ids are ignored. Sizes are clamped to
    the instance's ``minW``/``minH`` and the grid width before storing.
    """
    by_id = {c.id: c for c in map(_as_change, changes)}

    updated: list[WidgetInstance] = []
    for widget in layout.widgets:
        change = by_id.get(widget.id)
        if change is None:
            updated.append(widget)
        else:
            updated.append(clamp_geometry(widget, change.x, change.y, change.w, change.h))

    return layout.with_widgets(updated)


def reset_to_default(role: Role | str, store: LayoutStore | None = None) -> Layout:
    """Discard the persisted layout for ``role`` and return its built-in default."""
    role = Role(role)
    if store is not None:
        store.clear(role)
    logger.info("Reset %s layout to default", role.value)
    return get_default_layout(role)


__all__ = [
    "add_widget",
    "remove_widget",
    "move_or_resize",
    "clamp_geometry",
    "new_widget_id",
    "reset_to_default",
]
