"""
Vertical compaction.

Removes vertical gaps by pulling widgets upward while preserving their
relative order and never letting two widgets overlap. This is the
placement rule applied whenever a widget is added or the grid reflows.
"""

from collections.abc import Iterable

from agentdeck.core.ir import Layout, WidgetInstance


def compact(layout: Layout) -> Layout:
    """
    Compact a layout vertically.

    Algorithm:
    1. Order widgets by ascending ``y``, ties by ascending ``x`` (stable)
    2. For each widget, start no lower than the bottom of the widgets
       placed so far
    3. Move it up one row at a time while the row above is free in its
       column span (it never jumps over a placed widget)
    4. If it still overlaps a placed widget, push it just below that
       widget until it is clear

    The result is deterministic for a given input order and idempotent:
    compacting an already-compact layout returns the same geometry.

    Args:
        layout: Layout to compact

    Returns:
        New layout with widgets in processing order

    Examples:
        >>> from agentdeck.core.ir import Layout, Role, WidgetInstance
        >>> layout = Layout(
        ...     role=Role.AGENT,
        ...     widgets=[WidgetInstance(id="a", x=0, y=5, w=4, h=2, widget_type="QueueStats")],
        ... )
        >>> compact(layout).widgets[0].y
        0
    """
    placed: list[WidgetInstance] = []

    for widget in sorted(layout.widgets, key=lambda w: (w.y, w.x)):
        placed.append(_compact_widget(widget, placed))

    return layout.with_widgets(placed)


def _compact_widget(widget: WidgetInstance, placed: list[WidgetInstance]) -> WidgetInstance:
    """Find the resting row for one widget against the widgets already placed."""
    y = min(widget.y, _bottom(placed))

    while y > 0 and first_collision(widget.moved(y=y - 1), placed) is None:
        y -= 1

    candidate = widget.moved(y=y)
    while (hit := first_collision(candidate, placed)) is not None:
        candidate = candidate.moved(y=hit.bottom)

    return candidate


def _bottom(widgets: Iterable[WidgetInstance]) -> int:
    return max((w.bottom for w in widgets), default=0)


def first_collision(
    widget: WidgetInstance, others: Iterable[WidgetInstance]
) -> WidgetInstance | None:
    """Return the first widget in ``others`` that overlaps ``widget``."""
    for other in others:
        if widget.overlaps(other):
            return other
    return None


def find_collisions(layout: Layout) -> list[tuple[str, str]]:
    """List every overlapping pair of widget ids in a layout."""
    pairs: list[tuple[str, str]] = []
    widgets = layout.widgets
    for i, a in enumerate(widgets):
        for b in widgets[i + 1 :]:
            if a.overlaps(b):
                pairs.append((a.id, b.id))
    return pairs


def is_compact(layout: Layout) -> bool:
    """True when compaction would not move any widget."""
    before = {w.id: (w.x, w.y) for w in layout.widgets}
    after = {w.id: (w.x, w.y) for w in compact(layout).widgets}
    return before == after


__all__ = ["compact", "first_collision", "find_collisions", "is_compact"]
