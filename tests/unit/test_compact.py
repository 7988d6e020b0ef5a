"""Tests for vertical compaction."""

from hypothesis import given, settings
from hypothesis import strategies as st

from agentdeck.core.ir import GRID_COLUMNS, Layout, Role, WidgetInstance
from agentdeck.ui.layout_engine import DEFAULT_LAYOUTS, compact, find_collisions, is_compact


def _widget(id: str, x: int, y: int, w: int = 4, h: int = 3) -> WidgetInstance:
    return WidgetInstance(id=id, x=x, y=y, w=w, h=h, widget_type="QueueStats")


def _layout(*widgets: WidgetInstance) -> Layout:
    return Layout(role=Role.AGENT, widgets=list(widgets))


def _positions(layout: Layout) -> dict[str, tuple[int, int]]:
    return {w.id: (w.x, w.y) for w in layout.widgets}


class TestCompact:
    """Tests for the compaction pass."""

    def test_empty_layout(self):
        assert compact(_layout()).widgets == []

    def test_floats_single_widget_to_top(self):
        result = compact(_layout(_widget("a", 2, 7)))
        assert _positions(result) == {"a": (2, 0)}

    def test_closes_gap_between_stacked_widgets(self):
        result = compact(_layout(_widget("a", 0, 0), _widget("b", 0, 9)))
        assert _positions(result) == {"a": (0, 0), "b": (0, 3)}

    def test_side_by_side_widgets_both_rise(self):
        result = compact(_layout(_widget("a", 0, 4), _widget("b", 4, 6)))
        assert _positions(result) == {"a": (0, 0), "b": (4, 0)}

    def test_does_not_jump_over_widget_above(self):
        # b sits under a; it may only move up until it meets a
        result = compact(_layout(_widget("a", 0, 0, w=12, h=2), _widget("b", 3, 5)))
        assert _positions(result) == {"a": (0, 0), "b": (3, 2)}

    def test_overlap_is_pushed_below(self):
        result = compact(_layout(_widget("a", 0, 0), _widget("b", 2, 1)))
        assert _positions(result)["b"] == (2, 3)
        assert find_collisions(result) == []

    def test_columns_and_sizes_unchanged(self):
        before = _layout(_widget("a", 1, 5, w=5, h=2), _widget("b", 6, 3, w=6, h=4))
        after = compact(before)
        assert {w.id: (w.x, w.w, w.h) for w in after.widgets} == {
            "a": (1, 5, 2),
            "b": (6, 6, 4),
        }

    def test_returns_widgets_in_reading_order(self):
        result = compact(_layout(_widget("late", 0, 8), _widget("early", 4, 0)))
        assert [w.id for w in result.widgets] == ["early", "late"]

    def test_input_is_not_modified(self):
        before = _layout(_widget("a", 0, 5))
        compact(before)
        assert before.widgets[0].y == 5

    def test_default_layouts_are_already_compact(self):
        for layout in DEFAULT_LAYOUTS.values():
            assert is_compact(layout)
            assert find_collisions(layout) == []


class TestFindCollisions:
    def test_reports_overlapping_pair(self):
        layout = _layout(_widget("a", 0, 0), _widget("b", 3, 2), _widget("c", 8, 0))
        assert find_collisions(layout) == [("a", "b")]

    def test_touching_edges_do_not_collide(self):
        layout = _layout(_widget("a", 0, 0), _widget("b", 4, 0), _widget("c", 0, 3))
        assert find_collisions(layout) == []


# =============================================================================
# Property Tests
# =============================================================================


@st.composite
def layouts(draw) -> Layout:
    """Random valid layouts: in-grid widgets with unique ids, overlaps allowed."""
    count = draw(st.integers(min_value=0, max_value=8))
    widgets = []
    for index in range(count):
        w = draw(st.integers(min_value=1, max_value=GRID_COLUMNS))
        x = draw(st.integers(min_value=0, max_value=GRID_COLUMNS - w))
        y = draw(st.integers(min_value=0, max_value=20))
        h = draw(st.integers(min_value=1, max_value=6))
        widgets.append(_widget(f"w{index}", x, y, w=w, h=h))
    return _layout(*widgets)


class TestCompactProperties:
    """Property-based tests for compaction."""

    @given(layouts())
    @settings(max_examples=200)
    def test_result_has_no_overlaps(self, layout: Layout) -> None:
        """Invariant: compaction output never overlaps."""
        assert find_collisions(compact(layout)) == []

    @given(layouts())
    @settings(max_examples=200)
    def test_idempotent(self, layout: Layout) -> None:
        """Invariant: compacting twice equals compacting once."""
        once = compact(layout)
        assert _positions(compact(once)) == _positions(once)

    @given(layouts())
    @settings(max_examples=100)
    def test_keeps_every_widget(self, layout: Layout) -> None:
        """Invariant: ids, columns and sizes survive compaction."""
        before = {w.id: (w.x, w.w, w.h) for w in layout.widgets}
        after = {w.id: (w.x, w.w, w.h) for w in compact(layout).widgets}
        assert before == after
