"""Tests for layout operations, defaults and the widget registry."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from agentdeck.core.ir import GRID_COLUMNS, Layout, LayoutChange, Role, WidgetInstance
from agentdeck.core.store import MemoryStore
from agentdeck.ui.layout_engine import (
    NO_RENDERER,
    WIDGET_CATALOG,
    LayoutStore,
    add_widget,
    find_collisions,
    get_default_layout,
    move_or_resize,
    new_widget_id,
    remove_widget,
    reset_to_default,
    resolve_widget,
)
from agentdeck.ui.layout_engine.operations import clamp_geometry


def _widget(id: str, x: int, y: int, w: int = 4, h: int = 3, **kwargs) -> WidgetInstance:
    return WidgetInstance(id=id, x=x, y=y, w=w, h=h, widget_type="QueueStats", **kwargs)


class TestWidgetInstance:
    def test_serializes_with_camel_case_keys(self):
        widget = _widget("a", 0, 0, min_w=2, min_h=2)
        assert widget.model_dump(by_alias=True) == {
            "id": "a",
            "x": 0,
            "y": 0,
            "w": 4,
            "h": 3,
            "minW": 2,
            "minH": 2,
            "widgetType": "QueueStats",
        }

    def test_rejects_overflowing_grid(self):
        with pytest.raises(ValidationError):
            _widget("a", 10, 0, w=4)

    def test_rejects_size_below_minimum(self):
        with pytest.raises(ValidationError):
            _widget("a", 0, 0, w=2, min_w=3)

    def test_layout_rejects_duplicate_ids(self):
        with pytest.raises(ValidationError):
            Layout(role=Role.AGENT, widgets=[_widget("a", 0, 0), _widget("a", 4, 0)])

    def test_widget_lookup(self):
        layout = Layout(role=Role.AGENT, widgets=[_widget("a", 0, 0)])
        assert layout.widget("a").id == "a"
        with pytest.raises(KeyError):
            layout.widget("missing")


class TestRegistry:
    def test_catalog_has_six_widgets(self):
        assert [d.id for d in WIDGET_CATALOG] == [
            "QueueStats",
            "AgentPerformance",
            "CustomerProfile",
            "CallControls",
            "AgentMonitor",
            "CampaignStats",
        ]

    def test_unknown_type_resolves_to_no_renderer(self):
        assert resolve_widget("RetiredWidget") is NO_RENDERER
        assert not NO_RENDERER.has_renderer

    def test_known_type_has_renderer(self):
        assert resolve_widget("QueueStats").has_renderer


class TestDefaults:
    def test_agent_default(self):
        layout = get_default_layout(Role.AGENT)
        assert [(w.id, w.x, w.y, w.w, w.h) for w in layout.widgets] == [
            ("call-controls", 0, 0, 8, 6),
            ("customer-profile", 8, 0, 4, 6),
            ("performance", 0, 6, 6, 4),
            ("queue-stats", 6, 6, 6, 4),
        ]

    def test_supervisor_default_has_full_width_monitor(self):
        monitor = get_default_layout("supervisor").get("agent-monitor")
        assert monitor is not None
        assert (monitor.x, monitor.y, monitor.w, monitor.h) == (0, 3, 12, 5)
        assert (monitor.min_w, monitor.min_h) == (8, 4)

    def test_admin_default_widget_count(self):
        assert len(get_default_layout(Role.ADMIN).widgets) == 5

    def test_every_default_fits_the_grid(self):
        for role in Role:
            layout = get_default_layout(role)
            assert layout.role is role
            assert all(w.right <= GRID_COLUMNS for w in layout.widgets)
            assert find_collisions(layout) == []


class TestAddWidget:
    def test_add_to_empty_layout_lands_at_origin(self, empty_layout):
        result = add_widget(empty_layout, "QueueStats", widget_id="q")
        widget = result.get("q")
        assert widget is not None
        assert (widget.x, widget.y, widget.w, widget.h) == (0, 0, 4, 3)
        assert (widget.min_w, widget.min_h) == (3, 2)

    def test_add_places_below_existing_content(self):
        result = add_widget(get_default_layout(Role.AGENT), "CampaignStats", widget_id="c")
        widget = result.get("c")
        assert widget is not None
        assert (widget.x, widget.y) == (0, 10)
        assert find_collisions(result) == []

    def test_add_floats_up_into_free_space(self):
        layout = Layout(role=Role.AGENT, widgets=[_widget("right", 6, 0, w=6)])
        widget = add_widget(layout, "QueueStats", widget_id="n").get("n")
        assert widget is not None
        assert (widget.x, widget.y) == (0, 0)

    def test_unknown_type_gets_fallback_size(self, empty_layout):
        widget = add_widget(empty_layout, "RetiredWidget", widget_id="r").get("r")
        assert widget is not None
        assert (widget.w, widget.h, widget.min_w, widget.min_h) == (4, 3, 3, 2)

    def test_generated_ids_are_unique(self, empty_layout):
        layout = empty_layout
        for _ in range(5):
            layout = add_widget(layout, "QueueStats")
        assert len(set(layout.ids())) == 5

    def test_new_widget_id_avoids_existing(self):
        assert new_widget_id(["widget-a"]).startswith("widget-")

    def test_input_layout_unchanged(self, empty_layout):
        add_widget(empty_layout, "QueueStats")
        assert empty_layout.widgets == []


class TestRemoveWidget:
    def test_remove_keeps_other_positions(self):
        layout = get_default_layout(Role.AGENT)
        result = remove_widget(layout, "call-controls")
        assert "call-controls" not in result.ids()
        assert result.get("performance") == layout.get("performance")

    def test_remove_unknown_id_is_noop(self):
        layout = get_default_layout(Role.AGENT)
        assert remove_widget(layout, "missing") is layout

    def test_add_then_remove_restores_widget_set(self):
        layout = get_default_layout(Role.SUPERVISOR)
        added = add_widget(layout, "CallControls", widget_id="temp")
        assert remove_widget(added, "temp").ids() == layout.ids()


class TestMoveOrResize:
    def test_applies_reported_geometry(self):
        layout = Layout(role=Role.AGENT, widgets=[_widget("a", 0, 0)])
        result = move_or_resize(layout, [LayoutChange(id="a", x=2, y=1, w=5, h=4)])
        assert result.get("a").model_dump(include={"x", "y", "w", "h"}) == {
            "x": 2,
            "y": 1,
            "w": 5,
            "h": 4,
        }

    def test_accepts_mappings(self):
        layout = Layout(role=Role.AGENT, widgets=[_widget("a", 0, 0)])
        result = move_or_resize(layout, [{"id": "a", "x": 8, "y": 0, "w": 4, "h": 3}])
        assert result.get("a").x == 8

    def test_clamps_to_minimum_size(self):
        layout = get_default_layout(Role.AGENT)
        result = move_or_resize(layout, [LayoutChange(id="call-controls", x=0, y=0, w=1, h=1)])
        widget = result.get("call-controls")
        assert (widget.w, widget.h) == (6, 5)

    def test_clamps_into_grid(self):
        layout = Layout(role=Role.AGENT, widgets=[_widget("a", 0, 0)])
        result = move_or_resize(layout, [LayoutChange(id="a", x=11, y=-3, w=20, h=2)])
        widget = result.get("a")
        assert (widget.x, widget.y, widget.w, widget.h) == (0, 0, 12, 2)

    def test_unknown_ids_ignored(self):
        layout = get_default_layout(Role.AGENT)
        result = move_or_resize(layout, [LayoutChange(id="ghost", x=0, y=0, w=4, h=4)])
        assert result.widgets == layout.widgets

    def test_last_change_for_an_id_wins(self):
        layout = Layout(role=Role.AGENT, widgets=[_widget("a", 0, 0)])
        result = move_or_resize(
            layout,
            [
                LayoutChange(id="a", x=1, y=0, w=4, h=3),
                LayoutChange(id="a", x=5, y=0, w=4, h=3),
            ],
        )
        assert result.get("a").x == 5

    @given(
        x=st.integers(min_value=-50, max_value=50),
        y=st.integers(min_value=-50, max_value=50),
        w=st.integers(min_value=-50, max_value=50),
        h=st.integers(min_value=-50, max_value=50),
    )
    def test_clamped_geometry_always_valid(self, x: int, y: int, w: int, h: int) -> None:
        """Invariant: any raw geometry clamps to a valid in-grid widget."""
        widget = _widget("a", 0, 0, w=4, h=3, min_w=3, min_h=2)
        result = clamp_geometry(widget, x, y, w, h)
        assert result.min_w <= result.w <= GRID_COLUMNS
        assert result.h >= result.min_h
        assert 0 <= result.x
        assert result.right <= GRID_COLUMNS
        assert result.y >= 0


class TestResetToDefault:
    def test_clears_stored_layout(self):
        backing = MemoryStore({"dashboard-layout-agent": "[]"})
        store = LayoutStore(backing)

        layout = reset_to_default(Role.AGENT, store)

        assert layout == get_default_layout(Role.AGENT)
        assert "dashboard-layout-agent" not in backing

    def test_other_roles_untouched(self):
        backing = MemoryStore({"dashboard-layout-admin": "[]"})
        reset_to_default(Role.AGENT, LayoutStore(backing))
        assert "dashboard-layout-admin" in backing
