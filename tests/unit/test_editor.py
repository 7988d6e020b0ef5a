"""Tests for the dashboard editor lifecycle and widget palette."""

import pytest

from agentdeck.core.errors import EditModeError
from agentdeck.core.ir import LayoutChange, Role
from agentdeck.core.notices import NoticeLevel
from agentdeck.ui.layout_engine import (
    NO_RENDERER,
    DashboardEditor,
    EditMode,
    LayoutStore,
    WidgetPalette,
    get_default_layout,
    group_by_category,
)


class TestEditMode:
    def test_starts_viewing_with_default_layout(self, editor):
        assert editor.mode is EditMode.VIEWING
        assert editor.layout == get_default_layout(Role.AGENT)

    def test_begin_edit_does_not_touch_layout(self, editor):
        before = editor.layout
        editor.begin_edit()
        assert editor.is_editing
        assert editor.layout is before

    def test_save_persists_and_returns_to_viewing(self, editor, layout_store):
        editor.begin_edit()
        editor.add_widget("CampaignStats")

        notice = editor.save()

        assert editor.mode is EditMode.VIEWING
        assert notice.title == "Layout Saved"
        assert layout_store.load(Role.AGENT) == editor.layout

    def test_save_while_viewing_raises(self, editor):
        with pytest.raises(EditModeError):
            editor.save()

    def test_layout_changes_ignored_while_viewing(self, editor):
        before = editor.layout
        applied = editor.apply_layout_change([LayoutChange(id="call-controls", x=4, y=0, w=8, h=6)])
        assert applied is False
        assert editor.layout is before

    @pytest.mark.parametrize(
        "action",
        [
            lambda e: e.add_widget("QueueStats"),
            lambda e: e.remove_widget("queue-stats"),
            lambda e: e.reset(),
            lambda e: e.toggle_palette(),
        ],
    )
    def test_mutations_require_edit_mode(self, editor, action):
        with pytest.raises(EditModeError):
            action(editor)


class TestEdits:
    def test_layout_change_is_applied_and_reflowed(self, editor):
        editor.begin_edit()
        # shrinking call-controls lets performance float up one row
        editor.apply_layout_change([LayoutChange(id="call-controls", x=0, y=0, w=6, h=5)])

        controls = editor.layout.get("call-controls")
        assert (controls.w, controls.h) == (6, 5)
        assert editor.layout.get("performance").y == 5

    def test_add_widget_closes_palette(self, editor):
        editor.begin_edit()
        editor.toggle_palette()
        assert editor.palette.is_open

        widget = editor.add_widget("QueueStats")

        assert not editor.palette.is_open
        assert editor.layout.get(widget.id) == widget
        assert (widget.x, widget.y) == (0, 10)

    def test_palette_choice_adds_widget(self, editor):
        editor.begin_edit()
        editor.palette.open()
        editor.palette.choose("AgentMonitor")
        assert [w.widget_type for w in editor.layout.widgets].count("AgentMonitor") == 1
        assert not editor.palette.is_open

    def test_remove_widget(self, editor):
        editor.begin_edit()
        assert editor.remove_widget("queue-stats") is True
        assert "queue-stats" not in editor.layout.ids()

    def test_remove_missing_widget_returns_false(self, editor):
        editor.begin_edit()
        assert editor.remove_widget("missing") is False

    def test_reset_restores_default_and_clears_record(self, editor, layout_store):
        editor.begin_edit()
        editor.remove_widget("queue-stats")
        editor.save()
        assert layout_store.has_saved(Role.AGENT)

        editor.begin_edit()
        notice = editor.reset()

        assert notice.title == "Layout Reset"
        assert editor.layout == get_default_layout(Role.AGENT)
        assert not layout_store.has_saved(Role.AGENT)
        assert editor.is_editing


class TestRoles:
    def test_first_use_of_role_shows_default(self, layout_store):
        editor = DashboardEditor(layout_store, Role.SUPERVISOR)
        assert editor.layout == get_default_layout(Role.SUPERVISOR)

    def test_switch_role_loads_that_roles_layout(self, editor, layout_store):
        editor.begin_edit()
        editor.remove_widget("queue-stats")
        editor.save()

        layout = editor.switch_role(Role.ADMIN)

        assert layout == get_default_layout(Role.ADMIN)
        assert editor.role is Role.ADMIN

    def test_switch_role_discards_unsaved_edits(self, editor, layout_store):
        editor.begin_edit()
        editor.remove_widget("queue-stats")

        editor.switch_role(Role.ADMIN)
        editor.switch_role(Role.AGENT)

        assert editor.mode is EditMode.VIEWING
        assert "queue-stats" in editor.layout.ids()


class TestWriteFailure:
    def test_save_failure_keeps_layout_and_warns(self, failing_store):
        editor = DashboardEditor(LayoutStore(failing_store), Role.AGENT)
        editor.begin_edit()
        editor.remove_widget("queue-stats")

        notice = editor.save()

        assert notice.level is NoticeLevel.WARNING
        assert editor.mode is EditMode.VIEWING
        assert "queue-stats" not in editor.layout.ids()

    def test_reset_failure_still_shows_default(self, failing_store):
        editor = DashboardEditor(LayoutStore(failing_store), Role.AGENT)
        editor.begin_edit()
        editor.remove_widget("queue-stats")

        notice = editor.reset()

        assert notice.level is NoticeLevel.WARNING
        assert editor.layout == get_default_layout(Role.AGENT)


class TestSlots:
    def test_reading_order(self, editor):
        assert [w.id for w, _ in editor.slots()] == [
            "call-controls",
            "customer-profile",
            "performance",
            "queue-stats",
        ]

    def test_unknown_widget_type_renders_as_empty_slot(self, layout_store, memory_store):
        memory_store.save(
            "dashboard-layout-agent",
            '[{"id": "old", "x": 0, "y": 0, "w": 4, "h": 3, "widgetType": "RetiredWidget"}]',
        )
        editor = DashboardEditor(layout_store, Role.AGENT)

        [(widget, definition)] = editor.slots()

        assert widget.id == "old"
        assert definition is NO_RENDERER


class TestPalette:
    def test_groups_in_catalog_order(self):
        groups = group_by_category()
        assert [g.category for g in groups] == [
            "Analytics",
            "CRM",
            "Calls",
            "Supervisor",
            "Campaigns",
        ]
        assert [d.id for d in groups[0].widgets] == ["QueueStats", "AgentPerformance"]

    def test_choose_unknown_raises(self):
        chosen: list[str] = []
        palette = WidgetPalette(on_add=chosen.append)
        with pytest.raises(ValueError):
            palette.choose("RetiredWidget")
        assert chosen == []

    def test_toggle(self):
        palette = WidgetPalette(on_add=lambda _: None)
        assert palette.toggle() is True
        assert palette.toggle() is False
