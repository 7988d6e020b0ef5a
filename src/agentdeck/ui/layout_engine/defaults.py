"""
Built-in factory layouts, one per role.

Used on first use of a role and whenever a role's layout is reset.
"""

from agentdeck.core.ir import Layout, Role, WidgetInstance


def _widget(
    id: str, x: int, y: int, w: int, h: int, widget_type: str, min_w: int, min_h: int
) -> WidgetInstance:
    return WidgetInstance(
        id=id, x=x, y=y, w=w, h=h, min_w=min_w, min_h=min_h, widget_type=widget_type
    )


AGENT_LAYOUT = Layout(
    role=Role.AGENT,
    widgets=[
        _widget("call-controls", 0, 0, 8, 6, "CallControls", 6, 5),
        _widget("customer-profile", 8, 0, 4, 6, "CustomerProfile", 3, 4),
        _widget("performance", 0, 6, 6, 4, "AgentPerformance", 4, 3),
        _widget("queue-stats", 6, 6, 6, 4, "QueueStats", 4, 3),
    ],
)

SUPERVISOR_LAYOUT = Layout(
    role=Role.SUPERVISOR,
    widgets=[
        _widget("queue-stats", 0, 0, 4, 3, "QueueStats", 3, 2),
        _widget("campaign-stats", 4, 0, 4, 3, "CampaignStats", 3, 2),
        _widget("performance", 8, 0, 4, 3, "AgentPerformance", 3, 2),
        _widget("agent-monitor", 0, 3, 12, 5, "AgentMonitor", 8, 4),
    ],
)

ADMIN_LAYOUT = Layout(
    role=Role.ADMIN,
    widgets=[
        _widget("queue-stats", 0, 0, 3, 3, "QueueStats", 3, 2),
        _widget("campaign-stats", 3, 0, 3, 3, "CampaignStats", 3, 2),
        _widget("performance", 6, 0, 3, 3, "AgentPerformance", 3, 2),
        _widget("customer-profile", 9, 0, 3, 3, "CustomerProfile", 3, 2),
        _widget("agent-monitor", 0, 3, 12, 5, "AgentMonitor", 8, 4),
    ],
)

DEFAULT_LAYOUTS: dict[Role, Layout] = {
    Role.AGENT: AGENT_LAYOUT,
    Role.SUPERVISOR: SUPERVISOR_LAYOUT,
    Role.ADMIN: ADMIN_LAYOUT,
}


def get_default_layout(role: Role | str) -> Layout:
    """Get the built-in layout for a role."""
    return DEFAULT_LAYOUTS[Role(role)]


__all__ = [
    "DEFAULT_LAYOUTS",
    "AGENT_LAYOUT",
    "SUPERVISOR_LAYOUT",
    "ADMIN_LAYOUT",
    "get_default_layout",
]
