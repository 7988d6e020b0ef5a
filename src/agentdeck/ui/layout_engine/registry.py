"""
Widget registry for the layout engine.

Static catalog mapping a widget-type identifier to its display metadata,
renderer reference, and size constraints. Lookup of an unknown type
resolves to :data:`NO_RENDERER` instead of raising, so a layout that
references a removed widget type keeps an empty slot.
"""

from dataclasses import dataclass

# Size given to new instances of every catalog widget
DEFAULT_WIDGET_W = 4
DEFAULT_WIDGET_H = 3
DEFAULT_MIN_W = 3
DEFAULT_MIN_H = 2


@dataclass(frozen=True)
class WidgetDefinition:
    """
    Catalog entry for one widget type.

    Attributes:
        id: Widget type identifier stored on instances
        name: Human-readable name
        description: One-line description shown in the palette
        category: Palette grouping
        renderer: Template reference used by the presentation layer,
            None for the no-renderer case
        default_w: Width of a newly added instance
        default_h: Height of a newly added instance
        min_w: Minimum width of an instance
        min_h: Minimum height of an instance
    """

    id: str
    name: str
    description: str
    category: str
    renderer: str | None
    default_w: int = DEFAULT_WIDGET_W
    default_h: int = DEFAULT_WIDGET_H
    min_w: int = DEFAULT_MIN_W
    min_h: int = DEFAULT_MIN_H

    @property
    def has_renderer(self) -> bool:
        return self.renderer is not None

    @property
    def initial_size(self) -> tuple[int, int]:
        """Size of a new instance: the default, never below the minimum."""
        return max(self.default_w, self.min_w), max(self.default_h, self.min_h)


# =============================================================================
# Catalog
# =============================================================================

QUEUE_STATS = WidgetDefinition(
    id="QueueStats",
    name="Queue Statistics",
    description="Real-time queue monitoring",
    category="Analytics",
    renderer="widgets/queue_stats.html",
)

AGENT_PERFORMANCE = WidgetDefinition(
    id="AgentPerformance",
    name="Agent Performance",
    description="Personal metrics and goals",
    category="Analytics",
    renderer="widgets/agent_performance.html",
)

CUSTOMER_PROFILE = WidgetDefinition(
    id="CustomerProfile",
    name="Customer Profile",
    description="360° customer view",
    category="CRM",
    renderer="widgets/customer_profile.html",
)

CALL_CONTROLS = WidgetDefinition(
    id="CallControls",
    name="Call Controls",
    description="Primary call interface",
    category="Calls",
    renderer="widgets/call_controls.html",
)

AGENT_MONITOR = WidgetDefinition(
    id="AgentMonitor",
    name="Agent Monitor",
    description="Real-time team monitoring",
    category="Supervisor",
    renderer="widgets/agent_monitor.html",
)

CAMPAIGN_STATS = WidgetDefinition(
    id="CampaignStats",
    name="Campaign Statistics",
    description="Campaign performance tracking",
    category="Campaigns",
    renderer="widgets/campaign_stats.html",
)

# Returned for widget types missing from the catalog
NO_RENDERER = WidgetDefinition(
    id="",
    name="Unavailable widget",
    description="This widget type is no longer available",
    category="",
    renderer=None,
)

# Catalog in palette order
WIDGET_CATALOG: tuple[WidgetDefinition, ...] = (
    QUEUE_STATS,
    AGENT_PERFORMANCE,
    CUSTOMER_PROFILE,
    CALL_CONTROLS,
    AGENT_MONITOR,
    CAMPAIGN_STATS,
)

WIDGET_DEFINITIONS: dict[str, WidgetDefinition] = {w.id: w for w in WIDGET_CATALOG}


def resolve_widget(widget_type: str) -> WidgetDefinition:
    """Look up a widget type; unknown ids resolve to NO_RENDERER."""
    return WIDGET_DEFINITIONS.get(widget_type, NO_RENDERER)


def is_known_widget(widget_type: str) -> bool:
    return widget_type in WIDGET_DEFINITIONS


__all__ = [
    "WidgetDefinition",
    "WIDGET_CATALOG",
    "WIDGET_DEFINITIONS",
    "NO_RENDERER",
    "resolve_widget",
    "is_known_widget",
    "QUEUE_STATS",
    "AGENT_PERFORMANCE",
    "CUSTOMER_PROFILE",
    "CALL_CONTROLS",
    "AGENT_MONITOR",
    "CAMPAIGN_STATS",
]
