"""
Dashboard layout types for agentdeck IR.

This module contains the grid placement model: widget instances,
per-role layouts, layout change events reported by the interaction
surface, and the append placement request used for new widgets.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Fixed column count of the placement grid
GRID_COLUMNS = 12


class Role(StrEnum):
    """User roles; each role owns an independent layout."""

    AGENT = "agent"
    SUPERVISOR = "supervisor"
    ADMIN = "admin"


class WidgetInstance(BaseModel):
    """
    One placed occurrence of a widget type within a layout.

    Geometry is expressed in grid units. Serialized with the camel-case
    keys used by the persisted layout records (``minW``, ``minH``,
    ``widgetType``).

    Attributes:
        id: Instance identifier, unique within its layout
        x: Left column (0-based)
        y: Top row (0-based)
        w: Width in columns
        h: Height in rows
        min_w: Smallest width the instance may be resized to
        min_h: Smallest height the instance may be resized to
        widget_type: Widget registry identifier (e.g. "QueueStats")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    w: int = Field(..., ge=1, le=GRID_COLUMNS)
    h: int = Field(..., ge=1)
    min_w: int = Field(default=1, ge=1, le=GRID_COLUMNS, alias="minW")
    min_h: int = Field(default=1, ge=1, alias="minH")
    widget_type: str = Field(..., alias="widgetType")

    @model_validator(mode="after")
    def validate_geometry(self) -> WidgetInstance:
        """Enforce minimum size and grid bounds."""
        if self.w < self.min_w:
            raise ValueError(f"w={self.w} is below minW={self.min_w} for {self.id}")
        if self.h < self.min_h:
            raise ValueError(f"h={self.h} is below minH={self.min_h} for {self.id}")
        if self.x + self.w > GRID_COLUMNS:
            raise ValueError(f"{self.id} overflows the grid: x={self.x} w={self.w}")
        return self

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def overlaps(self, other: WidgetInstance) -> bool:
        """True when the two occupied rectangles share at least one cell."""
        if self.id == other.id:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def moved(self, *, x: int | None = None, y: int | None = None) -> WidgetInstance:
        """Return a copy with a new position."""
        return self.model_copy(
            update={
                "x": self.x if x is None else x,
                "y": self.y if y is None else y,
            }
        )


class Layout(BaseModel):
    """
    One role's arrangement of widget instances.

    Layouts are immutable; engine operations return a new Layout.

    Attributes:
        role: Role this layout belongs to
        widgets: Widget instances, ids unique
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    widgets: list[WidgetInstance] = Field(default_factory=list)

    @field_validator("widgets")
    @classmethod
    def validate_unique_ids(cls, v: list[WidgetInstance]) -> list[WidgetInstance]:
        """Validate that widget ids are unique."""
        seen: set[str] = set()
        for widget in v:
            if widget.id in seen:
                raise ValueError(f"duplicate widget id: {widget.id}")
            seen.add(widget.id)
        return v

    @property
    def bottom(self) -> int:
        """First row below all existing content."""
        return max((w.bottom for w in self.widgets), default=0)

    def ids(self) -> list[str]:
        return [w.id for w in self.widgets]

    def get(self, widget_id: str) -> WidgetInstance | None:
        for widget in self.widgets:
            if widget.id == widget_id:
                return widget
        return None

    def widget(self, widget_id: str) -> WidgetInstance:
        """Return the instance with ``widget_id``.

        Raises:
            KeyError: If the layout has no such instance.
        """
        widget = self.get(widget_id)
        if widget is None:
            raise KeyError(widget_id)
        return widget

    def with_widgets(self, widgets: Iterable[WidgetInstance]) -> Layout:
        """Return a new layout for the same role holding ``widgets``."""
        return Layout(role=self.role, widgets=list(widgets))

    def to_records(self) -> list[dict[str, object]]:
        """Serialize the widget array in its persisted form."""
        return [w.model_dump(by_alias=True) for w in self.widgets]


class LayoutChange(BaseModel):
    """
    Geometry reported by the interaction surface for one widget.

    Values are raw; the engine clamps them before storing.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class AppendPlacement:
    """
    Request to place a widget below all existing content.

    Consumed by the compaction pass so that ``y`` in the model stays a
    bounded integer.
    """

    def resolve_y(self, layout: Layout) -> int:
        return layout.bottom


APPEND = AppendPlacement()
