"""
agentdeck UI module.

This module provides:
- Dashboard layout engine (grid placement, edit mode, per-role persistence)
- Theme presentation context
"""

from agentdeck.ui.layout_engine import DashboardEditor, LayoutStore, compact
from agentdeck.ui.themes import StyleContext

__all__ = [
    "DashboardEditor",
    "LayoutStore",
    "StyleContext",
    "compact",
]
