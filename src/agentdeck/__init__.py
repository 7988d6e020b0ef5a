"""
agentdeck - role-based dashboard layouts and themes for contact-center consoles.

Arrange widgets on a 12-column grid per role, persist the arrangement,
and apply a remembered light/dark theme with preset or custom palettes.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    AgentDeckError,
    ConfigError,
    EditModeError,
    StoreWriteError,
    ThemeImportError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "AgentDeckError",
    "ConfigError",
    "EditModeError",
    "StoreWriteError",
    "ThemeImportError",
]
