"""
Error types for agentdeck layout, theme, and persistence operations.
"""

from dataclasses import dataclass
from typing import Optional


class AgentDeckError(Exception):
    """Base exception for all agentdeck errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class StoreWriteError(AgentDeckError):
    """
    Raised when a value cannot be written to the persistent store.

    Examples:
    - Store file not writable
    - Disk full / quota exceeded
    - Store directory cannot be created

    The in-memory model stays authoritative; the change just won't
    survive a restart.
    """

    pass


class ThemeImportError(AgentDeckError):
    """
    Raised when a theme document cannot be imported.

    ``reason`` is ``"parse"`` for malformed text and ``"invalid"`` for a
    document that parsed but is structurally wrong (missing ``colors`` or
    ``borderRadius``, wrong shapes, radius out of range).
    """

    PARSE = "parse"
    INVALID = "invalid"

    def __init__(
        self,
        message: str,
        reason: str = INVALID,
        context: Optional["ErrorContext"] = None,
    ):
        self.reason = reason
        super().__init__(message, context)


class EditModeError(AgentDeckError):
    """
    Raised when a layout mutation is attempted outside edit mode.

    Examples:
    - Adding a widget while viewing
    - Resetting the layout while viewing
    - Saving when no edit is in progress
    """

    pass


class ConfigError(AgentDeckError):
    """
    Raised when agentdeck.toml cannot be read or holds invalid values.
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        source: Where the failing value came from (file path or store key)
        detail: Optional extra detail, e.g. the offending field
    """

    source: str
    detail: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "theme.json (colors.primary)"
        """
        if self.detail:
            return f"{self.source} ({self.detail})"
        return self.source
