"""Core agentdeck functionality: IR, stores, configuration, theme engine, theme import/export."""

from . import ir
from .config import AgentDeckConfig, find_config, load_config
from .errors import (
    AgentDeckError,
    ConfigError,
    EditModeError,
    ErrorContext,
    StoreWriteError,
    ThemeImportError,
)
from .hsl import hex_to_hsl, hex_to_hsl_css
from .notices import Notice, NoticeLevel
from .store import JsonFileStore, MemoryStore, Store
from .theme_engine import ThemeApplicationPort, ThemeEngine, load_preference
from .theme_io import ExportedTheme, export_theme, parse_theme_document, read_theme_file

__all__ = [
    "ir",
    # Errors
    "AgentDeckError",
    "ConfigError",
    "EditModeError",
    "ErrorContext",
    "StoreWriteError",
    "ThemeImportError",
    # Config
    "AgentDeckConfig",
    "find_config",
    "load_config",
    # Persistence
    "JsonFileStore",
    "MemoryStore",
    "Store",
    # Theme
    "ExportedTheme",
    "ThemeApplicationPort",
    "ThemeEngine",
    "export_theme",
    "hex_to_hsl",
    "hex_to_hsl_css",
    "load_preference",
    "parse_theme_document",
    "read_theme_file",
    # Notices
    "Notice",
    "NoticeLevel",
]
