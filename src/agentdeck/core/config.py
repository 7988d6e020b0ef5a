"""
Project configuration loaded from agentdeck.toml.

All sections and keys are optional; a missing file yields the defaults.
The ``AGENTDECK_STORE`` environment variable overrides the store path.
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError, ErrorContext
from .ir import DEFAULT_VARIANT, Role, ThemeMode, ThemeVariant
from .store import STORE_FILE

CONFIG_FILE = "agentdeck.toml"
STORE_ENV_VAR = "AGENTDECK_STORE"


@dataclass
class StoreConfig:
    """Where persisted layouts and theme preferences live."""

    path: Path = STORE_FILE


@dataclass
class DashboardConfig:
    """Dashboard grid settings."""

    default_role: Role = Role.AGENT
    row_height: int = 80  # px per grid row, emitted as --row-height


@dataclass
class ThemeConfig:
    """Theme used when nothing has been persisted yet."""

    default_mode: ThemeMode = ThemeMode.LIGHT
    default_variant: ThemeVariant = DEFAULT_VARIANT


@dataclass
class AgentDeckConfig:
    """Top-level configuration."""

    root: Path = field(default_factory=Path.cwd)
    store: StoreConfig = field(default_factory=StoreConfig)
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)

    @property
    def store_path(self) -> Path:
        """Absolute store path (relative paths resolve against the project root)."""
        path = self.store.path
        return path if path.is_absolute() else self.root / path


def _enum_value(enum_cls, raw, key: str, source: str):
    try:
        return enum_cls(raw)
    except ValueError as e:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigError(
            f"Invalid value {raw!r}; expected one of: {choices}",
            context=ErrorContext(source=source, detail=key),
        ) from e


def load_config(path: Path) -> AgentDeckConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to agentdeck.toml. A missing file returns defaults rooted
            at the file's directory.

    Returns:
        AgentDeckConfig instance.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    root = path.parent.resolve()

    if path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", context=ErrorContext(source=str(path))) from e
    else:
        data = {}

    source = str(path)
    store_data = data.get("store", {})
    dashboard_data = data.get("dashboard", {})
    theme_data = data.get("theme", {})

    store_path = Path(store_data.get("path", STORE_FILE))
    env_store = os.environ.get(STORE_ENV_VAR)
    if env_store:
        store_path = Path(env_store)

    row_height = dashboard_data.get("row_height", 80)
    if not isinstance(row_height, int) or row_height <= 0:
        raise ConfigError(
            f"row_height must be a positive integer, got {row_height!r}",
            context=ErrorContext(source=source, detail="dashboard.row_height"),
        )

    return AgentDeckConfig(
        root=root,
        store=StoreConfig(path=store_path),
        dashboard=DashboardConfig(
            default_role=_enum_value(
                Role, dashboard_data.get("default_role", "agent"), "dashboard.default_role", source
            ),
            row_height=row_height,
        ),
        theme=ThemeConfig(
            default_mode=_enum_value(
                ThemeMode, theme_data.get("default_mode", "light"), "theme.default_mode", source
            ),
            default_variant=_enum_value(
                ThemeVariant,
                theme_data.get("default_variant", DEFAULT_VARIANT.value),
                "theme.default_variant",
                source,
            ),
        ),
    )


def find_config(start: Path | None = None) -> Path:
    """Return agentdeck.toml in ``start`` or the nearest parent that has one.

    Falls back to ``start / agentdeck.toml`` (which may not exist).
    """
    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE
        if candidate.exists():
            return candidate
    return start / CONFIG_FILE
