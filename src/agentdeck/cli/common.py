"""Shared CLI helpers: session wiring, logging setup, and output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from agentdeck.core.config import AgentDeckConfig, find_config, load_config
from agentdeck.core.errors import ConfigError
from agentdeck.core.ir import Role
from agentdeck.core.notices import Notice, NoticeLevel
from agentdeck.core.store import JsonFileStore
from agentdeck.core.theme_engine import ThemeEngine
from agentdeck.ui.layout_engine import DashboardEditor, LayoutStore
from agentdeck.ui.themes import StyleContext

console = Console()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_NOTICE_STYLES = {
    NoticeLevel.INFO: "green",
    NoticeLevel.WARNING: "yellow",
    NoticeLevel.ERROR: "red",
}


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@dataclass
class Session:
    """Objects shared by the commands of one CLI invocation."""

    config: AgentDeckConfig

    @cached_property
    def style(self) -> StyleContext:
        return StyleContext(row_height=self.config.dashboard.row_height)

    @cached_property
    def store(self) -> JsonFileStore:
        return JsonFileStore(self.config.store_path)

    @cached_property
    def layouts(self) -> LayoutStore:
        return LayoutStore(self.store)

    @cached_property
    def theme(self) -> ThemeEngine:
        return ThemeEngine(
            self.store,
            self.style,
            default_mode=self.config.theme.default_mode,
            default_variant=self.config.theme.default_variant,
        )

    def editor(self, role: Role | None = None) -> DashboardEditor:
        return DashboardEditor(self.layouts, role or self.config.dashboard.default_role)


def open_session(config_path: Path | None) -> Session:
    """Load configuration and build a session; exits with code 1 on bad config."""
    path = config_path or find_config()
    try:
        config = load_config(path)
    except ConfigError as e:
        fail(f"Configuration error: {e}")
    return Session(config=config)


def get_session(ctx: typer.Context) -> Session:
    """Session created by the main callback (or a default one)."""
    root = ctx.find_root()
    if not isinstance(root.obj, Session):
        root.obj = open_session(None)
    return root.obj


def fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


def print_notice(notice: Notice) -> None:
    style = _NOTICE_STYLES[notice.level]
    console.print(f"[{style}]{notice.title}[/{style}]: {escape(notice.description)}")


def print_warning(message: str | None) -> None:
    if message:
        console.print(f"[yellow]Warning: {escape(message)}[/yellow]")
