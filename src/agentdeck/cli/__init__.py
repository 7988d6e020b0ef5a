"""
agentdeck command line.

    agentdeck [--config PATH] [--verbose] layout ...
    agentdeck [--config PATH] [--verbose] theme ...
"""

from __future__ import annotations

import platform
from pathlib import Path

import typer

from agentdeck._version import get_version

from .common import configure_logging, open_session
from .layout import layout_app
from .theme import theme_app

app = typer.Typer(
    help="agentdeck - role-based dashboard layouts and themes for contact-center consoles.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and interpreter information."""
    if value:
        typer.echo(f"agentdeck {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to agentdeck.toml (default: nearest one above the current directory).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr."),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    configure_logging(verbose)
    ctx.obj = open_session(config)


app.add_typer(layout_app, name="layout")
app.add_typer(theme_app, name="theme")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]
