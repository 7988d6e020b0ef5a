"""
Theme commands.

Commands:
- show: Print the active theme
- mode: Set light or dark mode
- toggle: Flip between light and dark
- variant: Switch to a preset (or custom) variant
- custom: Apply a custom color scheme and radius
- reset: Restore the default custom colors and radius
- export: Write the active theme to a JSON or YAML file
- import: Adopt a theme from a JSON or YAML file
- css: Print the applied style variables as CSS
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from agentdeck.core import notices
from agentdeck.core.errors import ThemeImportError
from agentdeck.core.hsl import hex_to_hsl_css
from agentdeck.core.ir import (
    DEFAULT_THEME_NAME,
    MAX_RADIUS,
    MIN_RADIUS,
    VARIANT_DESCRIPTIONS,
    ColorScheme,
    ThemeMode,
    ThemeVariant,
)
from agentdeck.core.theme_engine import ThemeEngine
from agentdeck.core.theme_io import JSON_FORMAT, THEME_FORMATS, write_theme_file

from .common import console, fail, get_session, print_notice, print_warning

theme_app = typer.Typer(
    help="Inspect and change the console theme.",
    no_args_is_help=True,
)


def _engine(ctx: typer.Context) -> ThemeEngine:
    return get_session(ctx).theme


def _report(engine: ThemeEngine) -> None:
    pref = engine.preference
    console.print(f"Theme: [cyan]{pref.variant.value}[/cyan] ({pref.mode.value})")
    print_warning(engine.last_warning)


@theme_app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print the active mode, variant, radius and colors."""
    pref = _engine(ctx).preference
    label, description = VARIANT_DESCRIPTIONS[pref.variant]

    console.print(f"[bold]Mode:[/bold] {pref.mode.value}")
    console.print(f"[bold]Variant:[/bold] {label} - {description}")
    if pref.is_custom:
        console.print(f"[bold]Name:[/bold] {pref.name or DEFAULT_THEME_NAME}")
    console.print(f"[bold]Radius:[/bold] {pref.radius:g}px")

    table = Table(title="Colors")
    table.add_column("Slot", style="cyan")
    table.add_column("Hex")
    table.add_column("HSL")
    for slot, value in pref.effective_scheme.items():
        table.add_row(slot, value, hex_to_hsl_css(value))
    console.print(table)


@theme_app.command("mode")
def mode_command(
    ctx: typer.Context,
    mode: ThemeMode = typer.Argument(..., help="light or dark", case_sensitive=False),
) -> None:
    """Set light or dark mode."""
    engine = _engine(ctx)
    engine.set_mode(mode)
    _report(engine)


@theme_app.command("toggle")
def toggle_command(ctx: typer.Context) -> None:
    """Flip between light and dark mode."""
    engine = _engine(ctx)
    engine.toggle_mode()
    _report(engine)


@theme_app.command("variant")
def variant_command(
    ctx: typer.Context,
    variant: ThemeVariant = typer.Argument(..., help="Preset name or 'custom'."),
) -> None:
    """Switch the theme variant."""
    engine = _engine(ctx)
    engine.set_variant(variant)
    _report(engine)


def _color_option(slot: str):
    return typer.Option(None, f"--{slot}", help=f"Hex color for the {slot} slot.")


@theme_app.command("custom")
def custom_command(
    ctx: typer.Context,
    primary: str | None = _color_option("primary"),
    secondary: str | None = _color_option("secondary"),
    accent: str | None = _color_option("accent"),
    success: str | None = _color_option("success"),
    warning: str | None = _color_option("warning"),
    destructive: str | None = _color_option("destructive"),
    background: str | None = _color_option("background"),
    foreground: str | None = _color_option("foreground"),
    radius: float | None = typer.Option(
        None, "--radius", min=MIN_RADIUS, max=MAX_RADIUS, help="Corner radius in px (0-24)."
    ),
    name: str | None = typer.Option(None, "--name", help="Theme name."),
) -> None:
    """Apply a custom scheme. Slots not given keep their current color."""
    engine = _engine(ctx)
    given = {
        "primary": primary,
        "secondary": secondary,
        "accent": accent,
        "success": success,
        "warning": warning,
        "destructive": destructive,
        "background": background,
        "foreground": foreground,
    }
    current = engine.preference.effective_scheme.model_dump()
    scheme = ColorScheme(**{**current, **{k: v for k, v in given.items() if v is not None}})

    engine.apply_custom_scheme(scheme, radius, name)
    _report(engine)


@theme_app.command("reset")
def reset_command(ctx: typer.Context) -> None:
    """Restore the default custom colors and radius."""
    engine = _engine(ctx)
    print_notice(engine.reset_custom_scheme())
    print_warning(engine.last_warning)


@theme_app.command("export")
def export_command(
    ctx: typer.Context,
    output_dir: Path = typer.Option(
        Path("."), "--output-dir", "-o", help="Directory to write the theme file to."
    ),
    fmt: str = typer.Option(JSON_FORMAT, "--format", "-f", help="json or yaml"),
    name: str | None = typer.Option(None, "--name", help="Override the exported name."),
) -> None:
    """Write the active theme to a file named after the theme."""
    if fmt not in THEME_FORMATS:
        fail(f"Unknown format {fmt!r}; expected one of: {', '.join(THEME_FORMATS)}")

    exported = _engine(ctx).export_theme(name=name, fmt=fmt)
    path = write_theme_file(exported, output_dir)
    print_notice(notices.info("Theme Exported", f"Theme saved to {path}."))


@theme_app.command("import")
def import_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Theme file (.json, .yaml or .yml)."),
) -> None:
    """Adopt a theme file as the active custom theme."""
    engine = _engine(ctx)
    try:
        document = engine.import_theme_file(path)
    except ThemeImportError as e:
        if e.reason == ThemeImportError.PARSE:
            description = "Invalid theme file format."
        else:
            description = "Theme file is not a valid theme."
        print_notice(notices.error("Import Failed", description))
        fail(str(e))

    print_notice(notices.info("Theme Imported", f"{document.name} has been applied."))
    print_warning(engine.last_warning)


@theme_app.command("css")
def css_command(ctx: typer.Context) -> None:
    """Print the applied style variables as a CSS block."""
    session = get_session(ctx)
    engine = session.theme
    console.print(session.style.to_css(engine.preference.name), highlight=False, markup=False)
