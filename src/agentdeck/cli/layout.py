"""
Dashboard layout commands.

Commands:
- show: Print the role's layout in reading order
- palette: List the widgets that can be added
- add: Add a widget below existing content
- remove: Remove a widget by id
- move: Move or resize a widget
- reset: Restore the role's default layout
"""

from __future__ import annotations

import typer
from rich.table import Table

from agentdeck.core.ir import GRID_COLUMNS, Layout, LayoutChange, Role
from agentdeck.ui.layout_engine import DashboardEditor, group_by_category

from .common import console, fail, get_session, print_notice

layout_app = typer.Typer(
    help="Inspect and edit role dashboards.",
    no_args_is_help=True,
)


def _role_option():
    return typer.Option(
        None,
        "--role",
        "-r",
        help="Role whose dashboard to use (defaults to dashboard.default_role).",
        case_sensitive=False,
    )


def render_grid(layout: Layout) -> list[str]:
    """Draw the layout as one text line per grid row.

    Each widget fills its cells with a letter (A, B, ... in reading order);
    free cells are dots.

    >>> from agentdeck.core.ir import WidgetInstance
    >>> w = WidgetInstance(id="a", x=0, y=0, w=2, h=1, widget_type="QueueStats")
    >>> render_grid(Layout(role="agent", widgets=[w]))
    ['AA..........']
    """
    rows = [["."] * GRID_COLUMNS for _ in range(layout.bottom)]
    ordered = sorted(layout.widgets, key=lambda w: (w.y, w.x))
    for index, widget in enumerate(ordered):
        mark = chr(ord("A") + index % 26)
        for row in range(widget.y, widget.bottom):
            for col in range(widget.x, widget.right):
                rows[row][col] = mark
    return ["".join(row) for row in rows]


def _open_editor(ctx: typer.Context, role: Role | None) -> DashboardEditor:
    editor = get_session(ctx).editor(role)
    editor.begin_edit()
    return editor


@layout_app.command("show")
def show_command(
    ctx: typer.Context,
    role: Role | None = _role_option(),
    grid: bool = typer.Option(False, "--grid", help="Also draw the grid occupancy."),
) -> None:
    """Print the role's layout."""
    editor = get_session(ctx).editor(role)

    table = Table(title=f"{editor.role.value} dashboard")
    table.add_column("Id", style="cyan")
    table.add_column("Widget")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("w", justify="right")
    table.add_column("h", justify="right")

    for widget, definition in editor.slots():
        if definition.has_renderer:
            label = definition.name
        else:
            label = f"{widget.widget_type} [dim](empty slot)[/dim]"
        table.add_row(
            widget.id,
            label,
            str(widget.x),
            str(widget.y),
            str(widget.w),
            str(widget.h),
        )
    console.print(table)

    if grid:
        for line in render_grid(editor.layout):
            console.print(line, highlight=False)


@layout_app.command("palette")
def palette_command() -> None:
    """List the widgets that can be added, grouped by category."""
    for group in group_by_category():
        console.print(f"[bold]{group.category}[/bold]")
        for definition in group.widgets:
            console.print(f"  [cyan]{definition.id}[/cyan]  {definition.description}")


@layout_app.command("add")
def add_command(
    ctx: typer.Context,
    widget_type: str = typer.Argument(..., help="Widget type id (see 'layout palette')."),
    role: Role | None = _role_option(),
) -> None:
    """Add a widget below existing content and save."""
    editor = _open_editor(ctx, role)
    if not editor.palette.offers(widget_type):
        fail(f"Unknown widget type: {widget_type}")

    widget = editor.add_widget(widget_type)
    console.print(
        f"Added [cyan]{widget.id}[/cyan] at x={widget.x} y={widget.y} ({widget.w}x{widget.h})"
    )
    print_notice(editor.save())


@layout_app.command("remove")
def remove_command(
    ctx: typer.Context,
    widget_id: str = typer.Argument(..., help="Widget instance id."),
    role: Role | None = _role_option(),
) -> None:
    """Remove a widget and save."""
    editor = _open_editor(ctx, role)
    if not editor.remove_widget(widget_id):
        console.print(f"[yellow]No widget with id {widget_id}; layout unchanged[/yellow]")
        return
    print_notice(editor.save())


@layout_app.command("move")
def move_command(
    ctx: typer.Context,
    widget_id: str = typer.Argument(..., help="Widget instance id."),
    x: int | None = typer.Option(None, "--x", help="New left column."),
    y: int | None = typer.Option(None, "--y", help="New top row."),
    w: int | None = typer.Option(None, "--w", help="New width in columns."),
    h: int | None = typer.Option(None, "--h", help="New height in rows."),
    role: Role | None = _role_option(),
) -> None:
    """Move or resize a widget, reflow the grid, and save.

    Values outside the grid or below the widget's minimum size are clamped.
    """
    editor = _open_editor(ctx, role)
    current = editor.layout.get(widget_id)
    if current is None:
        fail(f"No widget with id {widget_id}")

    change = LayoutChange(
        id=widget_id,
        x=current.x if x is None else x,
        y=current.y if y is None else y,
        w=current.w if w is None else w,
        h=current.h if h is None else h,
    )
    editor.apply_layout_change([change])

    placed = editor.layout.widget(widget_id)
    console.print(
        f"[cyan]{placed.id}[/cyan] now at x={placed.x} y={placed.y} ({placed.w}x{placed.h})"
    )
    print_notice(editor.save())


@layout_app.command("reset")
def reset_command(
    ctx: typer.Context,
    role: Role | None = _role_option(),
) -> None:
    """Restore the role's default layout and forget the saved one."""
    editor = _open_editor(ctx, role)
    print_notice(editor.reset())
