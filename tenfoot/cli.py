from __future__ import annotations

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .fuzzy import search as search_fn
from .grid import GridOptions, NavigationGrid
from .keys import Direction, KeyEvent, parse_direction
from .layout import Columns, ConsoleColumns
from .logging import setup_logging
from .settings import load_settings

app = typer.Typer(
    add_completion=False,
    help="tenfoot: grid navigation and fuzzy search for 10-foot UIs",
    rich_markup_mode="rich",
)
console = Console()


def _fail(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")
    raise typer.Exit(code=2)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback()
def _root():
    """
    [bold]tenfoot[/bold]: focus navigation and fuzzy search, from the command line.

    [bold]Examples:[/bold]
      python -m tenfoot rank mine Minecraft Terraria "Counter-Strike 2"
      python -m tenfoot walk right right down --items 12 --columns 3
      python -m tenfoot config
    """
    setup_logging(load_settings())


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("rank", help="[bold cyan]R[/bold cyan]ank labels against a query")
def rank(
    query: str = typer.Argument(..., help="Search query"),
    labels: List[str] = typer.Argument(..., help="Candidate labels"),
    min_score: Optional[float] = typer.Option(None, "--min-score", help="Drop matches scoring below this"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Score every label against QUERY and list the matches, best first."""
    s = load_settings()
    threshold = s.TENFOOT_SEARCH_MIN_SCORE if min_score is None else min_score

    results = search_fn(labels, query, lambda label: label, threshold)

    if json_out:
        typer.echo(json.dumps([{"label": m.item, "score": round(m.score, 4)} for m in results], ensure_ascii=False, indent=2))
        return

    if not results:
        console.print(f"[yellow]No matches for:[/yellow] {query!r}")
        return

    t = Table(title=f"[bold]Matches for: [cyan]{query or '(all)'}[/cyan][/bold]")
    t.add_column("#", style="dim", justify="right")
    t.add_column("Label", style="cyan")
    t.add_column("Score", justify="right")

    for position, m in enumerate(results, 1):
        t.add_row(str(position), m.item, f"{m.score:.3f}")

    console.print(t)


@app.command("walk", help="[bold cyan]W[/bold cyan]alk a grid with a key sequence")
def walk(
    keys: List[str] = typer.Argument(..., help="Keys to press, e.g. right down a ArrowUp"),
    items: int = typer.Option(..., "--items", "-n", help="Number of items in the grid"),
    columns: Optional[int] = typer.Option(None, "--columns", "-c", help="Fixed column count (default: fit to console width)"),
    start: int = typer.Option(0, "--start", help="Index focused before the first key"),
    wrap_horizontal: Optional[bool] = typer.Option(None, "--wrap-horizontal/--no-wrap-horizontal", help="Wrap left/right across rows"),
    wrap_vertical: Optional[bool] = typer.Option(None, "--wrap-vertical/--no-wrap-vertical", help="Wrap up/down across the grid"),
    section_break: Optional[int] = typer.Option(None, "--section-break", help="Index where the second section starts"),
    wasd: Optional[bool] = typer.Option(None, "--wasd/--no-wasd", help="Accept WASD as arrow aliases"),
    text_entry: bool = typer.Option(False, "--text-entry", help="Pretend a text field has focus"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Replay KEYS on a grid and show where focus goes after each one."""
    s = load_settings()

    if items < 0:
        _fail(f"--items must be >= 0 (got {items})")
    for key in keys:
        if parse_direction(key) is None:
            _fail(f"Unknown direction key: {key!r}")

    overrides = {"section_break_index": section_break}
    if wrap_horizontal is not None:
        overrides["wrap_horizontal"] = wrap_horizontal
    if wrap_vertical is not None:
        overrides["wrap_vertical"] = wrap_vertical
    if wasd is not None:
        overrides["enable_wasd"] = wasd

    exits: list[str] = []
    cols: Columns = columns if columns is not None else ConsoleColumns(console, s.TENFOOT_CONSOLE_CARD_WIDTH)
    grid = NavigationGrid(
        items,
        cols,
        GridOptions.from_settings(s, **overrides),
        **{f"on_navigate_{d.value}": (lambda d=d: exits.append(d.value)) for d in Direction},
    )
    grid.focus(start)

    steps = []
    for key in keys:
        exits.clear()
        result = grid.handle_key(KeyEvent(key, text_entry=text_entry))
        steps.append({
            "key": key,
            "handled": result.handled,
            "index": grid.focused_index,
            "left_grid": exits[0] if exits else None,
        })

    if json_out:
        typer.echo(json.dumps({"columns": grid.columns, "items": items, "steps": steps}, indent=2))
        return

    t = Table(title=f"[bold]{items} items × {grid.columns} columns[/bold]")
    t.add_column("Step", style="dim", justify="right")
    t.add_column("Key", style="cyan")
    t.add_column("Handled", justify="center")
    t.add_column("Index", justify="right")
    t.add_column("Row, Col", justify="right")
    t.add_column("Left grid", style="magenta")

    for n, step in enumerate(steps, 1):
        row, col = grid.position(step["index"])
        t.add_row(
            str(n),
            step["key"],
            "✓" if step["handled"] else "[dim]–[/dim]",
            str(step["index"]),
            f"{row}, {col}",
            step["left_grid"] or "",
        )

    console.print(t)


@app.command("config", help="Show effective [bold cyan]c[/bold cyan]onfiguration")
def config():
    """Show the settings resolved from the environment and `.env`."""
    s = load_settings()

    console.print(Panel.fit(
        "\n".join([
            f"[bold]Columns:[/bold]          {s.TENFOOT_DEFAULT_COLUMNS} (min width {s.TENFOOT_MIN_COLUMN_WIDTH}, console card {s.TENFOOT_CONSOLE_CARD_WIDTH})",
            f"[bold]Wrap:[/bold]             horizontal={s.TENFOOT_WRAP_HORIZONTAL} vertical={s.TENFOOT_WRAP_VERTICAL}",
            f"[bold]WASD aliases:[/bold]     {s.TENFOOT_ENABLE_WASD}",
            f"[bold]Search:[/bold]           min score {s.TENFOOT_SEARCH_MIN_SCORE}, scroll padding {s.TENFOOT_SEARCH_SCROLL_PADDING}",
            "",
            f"[dim]Logging:[/dim]          {s.TENFOOT_LOG_LEVEL}"
            + (f" → {s.TENFOOT_LOG_DIR}" if s.TENFOOT_LOG_TO_FILE else " (console only)"),
        ]),
        title="[bold]Configuration[/bold]",
    ))


def main():
    app()
