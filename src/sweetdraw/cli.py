"""Sweetdraw CLI — typer entry point."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Annotated, Optional

from dotenv import load_dotenv
import typer

# Load .env from cwd before any option reads env vars
load_dotenv(Path.cwd() / ".env")
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from sweetdraw.config import Pivot, Range
from sweetdraw.errors import SelectionError
from sweetdraw.modes import get_mode, list_modes
from sweetdraw.selector import Selector
from sweetdraw.tables import LootTable, get_table, load_tables

app = typer.Typer(
    name="sweetdraw",
    help="Draw from weighted loot tables, optionally sweetening the odds toward a pivot.",
    no_args_is_help=True,
)
console = Console()

TablesDir = Annotated[
    Optional[Path],
    typer.Option("--tables-dir", envvar="SWEETDRAW_TABLES_DIR", help="Directory containing .sweetdraw/tables.toml"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Log selector internals")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_table(name: str, tables_dir: Path | None) -> LootTable:
    try:
        return get_table(name, tables_dir)
    except KeyError as exc:
        console.print(f"[red]{escape(exc.args[0])}[/]")
        raise typer.Exit(1)


# ── draw ──────────────────────────────────────────────────

@app.command()
def draw(
    table_name: Annotated[str, typer.Argument(metavar="TABLE", help="Table to draw from")],
    count: Annotated[int, typer.Option("-n", "--count", help="Number of draws")] = 1,
    mode: Annotated[str, typer.Option("--mode", help="Selection mode (see list-modes)")] = "multiple",
    bonus: Annotated[float, typer.Option(help="Equalization bonus (0 = pure weights)")] = 0.0,
    seed: Annotated[Optional[int], typer.Option(help="Seed for reproducible draws")] = None,
    pivot: Annotated[Pivot, typer.Option(help="Pivot the bonus pulls toward")] = Pivot.MEAN,
    range_: Annotated[Range, typer.Option("--range", help="Which entries the bonus adjusts")] = Range.ALL,
    tables_dir: TablesDir = None,
) -> None:
    """Draw entries from a table."""
    table = _load_table(table_name, tables_dir)
    try:
        draw_mode = get_mode(mode)
    except KeyError as exc:
        console.print(f"[red]{escape(exc.args[0])}[/]")
        raise typer.Exit(1)

    selector = Selector(pivot, range_, seed=seed)
    try:
        results = draw_mode.draw(selector, table.entries, count, bonus)
    except SelectionError as exc:
        console.print(f"[red]Draw failed:[/] {escape(str(exc))}")
        raise typer.Exit(1)

    out = Table(title=f"{len(results)} draw(s) from {table.name} ({draw_mode.name})")
    out.add_column("#", justify="right", style="dim")
    out.add_column("Entry", style="cyan")
    out.add_column("Weight", justify="right")
    for i, entry in enumerate(results, 1):
        out.add_row(str(i), entry.name, f"{entry.weight:g}")
    console.print(out)

    if len(results) > 1:
        tally = Counter(e.name for e in results)
        tally_str = ", ".join(f"{name} x{n}" for name, n in tally.most_common())
        console.print(f"Tally: {tally_str}")


# ── odds ──────────────────────────────────────────────────

@app.command()
def odds(
    table_name: Annotated[str, typer.Argument(metavar="TABLE", help="Table to inspect")],
    bonus: Annotated[float, typer.Option(help="Equalization bonus (0 = pure weights)")] = 0.0,
    pivot: Annotated[Pivot, typer.Option(help="Pivot the bonus pulls toward")] = Pivot.MEAN,
    range_: Annotated[Range, typer.Option("--range", help="Which entries the bonus adjusts")] = Range.ALL,
    tables_dir: TablesDir = None,
) -> None:
    """Show the selection probability of every entry in a table."""
    table = _load_table(table_name, tables_dir)
    selector = Selector(pivot, range_)
    try:
        adjusted = selector.adjusted_weights(table.entries, bonus)
        probs = selector.probabilities(table.entries, bonus)
    except SelectionError as exc:
        console.print(f"[red]Cannot compute odds:[/] {escape(str(exc))}")
        raise typer.Exit(1)

    console.print(f"[bold]{table.name}[/] bonus={bonus:g} pivot={pivot.value} range={range_.value}")
    out = Table(title="Odds")
    out.add_column("Entry", style="cyan")
    out.add_column("Weight", justify="right")
    out.add_column("Adjusted", justify="right")
    out.add_column("Probability", justify="right", style="bold")
    for entry, adj, p in zip(table.entries, adjusted, probs):
        out.add_row(entry.name, f"{entry.weight:g}", f"{adj:.4f}", f"{p:.2%}")
    console.print(out)


# ── list-tables ───────────────────────────────────────────

@app.command(name="list-tables")
def list_tables_cmd(tables_dir: TablesDir = None) -> None:
    """List available tables (builtins + user-defined)."""
    tables = load_tables(tables_dir)

    for name, tbl in sorted(tables.items()):
        out = Table(title=f"Table: {name}")
        out.add_column("Entry", style="cyan")
        out.add_column("Weight", justify="right")
        total = tbl.total_weight
        for entry in tbl.entries:
            pct = max(0.0, entry.weight) / total * 100 if total else 0.0
            out.add_row(entry.name, f"{entry.weight:g} ({pct:.0f}%)")
        console.print(out)
        console.print()


# ── list-modes ────────────────────────────────────────────

@app.command(name="list-modes")
def list_modes_cmd() -> None:
    """List available selection modes."""
    out = Table(title="Modes")
    out.add_column("Name", style="cyan")
    out.add_column("Description")
    for name, cls in sorted(list_modes().items()):
        out.add_row(name, cls.description)
    console.print(out)
