"""Scores command implementation"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.prompt import Confirm

from termsnake.config import load_config
from termsnake.core import LedgerError, ScoreLedger
from termsnake.ui import render_scores_table
from termsnake.utils.console import print_error, print_info, print_success

app = typer.Typer(help="High-score ledger")
console = Console()


def _load_ledger(ctx: typer.Context) -> ScoreLedger:
    global_opts = ctx.obj or {}
    config = load_config(global_opts.get("project"), extra_config_path=global_opts.get("config"))
    try:
        return ScoreLedger.load(config.storage.data_path)
    except LedgerError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the high-score table"""
    ledger = _load_ledger(ctx)
    console.print(render_scores_table(ledger.scores))


@app.command()
def path(ctx: typer.Context) -> None:
    """Show the ledger file location"""
    ledger = _load_ledger(ctx)
    console.print(f"[bold]Ledger:[/bold] {ledger.path.resolve()}")
    console.print(f"  Exists: {'[green]Yes[/green]' if ledger.path.exists() else '[red]No[/red]'}")


@app.command()
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Erase all recorded scores"""
    ledger = _load_ledger(ctx)
    if not len(ledger):
        print_info("No scores recorded")
        return

    if not yes and not Confirm.ask(f"Erase {len(ledger)} scores?", default=False):
        print_info("Cancelled")
        return

    try:
        ledger.clear()
    except LedgerError as e:
        print_error(str(e))
        raise typer.Exit(1)
    print_success("High scores cleared")
