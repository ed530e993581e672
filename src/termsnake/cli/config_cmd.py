"""Config command implementation"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from termsnake.config import (
    get_project_config_path,
    get_user_config_path,
    init_user_config,
    load_config,
)
from termsnake.utils.console import print_info, print_success

app = typer.Typer(help="Configuration management")
console = Console()


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize user configuration file"""
    config_path = get_user_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists at: {config_path}")
        print_info("Use --force to overwrite")
        return

    created_path = init_user_config(force=force)
    print_success(f"Created config at: {created_path}")


@app.command()
def show(
    ctx: typer.Context,
    project: Optional[Path] = typer.Option(None, "--project", "-p", help="Project directory"),
) -> None:
    """Show current configuration"""
    global_opts = ctx.obj or {}
    config = load_config(
        project or global_opts.get("project"),
        extra_config_path=global_opts.get("config"),
    )

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("board.width", str(config.board.width))
    table.add_row("board.height", str(config.board.height))

    table.add_row("speed.base_interval", f"{config.speed.base_interval:.3f}s")
    table.add_row("speed.speed_step", f"{config.speed.speed_step:.3f}s")
    table.add_row("speed.min_interval", f"{config.speed.min_interval:.3f}s")
    table.add_row("speed.game_over_pause", f"{config.speed.game_over_pause:.1f}s")

    table.add_row("storage.data_path", config.storage.data_path)

    table.add_row("display.show_scores", str(config.display.show_scores))

    console.print(table)


@app.command()
def path(
    project: Optional[Path] = typer.Option(None, "--project", "-p", help="Project directory"),
) -> None:
    """Show configuration file paths"""
    user_path = get_user_config_path()
    project_path = get_project_config_path(project)

    console.print(f"[bold]User config:[/bold] {user_path}")
    console.print(f"  Exists: {'[green]Yes[/green]' if user_path.exists() else '[red]No[/red]'}")

    console.print(f"\n[bold]Project config:[/bold] {project_path}")
    console.print(f"  Exists: {'[green]Yes[/green]' if project_path.exists() else '[red]No[/red]'}")
