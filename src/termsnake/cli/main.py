"""CLI main entry point"""

import typer
from typing import Optional
from pathlib import Path

# Enable -h as alias for --help
app = typer.Typer(
    name="termsnake",
    help="termsnake - Snake in your terminal",
    add_completion=True,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Import and register subcommands
from termsnake.cli import config_cmd, play, scores_cmd

app.add_typer(play.app, name="play")
app.add_typer(scores_cmd.app, name="scores")
app.add_typer(config_cmd.app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    project: Optional[Path] = typer.Option(
        None, "--project", "-P", help="Project directory (default: current directory)"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to an extra configuration file"
    ),
) -> None:
    """termsnake - Snake in your terminal"""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["project"] = project
    ctx.obj["config"] = config


@app.command()
def version() -> None:
    """Show version information"""
    from termsnake import __version__
    from rich.console import Console

    console = Console()
    console.print(f"[bold green]termsnake[/bold green] version {__version__}")


def cli() -> None:
    """CLI entry point"""
    # Ensure config directory exists on first run
    from termsnake.config.loader import ensure_config_dir

    ensure_config_dir()
    app()


if __name__ == "__main__":
    cli()
