"""Console utilities for rich output"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

# Custom theme
THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "dim": "dim",
    }
)

# Global console instance
console = Console(theme=THEME)


def print_info(message: str) -> None:
    """Print info message"""
    console.print(f"[info]{message}[/info]")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[warning]Warning: {message}[/warning]")


def print_error(message: str) -> None:
    """Print error message"""
    console.print(f"[error]Error: {message}[/error]")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[success]{message}[/success]")


def print_dim(message: str) -> None:
    """Print dimmed message"""
    console.print(f"[dim]{message}[/dim]")
