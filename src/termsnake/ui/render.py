"""Frame rendering with rich"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from termsnake.config.schema import DisplayConfig
from termsnake.core.session import DeathReason, SessionSnapshot

# Each grid cell is two characters wide so cells look roughly square
CELL = "  "

DEATH_MESSAGES = {
    DeathReason.WALL: "You hit the wall",
    DeathReason.SELF: "You ran into yourself",
    DeathReason.BOARD_FULL: "Board filled, nothing left to eat!",
}


def render_scores_table(scores: Iterable[int], highlight_row: Optional[int] = None) -> Table:
    """Build the high-score table.

    Args:
        scores: Scores, highest first
        highlight_row: Zero-based row to emphasise (the score just recorded)
    """
    table = Table(title="High Scores", title_style="bold", show_edge=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Score", style="bold yellow", justify="right")

    for row, score in enumerate(scores):
        cell = f"[reverse]{score}[/reverse]" if row == highlight_row else str(score)
        table.add_row(str(row + 1), cell)

    if table.row_count == 0:
        table.add_row("-", "[dim]none yet[/dim]")
    return table


def render_grid(snapshot: SessionSnapshot, display: Optional[DisplayConfig] = None) -> Text:
    """Draw the bordered playing field as styled text"""
    display = display or DisplayConfig()
    grid = snapshot.grid

    styles: dict[tuple[int, int], str] = {}
    for pos in snapshot.chain[1:]:
        styles[pos] = f"on {display.snake_color}"
    styles[snapshot.head] = f"on {display.head_color}"
    if snapshot.food is not None:
        styles[snapshot.food] = f"on {display.food_color}"

    border = f"on {display.border_color}"
    text = Text(no_wrap=True)
    full_row = CELL * (grid.width + 2)

    text.append(full_row, style=border)
    text.append("\n")
    for y in range(grid.height):
        text.append(CELL, style=border)
        for x in range(grid.width):
            style = styles.get((x, y))
            if style:
                text.append(CELL, style=style)
            else:
                text.append(CELL)
        text.append(CELL, style=border)
        text.append("\n")
    text.append(full_row, style=border)
    return text


def render_status(snapshot: SessionSnapshot) -> Text:
    """Score line shown below the board"""
    best = max(snapshot.score, snapshot.high_scores[0] if snapshot.high_scores else 0)
    return Text.assemble(
        ("Score: ", "bold"),
        (str(snapshot.score), "bold yellow"),
        "   ",
        ("Best: ", "bold"),
        (str(best), "bold yellow"),
        "   ",
        ("Length: ", "bold"),
        str(len(snapshot.chain)),
    )


def render_frame(snapshot: SessionSnapshot, display: Optional[DisplayConfig] = None) -> RenderableType:
    """Compose a full-screen frame for one session snapshot"""
    display = display or DisplayConfig()
    parts: list[RenderableType] = [render_grid(snapshot, display), render_status(snapshot)]

    if snapshot.is_over:
        message = DEATH_MESSAGES.get(snapshot.death_reason, "") if snapshot.death_reason else ""
        parts.append(Text.assemble(("GAME OVER", "bold red"), "  ", (message, "dim")))
    else:
        parts.append(Text("Arrows/WASD to steer, q to quit", style="dim"))

    if display.show_scores:
        parts.append(render_scores_table(snapshot.high_scores, highlight_row=snapshot.ledger_rank))

    return Group(*parts)
