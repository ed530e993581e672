"""Play command - the interactive game loop"""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

import typer
from pydantic import ValidationError
from rich.live import Live

from termsnake.config import BoardConfig, SpeedConfig, load_config
from termsnake.core import (
    DeathReason,
    GameSession,
    Grid,
    LedgerError,
    SessionSnapshot,
    ScoreLedger,
    tick_interval,
)
from termsnake.ui import QUIT_KEYS, RawKeyboard, key_to_direction, render_frame
from termsnake.utils.console import console, print_dim, print_error, print_info, print_success

app = typer.Typer(
    help="Play a game of snake",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class KeySource(Protocol):
    """Anything that can be polled for key presses"""

    def read_key(self, timeout: float) -> Optional[str]: ...


@dataclass
class GameResult:
    """Outcome of a finished or abandoned game"""

    score: int
    quit: bool
    death_reason: Optional[DeathReason]
    ticks: int
    new_best: bool = False


class GameDriver:
    """Polls input, paces ticks and renders frames until the game ends.

    The driver is the only owner of the session: every call into it
    happens on the calling thread, one at a time.
    """

    def __init__(
        self,
        session: GameSession,
        keyboard: KeySource,
        render: Callable[[SessionSnapshot], None],
        speed: Optional[SpeedConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self.keyboard = keyboard
        self.render = render
        self.speed = speed or SpeedConfig()
        self._clock = clock
        self._sleep = sleep
        self._last_tick = clock()
        self._quit = False
        self._best_before = session.ledger.best if session.ledger is not None else 0

    @property
    def current_interval(self) -> float:
        """Seconds between ticks at the current score"""
        return tick_interval(
            self.session.score,
            base=self.speed.base_interval,
            step=self.speed.speed_step,
            floor=self.speed.min_interval,
        )

    def handle_key(self, key: str) -> None:
        if key in QUIT_KEYS:
            self._quit = True
            return
        direction = key_to_direction(key)
        if direction is not None:
            self.session.request_direction_change(direction)

    def step(self) -> bool:
        """Run one loop iteration, return False once the loop should stop"""
        key = self.keyboard.read_key(self.speed.poll_interval)
        if key is not None:
            self.handle_key(key)
            if self._quit:
                return False

        now = self._clock()
        if now - self._last_tick >= self.current_interval:
            self.session.tick()
            self._last_tick = now

        self.render(self.session.snapshot())

        if self.session.is_over:
            self._sleep(self.speed.game_over_pause)
            return False
        return True

    def run(self) -> GameResult:
        """Loop until game over or quit"""
        self.render(self.session.snapshot())
        try:
            while self.step():
                pass
        except KeyboardInterrupt:
            self._quit = True

        session = self.session
        return GameResult(
            score=session.score,
            quit=self._quit and not session.is_over,
            death_reason=session.death_reason,
            ticks=session.ticks,
            new_best=session.is_over and session.score > self._best_before,
        )


@app.callback(invoke_without_command=True)
def play(
    ctx: typer.Context,
    width: Optional[int] = typer.Option(None, "--width", "-W", min=5, max=200, help="Grid width"),
    height: Optional[int] = typer.Option(None, "--height", "-H", min=5, max=100, help="Grid height"),
    speed: Optional[float] = typer.Option(
        None, "--speed", "-s", min=0.01, help="Starting tick interval in seconds"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for food placement"),
) -> None:
    """Start a new game"""
    global_opts = ctx.obj or {}
    verbose = global_opts.get("verbose", False)

    try:
        config = load_config(global_opts.get("project"), extra_config_path=global_opts.get("config"))
        board = {"width": width, "height": height}
        config.board = BoardConfig(
            **{**config.board.model_dump(), **{k: v for k, v in board.items() if v is not None}}
        )
        if speed is not None:
            config.speed = SpeedConfig(**{**config.speed.model_dump(), "base_interval": speed})
    except ValidationError as e:
        print_error("Invalid settings: " + "; ".join(err["msg"] for err in e.errors()))
        raise typer.Exit(1)

    try:
        ledger = ScoreLedger.load(config.storage.data_path)
    except LedgerError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if verbose:
        print_dim(f"Ledger: {ledger.path} ({len(ledger)} scores)")
        print_dim(f"Board: {config.board.width}x{config.board.height}")

    if not sys.stdin.isatty():
        print_error("termsnake needs an interactive terminal")
        raise typer.Exit(1)

    rng = random.Random(seed) if seed is not None else None
    session = GameSession(Grid(config.board.width, config.board.height), ledger, rng)

    try:
        with RawKeyboard() as keyboard, Live(
            console=console, screen=True, auto_refresh=False, transient=True
        ) as live:

            def _draw(snapshot: SessionSnapshot) -> None:
                live.update(render_frame(snapshot, config.display), refresh=True)

            result = GameDriver(session, keyboard, _draw, config.speed).run()
    except LedgerError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if result.quit:
        print_info(f"Quit with score {result.score} (not recorded)")
        return

    console.print(f"[bold]Game over[/bold] - score [bold yellow]{result.score}[/bold yellow]")
    if result.new_best:
        print_success("New high score!")
    if verbose:
        reason = result.death_reason.value if result.death_reason else "unknown"
        print_dim(f"Ticks: {result.ticks}, ended by: {reason}")
