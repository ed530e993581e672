"""Game session state machine"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .direction import Direction, is_opposite
from .food import BoardFullError, place_food
from .grid import Grid, Position, step
from .ledger import ScoreLedger


class SessionStatus(str, Enum):
    """Session lifecycle"""

    RUNNING = "running"
    GAME_OVER = "game_over"


class DeathReason(str, Enum):
    """Why a session ended"""

    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


class TickOutcome(str, Enum):
    """What a single tick did"""

    IDLE = "idle"  # session already over
    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for rendering"""

    grid: Grid
    chain: tuple[Position, ...]
    food: Optional[Position]
    direction: Direction
    score: int
    status: SessionStatus
    death_reason: Optional[DeathReason]
    ticks: int
    high_scores: tuple[int, ...]
    ledger_rank: Optional[int] = None

    @property
    def head(self) -> Position:
        return self.chain[0]

    @property
    def is_over(self) -> bool:
        return self.status == SessionStatus.GAME_OVER


class GameSession:
    """A single game of snake.

    Owns the segment chain (head first), the current direction, the food
    position and the score. State only changes through :meth:`tick` and
    :meth:`request_direction_change`; both must be called from one thread.

    When the game ends the score is written to the ledger exactly once,
    before :meth:`tick` returns.

    Attributes:
        grid: Playing field bounds
        ledger: High-score ledger updated on game over (optional)
    """

    def __init__(
        self,
        grid: Grid,
        ledger: Optional[ScoreLedger] = None,
        rng: Optional[random.Random] = None,
        chain: Optional[Iterable[Position]] = None,
        direction: Direction = Direction.RIGHT,
        food: Optional[Position] = None,
    ):
        self.grid = grid
        self.ledger = ledger
        self._rng = rng

        self._chain: deque[Position] = deque(chain if chain is not None else [grid.center])
        if not self._chain:
            raise ValueError("Snake chain must have at least one segment")
        if len(set(self._chain)) != len(self._chain):
            raise ValueError("Snake chain contains duplicate positions")
        for pos in self._chain:
            if not grid.contains(pos):
                raise ValueError(f"Segment {pos} is outside the {grid.width}x{grid.height} grid")

        if food is None:
            food = place_food(self._chain, grid, self._rng)
        elif food in self._chain or not grid.contains(food):
            raise ValueError(f"Food at {food} must be a free cell inside the grid")

        self._food: Optional[Position] = food
        self._direction = direction
        self._score = 0
        self._ticks = 0
        self._status = SessionStatus.RUNNING
        self._death_reason: Optional[DeathReason] = None
        self._recorded = False
        self._ledger_rank: Optional[int] = None

    # ---- read-only state ----

    @property
    def chain(self) -> tuple[Position, ...]:
        """Segment positions, head first"""
        return tuple(self._chain)

    @property
    def head(self) -> Position:
        return self._chain[0]

    @property
    def food(self) -> Optional[Position]:
        """Food position, None only once the board is full"""
        return self._food

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def score(self) -> int:
        return self._score

    @property
    def ticks(self) -> int:
        """Number of ticks that advanced the game"""
        return self._ticks

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status == SessionStatus.GAME_OVER

    @property
    def death_reason(self) -> Optional[DeathReason]:
        return self._death_reason

    @property
    def ledger_rank(self) -> Optional[int]:
        """High-score row the final score landed in, None if it missed the table"""
        return self._ledger_rank

    def snapshot(self) -> SessionSnapshot:
        """Capture the current state for a renderer"""
        return SessionSnapshot(
            grid=self.grid,
            chain=self.chain,
            food=self._food,
            direction=self._direction,
            score=self._score,
            status=self._status,
            death_reason=self._death_reason,
            ticks=self._ticks,
            high_scores=self.ledger.scores if self.ledger is not None else (),
            ledger_rank=self._ledger_rank,
        )

    # ---- transitions ----

    def request_direction_change(self, direction: Direction) -> None:
        """Steer the snake; reversing straight into the body is ignored.

        Takes effect on the next tick. Later calls before that tick win.
        """
        if self.is_over or is_opposite(direction, self._direction):
            return
        self._direction = direction

    def tick(self) -> TickOutcome:
        """Advance the game by one cell"""
        if self.is_over:
            return TickOutcome.IDLE

        candidate = step(self.head, self._direction)

        if not self.grid.contains(candidate):
            self._end(DeathReason.WALL)
            return TickOutcome.COLLIDED
        if candidate in self._chain:
            self._end(DeathReason.SELF)
            return TickOutcome.COLLIDED

        self._ticks += 1
        self._chain.appendleft(candidate)

        if candidate != self._food:
            self._chain.pop()
            return TickOutcome.MOVED

        self._score += 1
        try:
            self._food = place_food(self._chain, self.grid, self._rng)
        except BoardFullError:
            self._food = None
            self._end(DeathReason.BOARD_FULL)
        return TickOutcome.ATE

    def _end(self, reason: DeathReason) -> None:
        self._status = SessionStatus.GAME_OVER
        self._death_reason = reason
        if self.ledger is not None and not self._recorded:
            self._recorded = True
            self._ledger_rank = self.ledger.record(self._score)

    def __repr__(self) -> str:
        return (
            f"<GameSession status={self._status.value} head={self.head} "
            f"length={len(self._chain)} score={self._score}>"
        )
