"""Core module - game state, food placement and the score ledger"""

from .direction import Direction, is_opposite
from .food import DEFAULT_ATTEMPTS, BoardFullError, place_food
from .grid import Grid, Position, step
from .ledger import DEFAULT_LEDGER_PATH, MAX_ENTRIES, LedgerError, ScoreLedger
from .pacing import tick_interval
from .session import (
    DeathReason,
    GameSession,
    SessionSnapshot,
    SessionStatus,
    TickOutcome,
)

__all__ = [
    "Direction",
    "is_opposite",
    "Grid",
    "Position",
    "step",
    # Food
    "DEFAULT_ATTEMPTS",
    "BoardFullError",
    "place_food",
    # Ledger
    "DEFAULT_LEDGER_PATH",
    "MAX_ENTRIES",
    "LedgerError",
    "ScoreLedger",
    # Session
    "DeathReason",
    "GameSession",
    "SessionSnapshot",
    "SessionStatus",
    "TickOutcome",
    "tick_interval",
]
