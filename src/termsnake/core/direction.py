"""Movement directions"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Snake heading on the grid (screen coordinates, y grows downward)"""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) for one step in this direction"""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return True if a and b point in exactly opposite directions"""
    return _OPPOSITES[a] is b
