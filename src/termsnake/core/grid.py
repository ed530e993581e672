"""Grid bounds and positions"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .direction import Direction

# (x, y) cell coordinates, origin at the top-left corner
Position = tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed rectangular playing field"""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")

    @property
    def capacity(self) -> int:
        """Total number of cells"""
        return self.width * self.height

    @property
    def center(self) -> Position:
        return (self.width // 2, self.height // 2)

    def contains(self, pos: Position) -> bool:
        """Check whether a position lies inside the grid"""
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Position]:
        """Iterate over every cell, row by row"""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)


def step(pos: Position, direction: Direction) -> Position:
    """Move one cell in a direction.

    Coordinates are signed: stepping up or left from 0 gives -1, which the
    caller sees as out of bounds.
    """
    dx, dy = direction.delta
    return (pos[0] + dx, pos[1] + dy)
