"""Random food placement"""

from __future__ import annotations

import random
from typing import Collection, Optional

from .grid import Grid, Position

# Rejection-sampling attempts before falling back to enumerating free cells.
# On a nearly full grid blind retries could spin for a very long time.
DEFAULT_ATTEMPTS = 64

_default_rng = random.Random()


class BoardFullError(Exception):
    """Raised when every grid cell is occupied and food cannot be placed"""

    def __init__(self, grid: Grid):
        super().__init__(f"No free cell left on a {grid.width}x{grid.height} grid")
        self.grid = grid


def place_food(
    occupied: Collection[Position],
    grid: Grid,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_ATTEMPTS,
) -> Position:
    """Choose a uniformly random free cell for the next food item.

    Samples random cells until one outside ``occupied`` is found. After
    ``max_attempts`` misses the free cells are listed and one is picked
    directly, so the call always terminates.

    Args:
        occupied: Cells that food must not land on (the snake chain)
        grid: Playing field bounds
        rng: Random source, defaults to the ``random`` module
        max_attempts: Sampling attempts before enumerating free cells

    Returns:
        A position inside the grid and not in ``occupied``

    Raises:
        BoardFullError: If no free cell exists
    """
    if rng is None:
        rng = _default_rng
    taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)

    if len(taken) < grid.capacity:
        for _ in range(max_attempts):
            candidate = (rng.randrange(grid.width), rng.randrange(grid.height))
            if candidate not in taken:
                return candidate

    free = [cell for cell in grid.cells() if cell not in taken]
    if not free:
        raise BoardFullError(grid)
    return rng.choice(free)
