"""Tests for directions and grid stepping"""

import pytest

from termsnake.core.direction import Direction, is_opposite
from termsnake.core.grid import Grid, step


class TestDirection:
    """Test Direction enum"""

    def test_direction_values(self):
        assert Direction.UP.value == "up"
        assert Direction.DOWN.value == "down"
        assert Direction.LEFT.value == "left"
        assert Direction.RIGHT.value == "right"

    @pytest.mark.parametrize(
        "a,b",
        [
            (Direction.UP, Direction.DOWN),
            (Direction.DOWN, Direction.UP),
            (Direction.LEFT, Direction.RIGHT),
            (Direction.RIGHT, Direction.LEFT),
        ],
    )
    def test_opposites(self, a, b):
        assert is_opposite(a, b)
        assert a.opposite is b

    def test_not_opposite(self):
        """Same or perpendicular directions are not opposites"""
        for d in Direction:
            assert not is_opposite(d, d)
        assert not is_opposite(Direction.UP, Direction.LEFT)
        assert not is_opposite(Direction.RIGHT, Direction.DOWN)

    def test_screen_coordinates(self):
        """Up decreases y, left decreases x"""
        assert step((5, 5), Direction.UP) == (5, 4)
        assert step((5, 5), Direction.DOWN) == (5, 6)
        assert step((5, 5), Direction.LEFT) == (4, 5)
        assert step((5, 5), Direction.RIGHT) == (6, 5)


class TestGrid:
    """Test Grid bounds"""

    def test_center(self):
        assert Grid(30, 20).center == (15, 10)
        assert Grid(5, 5).center == (2, 2)

    def test_contains(self):
        grid = Grid(30, 20)
        assert grid.contains((0, 0))
        assert grid.contains((29, 19))
        assert not grid.contains((30, 0))
        assert not grid.contains((0, 20))
        assert not grid.contains((-1, 5))

    def test_step_from_zero_leaves_grid(self):
        """No clamping: stepping left/up from 0 goes negative"""
        grid = Grid(30, 20)
        assert not grid.contains(step((0, 5), Direction.LEFT))
        assert not grid.contains(step((5, 0), Direction.UP))

    def test_cells_and_capacity(self):
        grid = Grid(3, 2)
        cells = list(grid.cells())
        assert len(cells) == grid.capacity == 6
        assert cells[0] == (0, 0)
        assert cells[-1] == (2, 1)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Grid(0, 10)
