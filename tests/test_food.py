"""Tests for food placement"""

import random

import pytest

from termsnake.core.food import BoardFullError, place_food
from termsnake.core.grid import Grid


class TestPlaceFood:
    """Test place_food function"""

    def test_food_inside_grid(self, seeded_rng):
        grid = Grid(30, 20)
        for _ in range(200):
            x, y = place_food(set(), grid, seeded_rng)
            assert 0 <= x < 30
            assert 0 <= y < 20

    def test_food_avoids_occupied(self, seeded_rng):
        grid = Grid(10, 10)
        occupied = {(x, y) for x in range(10) for y in range(10) if (x + y) % 2 == 0}
        for _ in range(100):
            assert place_food(occupied, grid, seeded_rng) not in occupied

    def test_single_free_cell(self, seeded_rng):
        """Nearly full grid still finds the only free cell"""
        grid = Grid(6, 6)
        free = (4, 1)
        occupied = [cell for cell in grid.cells() if cell != free]
        assert place_food(occupied, grid, seeded_rng) == free

    def test_fallback_after_attempts(self, seeded_rng):
        """With zero sampling attempts the enumeration path is used"""
        grid = Grid(5, 5)
        occupied = {(0, 0), (1, 0)}
        pos = place_food(occupied, grid, seeded_rng, max_attempts=0)
        assert pos not in occupied
        assert grid.contains(pos)

    def test_board_full(self, seeded_rng):
        grid = Grid(3, 3)
        with pytest.raises(BoardFullError):
            place_food(list(grid.cells()), grid, seeded_rng)

    def test_default_rng(self):
        """Works without an explicit random source"""
        grid = Grid(5, 5)
        assert grid.contains(place_food({(2, 2)}, grid))

    def test_deterministic_with_seed(self):
        grid = Grid(30, 20)
        a = place_food({(15, 10)}, grid, random.Random(7))
        b = place_food({(15, 10)}, grid, random.Random(7))
        assert a == b
