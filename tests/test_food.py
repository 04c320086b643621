"""Tests for food placement."""

import numpy as np
import pytest

from grid_snake.food import place_food
from grid_snake.grid import GRID_SIZE, Position, in_bounds
from grid_snake.snake import Snake


def _all_cells() -> list[Position]:
    return [Position(x, y) for x in range(GRID_SIZE) for y in range(GRID_SIZE)]


class TestPlaceFood:
    def test_not_on_snake(self):
        rng = np.random.default_rng(0)
        occupied = Snake.initial().occupancy()
        for _ in range(200):
            food = place_food(occupied, rng)
            assert food not in occupied
            assert in_bounds(food)

    def test_returns_position(self):
        food = place_food(set(), np.random.default_rng(1))
        assert isinstance(food, Position)
        assert isinstance(food.x, int)
        assert isinstance(food.y, int)

    def test_single_free_cell_found(self):
        free = Position(7, 13)
        occupied = set(_all_cells()) - {free}
        assert place_food(occupied, np.random.default_rng(3)) == free

    def test_full_grid_rejected(self):
        with pytest.raises(ValueError, match="No free cell"):
            place_food(set(_all_cells()))

    def test_out_of_bounds_occupancy_ignored(self):
        # Off-grid entries don't count towards a full grid.
        occupied = (set(_all_cells()) - {Position(0, 0)}) | {Position(-1, -1)}
        assert place_food(occupied, np.random.default_rng(5)) == Position(0, 0)

    def test_deterministic(self):
        """Same seed produces same food positions."""
        assert self._draws(42) == self._draws(42)

    def test_different_seeds(self):
        assert self._draws(1) != self._draws(2)

    def test_default_rng(self):
        assert in_bounds(place_food(Snake.initial().occupancy()))

    @staticmethod
    def _draws(seed: int) -> list[Position]:
        rng = np.random.default_rng(seed)
        return [place_food(set(), rng) for _ in range(5)]
