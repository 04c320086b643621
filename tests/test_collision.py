"""Tests for the collision detector."""

import pytest

from grid_snake.collision import CollisionKind, check_collision
from grid_snake.grid import GRID_SIZE, Position
from grid_snake.snake import INITIAL_BODY


class TestWallCollision:
    @pytest.mark.parametrize("i", [0, 7, GRID_SIZE - 1])
    def test_every_edge(self, i):
        assert check_collision(Position(-1, i), INITIAL_BODY) == CollisionKind.WALL
        assert check_collision(Position(GRID_SIZE, i), INITIAL_BODY) == CollisionKind.WALL
        assert check_collision(Position(i, -1), INITIAL_BODY) == CollisionKind.WALL
        assert check_collision(Position(i, GRID_SIZE), INITIAL_BODY) == CollisionKind.WALL

    def test_wall_checked_before_body(self):
        body = (Position(-1, 0), Position(0, 0))
        assert check_collision(Position(-1, 0), body) == CollisionKind.WALL


class TestSelfCollision:
    def test_head_on_body(self):
        assert check_collision(Position(10, 11), INITIAL_BODY) == CollisionKind.SELF

    def test_head_on_tail_counts(self):
        # The tail cell is still occupied when the check runs.
        assert check_collision(Position(10, 12), INITIAL_BODY) == CollisionKind.SELF

    def test_clear(self):
        assert check_collision(Position(10, 9), INITIAL_BODY) is None
        assert check_collision(Position(0, 0), INITIAL_BODY) is None
