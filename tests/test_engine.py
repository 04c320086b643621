"""Tests for the per-tick motion engine."""

import pytest

from grid_snake.collision import CollisionKind
from grid_snake.engine import advance
from grid_snake.grid import Position
from grid_snake.snake import Direction, Snake

FAR_FOOD = Position(0, 0)


class TestAdvanceMovement:
    def test_shift_up(self):
        result = advance(Snake.initial(), Direction.UP, FAR_FOOD)
        assert result.snake.body == (
            Position(10, 9), Position(10, 10), Position(10, 11),
        )
        assert not result.ate_food
        assert result.collided is None

    @pytest.mark.parametrize(
        "direction", [Direction.UP, Direction.LEFT, Direction.RIGHT],
    )
    def test_length_kept_without_food(self, direction):
        snake = Snake.initial()
        assert len(advance(snake, direction, FAR_FOOD).snake) == len(snake)

    def test_grows_by_one_on_food(self):
        snake = Snake.initial()
        result = advance(snake, Direction.UP, Position(10, 9))
        assert result.ate_food
        assert len(result.snake) == len(snake) + 1
        assert result.snake.head == Position(10, 9)
        assert result.snake.tail == snake.tail

    def test_input_not_mutated(self):
        snake = Snake.initial()
        before = snake.body
        advance(snake, Direction.LEFT, Position(9, 10))
        assert snake.body == before


class TestAdvanceCollision:
    def test_wall(self):
        snake = Snake((Position(0, 5), Position(1, 5), Position(2, 5)))
        result = advance(snake, Direction.LEFT, FAR_FOOD)
        assert result.collided == CollisionKind.WALL
        assert result.snake is snake
        assert not result.ate_food

    def test_reverse_into_neck(self):
        result = advance(Snake.initial(), Direction.DOWN, FAR_FOOD)
        assert result.collided == CollisionKind.SELF
        assert result.snake == Snake.initial()

    def test_moving_onto_vacating_tail_collides(self):
        # Square loop: the head steps onto the tail cell.
        snake = Snake((
            Position(5, 5), Position(6, 5), Position(6, 6), Position(5, 6),
        ))
        result = advance(snake, Direction.DOWN, FAR_FOOD)
        assert result.collided == CollisionKind.SELF
