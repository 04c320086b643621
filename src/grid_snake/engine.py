"""Per-tick snake motion."""

from __future__ import annotations

from dataclasses import dataclass

from grid_snake.collision import CollisionKind, check_collision
from grid_snake.grid import Position
from grid_snake.snake import Direction, Snake


@dataclass(frozen=True)
class MoveResult:
    """Outcome of advancing the snake by one tick."""

    snake: Snake
    ate_food: bool = False
    collided: CollisionKind | None = None


def advance(snake: Snake, direction: Direction, food: Position) -> MoveResult:
    """Advance *snake* one cell along *direction*.

    On collision the original snake comes back untouched with ``collided``
    set. Otherwise the new head is prepended; the tail is kept when the head
    lands on *food* and dropped when it does not. Inputs are never mutated.
    """
    new_head = snake.next_head(direction)

    collided = check_collision(new_head, snake.body)
    if collided is not None:
        return MoveResult(snake=snake, collided=collided)

    ate_food = new_head == food
    return MoveResult(snake=snake.moved_to(new_head, grow=ate_food), ate_food=ate_food)
