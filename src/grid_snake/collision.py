"""Wall and self collision checks."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from grid_snake.grid import Position, in_bounds


class CollisionKind(str, enum.Enum):
    """What a candidate head ran into."""

    WALL = "wall"
    SELF = "self"


def check_collision(
    head: Position, body: Iterable[Position],
) -> CollisionKind | None:
    """Classify a candidate head against the grid and the pre-move body.

    *body* is the whole snake before the move, tail included: the head may
    not land on the cell the tail is about to vacate. Walls are checked
    first. Returns ``None`` when the move is clear.
    """
    if not in_bounds(head):
        return CollisionKind.WALL
    if any(seg == head for seg in body):
        return CollisionKind.SELF
    return None
