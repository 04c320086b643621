"""Snake representation and direction model."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from grid_snake.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITES[direction]


INITIAL_BODY: tuple[Position, ...] = (
    Position(10, 10),
    Position(10, 11),
    Position(10, 12),
)
INITIAL_DIRECTION = Direction.UP


@dataclass(frozen=True)
class Snake:
    """An immutable snake: an ordered tuple of positions, head first.

    The head is ``body[0]``; the tail is ``body[-1]``. Moving never mutates
    a snake, it builds a new one.
    """

    body: tuple[Position, ...]

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake must have at least 1 segment.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake segments must not overlap.")

    @classmethod
    def initial(cls) -> Snake:
        """The fixed 3-segment vertical starting layout."""
        return cls(INITIAL_BODY)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> Position:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        return Position(self.head.x + dx, self.head.y + dy)

    def moved_to(self, new_head: Position, grow: bool = False) -> Snake:
        """Return the snake with *new_head* prepended.

        The tail is dropped unless *grow* is set.
        """
        kept = self.body if grow else self.body[:-1]
        return Snake((new_head, *kept))

    def occupancy(self) -> frozenset[Position]:
        """The set of cells covered by the snake."""
        return frozenset(self.body)

    def occupies(self, pos: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return pos in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
