"""Grid geometry and cell export for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 20


class Position(NamedTuple):
    """A cell coordinate. ``x`` is the column, ``y`` the row (y grows down)."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes stored in an exported cell array."""

    EMPTY = 0
    SNAKE_BODY = 1
    SNAKE_HEAD = 2
    FOOD = 3


def in_bounds(pos: Position) -> bool:
    """Check whether a coordinate lies within the grid."""
    return 0 <= pos.x < GRID_SIZE and 0 <= pos.y < GRID_SIZE


def cell_count() -> int:
    return GRID_SIZE * GRID_SIZE


def render_cells(snake: Iterable[Position], food: Position) -> np.ndarray:
    """Build a ``(GRID_SIZE, GRID_SIZE)`` array of :class:`CellType` codes.

    Indexed ``[y, x]`` consistent with NumPy row-major ordering. The first
    position of *snake* is painted as the head.
    """
    cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    cells[food.y, food.x] = CellType.FOOD
    for i, seg in enumerate(snake):
        cells[seg.y, seg.x] = CellType.SNAKE_HEAD if i == 0 else CellType.SNAKE_BODY
    return cells
