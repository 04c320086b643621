"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection

import numpy as np

from grid_snake.grid import GRID_SIZE, Position, cell_count, in_bounds

logger = logging.getLogger(__name__)


def place_food(
    occupied: Collection[Position],
    rng: np.random.Generator | None = None,
) -> Position:
    """Draw a random free cell by rejection sampling.

    ``x`` and ``y`` are drawn independently and uniformly over
    ``[0, GRID_SIZE)``; the first draw not in *occupied* wins. There is no
    attempt cap, so at least one cell must be free. A grid whose every cell
    is occupied raises ``ValueError`` instead of looping forever; normal play
    never gets near that length.
    """
    blocked = {pos for pos in occupied if in_bounds(pos)}
    if len(blocked) >= cell_count():
        raise ValueError("No free cell left for food placement.")

    rng = rng if rng is not None else np.random.default_rng()
    attempts = 0
    while True:
        attempts += 1
        x, y = rng.integers(0, GRID_SIZE, size=2)
        candidate = Position(int(x), int(y))
        if candidate not in blocked:
            logger.debug(
                "Food placed at %s after %d draw(s).", candidate, attempts,
            )
            return candidate
