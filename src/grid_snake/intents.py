"""Mapping of raw key identifiers to game intents."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from grid_snake.snake import Direction

if TYPE_CHECKING:
    from grid_snake.game import GameState


class Intent(enum.Enum):
    """Normalized user actions, independent of the key that produced them."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"

    @property
    def direction(self) -> Direction | None:
        """The movement direction for a movement intent, else ``None``."""
        return _INTENT_DIRECTIONS.get(self)


_INTENT_DIRECTIONS: dict[Intent, Direction] = {
    Intent.UP: Direction.UP,
    Intent.DOWN: Direction.DOWN,
    Intent.LEFT: Direction.LEFT,
    Intent.RIGHT: Direction.RIGHT,
}

# Two aliases per direction: arrow keys and WASD.
MOVEMENT_KEYS: dict[str, Intent] = {
    "ArrowUp": Intent.UP,
    "ArrowDown": Intent.DOWN,
    "ArrowLeft": Intent.LEFT,
    "ArrowRight": Intent.RIGHT,
    "w": Intent.UP,
    "s": Intent.DOWN,
    "a": Intent.LEFT,
    "d": Intent.RIGHT,
}

SPACE_KEYS: frozenset[str] = frozenset({" ", "Space", "Spacebar"})


def map_key(key: str, state: GameState) -> Intent | None:
    """Translate *key* into an intent valid for *state*.

    Nothing maps before the game starts. Space restarts after a game over
    and toggles pause otherwise. Movement keys only count while running.
    Unknown identifiers map to ``None``.
    """
    from grid_snake.game import GameState

    if state == GameState.NOT_STARTED:
        return None

    if key in SPACE_KEYS:
        if state == GameState.GAME_OVER:
            return Intent.RESTART
        return Intent.TOGGLE_PAUSE

    intent = MOVEMENT_KEYS.get(key)
    if intent is None or state != GameState.RUNNING:
        return None
    return intent
