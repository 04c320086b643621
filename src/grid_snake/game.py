"""Game state machine composing snake motion, food and scoring."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from grid_snake.engine import advance
from grid_snake.food import place_food
from grid_snake.grid import GRID_SIZE, Position, render_cells
from grid_snake.intents import Intent, map_key
from grid_snake.snake import INITIAL_DIRECTION, Direction, Snake, opposite

logger = logging.getLogger(__name__)

FOOD_REWARD = 10


class GameState(str, enum.Enum):
    """Lifecycle states of a round."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one committed game state, for renderers."""

    snake: tuple[Position, ...]
    food: Position
    score: int
    state: GameState
    direction: Direction
    tick: int

    @property
    def head(self) -> Position:
        return self.snake[0]

    def cells(self) -> np.ndarray:
        """Return the board as a ``[y, x]`` array of ``CellType`` codes."""
        return render_cells(self.snake, self.food)

    def to_dict(self, include_cells: bool = True) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        data: dict = {
            "tick": self.tick,
            "score": self.score,
            "state": self.state.value,
            "direction": self.direction.name.lower(),
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
        }
        if include_cells:
            data["grid"] = {
                "size": GRID_SIZE,
                "cells": self.cells().tolist(),
            }
        return data


class SnakeGame:
    """Single-player snake state machine.

    The game owns the snake, food, score and the pending direction. Every
    mutating call runs to completion and returns the snapshot of the state
    it committed. Ticks are driven externally (see
    :class:`grid_snake.session.GameSession`).
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.state = GameState.NOT_STARTED
        self._reset()

    def _reset(self) -> None:
        self.snake = Snake.initial()
        self.pending_direction = INITIAL_DIRECTION
        self.score = 0
        self.tick_count = 0
        self.food = place_food(self.snake.occupancy(), self.rng)

    def start(self) -> GameSnapshot:
        """Begin the first round. Ignored once the game has started."""
        if self.state != GameState.NOT_STARTED:
            logger.debug("Start ignored in state %s.", self.state.value)
            return self.snapshot()
        self._reset()
        self.state = GameState.RUNNING
        logger.info("Game started.")
        return self.snapshot()

    def set_direction(self, direction: Direction) -> bool:
        """Queue *direction* for the next tick unless it reverses the pending one.

        The latest accepted direction wins. Returns whether it was accepted.
        """
        if direction == opposite(self.pending_direction):
            return False
        self.pending_direction = direction
        return True

    def apply(self, intent: Intent) -> GameSnapshot:
        """Apply a normalized intent; intents invalid for the state are ignored."""
        if intent == Intent.TOGGLE_PAUSE:
            if self.state == GameState.RUNNING:
                self.state = GameState.PAUSED
                logger.debug("Game paused at tick %d.", self.tick_count)
            elif self.state == GameState.PAUSED:
                self.state = GameState.RUNNING
                logger.debug("Game resumed at tick %d.", self.tick_count)
        elif intent == Intent.RESTART:
            if self.state == GameState.GAME_OVER:
                self._reset()
                self.state = GameState.RUNNING
                logger.info("Game restarted.")
        elif self.state == GameState.RUNNING:
            direction = intent.direction
            if direction is not None and not self.set_direction(direction):
                logger.debug("Reversal to %s discarded.", direction.name)
        return self.snapshot()

    def press(self, key: str) -> GameSnapshot:
        """Handle a raw key identifier. Unknown keys change nothing."""
        intent = map_key(key, self.state)
        if intent is None:
            logger.debug("Key %r ignored in state %s.", key, self.state.value)
            return self.snapshot()
        return self.apply(intent)

    def tick(self) -> GameSnapshot:
        """Advance the game by one step. Only runs while RUNNING."""
        if self.state != GameState.RUNNING:
            return self.snapshot()

        result = advance(self.snake, self.pending_direction, self.food)
        if result.collided is not None:
            # The attempted move is discarded; the last good snake stays.
            self.state = GameState.GAME_OVER
            logger.info(
                "Game over (%s collision) at tick %d with score %d.",
                result.collided.value, self.tick_count, self.score,
            )
            return self.snapshot()

        self.snake = result.snake
        if result.ate_food:
            self.score += FOOD_REWARD
            self.food = place_food(self.snake.occupancy(), self.rng)
        self.tick_count += 1
        return self.snapshot()

    def snapshot(self) -> GameSnapshot:
        """Return an immutable view of the current state."""
        return GameSnapshot(
            snake=self.snake.body,
            food=self.food,
            score=self.score,
            state=self.state,
            direction=self.pending_direction,
            tick=self.tick_count,
        )
