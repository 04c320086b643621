"""Grid Snake: single-player snake game core."""

from grid_snake.collision import CollisionKind, check_collision
from grid_snake.config import GameConfig
from grid_snake.engine import MoveResult, advance
from grid_snake.food import place_food
from grid_snake.game import FOOD_REWARD, GameSnapshot, GameState, SnakeGame
from grid_snake.grid import GRID_SIZE, CellType, Position
from grid_snake.intents import Intent, map_key
from grid_snake.session import GameSession, TickTimer
from grid_snake.snake import Direction, Snake, opposite

__all__ = [
    "FOOD_REWARD",
    "GRID_SIZE",
    "CellType",
    "CollisionKind",
    "Direction",
    "GameConfig",
    "GameSession",
    "GameSnapshot",
    "GameState",
    "Intent",
    "MoveResult",
    "Position",
    "Snake",
    "SnakeGame",
    "TickTimer",
    "advance",
    "check_collision",
    "map_key",
    "opposite",
    "place_food",
]
