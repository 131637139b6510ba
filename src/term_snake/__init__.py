"""Term Snake — terminal snake game."""

from term_snake.config import GameConfig, Glyphs
from term_snake.engine import GameLoop, GameResult
from term_snake.fruit import Fruit
from term_snake.grid import Grid
from term_snake.snake import CollisionKind, Direction, Segment, Snake

__all__ = [
    "CollisionKind",
    "Direction",
    "Fruit",
    "GameConfig",
    "GameLoop",
    "GameResult",
    "Glyphs",
    "Grid",
    "Segment",
    "Snake",
]
