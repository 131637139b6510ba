"""Tick-based game loop composing grid, snake, fruit and keyboard input."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

import numpy as np

from term_snake.config import GameConfig
from term_snake.fruit import Fruit
from term_snake.grid import Grid
from term_snake.snake import CollisionKind, Snake

if TYPE_CHECKING:
    from term_snake.keyboard import KeyboardInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """How a finished game ended."""

    reason: CollisionKind | None
    length: int
    ticks: int

    @property
    def quit(self) -> bool:
        """True when the player quit before any collision."""
        return self.reason is None


class GameLoop:
    """Single-snake game loop.

    The loop owns the grid, snake, and fruit. Each call to :meth:`tick`
    draws one frame, applies pending input and advances the snake;
    :meth:`run` repeats ticks on a fixed cadence until the game ends.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        output: TextIO | None = None,
        keyboard: KeyboardInput | None = None,
        rng: np.random.Generator | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.output = output if output is not None else sys.stdout
        self.keyboard = keyboard
        self.sleep = sleep
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        glyphs = self.config.glyphs
        self.grid = Grid(
            self.config.width, self.config.height,
            wall_tile=glyphs.wall, floor_tile=glyphs.floor,
        )
        self.snake = Snake(self.config.width, self.config.height)
        self.snake.initialize(
            self.config.initial_length, self.config.start_x, self.config.start_y,
        )
        self.fruit = Fruit.spawn(
            self.config.width, self.config.height,
            rng=self.rng, glyph=glyphs.fruit,
        )
        self.ticks = 0

    def tick(self) -> CollisionKind | None:
        """Run one simulation step.

        Returns the collision that ended the game, or ``None`` to continue.
        """
        self.grid.reset()
        for x, y in self.snake.body:
            self.grid.set_tile(x, y, self.config.glyphs.snake)

        # Eating is judged on the current head, before this tick's move.
        head = self.snake.head
        if self.fruit.is_at(head.x, head.y):
            self.snake.grow_after_eating()
            self.fruit.relocate()
            logger.debug(
                "Fruit eaten at tick %d; length now %d.",
                self.ticks, self.snake.length,
            )
        fruit_x, fruit_y = self.fruit.position
        self.grid.set_tile(fruit_x, fruit_y, self.fruit.glyph)

        self.grid.render(self.output)

        if self.keyboard is not None:
            direction = self.keyboard.poll()
            if direction is not None:
                self.snake.set_direction(direction)

        collision = self.snake.move_forward()
        self.ticks += 1
        return collision

    def run(self) -> GameResult:
        """Tick until a collision or a quit request ends the game."""
        logger.info(
            "Game started on %dx%d grid with length %d.",
            self.config.width, self.config.height, self.snake.length,
        )
        while True:
            collision = self.tick()
            if collision is not None:
                logger.info(
                    "Game over at tick %d: %s (length %d).",
                    self.ticks, collision.value, self.snake.length,
                )
                return GameResult(collision, self.snake.length, self.ticks)
            if self.keyboard is not None and self.keyboard.quit_requested:
                # Only set by poll() on this thread.
                logger.info("Player quit at tick %d.", self.ticks)
                return GameResult(None, self.snake.length, self.ticks)
            self.sleep(self.config.tick_interval)
