"""Fruit placement logic."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)


class Fruit:
    """A single fruit placed uniformly at random inside the wall border.

    Uses an injected NumPy RNG for deterministic, reproducible placement.
    Placement does not avoid the snake, so a fruit may appear under its
    body until the snake moves away.
    """

    def __init__(
        self,
        x: int,
        y: int,
        field_width: int,
        field_height: int,
        rng: np.random.Generator | None = None,
        glyph: str = "@",
    ) -> None:
        if field_width < 3 or field_height < 3:
            raise ValueError("Field must have at least one interior cell.")
        self.x = x
        self.y = y
        self.field_width = field_width
        self.field_height = field_height
        self.rng = rng if rng is not None else np.random.default_rng()
        self.glyph = glyph

    @classmethod
    def spawn(
        cls,
        field_width: int,
        field_height: int,
        rng: np.random.Generator | None = None,
        glyph: str = "@",
    ) -> Fruit:
        """Create a fruit at a random interior position."""
        fruit = cls(0, 0, field_width, field_height, rng=rng, glyph=glyph)
        fruit.relocate()
        return fruit

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def relocate(self) -> None:
        """Move to a new random interior position (repeats allowed)."""
        self.x = int(self.rng.integers(1, self.field_width - 1))
        self.y = int(self.rng.integers(1, self.field_height - 1))
        logger.debug("Fruit placed at (%d, %d).", self.x, self.y)

    def is_at(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y
