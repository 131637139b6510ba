"""Grid representation for the terminal snake game."""

from __future__ import annotations

from typing import TextIO

import numpy as np

# Clear screen, then move the cursor to the top-left corner.
CLEAR_SCREEN = "\x1b[2J\x1b[H"
LINE_END = "\r\n"


class Grid:
    """NumPy-backed character buffer with a one-cell wall border.

    Coordinates are ``(x, y)``; the buffer is indexed ``[y, x]`` so that
    each NumPy row is one line of the rendered frame.
    """

    def __init__(
        self,
        width: int = 32,
        height: int = 32,
        wall_tile: str = "#",
        floor_tile: str = " ",
    ) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid dimensions must be at least 3×3.")
        for tile in (wall_tile, floor_tile):
            if len(tile) != 1:
                raise ValueError(f"Tile glyph must be one character, got {tile!r}.")
        self.width = width
        self.height = height
        self.wall_tile = wall_tile
        self.floor_tile = floor_tile
        self.tiles = np.full((height, width), floor_tile, dtype="<U1")
        self.reset()

    def reset(self) -> None:
        """Fill the interior with floor tiles and the border with walls."""
        self.tiles[:] = self.floor_tile
        self.tiles[0, :] = self.wall_tile
        self.tiles[-1, :] = self.wall_tile
        self.tiles[:, 0] = self.wall_tile
        self.tiles[:, -1] = self.wall_tile

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> str:
        """Return the glyph at the given coordinate."""
        self._check_bounds(x, y)
        return str(self.tiles[y, x])

    def set_tile(self, x: int, y: int, symbol: str) -> None:
        """Write a single glyph at the given coordinate."""
        self._check_bounds(x, y)
        self.tiles[y, x] = symbol

    def rows(self) -> list[str]:
        """Return the buffer as one string per line."""
        return ["".join(row) for row in self.tiles.tolist()]

    def render(self, stream: TextIO) -> None:
        """Draw the full buffer as one frame, replacing the previous one."""
        frame = "".join(row + LINE_END for row in self.rows())
        stream.write(CLEAR_SCREEN + frame)
        stream.flush()

    def _check_bounds(self, x: int, y: int) -> None:
        # NumPy would silently wrap negative indices.
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Tile ({x}, {y}) outside {self.width}x{self.height} grid."
            )
