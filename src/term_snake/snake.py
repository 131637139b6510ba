"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from typing import NamedTuple


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


class CollisionKind(enum.Enum):
    """Reasons a move can end the game."""

    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"


class Segment(NamedTuple):
    """One body cell of the snake."""

    x: int
    y: int


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The field bounds
    are used to detect moves onto the wall border.
    """

    def __init__(
        self,
        field_width: int,
        field_height: int,
        direction: Direction = Direction.UP,
    ) -> None:
        self.field_width = field_width
        self.field_height = field_height
        self.direction = direction
        self.body: deque[Segment] = deque()
        self.target_length = 0

    def initialize(self, length: int, start_x: int, start_y: int) -> None:
        """Lay out *length* segments in a row, head first, growing in x."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body.clear()
        for i in range(length):
            self.body.append(Segment(start_x + i, start_y))
        self.target_length = length

    @property
    def head(self) -> Segment:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def length(self) -> int:
        return self.target_length

    def set_direction(self, requested: Direction) -> None:
        """Change direction, ignoring 180° reversals."""
        if _OPPOSITES[requested] != self.direction:
            self.direction = requested

    def next_head(self) -> Segment:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return Segment(x + dx, y + dy)

    def move_forward(self) -> CollisionKind | None:
        """Advance one cell in the facing direction.

        Returns ``None`` on success, or the collision that ended the game.
        A failed move leaves the body untouched.
        """
        new_head = self.next_head()
        if self._hits_wall(new_head):
            return CollisionKind.OUT_OF_BOUNDS

        # The tail vacates its cell this tick.
        remaining = list(self.body)[:-1]
        occupied = set(remaining)
        if new_head in occupied or len(occupied) != len(remaining):
            return CollisionKind.SELF_COLLISION

        self.body.pop()
        self.body.appendleft(new_head)
        return None

    def grow_after_eating(self) -> None:
        """Append one segment past the tail, continuing the tail's line."""
        tail = self.body[-1]
        if len(self.body) > 1:
            before = self.body[-2]
            x, y = tail
            if tail.x == before.x:
                y = tail.y * 2 - before.y
            elif tail.y == before.y:
                x = tail.x * 2 - before.x
            new_tail = Segment(x, y)
        else:
            dx, dy = self.direction.value
            new_tail = Segment(tail.x - dx, tail.y - dy)
        self.body.append(new_tail)
        self.target_length += 1

    def _hits_wall(self, segment: Segment) -> bool:
        return (
            segment.x <= 0 or segment.y <= 0
            or segment.x >= self.field_width - 1
            or segment.y >= self.field_height - 1
        )
