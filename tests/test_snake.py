"""Tests for the Snake module."""

from collections import deque

import pytest

from term_snake.snake import CollisionKind, Direction, Segment, Snake


def _snake(body, direction, width=32, height=32):
    snake = Snake(width, height, direction)
    snake.body = deque(Segment(x, y) for x, y in body)
    snake.target_length = len(body)
    return snake


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(32, 32)
        snake.initialize(3, 12, 12)
        assert snake.head == (12, 12)
        assert snake.length == 3
        assert snake.direction == Direction.UP

    def test_body_extends_in_increasing_x(self):
        snake = Snake(32, 32)
        snake.initialize(3, 12, 12)
        assert list(snake.body) == [(12, 12), (13, 12), (14, 12)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(10, 10).initialize(0, 2, 2)


class TestSnakeDirection:
    def test_set_valid_direction(self):
        snake = Snake(10, 10, Direction.UP)
        snake.set_direction(Direction.LEFT)
        assert snake.direction == Direction.LEFT

    def test_ignore_180_reversal_vertical(self):
        snake = Snake(10, 10, Direction.UP)
        snake.set_direction(Direction.DOWN)
        assert snake.direction == Direction.UP

    def test_ignore_180_reversal_horizontal(self):
        snake = Snake(10, 10, Direction.RIGHT)
        snake.set_direction(Direction.LEFT)
        assert snake.direction == Direction.RIGHT

    def test_same_direction_is_allowed(self):
        snake = Snake(10, 10, Direction.DOWN)
        snake.set_direction(Direction.DOWN)
        assert snake.direction == Direction.DOWN


class TestSnakeMovement:
    def test_next_head(self):
        snake = _snake([(5, 5), (6, 5)], Direction.UP)
        assert snake.next_head() == (5, 4)

    def test_move_forward(self):
        snake = _snake([(5, 5), (6, 5), (7, 5)], Direction.UP)
        assert snake.move_forward() is None
        assert list(snake.body) == [(5, 4), (5, 5), (6, 5)]

    def test_length_preserved_across_moves(self):
        snake = Snake(20, 20)
        snake.initialize(4, 5, 15)
        for _ in range(10):
            assert snake.move_forward() is None
            assert len(snake.body) == snake.length == 4

    def test_moving_into_vacated_tail_is_allowed(self):
        # A 2x2 loop: the head steps into the cell the tail leaves.
        snake = _snake([(5, 5), (5, 6), (6, 6), (6, 5)], Direction.RIGHT)
        assert snake.move_forward() is None
        assert snake.head == (6, 5)


class TestSnakeGrowth:
    def test_horizontal_extension(self):
        snake = _snake([(12, 12), (11, 12), (10, 12)], Direction.RIGHT)
        snake.grow_after_eating()
        assert snake.body[-1] == (9, 12)
        assert snake.length == 4
        assert len(snake.body) == 4

    def test_vertical_extension(self):
        snake = _snake([(4, 4), (4, 5), (4, 6)], Direction.UP)
        snake.grow_after_eating()
        assert snake.body[-1] == (4, 7)

    def test_single_segment_extends_behind_head(self):
        snake = _snake([(4, 4)], Direction.LEFT)
        snake.grow_after_eating()
        assert list(snake.body) == [(4, 4), (5, 4)]

    def test_length_stays_grown_after_move(self):
        snake = _snake([(12, 12), (11, 12), (10, 12)], Direction.RIGHT)
        snake.grow_after_eating()
        assert snake.move_forward() is None
        assert len(snake.body) == 4
        assert snake.head == (13, 12)


class TestSnakeCollision:
    def test_wall_on_left(self):
        snake = _snake([(1, 10), (2, 10), (3, 10)], Direction.LEFT, width=3)
        assert snake.move_forward() == CollisionKind.OUT_OF_BOUNDS

    @pytest.mark.parametrize(
        ("head", "direction"),
        [
            ((5, 1), Direction.UP),
            ((5, 8), Direction.DOWN),
            ((8, 5), Direction.RIGHT),
        ],
    )
    def test_wall_on_each_side(self, head, direction):
        snake = _snake([head], direction, width=10, height=10)
        assert snake.move_forward() == CollisionKind.OUT_OF_BOUNDS

    def test_failed_move_leaves_body_untouched(self):
        snake = _snake([(1, 10), (2, 10)], Direction.LEFT)
        snake.move_forward()
        assert list(snake.body) == [(1, 10), (2, 10)]

    def test_self_collision(self):
        # Moving down lands the head on the fourth segment.
        body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        snake = _snake(body, Direction.DOWN)
        assert snake.move_forward() == CollisionKind.SELF_COLLISION

    def test_overlapping_body_segments(self):
        # The head is clear, but two remaining segments share a cell.
        body = [(5, 5), (6, 5), (6, 5), (7, 5)]
        snake = _snake(body, Direction.UP)
        assert snake.move_forward() == CollisionKind.SELF_COLLISION
        assert list(snake.body) == body
