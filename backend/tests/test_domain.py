"""
Tests for the domain package - geometry, snake movement, direction control,
food placement and the GameState snapshot.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Point,
    Size,
    Vector,
    ZERO_VECTOR,
    Snake,
    GameState,
    DIRECTION_VECTORS,
    steer,
    direction_of,
    normalize_direction,
    place_food,
    UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
)


class TestPoint:
    """Tests for the Point value type."""

    def test_equality_by_component(self):
        assert Point(2, 3) == Point(2, 3)
        assert Point(2, 3) != Point(3, 2)

    def test_point_equals_plain_tuple(self):
        """Points unpack and compare like (x, y) tuples."""
        x, y = Point(4, 5)
        assert (x, y) == (4, 5)
        assert Point(4, 5) == (4, 5)

    def test_translate(self):
        assert Point(1, 1).translate(Vector(1, 0)) == Point(2, 1)
        assert Point(0, 0).translate(Vector(0, -1)) == Point(0, -1)

    def test_scale(self):
        """Board size to pixel size."""
        assert Size(20, 10).scale(30) == Size(600, 300)

    def test_opposite(self):
        assert Vector(1, 0).opposite() == Vector(-1, 0)
        assert ZERO_VECTOR.opposite() == ZERO_VECTOR

    def test_within(self):
        size = Size(5, 5)
        assert Point(0, 0).within(size)
        assert Point(4, 4).within(size)
        assert not Point(5, 2).within(size)
        assert not Point(-1, 2).within(size)
        assert not Point(2, 5).within(size)
        assert not Point(2, -1).within(size)

    def test_default_point_is_origin(self):
        assert Point() == Point(0, 0)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake starts with one segment and a zero vector."""
        snake = Snake([(5, 5)])
        assert snake.positions == [Point(5, 5)]
        assert snake.vector == ZERO_VECTOR
        assert len(snake) == 1

    def test_snake_defaults_to_origin(self):
        assert Snake().positions == [Point(0, 0)]

    def test_snake_requires_a_segment(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == Point(5, 5)
        assert snake.tail == Point(3, 5)
        assert snake.body() == [Point(4, 5), Point(3, 5)]

    def test_advance_with_zero_vector_stays_put(self):
        snake = Snake([(2, 2)])
        snake.advance()
        assert snake.positions == [Point(2, 2)]

    def test_advance_moves_head_by_vector(self):
        snake = Snake([(2, 2)], vector=(1, 0))
        snake.advance()
        assert snake.head == Point(3, 2)

    def test_advance_body_follows_head(self):
        snake = Snake([(3, 2), (2, 2), (1, 2)], vector=(0, 1))
        snake.advance()
        assert snake.positions == [Point(3, 3), Point(3, 2), Point(2, 2)]

    def test_grow_appends_copy_of_tail(self):
        """After grow() length increases by one and the new segment sits on the old tail."""
        snake = Snake([(3, 2), (2, 2)])
        snake.grow()
        assert len(snake) == 3
        assert snake.positions[-1] == Point(2, 2)
        assert snake.positions[-2] == Point(2, 2)

    def test_advance_right_after_growth_keeps_duplicate(self):
        """Two segments on one cell: the copy stays behind, nothing is lost."""
        snake = Snake([(0, 0), (0, 0)], vector=(1, 0))
        snake.advance()
        assert snake.positions == [Point(1, 0), Point(0, 0)]

    def test_advance_after_growth_of_longer_snake(self):
        snake = Snake([(3, 0), (2, 0), (1, 0)], vector=(1, 0))
        snake.grow()
        snake.advance()
        assert snake.positions == [Point(4, 0), Point(3, 0), Point(2, 0), Point(1, 0)]
        snake.advance()
        assert snake.positions == [Point(5, 0), Point(4, 0), Point(3, 0), Point(2, 0)]

    def test_length_never_drops_below_one(self):
        snake = Snake([(2, 2)], vector=(0, 1))
        for _ in range(10):
            snake.advance()
            assert len(snake) >= 1

    def test_contains(self):
        snake = Snake([(1, 1), (1, 2)])
        assert (1, 2) in snake
        assert Point(5, 5) not in snake


class TestDirection:
    """Tests for the direction controller."""

    def test_vectors_are_unit_directions(self):
        assert DIRECTION_VECTORS[UP] == Vector(0, -1)
        assert DIRECTION_VECTORS[DOWN] == Vector(0, 1)
        assert DIRECTION_VECTORS[LEFT] == Vector(-1, 0)
        assert DIRECTION_VECTORS[RIGHT] == Vector(1, 0)
        assert set(DIRECTION_VECTORS) == VALID_MOVES

    @pytest.mark.parametrize("direction", sorted(VALID_MOVES))
    def test_first_input_always_applies(self, direction):
        """A zero vector has no opposite."""
        assert steer(ZERO_VECTOR, direction) == DIRECTION_VECTORS[direction]

    @pytest.mark.parametrize("current,reverse", [
        (UP, DOWN), (DOWN, UP), (LEFT, RIGHT), (RIGHT, LEFT),
    ])
    def test_reversal_is_ignored(self, current, reverse):
        vector = DIRECTION_VECTORS[current]
        assert steer(vector, reverse) == vector

    def test_perpendicular_and_same_direction_apply(self):
        right = DIRECTION_VECTORS[RIGHT]
        assert steer(right, UP) == DIRECTION_VECTORS[UP]
        assert steer(right, DOWN) == DIRECTION_VECTORS[DOWN]
        assert steer(right, RIGHT) == right

    def test_unknown_direction_is_ignored(self):
        right = DIRECTION_VECTORS[RIGHT]
        assert steer(right, "SIDEWAYS") == right
        assert steer(right, None) == right
        assert steer(ZERO_VECTOR, "") == ZERO_VECTOR

    def test_direction_names_are_normalized(self):
        assert normalize_direction(" up ") == UP
        assert normalize_direction("Left") == LEFT
        assert normalize_direction("north") is None
        assert steer(ZERO_VECTOR, "down") == DIRECTION_VECTORS[DOWN]

    def test_direction_of(self):
        assert direction_of(Vector(0, -1)) == UP
        assert direction_of(ZERO_VECTOR) is None


class TestPlaceFood:
    """Tests for food placement."""

    def test_food_is_within_bounds(self):
        rng = random.Random(1)
        for _ in range(50):
            food = place_food([(0, 0)], Size(4, 3), rng=rng)
            assert 0 <= food.x < 4
            assert 0 <= food.y < 3

    def test_food_never_on_snake(self):
        rng = random.Random(7)
        snake = [(x, y) for x in range(3) for y in range(3) if (x, y) != (2, 2)]
        for _ in range(20):
            # Only one free cell left
            assert place_food(snake, Size(3, 3), rng=rng) == Point(2, 2)

    def test_food_avoids_snake_on_larger_board(self):
        rng = random.Random(3)
        snake = Snake([(2, 2), (2, 3), (2, 4), (3, 4)])
        for _ in range(100):
            assert place_food(snake.positions, Size(5, 5), rng=rng) not in snake.positions

    def test_full_board_raises(self):
        snake = [(x, y) for x in range(2) for y in range(2)]
        with pytest.raises(ValueError):
            place_food(snake, Size(2, 2), rng=random.Random(0))

    def test_accepts_plain_tuple_bounds(self):
        food = place_food([(0, 0)], (2, 1), rng=random.Random(0))
        assert food == Point(1, 0)


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick_count=3,
            snake_positions=[(2, 1), (1, 1)],
            food=(3, 3),
            score=1,
            width=5,
            height=5,
            vector=(1, 0),
            running=True,
            round_number=2
        )
        values.update(overrides)
        return GameState(**values)

    def test_gamestate_initialization(self):
        state = self._state()
        assert state.tick_count == 3
        assert state.head == (2, 1)
        assert state.food == (3, 3)
        assert state.score == 1
        assert state.running is True

    def test_print_board_marks_cells(self):
        board = self._state().print_board()
        lines = board.split("\n")
        # Row 0 printed first, x labels last
        assert lines[0].startswith(" 0")
        assert lines[1].split()[1:] == [".", "T", "H", ".", "."]
        assert lines[3].split()[1:] == [".", ".", ".", "A", "."]
        assert lines[-1].split() == ["0", "1", "2", "3", "4"]

    def test_print_board_without_food(self):
        board = self._state(food=None).print_board()
        assert "A" not in board

    def test_to_dict_is_json_friendly(self):
        data = self._state().to_dict()
        assert data["snake_positions"] == [[2, 1], [1, 1]]
        assert data["food"] == [3, 3]
        assert data["vector"] == [1, 0]

    def test_gamestate_repr(self):
        repr_str = repr(self._state())
        assert "round=2" in repr_str
        assert "tick=3" in repr_str
