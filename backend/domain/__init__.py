"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
rendering and input concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    TAIL_COLLISION, BORDER_COLLISION,
    DEFAULT_BOARD_WIDTH, DEFAULT_BOARD_HEIGHT, DEFAULT_TICK_RATE_MS,
)
from .geometry import Point, Position, Vector, Size, ZERO_VECTOR
from .snake import Snake
from .direction import DIRECTION_VECTORS, steer, direction_of, normalize_direction
from .food import place_food
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'TAIL_COLLISION', 'BORDER_COLLISION',
    'DEFAULT_BOARD_WIDTH', 'DEFAULT_BOARD_HEIGHT', 'DEFAULT_TICK_RATE_MS',
    'Point', 'Position', 'Vector', 'Size', 'ZERO_VECTOR',
    'Snake',
    'DIRECTION_VECTORS', 'steer', 'direction_of', 'normalize_direction',
    'place_food',
    'GameState',
]
