"""
Food placement on free board cells.
"""

import random
from typing import Iterable

from .geometry import Point, Position, Size


def place_food(snake_positions: Iterable[Position], bounds: Size, rng=random) -> Position:
    """
    Return a random cell (x, y) not occupied by the snake.

    Draws uniformly over the board and redraws on every hit. A board with
    no free cell raises ValueError rather than looping forever.
    """
    bounds = Size(*bounds)
    occupied = {Point(*p) for p in snake_positions}
    free_cells = bounds.x * bounds.y - sum(1 for p in occupied if p.within(bounds))
    if free_cells <= 0:
        raise ValueError(f"No free cell left for food on a {bounds.x}x{bounds.y} board.")

    while True:
        cell = Point(rng.randint(0, bounds.x - 1), rng.randint(0, bounds.y - 1))
        if cell not in occupied:
            return cell
