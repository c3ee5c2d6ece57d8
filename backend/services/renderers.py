"""
Render adapters for the game engine.

A renderer owns the board drawing surface and outlives individual rounds.
The engine only talks to it through clear(), mark_snake(), mark_food(),
set_score() and flush(); render_state() paints a full GameState snapshot.
"""

import logging
from typing import List, Optional, TextIO

from domain.game_state import GameState
from domain.geometry import Point, Position, Size

logger = logging.getLogger(__name__)


class Renderer:
    """
    Base class/interface for board renderers.

    Attributes:
        size: board dimensions as a Size(width, height)
        score: last score passed to set_score()
    """

    def __init__(self, size: Size):
        size = Size(*size)
        if size.x <= 0 or size.y <= 0:
            raise ValueError(f"Board size must be positive, got {size.x}x{size.y}.")
        self.size = size
        self.score = 0

    def clear(self) -> None:
        """Reset every cell to empty."""
        raise NotImplementedError

    def mark_snake(self, point: Position) -> None:
        raise NotImplementedError

    def mark_food(self, point: Position) -> None:
        raise NotImplementedError

    def set_score(self, score: int) -> None:
        self.score = score

    def flush(self) -> None:
        """Called once a complete frame has been painted."""
        return None


class TextRenderer(Renderer):
    """Paints the board as characters and writes each frame to a stream."""

    EMPTY = "."
    SNAKE = "#"
    FOOD = "*"

    def __init__(self, size: Size, stream: Optional[TextIO]):
        if stream is None:
            raise ValueError("No render target: TextRenderer needs an output stream.")
        super().__init__(size)
        self.stream = stream
        self.matrix: List[List[str]] = []
        self._populate()

    def _populate(self) -> None:
        self.matrix = [[self.EMPTY for _ in range(self.size.x)] for _ in range(self.size.y)]

    def clear(self) -> None:
        for row in self.matrix:
            for x in range(len(row)):
                row[x] = self.EMPTY

    def mark_snake(self, point: Position) -> None:
        self._set_cell(point, self.SNAKE)

    def mark_food(self, point: Position) -> None:
        self._set_cell(point, self.FOOD)

    def _set_cell(self, point: Position, char: str) -> None:
        x, y = point
        self.matrix[y][x] = char

    def render_text(self) -> str:
        lines = ["".join(row) for row in self.matrix]
        lines.append(f"Score: {self.score}")
        return "\n".join(lines)

    def flush(self) -> None:
        self.stream.write(self.render_text() + "\n\n")
        self.stream.flush()


def render_state(renderer: Renderer, state: GameState) -> None:
    """Paint a snapshot: food, snake segments on the board, then the score."""
    if state.food is not None:
        renderer.mark_food(Point(*state.food))

    for position in state.snake_positions:
        point = Point(*position)
        if point.within(renderer.size):
            renderer.mark_snake(point)

    renderer.set_score(state.score)
    renderer.flush()


class MultiRenderer(Renderer):
    """Fans every call out to several renderers of the same board size."""

    def __init__(self, size: Size, renderers: List[Renderer]):
        super().__init__(size)
        for renderer in renderers:
            if renderer.size != self.size:
                raise ValueError("All renderers must share the board size.")
        self.renderers = list(renderers)

    def clear(self) -> None:
        for renderer in self.renderers:
            renderer.clear()

    def mark_snake(self, point: Position) -> None:
        for renderer in self.renderers:
            renderer.mark_snake(point)

    def mark_food(self, point: Position) -> None:
        for renderer in self.renderers:
            renderer.mark_food(point)

    def set_score(self, score: int) -> None:
        super().set_score(score)
        for renderer in self.renderers:
            renderer.set_score(score)

    def flush(self) -> None:
        for renderer in self.renderers:
            renderer.flush()
