"""
GameState entity - a render-ready snapshot of the game at one tick.
"""

from typing import List, Tuple, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_count: ticks since the current round started
        snake_positions: list of (x, y) from head to tail
        food: (x, y) of the food, or None before the first round starts
        score: snake length minus one
        width, height: board dimensions
        vector: current movement vector as (dx, dy)
        running: whether the tick timer is active
        round_number: which round we are in (0-based)
    """

    def __init__(
        self,
        tick_count: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        width: int,
        height: int,
        vector: Tuple[int, int] = (0, 0),
        running: bool = False,
        round_number: int = 0
    ):
        self.tick_count = tick_count
        self.snake_positions = snake_positions
        self.food = food
        self.score = score
        self.width = width
        self.height = height
        self.vector = vector
        self.running = running
        self.round_number = round_number

    @property
    def head(self) -> Optional[Tuple[int, int]]:
        return self.snake_positions[0] if self.snake_positions else None

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Row 0 is printed first since y grows downward.
        """
        # Create empty board
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        # Tail first so the head wins on a shared cell
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        # x-axis labels at the bottom
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        """JSON-friendly representation."""
        return {
            "round_number": self.round_number,
            "tick_count": self.tick_count,
            "snake_positions": [list(p) for p in self.snake_positions],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "width": self.width,
            "height": self.height,
            "vector": list(self.vector),
            "running": self.running,
        }

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, tick={self.tick_count}, "
            f"food={self.food}, length={len(self.snake_positions)}, score={self.score}>"
        )
