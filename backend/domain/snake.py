"""
Snake entity for the game engine.
"""

from typing import Iterable, List, Optional

from .geometry import Point, Position, Vector, ZERO_VECTOR


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: list of Points from head at index 0 to tail at the end
        vector: movement applied to the head on every advance; zero until
            the first direction input arrives
    """

    def __init__(self, positions: Optional[Iterable[Position]] = None,
                 vector: Vector = ZERO_VECTOR):
        if positions is None:
            positions = [Point()]
        self.positions: List[Position] = [Point(*p) for p in positions]
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        self.vector = Point(*vector)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, point) -> bool:
        return Point(*point) in self.positions

    def advance(self) -> None:
        """
        Move the snake one step along its vector.

        Every segment takes the cell of the one ahead of it, then the head
        moves. Right after grow() the last two segments share a cell; the
        shift then starts one segment earlier so the copy stays behind and
        the body gets longer by one.
        """
        points = self.positions
        last_index = len(points) - 1

        if len(points) > 1 and points[-1] == points[-2]:
            last_index = len(points) - 2

        for i in range(last_index, 0, -1):
            points[i] = points[i - 1]

        points[0] = points[0].translate(self.vector)

    def grow(self) -> None:
        """Append a segment on top of the current tail."""
        self.positions.append(self.tail)

    def body(self) -> List[Position]:
        """Segments behind the head."""
        return self.positions[1:]

    def __repr__(self):
        return f"<Snake head={tuple(self.head)} length={len(self)} vector={tuple(self.vector)}>"
