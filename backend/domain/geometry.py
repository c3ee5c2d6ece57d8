"""
Grid coordinates for the game engine.

One value type covers positions, board sizes and per-tick movement vectors;
the aliases below only name the role a Point plays.
"""

from typing import NamedTuple


class Point(NamedTuple):
    """An (x, y) grid cell. Immutable, compares and hashes by component."""

    x: int = 0
    y: int = 0

    def translate(self, vector: "Point") -> "Point":
        """Return this point moved by vector."""
        return Point(self.x + vector.x, self.y + vector.y)

    def scale(self, factor: int) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def opposite(self) -> "Point":
        return Point(-self.x, -self.y)

    def within(self, size: "Point") -> bool:
        """True if this point lies in [0, size.x) x [0, size.y)."""
        return 0 <= self.x < size.x and 0 <= self.y < size.y


Position = Point
Vector = Point
Size = Point

ZERO_VECTOR = Vector(0, 0)
