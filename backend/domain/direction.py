"""
Direction control: turns discrete direction inputs into a movement vector.
"""

import logging
from typing import Dict, Optional

from .constants import UP, DOWN, LEFT, RIGHT
from .geometry import Vector, ZERO_VECTOR

logger = logging.getLogger(__name__)

# y grows downward, as on screen
DIRECTION_VECTORS: Dict[str, Vector] = {
    UP:    Vector(0, -1),
    DOWN:  Vector(0, 1),
    LEFT:  Vector(-1, 0),
    RIGHT: Vector(1, 0),
}


def normalize_direction(direction) -> Optional[str]:
    """Return the canonical direction name, or None if it is not one of the four."""
    if not isinstance(direction, str):
        return None
    name = direction.strip().upper()
    return name if name in DIRECTION_VECTORS else None


def steer(current: Vector, direction) -> Vector:
    """
    Return the movement vector after applying a direction input.

    Unknown directions and exact reversals of a non-zero vector leave the
    vector unchanged. A zero vector has no opposite, so the first input
    always takes effect.
    """
    name = normalize_direction(direction)
    if name is None:
        logger.debug("Ignoring unknown direction %r", direction)
        return current

    requested = DIRECTION_VECTORS[name]
    if current != ZERO_VECTOR and requested == current.opposite():
        logger.debug("Ignoring reversal %s", name)
        return current

    return requested


def direction_of(vector: Vector) -> Optional[str]:
    """Map a unit vector back to its direction name (None for zero)."""
    for name, candidate in DIRECTION_VECTORS.items():
        if candidate == vector:
            return name
    return None
