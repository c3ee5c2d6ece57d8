"""
Base input source interface for the game engine.
"""

import logging
from typing import Callable, Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class InputSource:
    """
    Base class/interface for direction input.

    An input source emits discrete direction events ("UP", "DOWN", "LEFT",
    "RIGHT") to the single handler that subscribed to it. The run loop calls
    poll() once per tick so sources that decide moves from the board state
    get a chance to emit before the next tick.
    """

    def __init__(self):
        self._handler: Optional[Callable[[str], None]] = None

    @property
    def subscribed(self) -> bool:
        return self._handler is not None

    def subscribe(self, handler: Callable[[str], None]) -> None:
        """Register the handler that receives direction events."""
        self._handler = handler

    def emit(self, direction: str) -> None:
        """Forward a direction event to the subscriber."""
        if self._handler is None:
            logger.debug("Dropping direction %s: no subscriber", direction)
            return
        self._handler(direction)

    def poll(self, game_state: GameState) -> None:
        """
        Called by the run loop after every tick.

        Args:
            game_state: Snapshot returned by the last tick
        """
        return None
