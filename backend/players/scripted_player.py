"""
Scripted player - replays a fixed move per tick.
"""

from typing import Dict

from domain.game_state import GameState
from .base import InputSource


class ScriptedPlayer(InputSource):
    """
    Emits moves[tick_count] after the tick with that count, so the move
    applies to the following tick. moves[0] is emitted when the round starts.
    """

    def __init__(self, moves: Dict[int, str]):
        super().__init__()
        self.moves = dict(moves)

    def poll(self, game_state: GameState) -> None:
        move = self.moves.get(game_state.tick_count)
        if move is not None:
            self.emit(move)
