"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List

from domain.constants import VALID_MOVES
from domain.direction import DIRECTION_VECTORS
from domain.geometry import Point, ZERO_VECTOR
from domain.game_state import GameState
from .base import InputSource


class RandomPlayer(InputSource):
    """
    An autopilot that emits a random direction avoiding walls, its own body
    and reversals.
    """

    def __init__(self, rng=None):
        super().__init__()
        self.rng = rng or random.Random()

    def choose_move(self, game_state: GameState) -> str:
        snake_positions = [Point(*p) for p in game_state.snake_positions]
        head = snake_positions[0]
        current = Point(*game_state.vector)
        board = Point(game_state.width, game_state.height)

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            vector = DIRECTION_VECTORS[move]
            if current != ZERO_VECTOR and vector == current.opposite():
                continue

            new_head = head.translate(vector)
            if not new_head.within(board):
                continue

            if new_head in snake_positions[1:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)

    def poll(self, game_state: GameState) -> None:
        if not game_state.snake_positions:
            return
        self.emit(self.choose_move(game_state))
