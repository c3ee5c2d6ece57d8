"""
Input sources for the Snake engine.

This module contains the input abstractions and implementations
that emit direction events to a running game.
"""

from .base import InputSource
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'InputSource',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
