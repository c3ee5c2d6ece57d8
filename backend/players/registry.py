"""
Registry for input sources selectable by name (e.g. from the CLI).
"""

from typing import Dict, Optional, Type

from .base import InputSource
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer


# Registry: maps player key -> input source class
PLAYER_CLASSES: Dict[str, Type[InputSource]] = {
    "random": RandomPlayer,
    "scripted": ScriptedPlayer,
    "idle": InputSource,
}

AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[InputSource]:
    """
    Get the input source class for a given player key.

    Args:
        player_key: One of 'random', 'scripted', 'idle'. If None or empty, returns random.

    Returns:
        The input source class (subclass of InputSource).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "random"

    player_key = player_key.strip()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]


def list_players() -> list:
    """
    Return metadata about all available input sources.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Autopilot picking random safe moves"},
        {"key": "scripted", "description": "Replays a fixed move per tick"},
        {"key": "idle", "description": "Never steers; the snake waits for input"},
    ]
