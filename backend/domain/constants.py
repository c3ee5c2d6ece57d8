"""
Game constants for the Snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Round-end reasons
TAIL_COLLISION = "tail"
BORDER_COLLISION = "border"

# Game settings
DEFAULT_BOARD_WIDTH = 20
DEFAULT_BOARD_HEIGHT = 20
DEFAULT_TICK_RATE_MS = 150
DEFAULT_PIXEL_SIZE = 30
DEFAULT_MAX_FRAMES = 300  # ~45s of 150ms ticks, ~350MB of 20x20 frames
