"""
Game constants for termsnake.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Heading of the snake. Screen coordinates: y grows downwards."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Board defaults
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 20
DEFAULT_TICK_MS = 500
DEFAULT_START = (10, 10)
DEFAULT_FOOD = (15, 15)

# Glyphs
WALL_GLYPH = "■"
HEAD_GLYPH = "☺"
BODY_GLYPH = "○"
FOOD_GLYPH = "●"
EMPTY_GLYPH = " "

CLEAR_VIEWPORT = "\x1b[2J\x1b[1;1H"
LINE_END = "\n\r"
GAME_OVER_MESSAGE = "You are DEAD!"
