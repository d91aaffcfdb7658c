"""
Domain entities for the termsnake game engine.

This module contains the core game entities. None of them know about
threads, locks or the terminal.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction
from .snake import Position, Snake, point_in_set
from .food import Food
from .game_state import GameStatus, WorldSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'Position',
    'Snake',
    'point_in_set',
    'Food',
    'GameStatus',
    'WorldSnapshot',
]
