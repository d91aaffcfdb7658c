"""
Food entity - the single item the snake is chasing.
"""

import random
from typing import Callable

from .snake import Position

# Uniform integer source returning a value in [0, n).
RandomInt = Callable[[int], int]


class Food:
    """
    A single piece of food on the board.

    Placement does not look at the snake, so food can land under the body.
    """

    def __init__(self, position: Position):
        self.position = Position(*position)

    def relocate(self, max_x: int, max_y: int, rng: RandomInt = random.randrange) -> Position:
        """
        Move the food to a random cell in [0, max_x) x [0, max_y).

        Args:
            max_x: exclusive upper bound for x
            max_y: exclusive upper bound for y
            rng: uniform integer source, called as rng(n) -> [0, n)

        Returns:
            The new position
        """
        self.position = Position(rng(max_x), rng(max_y))
        return self.position

    def __repr__(self):
        return f"<Food position={tuple(self.position)}>"
