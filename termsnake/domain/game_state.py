"""
Game status and the per-frame snapshot of the world.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import Direction
from .snake import Position


class GameStatus(str, Enum):
    """Started -> Ended, never back."""

    STARTED = "STARTED"
    ENDED = "ENDED"


@dataclass(frozen=True)
class WorldSnapshot:
    """
    A consistent copy of the world taken once per frame.

    Attributes:
        head: head position of the snake
        body: body segments, newest first
        food: food position
        direction: heading at the time of the snapshot
        status: game status at the time of the snapshot
    """

    head: Position
    body: Tuple[Position, ...]
    food: Position
    direction: Direction
    status: GameStatus

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def ended(self) -> bool:
        return self.status is GameStatus.ENDED
