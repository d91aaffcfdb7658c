"""
WorldState - the lock-protected aggregate shared by all game threads.

Snake, Food and GameStatus each live in their own GuardedCell. Any path
that holds more than one of them takes them in the order
snake -> food -> status. No lock is held across a sleep or a key read.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

from .config import GameConfig
from .domain.constants import Direction
from .domain.food import Food
from .domain.game_state import GameStatus, WorldSnapshot
from .domain.snake import Position, Snake
from .sync import GuardedCell

logger = logging.getLogger(__name__)


class WorldState:
    """The single source of truth for one game."""

    def __init__(self, snake: Snake, food: Food, status: GameStatus = GameStatus.STARTED):
        self.snake_cell: GuardedCell[Snake] = GuardedCell(snake, "snake")
        self.food_cell: GuardedCell[Food] = GuardedCell(food, "food")
        self.status_cell: GuardedCell[GameStatus] = GuardedCell(status, "status")

    @classmethod
    def new_game(cls, config: GameConfig) -> "WorldState":
        return cls(
            Snake.spawn(config.start_x, config.start_y),
            Food(Position(config.food_x, config.food_y)),
        )

    @contextmanager
    def snake_and_food(self) -> Iterator[Tuple[Snake, Food]]:
        """Hold both the snake and food locks, snake first."""
        with self.snake_cell.lock() as snake:
            with self.food_cell.lock() as food:
                yield snake, food

    def steer(self, direction: Direction) -> None:
        # Reversals are accepted as-is.
        with self.snake_cell.lock() as snake:
            snake.direction = direction

    @property
    def status(self) -> GameStatus:
        return self.status_cell.get()

    def end(self) -> bool:
        """
        Mark the game as ended.

        Returns:
            True if this call made the Started -> Ended transition,
            False if the game had already ended
        """
        previous = self.status_cell.swap(GameStatus.ENDED)
        if previous is GameStatus.STARTED:
            logger.info("Game status changed to %s", GameStatus.ENDED.value)
            return True
        return False

    def snapshot(self) -> WorldSnapshot:
        """Copy everything a frame needs under one ordered acquisition."""
        with self.snake_and_food() as (snake, food):
            with self.status_cell.lock() as status:
                return WorldSnapshot(
                    head=snake.head,
                    body=tuple(snake.body),
                    food=food.position,
                    direction=snake.direction,
                    status=status,
                )
