"""
Simulation loop - advances the world once per tick.
"""

import logging
import random
import threading

from ..domain.food import RandomInt
from ..domain.game_state import GameStatus
from ..world_state import WorldState
from .base import GameThread

logger = logging.getLogger(__name__)


class SimulationLoop(GameThread):
    """
    Fixed-tick state machine: Running until the snake hits a wall, then Ended.

    Each tick holds the snake and food locks (in that order) while it moves
    the snake, resolves food and checks the walls. The locks are released
    before waiting for the next tick.
    """

    def __init__(
        self,
        world: WorldState,
        width: int,
        height: int,
        interval: float,
        stop_event: threading.Event,
        rng: RandomInt = random.randrange,
    ):
        super().__init__("simulation", stop_event)
        self.world = world
        self.width = width
        self.height = height
        self.interval = interval
        self.rng = rng
        self.ticks = 0

    def tick(self) -> bool:
        """
        Run one tick.

        Returns:
            False once the game has ended, True if another tick should follow
        """
        with self.world.snake_and_food() as (snake, food):
            snake.move_forward()
            self.ticks += 1

            if snake.check_food_collision(food):
                # One less than the board on each axis.
                position = food.relocate(self.width - 1, self.height - 1, self.rng)
                logger.debug(
                    "Tick %d: food eaten at %s, relocated to %s",
                    self.ticks, tuple(snake.head), tuple(position)
                )

            if snake.is_colliding_with_wall(self.width, self.height):
                self.world.end()
                logger.info(
                    "Tick %d: snake hit the wall at %s (length %d)",
                    self.ticks, tuple(snake.head), snake.length
                )
                return False
        return True

    def loop(self) -> None:
        while not self.stop_event.is_set():
            if self.world.status is GameStatus.ENDED:
                break
            if not self.tick():
                break
            if self.stop_event.wait(self.interval):
                break
