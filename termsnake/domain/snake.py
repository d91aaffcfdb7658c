"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, NamedTuple, Optional, TYPE_CHECKING

from .constants import Direction, RIGHT

if TYPE_CHECKING:
    from .food import Food


class Position(NamedTuple):
    """A grid cell. Bounds are the board's business, not the cell's."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


def point_in_set(point: Position, positions: Iterable[Position]) -> bool:
    """Linear scan used when classifying body cells for a frame."""
    for p in positions:
        if p.x == point.x and p.y == point.y:
            return True
    return False


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        direction: current heading
        head: position of the head
        body: deque of positions, newest segment at index 0, tail at the end
        has_eaten: set by a food collision, consumed by the next move
    """

    def __init__(
        self,
        head: Position,
        body: Optional[Iterable[Position]] = None,
        direction: Direction = RIGHT,
    ):
        self.direction = direction
        self.head = Position(*head)
        self.body = deque(Position(*p) for p in (body or []))
        self.has_eaten = False

    @classmethod
    def spawn(cls, x: int, y: int) -> "Snake":
        """A fresh snake heading right with one body segment behind the head."""
        return cls(Position(x, y), [Position(x - 1, y)], RIGHT)

    @property
    def length(self) -> int:
        return len(self.body)

    def move_forward(self) -> None:
        # The tail stays put on the tick after eating.
        if not self.has_eaten:
            self.body.pop()
        else:
            self.has_eaten = False
        self.body.appendleft(self.head)
        self.head = self.head.step(self.direction)

    def check_food_collision(self, food: "Food") -> bool:
        if self.head == food.position:
            self.has_eaten = True
            return True
        return False

    def is_colliding_with_wall(self, width: int, height: int) -> bool:
        x, y = self.head
        return x < 0 or x >= width or y < 0 or y >= height

    def __repr__(self):
        return (
            f"<Snake head={tuple(self.head)}, direction={self.direction.value}, "
            f"length={self.length}>"
        )
