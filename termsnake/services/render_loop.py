"""
Render loop - paints the world to the terminal once per frame.
"""

import logging
import sys
import threading
from typing import List, Optional, TextIO

from ..domain.constants import (
    BODY_GLYPH,
    CLEAR_VIEWPORT,
    EMPTY_GLYPH,
    FOOD_GLYPH,
    GAME_OVER_MESSAGE,
    HEAD_GLYPH,
    LINE_END,
    WALL_GLYPH,
)
from ..domain.game_state import GameStatus, WorldSnapshot
from ..domain.snake import Position, point_in_set
from ..world_state import WorldState
from .base import GameThread

logger = logging.getLogger(__name__)


def cell_glyph(snapshot: WorldSnapshot, point: Position) -> str:
    """Classify a cell: head, then body, then food, then blank."""
    if point == snapshot.head:
        return HEAD_GLYPH
    if point_in_set(point, snapshot.body):
        return BODY_GLYPH
    if point == snapshot.food:
        return FOOD_GLYPH
    return EMPTY_GLYPH


def render_frame(snapshot: WorldSnapshot, width: int, height: int) -> str:
    """
    Return the frame text for a snapshot: height + 2 rows of width + 2 glyphs,
    walls included. Rows end with a raw-mode line break.
    """
    border = WALL_GLYPH * (width + 2)
    rows: List[str] = [border]
    for y in range(height):
        cells = "".join(cell_glyph(snapshot, Position(x, y)) for x in range(width))
        rows.append(f"{WALL_GLYPH}{cells}{WALL_GLYPH}")
    rows.append(border)
    return LINE_END.join(rows) + LINE_END


class RenderLoop(GameThread):
    """
    Draws a frame from a fresh snapshot, waits one frame interval, then
    checks whether the game has ended. The game-over message therefore
    shows up at most one frame after the simulation ends the game.
    """

    def __init__(
        self,
        world: WorldState,
        width: int,
        height: int,
        interval: float,
        stop_event: threading.Event,
        out: Optional[TextIO] = None,
    ):
        super().__init__("render", stop_event)
        self.world = world
        self.width = width
        self.height = height
        self.interval = interval
        self.out = out if out is not None else sys.stdout
        self.frames = 0

    def draw(self) -> WorldSnapshot:
        snapshot = self.world.snapshot()
        self.out.write(CLEAR_VIEWPORT + render_frame(snapshot, self.width, self.height))
        self.out.flush()
        self.frames += 1
        return snapshot

    def loop(self) -> None:
        while not self.stop_event.is_set():
            self.draw()
            if self.stop_event.wait(self.interval):
                break
            if self.world.status is GameStatus.ENDED:
                self.out.write(GAME_OVER_MESSAGE + LINE_END)
                self.out.flush()
                logger.info("Render stopped after %d frames: game over", self.frames)
                break
