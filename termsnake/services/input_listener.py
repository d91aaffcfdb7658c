"""
Input listener - turns key presses into steering and quit requests.
"""

import logging
import threading
from typing import Callable, Dict, Optional

import readchar

from ..domain.constants import DOWN, LEFT, RIGHT, UP, Direction
from ..world_state import WorldState
from .base import GameThread
from .keyboard import KeyReader

try:
    import termios
except ImportError:  # Windows
    termios = None

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[str, Direction] = {
    readchar.key.LEFT: LEFT,
    readchar.key.RIGHT: RIGHT,
    readchar.key.UP: UP,
    readchar.key.DOWN: DOWN,
}
QUIT_KEYS = {"q", readchar.key.ESC}

# A key source failing this way leaves the game running without input.
KEY_SOURCE_ERRORS = (OSError, ValueError, EOFError) + (
    (termios.error,) if termios is not None else ()
)


class InputListener(GameThread):
    """
    Blocks on the keyboard and reacts to each key.

    The key read cannot be interrupted, so this thread is a daemon: once the
    game is over the process may exit while it is still waiting for a key.
    If the key source itself breaks (stdin closed, not a terminal) only this
    thread ends; the simulation plays on to the wall.
    """

    def __init__(
        self,
        world: WorldState,
        stop_event: threading.Event,
        read_key: Optional[Callable[[], str]] = None,
    ):
        super().__init__("input", stop_event, daemon=True)
        self.world = world
        self.read_key = read_key
        self.quit_requested = False
        self.input_lost = False

    def handle_key(self, key: str) -> bool:
        """
        Apply one key press.

        Returns:
            False if the key asked to quit, True otherwise
        """
        if key in QUIT_KEYS:
            self.request_quit()
            return False

        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.world.steer(direction)
            logger.debug("Steering %s", direction.value)
        return True

    def request_quit(self) -> None:
        logger.info("Quit requested")
        self.quit_requested = True
        self.stop_event.set()

    def lose_input(self, error: BaseException) -> None:
        self.input_lost = True
        logger.warning(f"Keyboard input unavailable, continuing without it: {error}")

    def loop(self) -> None:
        try:
            read_key = self.read_key if self.read_key is not None else KeyReader()
        except KEY_SOURCE_ERRORS as e:
            self.lose_input(e)
            return

        while not self.stop_event.is_set():
            try:
                key = read_key()
            except KeyboardInterrupt:
                # Ctrl-C arrives as a key while the terminal is raw.
                self.request_quit()
                break
            except KEY_SOURCE_ERRORS as e:
                self.lose_input(e)
                break
            if not self.handle_key(key):
                break
