"""
Base thread for the game loops.
"""

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class GameThread(threading.Thread):
    """
    A named worker that runs one game loop until it returns or the shared
    stop signal is set.

    A loop that raises records the error, logs it and sets the stop signal
    so the other loops wind down instead of running on inconsistent state.
    """

    def __init__(self, name: str, stop_event: threading.Event, daemon: bool = False):
        threading.Thread.__init__(self, name=name, daemon=daemon)
        self.stop_event = stop_event
        self.error: Optional[BaseException] = None

    def loop(self) -> None:
        raise NotImplementedError

    def run(self) -> None:
        try:
            self.loop()
        except Exception as e:
            self.error = e
            logger.exception("%s thread failed", self.name)
            self.stop_event.set()
