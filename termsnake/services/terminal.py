"""
Terminal raw-mode toggle.

Both directions are best-effort: a terminal that cannot be switched (not a
tty, no termios on this platform) only produces a warning and the game goes on.
"""

import logging
import sys
from typing import Any, List, Optional, TextIO

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

logger = logging.getLogger(__name__)


class TerminalMode:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved: Optional[List[Any]] = None

    def enable(self) -> bool:
        """Switch the terminal to raw input. Returns True on success."""
        if termios is None:
            logger.warning("Could not enable raw mode: termios is not available")
            return False
        try:
            fd = self.stream.fileno()
            saved = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError, ValueError) as e:
            logger.warning(f"Could not enable raw mode: {e}")
            return False
        self._saved = saved
        return True

    def restore(self) -> bool:
        """Put back the settings saved by enable(). Returns True on success."""
        if self._saved is None:
            return False
        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, saved)
        except (termios.error, OSError, ValueError) as e:
            logger.warning(f"Could not restore terminal mode: {e}")
            return False
        return True

    def __enter__(self) -> "TerminalMode":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
