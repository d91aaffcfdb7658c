"""
Blocking key reader with an escape delay.

readchar.readkey() waits for a second byte after ESC, so a lone Escape
press never comes back as readchar.key.ESC. This reader reads the raw file
descriptor and gives the rest of an escape sequence esc_delay seconds to
arrive; if nothing follows, the press was Escape on its own.

Returned strings use the readchar.key constants, so arrow keys compare
equal to readchar.key.UP and friends.
"""

import os
import select
import sys
from typing import Optional

import readchar

DEFAULT_ESC_DELAY = 0.05

# Continuation bytes of CSI/SS3 sequences, as readchar.readkey() parses them.
_SEQUENCE_INTRODUCERS = "\x4f\x5b"
_PARAMETER_STARTS = "\x31\x32\x33\x35\x36"
_PARAMETER_CONTINUES = "\x30\x31\x33\x34\x35\x37\x38\x39"


class KeyReader:
    """
    Callable key source for InputListener.

    Raises:
        EOFError: when the input stream is closed
        KeyboardInterrupt: on Ctrl-C, which arrives as a byte in raw mode
        OSError: when the descriptor cannot be read or polled
    """

    def __init__(self, fd: Optional[int] = None, esc_delay: float = DEFAULT_ESC_DELAY):
        self.fd = fd if fd is not None else sys.stdin.fileno()
        self.esc_delay = esc_delay

    def _read_char(self) -> str:
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("key input closed")
        return data.decode("latin-1")

    def _pending(self) -> bool:
        ready, _, _ = select.select([self.fd], [], [], self.esc_delay)
        return bool(ready)

    def _next_in_sequence(self) -> Optional[str]:
        return self._read_char() if self._pending() else None

    def __call__(self) -> str:
        c1 = self._read_char()
        if c1 == readchar.key.CTRL_C:
            raise KeyboardInterrupt
        if c1 != readchar.key.ESC:
            return c1

        c2 = self._next_in_sequence()
        if c2 is None:
            return readchar.key.ESC
        key = c1 + c2
        if c2 not in _SEQUENCE_INTRODUCERS:
            return key

        c3 = self._next_in_sequence()
        if c3 is None:
            return key
        key += c3
        if c3 not in _PARAMETER_STARTS:
            return key

        c4 = self._next_in_sequence()
        if c4 is None:
            return key
        key += c4
        if c4 not in _PARAMETER_CONTINUES:
            return key

        c5 = self._next_in_sequence()
        return key + c5 if c5 is not None else key
