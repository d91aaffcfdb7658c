"""
Lock-protected cells shared between the game threads.

A cell whose holder raises is poisoned: every later acquisition raises
PoisonedLockError instead of handing out possibly half-updated state.
"""

import copy
import logging
import threading
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PoisonedLockError(RuntimeError):
    """A previous holder of the cell failed while holding its lock."""


class GuardedCell(Generic[T]):
    """A value that is only reachable while its lock is held."""

    def __init__(self, value: T, name: str):
        self.name = name
        self._value = value
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def lock(self) -> Iterator[T]:
        """
        Hold the cell's lock for the duration of a with-block.

        Raises:
            PoisonedLockError: if an earlier holder raised inside its block
        """
        with self._lock:
            if self._poisoned:
                raise PoisonedLockError(f"{self.name} lock is poisoned")
            try:
                yield self._value
            except Exception:
                self._poisoned = True
                logger.error("Holder of %s lock failed; cell poisoned", self.name)
                raise

    def get(self) -> T:
        """Return a copy of the value; changes to it never reach the cell."""
        with self.lock() as value:
            return copy.deepcopy(value)

    def swap(self, value: T) -> T:
        """Replace the value and return the previous one."""
        with self.lock() as previous:
            self._value = value
            return previous
