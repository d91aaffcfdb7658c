"""
Tests for the input listener - key mapping, quit and Ctrl-C.
"""

import io
import sys
import threading

import pytest
import readchar

from termsnake.config import GameConfig
from termsnake.domain import DOWN, LEFT, RIGHT, UP
from termsnake.services.input_listener import InputListener
from termsnake.sync import PoisonedLockError
from termsnake.world_state import WorldState


def keys(*pressed):
    """A read_key stand-in that replays the given keys in order."""
    return iter(pressed).__next__


@pytest.fixture
def world():
    return WorldState.new_game(GameConfig())


class TestHandleKey:
    @pytest.mark.parametrize("key,direction", [
        (readchar.key.LEFT, LEFT),
        (readchar.key.RIGHT, RIGHT),
        (readchar.key.UP, UP),
        (readchar.key.DOWN, DOWN),
    ])
    def test_arrow_keys_steer(self, world, key, direction):
        """Each arrow key sets the matching heading."""
        listener = InputListener(world, threading.Event(), read_key=keys())
        assert listener.handle_key(key) is True
        assert world.snapshot().direction is direction

    @pytest.mark.parametrize("key", ["q", readchar.key.ESC])
    def test_quit_keys(self, world, key):
        """q and Escape request a quit and set the stop signal."""
        stop = threading.Event()
        listener = InputListener(world, stop, read_key=keys())
        assert listener.handle_key(key) is False
        assert listener.quit_requested is True
        assert stop.is_set()

    @pytest.mark.parametrize("key", ["x", "Q", " ", readchar.key.ENTER])
    def test_other_keys_ignored(self, world, key):
        """Unmapped keys change nothing."""
        stop = threading.Event()
        listener = InputListener(world, stop, read_key=keys())
        before = world.snapshot()
        assert listener.handle_key(key) is True
        assert world.snapshot() == before
        assert not stop.is_set()

    def test_reversal_is_accepted(self, world):
        """Pressing the opposite of the current heading is not rejected."""
        listener = InputListener(world, threading.Event(), read_key=keys())
        listener.handle_key(readchar.key.LEFT)
        assert world.snapshot().direction is LEFT


class TestListenerLoop:
    def test_loop_applies_keys_until_quit(self, world):
        """Keys are applied in order and the loop ends on q."""
        stop = threading.Event()
        listener = InputListener(
            world, stop, read_key=keys(readchar.key.UP, "z", readchar.key.LEFT, "q", readchar.key.DOWN)
        )
        listener.loop()
        assert world.snapshot().direction is LEFT
        assert listener.quit_requested is True
        assert stop.is_set()

    def test_ctrl_c_is_treated_as_quit(self, world):
        """KeyboardInterrupt from the key reader quits cleanly."""
        def interrupted():
            raise KeyboardInterrupt

        stop = threading.Event()
        listener = InputListener(world, stop, read_key=interrupted)
        listener.loop()
        assert listener.quit_requested is True
        assert stop.is_set()

    @pytest.mark.parametrize("error", [OSError(25, "Inappropriate ioctl for device"), EOFError("closed")])
    def test_lost_key_source_leaves_game_running(self, world, error):
        """A broken key reader ends only the listener; the stop signal stays clear."""
        def broken():
            raise error

        stop = threading.Event()
        listener = InputListener(world, stop, read_key=broken)
        listener.start()
        listener.join(timeout=5)
        assert not listener.is_alive()
        assert listener.input_lost is True
        assert listener.error is None
        assert not stop.is_set()

    def test_default_reader_without_terminal(self, world, monkeypatch):
        """With no usable stdin the listener gives up on input but not on the game."""
        monkeypatch.setattr(sys, "stdin", io.StringIO())
        stop = threading.Event()
        listener = InputListener(world, stop)
        listener.loop()
        assert listener.input_lost is True
        assert not stop.is_set()

    def test_steering_failure_is_fatal(self, world):
        """A poisoned snake cell is not mistaken for lost input."""
        with pytest.raises(RuntimeError):
            with world.snake_cell.lock():
                raise RuntimeError("holder crashed")

        stop = threading.Event()
        listener = InputListener(world, stop, read_key=keys(readchar.key.UP))
        listener.start()
        listener.join(timeout=5)
        assert isinstance(listener.error, PoisonedLockError)
        assert stop.is_set()

    def test_listener_is_daemon(self, world):
        """The blocking reader must not keep the process alive."""
        listener = InputListener(world, threading.Event(), read_key=keys())
        assert listener.daemon is True
