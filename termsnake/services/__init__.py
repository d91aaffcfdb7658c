"""
Game loops and terminal services.

Each loop runs on its own thread and talks to the others only through the
shared WorldState and the stop signal.
"""

from .base import GameThread
from .simulation_loop import SimulationLoop
from .render_loop import RenderLoop, render_frame
from .input_listener import InputListener
from .keyboard import KeyReader
from .terminal import TerminalMode

__all__ = [
    'GameThread',
    'SimulationLoop',
    'RenderLoop',
    'render_frame',
    'InputListener',
    'KeyReader',
    'TerminalMode',
]
