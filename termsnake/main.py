import argparse
import logging
import random
import sys
import threading
from typing import Callable, Optional, TextIO

from dotenv import load_dotenv

from .config import ConfigError, GameConfig
from .domain.food import RandomInt
from .services.input_listener import InputListener
from .services.render_loop import RenderLoop
from .services.simulation_loop import SimulationLoop
from .services.terminal import TerminalMode
from .world_state import WorldState

logger = logging.getLogger(__name__)


def run_game(
    config: GameConfig,
    out: Optional[TextIO] = None,
    read_key: Optional[Callable[[], str]] = None,
    rng: RandomInt = random.randrange,
    terminal: Optional[TerminalMode] = None,
) -> int:
    """
    Play one game to completion.

    Starts the render, simulation and input threads on a shared world and
    stop signal, waits for the game to end (wall hit or quit key) and puts
    the terminal back the way it was on every exit path.

    Args:
        config: validated game configuration
        out: where frames are written (default: stdout)
        read_key: blocking key source (default: KeyReader on stdin)
        rng: uniform integer source used to place food
        terminal: raw-mode toggle (default: TerminalMode on stdin)

    Returns:
        Process exit status: 0 for a normal game over or quit, 1 if any
        game thread failed
    """
    world = WorldState.new_game(config)
    stop_event = threading.Event()
    terminal = terminal if terminal is not None else TerminalMode()

    simulation = SimulationLoop(
        world, config.width, config.height, config.tick_interval, stop_event, rng=rng
    )
    renderer = RenderLoop(
        world, config.width, config.height, config.frame_interval, stop_event, out=out
    )
    listener = InputListener(world, stop_event, read_key=read_key)

    with terminal:
        try:
            renderer.start()
            simulation.start()
            listener.start()

            simulation.join()
            renderer.join()
        finally:
            stop_event.set()

    failed = [t for t in (simulation, renderer, listener) if t.error is not None]
    for thread in failed:
        print(f"✗ {thread.name} thread failed: {thread.error}", file=sys.stderr)
    if failed:
        return 1

    if listener.quit_requested:
        logger.info("Game quit after %d ticks", simulation.ticks)
    else:
        logger.info("Game over after %d ticks", simulation.ticks)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal. Arrow keys steer, q or Esc quits."
    )
    parser.add_argument("--width", type=int, required=False, default=None,
                        help="Width of the board in cells (env SNAKE_WIDTH, default 40)")
    parser.add_argument("--height", type=int, required=False, default=None,
                        help="Height of the board in cells (env SNAKE_HEIGHT, default 20)")
    parser.add_argument("--tick-ms", type=int, required=False, default=None,
                        help="Simulation interval in milliseconds (env SNAKE_TICK_MS, default 500)")
    parser.add_argument("--frame-ms", type=int, required=False, default=None,
                        help="Render interval in milliseconds (env SNAKE_FRAME_MS, default tick interval)")
    parser.add_argument("--log-level", type=str, required=False, default=None,
                        help="Logging level (env SNAKE_LOG_LEVEL, default WARNING)")
    parser.add_argument("--log-file", type=str, required=False, default=None,
                        help="Write logs to this file instead of stderr")
    return parser


def load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.from_env()
    # An explicit --tick-ms also drives the frame rate unless --frame-ms is given.
    frame_ms = args.frame_ms
    if frame_ms is None and args.tick_ms is not None:
        frame_ms = args.tick_ms
    return config.with_overrides(
        width=args.width,
        height=args.height,
        tick_ms=args.tick_ms,
        frame_ms=frame_ms,
        log_level=args.log_level.upper() if args.log_level else None,
    ).validate()


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"✗ Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s",
        filename=args.log_file,
    )
    logger.info(
        "Starting %dx%d game (tick %d ms, frame %d ms)",
        config.width, config.height, config.tick_ms, config.frame_ms
    )
    return run_game(config)


if __name__ == "__main__":
    sys.exit(main())
