"""
Game configuration.

Values come from the environment (optionally seeded from a .env file via
python-dotenv) and can be overridden by command line flags in main.py.

Environment:
    SNAKE_WIDTH, SNAKE_HEIGHT     Play-field size in cells (default 40x20)
    SNAKE_TICK_MS                 Simulation interval in ms (default 500)
    SNAKE_FRAME_MS                Render interval in ms (default: SNAKE_TICK_MS)
    SNAKE_START_X, SNAKE_START_Y  Initial head cell (default 10,10)
    SNAKE_FOOD_X, SNAKE_FOOD_Y    Initial food cell (default 15,15)
    SNAKE_LOG_LEVEL               Logging level name (default WARNING)
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .domain.constants import (
    DEFAULT_FOOD,
    DEFAULT_HEIGHT,
    DEFAULT_START,
    DEFAULT_TICK_MS,
    DEFAULT_WIDTH,
)


class ConfigError(ValueError):
    """Raised for configuration values the game cannot run with."""


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_ms: int = DEFAULT_TICK_MS
    frame_ms: int = DEFAULT_TICK_MS
    start_x: int = DEFAULT_START[0]
    start_y: int = DEFAULT_START[1]
    food_x: int = DEFAULT_FOOD[0]
    food_y: int = DEFAULT_FOOD[1]
    log_level: str = "WARNING"

    @property
    def tick_interval(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def frame_interval(self) -> float:
        return self.frame_ms / 1000.0

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from environment variables, falling back to defaults."""
        if env is None:
            env = os.environ
        tick_ms = _env_int(env, "SNAKE_TICK_MS", DEFAULT_TICK_MS)
        return cls(
            width=_env_int(env, "SNAKE_WIDTH", DEFAULT_WIDTH),
            height=_env_int(env, "SNAKE_HEIGHT", DEFAULT_HEIGHT),
            tick_ms=tick_ms,
            frame_ms=_env_int(env, "SNAKE_FRAME_MS", tick_ms),
            start_x=_env_int(env, "SNAKE_START_X", DEFAULT_START[0]),
            start_y=_env_int(env, "SNAKE_START_Y", DEFAULT_START[1]),
            food_x=_env_int(env, "SNAKE_FOOD_X", DEFAULT_FOOD[0]),
            food_y=_env_int(env, "SNAKE_FOOD_Y", DEFAULT_FOOD[1]),
            log_level=env.get("SNAKE_LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> "GameConfig":
        """
        Check the config against the board rules.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: on the first violated constraint
        """
        # Food relocates within width-1 x height-1, which must be non-empty.
        if self.width < 2 or self.height < 2:
            raise ConfigError(
                f"Board must be at least 2x2, got {self.width}x{self.height}"
            )
        if self.tick_ms < 1 or self.frame_ms < 1:
            raise ConfigError("Tick and frame intervals must be at least 1 ms")

        cells = {
            "start": (self.start_x, self.start_y),
            "start body": (self.start_x - 1, self.start_y),
            "food": (self.food_x, self.food_y),
        }
        for label, (x, y) in cells.items():
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ConfigError(
                    f"{label} cell {(x, y)} is outside the {self.width}x{self.height} board"
                )
        return self
