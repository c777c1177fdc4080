"""
Runtime configuration for the snake driver.

Values come from the environment (a local .env is loaded first), falling back
to the defaults below.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import MOVING_PERIOD, RESTART_TIME

load_dotenv()

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_FPS = 30


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    moving_period: float = MOVING_PERIOD
    restart_time: float = RESTART_TIME
    fps: int = DEFAULT_FPS
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GameConfig":
        config = cls(
            width=_env_int("SNAKE_BOARD_WIDTH", DEFAULT_WIDTH),
            height=_env_int("SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT),
            moving_period=_env_float("SNAKE_MOVING_PERIOD", MOVING_PERIOD),
            restart_time=_env_float("SNAKE_RESTART_TIME", RESTART_TIME),
            fps=_env_int("SNAKE_FPS", DEFAULT_FPS),
            seed=_env_int("SNAKE_SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
        if config.fps <= 0:
            raise ValueError(f"SNAKE_FPS must be positive, got {config.fps}")
        return config
