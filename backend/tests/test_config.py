"""
Tests for config.py - environment-driven settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig  # noqa: E402

ENV_VARS = [
    "SNAKE_BOARD_WIDTH", "SNAKE_BOARD_HEIGHT", "SNAKE_MOVING_PERIOD",
    "SNAKE_RESTART_TIME", "SNAKE_FPS", "SNAKE_SEED", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = GameConfig.from_env()
    assert config.width == 20
    assert config.height == 20
    assert config.moving_period == 0.1
    assert config.restart_time == 1.0
    assert config.fps == 30
    assert config.seed is None
    assert config.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SNAKE_BOARD_WIDTH", "12")
    monkeypatch.setenv("SNAKE_MOVING_PERIOD", "0.25")
    monkeypatch.setenv("SNAKE_SEED", "9")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = GameConfig.from_env()

    assert config.width == 12
    assert config.moving_period == 0.25
    assert config.seed == 9
    assert config.log_level == "DEBUG"


def test_invalid_integer_names_variable(monkeypatch):
    monkeypatch.setenv("SNAKE_BOARD_WIDTH", "wide")
    with pytest.raises(ValueError, match="SNAKE_BOARD_WIDTH"):
        GameConfig.from_env()


def test_fps_must_be_positive(monkeypatch):
    monkeypatch.setenv("SNAKE_FPS", "0")
    with pytest.raises(ValueError, match="SNAKE_FPS"):
        GameConfig.from_env()
