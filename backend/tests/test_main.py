"""
Tests for main.py - the headless driver.
"""

import argparse
import os
import sys
from unittest.mock import Mock

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import main, run_simulation  # noqa: E402
from players.base import Player  # noqa: E402
from services.renderer import Renderer  # noqa: E402


class IdlePlayer(Player):
    """Never presses a key."""

    def get_key(self, game_state):
        return None


def make_params(**overrides):
    params = dict(width=10, height=10, seconds=3, fps=30, seed=1)
    params.update(overrides)
    return argparse.Namespace(**params)


class TestRunSimulation:

    def test_idle_snake_hits_wall_and_restarts(self):
        result = run_simulation(make_params(), player=IdlePlayer())

        assert result["frames"] == 90
        assert result["deaths"] >= 1
        assert result["restarts"] >= 1
        assert result["foods_eaten"] == 0
        assert result["max_length"] == 2
        assert isinstance(result["final_board"], str)

    def test_random_player_session(self):
        result = run_simulation(make_params(seconds=10, seed=4))

        assert result["frames"] == 300
        assert result["max_length"] >= 2
        assert "#" in result["final_board"]

    def test_seeded_sessions_are_reproducible(self):
        first = run_simulation(make_params(seconds=5, seed=12))
        second = run_simulation(make_params(seconds=5, seed=12))
        assert first == second

    def test_custom_renderer_draws_every_frame(self):
        renderer = Mock(spec=Renderer)
        run_simulation(make_params(seconds=1), player=IdlePlayer(), renderer=renderer)

        # Four border rectangles per frame at least
        assert renderer.draw_rectangle.call_count >= 4 * 30

    def test_video_receives_frames(self):
        video = Mock()
        video.generate_video.return_value = "/tmp/session.mp4"

        result = run_simulation(
            make_params(seconds=1, video="/tmp/session.mp4"),
            player=IdlePlayer(),
            video=video
        )

        assert video.add_frame.call_count == 30
        video.generate_video.assert_called_once_with("/tmp/session.mp4")
        assert result["video_path"] == "/tmp/session.mp4"


class TestMain:

    def test_main_prints_summary(self, capsys, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("SNAKE_FPS", raising=False)
        main(["--width", "10", "--height", "10", "--seconds", "2", "--seed", "3", "--print-board"])

        out = capsys.readouterr().out
        assert "Simulation Result Summary" in out
        assert '"frames": 60' in out
        assert '"max_length"' in out
        assert " 0 # # # # # # # # # #" in out

    def test_main_returns_none_for_console_script(self, capsys, monkeypatch):
        """A console-script wrapper exits with main()'s return value, so it must be None."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert main(["--width", "10", "--height", "10", "--seconds", "1", "--seed", "1"]) is None
        assert "Simulation Result Summary" in capsys.readouterr().out

    def test_main_rejects_tiny_board(self):
        with pytest.raises(ValueError):
            main(["--width", "3", "--seconds", "1"])
