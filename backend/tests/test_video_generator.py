"""
Tests for the video generator.
"""

import os
import sys
from unittest.mock import patch

import pytest
from PIL import Image

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.video_generator import SnakeVideoGenerator  # noqa: E402


def test_add_frame_drops_alpha():
    generator = SnakeVideoGenerator(fps=10)
    generator.add_frame(Image.new("RGBA", (40, 20), (255, 0, 0, 255)))

    assert len(generator.frames) == 1
    assert generator.frames[0].shape == (20, 40, 3)


def test_generate_video_writes_clip(tmp_path):
    generator = SnakeVideoGenerator(fps=10)
    for _ in range(3):
        generator.add_frame(Image.new("RGBA", (40, 40)))
    output = str(tmp_path / "out" / "session.mp4")

    with patch("services.video_generator.ImageSequenceClip") as clip_cls:
        path = generator.generate_video(output)

    assert path == output
    assert os.path.isdir(tmp_path / "out")
    frames = clip_cls.call_args.args[0]
    assert len(frames) == 3
    assert clip_cls.call_args.kwargs["fps"] == 10
    clip_cls.return_value.write_videofile.assert_called_once_with(
        output, codec='libx264', audio=False, logger=None
    )


def test_generate_video_without_frames_raises():
    with pytest.raises(ValueError):
        SnakeVideoGenerator().generate_video()


def test_fps_must_be_positive():
    with pytest.raises(ValueError):
        SnakeVideoGenerator(fps=0)
