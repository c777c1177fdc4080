"""
Video Generation Service for Snake games

Frames are rendered with ImageRenderer (Pillow) while the game runs, kept as
numpy arrays, and encoded to MP4 with MoviePy/FFmpeg at the end.
"""

import logging
import os
import tempfile
from typing import List, Optional

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_FPS = 30


class SnakeVideoGenerator:
    """Collect rendered frames and write them out as an MP4"""

    def __init__(self, fps: int = DEFAULT_FPS):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}.")
        self.fps = fps
        self.frames: List[np.ndarray] = []

    def add_frame(self, frame: Image.Image):
        # libx264 wants RGB without alpha
        self.frames.append(np.array(frame.convert("RGB")))

    def generate_video(self, output_path: Optional[str] = None, name: str = "snake") -> str:
        """
        Encode the collected frames.

        Args:
            output_path: Optional output path (if None, uses a temp file)
            name: basename used for the temp file

        Returns:
            Path to the generated video file
        """
        if not self.frames:
            raise ValueError("No frames to encode.")

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{name}_replay.mp4")
        else:
            parent = os.path.dirname(output_path)
            if parent:
                os.makedirs(parent, exist_ok=True)

        logger.info("Encoding %d frames at %d FPS", len(self.frames), self.fps)

        clip = ImageSequenceClip(self.frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info("Video created successfully at %s", output_path)
        return output_path
