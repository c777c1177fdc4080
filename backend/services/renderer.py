"""
Renderers for the snake game.

The game only ever asks for two primitives: an opaque block on one cell and
a (possibly translucent) rectangle spanning a region of cells. ImageRenderer
draws them with Pillow onto an RGBA canvas, one frame at a time.
"""

from typing import Optional, Tuple

from PIL import Image, ImageColor, ImageDraw


CELL_SIZE = 20  # Size of each grid cell in pixels
BACKGROUND = "#FFFFFFFF"


def hex_to_rgba(hex_color: str) -> Tuple[int, int, int, int]:
    """Convert #RRGGBB or #RRGGBBAA to an RGBA tuple"""
    return ImageColor.getcolor(hex_color, "RGBA")


class Renderer:
    """
    Base class/interface for drawing sinks.

    Coordinates are board cells, not pixels.
    """

    def draw_block(self, color: str, x: int, y: int):
        raise NotImplementedError

    def draw_rectangle(self, color: str, x: int, y: int, width: int, height: int):
        raise NotImplementedError


class ImageRenderer(Renderer):
    """Draw frames into Pillow images"""

    def __init__(self, cell_size: int = CELL_SIZE, background: str = BACKGROUND):
        self.cell_size = cell_size
        self.background = background
        self.image: Optional[Image.Image] = None
        self._draw: Optional[ImageDraw.ImageDraw] = None

    def begin_frame(self, board_width: int, board_height: int):
        size = (board_width * self.cell_size, board_height * self.cell_size)
        self.image = Image.new("RGBA", size, hex_to_rgba(self.background))
        self._draw = ImageDraw.Draw(self.image)

    def end_frame(self) -> Image.Image:
        if self.image is None:
            raise RuntimeError("end_frame() called before begin_frame().")
        frame = self.image
        self.image = None
        self._draw = None
        return frame

    def _pixel_box(self, x: int, y: int, width: int, height: int):
        size = self.cell_size
        return [x * size, y * size, (x + width) * size - 1, (y + height) * size - 1]

    def draw_block(self, color: str, x: int, y: int):
        self.draw_rectangle(color, x, y, 1, 1)

    def draw_rectangle(self, color: str, x: int, y: int, width: int, height: int):
        if self.image is None:
            raise RuntimeError("draw called outside of a frame; call begin_frame() first.")

        rgba = hex_to_rgba(color)
        if rgba[3] == 255:
            self._draw.rectangle(self._pixel_box(x, y, width, height), fill=rgba)
            return

        # Translucent fills are composited so the board stays visible underneath
        overlay = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        ImageDraw.Draw(overlay).rectangle(self._pixel_box(x, y, width, height), fill=rgba)
        self.image = Image.alpha_composite(self.image, overlay)
        self._draw = ImageDraw.Draw(self.image)

    def render(self, game) -> Image.Image:
        """Render one full frame of `game`."""
        self.begin_frame(game.board_width, game.board_height)
        game.draw(self)
        return self.end_frame()
