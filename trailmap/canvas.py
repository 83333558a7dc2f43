from typing import Tuple

from PIL import Image, ImageDraw
from reportlab.lib.colors import Color

from trailmap.project_types import PixelPoint

RGB = Tuple[int, int, int]


def to_rgb(color: Color) -> RGB:
    return tuple(int(round(channel * 255)) for channel in color.rgb())


def to_rgba(color: Color, alpha: float) -> Tuple[int, int, int, int]:
    return (*to_rgb(color), int(round(alpha * 255)))


class Canvas:
    """
    RGB pixel buffer.

    Every primitive is blended onto the pixels below it with its own alpha, so
    later draws layer on top of earlier ones.
    """

    def __init__(self, size: Tuple[int, int], background: Color):
        self.image = Image.new("RGB", size, to_rgb(background))
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def fill_background(self, color: Color) -> None:
        self.image.paste(to_rgb(color), (0, 0, *self.image.size))

    def draw_line_segment(
        self,
        start: PixelPoint,
        end: PixelPoint,
        color: Color,
        alpha: float,
        width: int = 1,
    ) -> None:
        self._draw.line([start, end], fill=to_rgba(color, alpha), width=width)

    def fill_rect(
        self,
        origin: PixelPoint,
        width: int,
        height: int,
        color: Color,
        alpha: float,
    ) -> None:
        """Fill width x height pixels with origin as the top-left corner"""
        x0 = int(round(origin[0]))
        y0 = int(round(origin[1]))
        # Pillow rectangles include both corners
        self._draw.rectangle(
            [x0, y0, x0 + width - 1, y0 + height - 1],
            fill=to_rgba(color, alpha),
        )

    def get_pixel(self, x: int, y: int) -> RGB:
        return self.image.getpixel((x, y))
