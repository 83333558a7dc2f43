from dataclasses import dataclass
from typing import Tuple

from trailmap.errors import DegenerateExtentError
from trailmap.logger import logger
from trailmap.project_types import BoundingBox, PixelPoint, PlanarPoint, Resolution


def normalize(value: float, minimum: float, maximum: float) -> float:
    """Linearly map [minimum, maximum] onto [0, 1]"""
    extent = maximum - minimum
    if extent == 0:
        raise DegenerateExtentError(
            f"Cannot normalize against a zero extent at {minimum}"
        )
    return (value - minimum) / extent


def derive_resolution(bounding_box: BoundingBox, width: int) -> Resolution:
    """Keep the bounding box aspect ratio for a fixed pixel width"""
    if bounding_box.width == 0 or bounding_box.height == 0:
        raise DegenerateExtentError(
            f"Bounding box has zero extent: {bounding_box.width} x {bounding_box.height}"
        )

    return Resolution(
        width=width,
        height=width * (bounding_box.height / bounding_box.width),
    )


@dataclass(frozen=True)
class RenderState:
    bounding_box: BoundingBox
    resolution: Resolution

    @classmethod
    def for_bounding_box(cls, bounding_box: BoundingBox, width: int) -> "RenderState":
        logger.info("Calculating map dimensions...")
        resolution = derive_resolution(bounding_box, width)
        state = cls(bounding_box, resolution)

        logger.info(
            f"Planar extent: {bounding_box.width:.6f} x {bounding_box.height:.6f}"
        )
        pixel_width, pixel_height = state.pixel_size
        logger.info(f"Image dimensions: {pixel_width}px x {pixel_height}px")
        return state

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return (
            max(1, round(self.resolution.width)),
            max(1, round(self.resolution.height)),
        )

    def transform_coords(self, point: PlanarPoint) -> PixelPoint:
        x = normalize(point.x, self.bounding_box.min.x, self.bounding_box.max.x)
        y = normalize(point.y, self.bounding_box.min.y, self.bounding_box.max.y)
        return (x * self.resolution.width, y * self.resolution.height)
