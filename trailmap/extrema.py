import math
from typing import Iterable

from tqdm import tqdm

from trailmap.errors import EmptyDatasetError, InvalidGeometryPoint
from trailmap.logger import logger
from trailmap.project_types import BoundingBox, Geometry, PlanarPoint
from trailmap.projection import Projector, project, project_geometry


class ExtremaAccumulator:
    """Running planar bounding box over every projected road coordinate"""

    def __init__(self, projector: Projector = project):
        self.projector = projector
        self.min_x: float = math.inf
        self.min_y: float = math.inf
        self.max_x: float = -math.inf
        self.max_y: float = -math.inf

        self.coordinate_count = 0
        self.skipped_geometries = 0

    def add_geometry(self, geometry: Geometry) -> None:
        if not geometry:
            return

        try:
            points = project_geometry(geometry, self.projector)
        except InvalidGeometryPoint as e:
            self.skipped_geometries += 1
            logger.debug(f"Skipping geometry outside the projection: {e}")
            return

        for point in points:
            self.add_point(point)

    def add_point(self, point: PlanarPoint) -> None:
        # Both bounds are checked on every coordinate
        if point.x < self.min_x:
            self.min_x = point.x
        if point.x > self.max_x:
            self.max_x = point.x
        if point.y < self.min_y:
            self.min_y = point.y
        if point.y > self.max_y:
            self.max_y = point.y

        self.coordinate_count += 1

    def bounding_box(self) -> BoundingBox:
        if self.coordinate_count == 0:
            raise EmptyDatasetError("Road dataset contains no usable coordinates")

        return BoundingBox(
            min=PlanarPoint(self.min_x, self.min_y),
            max=PlanarPoint(self.max_x, self.max_y),
        )


def accumulate(
    stream: Iterable[Geometry],
    projector: Projector = project,
    desc: str = "Computing extrema (Pass 1)",
) -> BoundingBox:
    """Exhaust the stream and return the bounding box of its projected coordinates"""
    accumulator = ExtremaAccumulator(projector)
    for geometry in tqdm(stream, desc=desc):
        accumulator.add_geometry(geometry)

    if accumulator.skipped_geometries:
        logger.warning(
            f"Skipped {accumulator.skipped_geometries} geometries outside the projection"
        )
    logger.info(
        f"Bounding box from {accumulator.coordinate_count} coordinates: "
        f"min=({accumulator.min_x:.6f}, {accumulator.min_y:.6f}) "
        f"max=({accumulator.max_x:.6f}, {accumulator.max_y:.6f})"
    )

    return accumulator.bounding_box()
