from typing import Iterable, TypedDict

from reportlab.lib.colors import Color
from tqdm import tqdm

from trailmap.canvas import Canvas
from trailmap.errors import InvalidGeometryPoint
from trailmap.logger import logger
from trailmap.map_dimensions import RenderState
from trailmap.project_types import GeographicPoint, Geometry
from trailmap.projection import Projector, project, project_geometry


class LineStyle(TypedDict):
    stroke_color: Color
    stroke_alpha: float
    stroke_width: int


class MarkerStyle(TypedDict):
    fill_color: Color
    fill_alpha: float
    size: int


class FeatureRenderer:
    def __init__(
        self,
        canvas: Canvas,
        render_state: RenderState,
        projector: Projector = project,
    ):
        self.canvas = canvas
        self.render_state = render_state
        self.projector = projector
        self.transform_coords = render_state.transform_coords

    def render_line_features(
        self,
        features: Iterable[Geometry],
        style: LineStyle,
        desc: str = "Drawing line features",
    ) -> int:
        """Render each geometry as its own polyline, returning how many were drawn"""
        drawn = 0
        skipped = 0
        for feature in tqdm(features, desc=desc):
            if not feature:
                continue
            try:
                self._render_line_feature(feature, style)
                drawn += 1
            except InvalidGeometryPoint as e:
                skipped += 1
                logger.debug(f"Skipping line feature: {e}")

        if skipped:
            logger.warning(f"Skipped {skipped} line features outside the projection")
        return drawn

    def _render_line_feature(self, feature: Geometry, style: LineStyle) -> None:
        # Project the whole line first so a bad coordinate leaves nothing drawn
        pixels = [
            self.transform_coords(point)
            for point in project_geometry(feature, self.projector)
        ]

        previous = None
        for pixel in pixels:
            if previous is not None:
                self.canvas.draw_line_segment(
                    previous,
                    pixel,
                    style["stroke_color"],
                    style["stroke_alpha"],
                    style["stroke_width"],
                )
            previous = pixel

    def render_point_features(
        self,
        features: Iterable[GeographicPoint],
        style: MarkerStyle,
        desc: str = "Drawing point features",
    ) -> int:
        """Render each point as a square marker anchored at its top-left corner"""
        drawn = 0
        skipped = 0
        for feature in tqdm(features, desc=desc):
            try:
                x, y = self.transform_coords(self.projector(feature))
            except InvalidGeometryPoint as e:
                skipped += 1
                logger.debug(f"Skipping point feature: {e}")
                continue

            self.canvas.fill_rect(
                (x, y),
                style["size"],
                style["size"],
                style["fill_color"],
                style["fill_alpha"],
            )
            drawn += 1

        if skipped:
            logger.warning(f"Skipped {skipped} point features outside the projection")
        return drawn
