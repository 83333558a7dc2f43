from typing import Iterable

from reportlab.lib.colors import Color

from trailmap.logger import logger
from trailmap.project_types import Geometry
from trailmap.rendering import FeatureRenderer, LineStyle
from trailmap.scale import ROAD_ALPHA, ROAD_STROKE_WIDTH


def road_style(color: Color) -> LineStyle:
    return {
        "stroke_color": color,
        "stroke_alpha": ROAD_ALPHA,
        "stroke_width": ROAD_STROKE_WIDTH,
    }


class RoadHandler:
    def __init__(self):
        self.roads_drawn = 0

    def render_roads(
        self,
        renderer: FeatureRenderer,
        roads: Iterable[Geometry],
        color: Color,
    ) -> None:
        self.roads_drawn = renderer.render_line_features(
            features=roads,
            style=road_style(color),
            desc="Rendering roads (Pass 2)",
        )
        logger.info(f"Drew {self.roads_drawn} roads")
