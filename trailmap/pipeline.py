from typing import Iterable, Sequence

from trailmap.canvas import Canvas
from trailmap.extrema import accumulate
from trailmap.feature_stream import open_road_stream
from trailmap.features.location_handler import LocationHandler, load_locations
from trailmap.features.road_handler import RoadHandler
from trailmap.logger import logger
from trailmap.map_dimensions import RenderState
from trailmap.project_types import (
    BoundingBox,
    GeographicPoint,
    Geometry,
    MapColors,
    MapConfig,
)
from trailmap.projection import Projector, project
from trailmap.rendering import FeatureRenderer


def compute_bounding_box(roads_path: str, projector: Projector = project) -> BoundingBox:
    """First pass: fold every projected road coordinate into a bounding box"""
    logger.info("First pass: computing min / max coordinates for shapefile...")
    with open_road_stream(roads_path) as stream:
        return accumulate(stream, projector)


def render(
    roads: Iterable[Geometry],
    locations: Sequence[GeographicPoint],
    render_state: RenderState,
    canvas: Canvas,
    colors: MapColors,
    projector: Projector = project,
) -> None:
    """Second pass: draw location markers, then roads on top of them"""
    renderer = FeatureRenderer(canvas, render_state, projector)

    LocationHandler(locations).render_locations(renderer, colors.location)

    RoadHandler().render_roads(renderer, roads, colors.road)


def render_trail_map(config: MapConfig, projector: Projector = project) -> Canvas:
    """Run both passes and return the finished canvas; nothing is written here"""
    colors = config.colors

    locations = load_locations(config.locations_path, config.locations_field)

    bounding_box = compute_bounding_box(config.roads_path, projector)
    render_state = RenderState.for_bounding_box(bounding_box, config.width_px)

    canvas = Canvas(render_state.pixel_size, colors.background)

    logger.info("Second pass: drawing features...")
    with open_road_stream(config.roads_path) as roads:
        render(
            roads,
            locations,
            render_state,
            canvas,
            colors,
            projector,
        )

    return canvas
