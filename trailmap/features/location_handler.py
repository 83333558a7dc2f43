import json
import os
from typing import List, Sequence

from reportlab.lib.colors import Color

from trailmap.errors import DecodeError, ResourceOpenError
from trailmap.logger import logger
from trailmap.project_types import GeographicPoint
from trailmap.projection import from_e7
from trailmap.rendering import FeatureRenderer, MarkerStyle
from trailmap.scale import LOCATION_ALPHA, LOCATION_MARKER_SIZE


def location_style(color: Color) -> MarkerStyle:
    return {
        "fill_color": color,
        "fill_alpha": LOCATION_ALPHA,
        "size": LOCATION_MARKER_SIZE,
    }


def load_locations(path: str, field: str = "locations") -> List[GeographicPoint]:
    """
    Read a location history document.

    The document holds an array under `field` whose records carry integer
    `latitudeE7` and `longitudeE7` values. Records missing either are skipped.
    """
    if not os.path.exists(path):
        raise ResourceOpenError(path, "no such file")

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise ResourceOpenError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise DecodeError(path, f"invalid JSON: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get(field), list):
        raise DecodeError(path, f"missing top-level array '{field}'")

    locations: List[GeographicPoint] = []
    skipped = 0
    for record in document[field]:
        try:
            locations.append(from_e7(record["latitudeE7"], record["longitudeE7"]))
        except (KeyError, TypeError):
            skipped += 1

    if skipped:
        logger.warning(f"Skipped {skipped} location records without E7 coordinates")
    logger.info(f"Loaded {len(locations)} locations from {path}")
    return locations


class LocationHandler:
    def __init__(self, locations: Sequence[GeographicPoint] = ()):
        self.locations: List[GeographicPoint] = list(locations)
        self.locations_drawn = 0

    def render_locations(self, renderer: FeatureRenderer, color: Color) -> None:
        self.locations_drawn = renderer.render_point_features(
            features=self.locations,
            style=location_style(color),
            desc="Rendering locations",
        )
        logger.info(f"Drew {self.locations_drawn} location markers")
