from dataclasses import dataclass
from typing import NamedTuple, Tuple

from reportlab.lib.colors import Color, toColor

Lon = float
Lat = float


class GeographicPoint(NamedTuple):
    lon: Lon
    lat: Lat


class PlanarPoint(NamedTuple):
    x: float
    y: float


# Ordered (lon, lat) pairs of one polyline, possibly empty
Geometry = Tuple[Tuple[Lon, Lat], ...]

PixelPoint = Tuple[float, float]


class BoundingBox(NamedTuple):
    min: PlanarPoint
    max: PlanarPoint

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


class Resolution(NamedTuple):
    width: float
    height: float


class MapColors(NamedTuple):
    background: Color
    road: Color
    location: Color


@dataclass(frozen=True)
class MapConfig:
    roads_path: str
    locations_path: str
    output_path: str
    width_px: int
    background_color: str
    road_color: str
    location_color: str
    locations_field: str = "locations"

    def __post_init__(self):
        if not self.roads_path:
            raise ValueError("roads_path is required")
        if not self.locations_path:
            raise ValueError("locations_path is required")
        if not self.output_path:
            raise ValueError("output_path is required")
        if not self.locations_field:
            raise ValueError("locations_field is required")

        if isinstance(self.width_px, bool) or not isinstance(self.width_px, int):
            raise ValueError("width_px must be an integer")
        if self.width_px <= 0:
            raise ValueError("width_px must be greater than 0")

        for name in ("background_color", "road_color", "location_color"):
            try:
                toColor(getattr(self, name))
            except ValueError:
                raise ValueError(
                    f"{name} is not a valid colour: {getattr(self, name)!r}"
                ) from None

    @property
    def colors(self) -> MapColors:
        return MapColors(
            background=toColor(self.background_color),
            road=toColor(self.road_color),
            location=toColor(self.location_color),
        )
