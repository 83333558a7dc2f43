import math
from typing import Callable, Iterable, List

from trailmap.errors import InvalidGeometryPoint
from trailmap.project_types import GeographicPoint, PlanarPoint
from trailmap.scale import E7_FACTOR, MAX_LATITUDE, PROJECTION_SCALE

Projector = Callable[[GeographicPoint], PlanarPoint]


def project(point: GeographicPoint, scale: float = PROJECTION_SCALE) -> PlanarPoint:
    """
    Spherical Web Mercator on the unit square.

    x grows eastward from 0 at -180 to 1 at +180, y grows southward with 0.5 on
    the equator, so the output can be drawn without flipping.
    """
    lon, lat = point
    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise InvalidGeometryPoint(f"Non-finite coordinate: ({lon}, {lat})")
    if abs(lat) >= MAX_LATITUDE:
        raise InvalidGeometryPoint(f"Latitude {lat} is outside the Mercator domain")

    x = lon / 360 + 0.5
    y = 0.5 - math.log(math.tan(math.pi / 4 + lat * math.pi / 360)) / (2 * math.pi)
    return PlanarPoint(x * scale, y * scale)


def project_geometry(
    coords: Iterable[tuple], projector: Projector = project
) -> List[PlanarPoint]:
    """Project every coordinate, failing the whole geometry on the first bad one"""
    return [projector(GeographicPoint(lon, lat)) for lon, lat in coords]


def from_e7(latitude_e7: int, longitude_e7: int) -> GeographicPoint:
    return GeographicPoint(lon=longitude_e7 / E7_FACTOR, lat=latitude_e7 / E7_FACTOR)
