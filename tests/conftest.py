import json

import fiona
import pytest
from reportlab.lib.colors import toColor

from trailmap.project_types import GeographicPoint, MapColors, PlanarPoint

ROAD_SCHEMA = {"geometry": "LineString", "properties": {"osm_id": "int"}}


def _identity(point: GeographicPoint) -> PlanarPoint:
    return PlanarPoint(point.lon, point.lat)


@pytest.fixture
def identity_projector():
    """Treat coordinates as already projected"""
    return _identity


@pytest.fixture
def colors() -> MapColors:
    return MapColors(
        background=toColor("#000000"),
        road=toColor("#0000ff"),
        location=toColor("#ff0000"),
    )


@pytest.fixture
def write_roads(tmp_path):
    """Write a polyline shapefile; a None entry becomes a null shape"""

    def _write(lines, name="roads.shp"):
        path = tmp_path / name
        with fiona.open(
            str(path),
            "w",
            driver="ESRI Shapefile",
            schema=ROAD_SCHEMA,
            crs="EPSG:4326",
        ) as dst:
            for i, coords in enumerate(lines):
                geometry = (
                    None
                    if coords is None
                    else {"type": "LineString", "coordinates": coords}
                )
                dst.write({"geometry": geometry, "properties": {"osm_id": i}})
        return str(path)

    return _write


@pytest.fixture
def write_locations(tmp_path):
    def _write(records, name="location-history.json", field="locations"):
        path = tmp_path / name
        path.write_text(json.dumps({field: records}), encoding="utf-8")
        return str(path)

    return _write
