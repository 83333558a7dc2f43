import dataclasses

import pytest
from reportlab.lib.colors import Color

from config import CONFIG
from trailmap.canvas import to_rgb
from trailmap.project_types import MapConfig


def make_config(**overrides) -> MapConfig:
    values = {
        "roads_path": "roads.shp",
        "locations_path": "location-history.json",
        "output_path": "graph.png",
        "width_px": 400,
        "background_color": "#141518",
        "road_color": "#D3D3D3",
        "location_color": "#ce8c16",
    }
    values.update(overrides)
    return MapConfig(**values)


def test_default_config_is_valid():
    assert CONFIG.width_px == 4000
    assert CONFIG.locations_field == "locations"


def test_colors_are_parsed():
    colors = make_config().colors

    assert isinstance(colors.background, Color)
    assert to_rgb(colors.road) == (0xD3, 0xD3, 0xD3)
    assert to_rgb(colors.location) == (0xCE, 0x8C, 0x16)


def test_config_is_immutable():
    config = make_config()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width_px = 10


@pytest.mark.parametrize("width", [0, -5, 10.5, True])
def test_invalid_width(width):
    with pytest.raises(ValueError):
        make_config(width_px=width)


def test_invalid_colour():
    with pytest.raises(ValueError):
        make_config(road_color="not-a-colour")


@pytest.mark.parametrize("field", ["roads_path", "locations_path", "output_path"])
def test_paths_are_required(field):
    with pytest.raises(ValueError):
        make_config(**{field: ""})
