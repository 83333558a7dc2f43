import pytest

from trailmap.errors import DegenerateExtentError
from trailmap.map_dimensions import RenderState, derive_resolution, normalize
from trailmap.project_types import BoundingBox, PlanarPoint, Resolution


def test_normalize_boundaries():
    assert normalize(-3.0, -3.0, 7.0) == 0.0
    assert normalize(7.0, -3.0, 7.0) == 1.0


def test_normalize_is_affine():
    minimum, maximum = 2.0, 12.0
    for t in (0.1, 0.25, 0.5, 0.9):
        value = minimum + t * (maximum - minimum)
        assert normalize(value, minimum, maximum) == pytest.approx(t)


def test_normalize_zero_extent_is_fatal():
    with pytest.raises(DegenerateExtentError):
        normalize(1.0, 1.0, 1.0)


@pytest.mark.parametrize(
    "bbox",
    [
        BoundingBox(PlanarPoint(0.0, 0.0), PlanarPoint(20.0, 10.0)),
        BoundingBox(PlanarPoint(0.51, 0.33), PlanarPoint(0.52, 0.3412)),
        BoundingBox(PlanarPoint(-4.0, -9.0), PlanarPoint(1.0, 30.0)),
    ],
)
def test_height_preserves_aspect_ratio(bbox):
    resolution = derive_resolution(bbox, 4000)

    assert resolution.width == 4000
    assert resolution.height == pytest.approx(
        4000 * (bbox.max.y - bbox.min.y) / (bbox.max.x - bbox.min.x)
    )


@pytest.mark.parametrize(
    "bbox",
    [
        BoundingBox(PlanarPoint(1.0, 1.0), PlanarPoint(1.0, 1.0)),
        BoundingBox(PlanarPoint(0.0, 1.0), PlanarPoint(5.0, 1.0)),
        BoundingBox(PlanarPoint(2.0, 0.0), PlanarPoint(2.0, 5.0)),
    ],
)
def test_degenerate_extent_is_fatal(bbox):
    with pytest.raises(DegenerateExtentError):
        RenderState.for_bounding_box(bbox, 100)


def test_transform_coords_scales_to_resolution():
    bbox = BoundingBox(PlanarPoint(0.0, 0.0), PlanarPoint(20.0, 10.0))
    state = RenderState.for_bounding_box(bbox, 100)

    assert state.resolution == Resolution(100, 50.0)
    assert state.pixel_size == (100, 50)
    assert state.transform_coords(PlanarPoint(0.0, 0.0)) == (0.0, 0.0)
    assert state.transform_coords(PlanarPoint(10.0, 10.0)) == (50.0, 50.0)
    assert state.transform_coords(PlanarPoint(20.0, 0.0)) == (100.0, 0.0)


def test_pixel_size_is_at_least_one_pixel():
    bbox = BoundingBox(PlanarPoint(0.0, 0.0), PlanarPoint(1000.0, 1.0))
    state = RenderState.for_bounding_box(bbox, 100)

    assert state.pixel_size == (100, 1)


def test_render_state_is_immutable():
    bbox = BoundingBox(PlanarPoint(0.0, 0.0), PlanarPoint(2.0, 1.0))
    state = RenderState.for_bounding_box(bbox, 10)

    with pytest.raises(AttributeError):
        state.resolution = Resolution(20, 10)


def test_box_corners_map_to_canvas_edges():
    bbox = BoundingBox(PlanarPoint(0.3, 0.2), PlanarPoint(0.7, 0.4))
    state = RenderState.for_bounding_box(bbox, 400)

    assert state.transform_coords(bbox.min) == (0.0, 0.0)
    # The far corner lands on the edge itself, one past the last pixel
    assert state.transform_coords(bbox.max) == (400.0, 200.0)
    assert state.pixel_size == (400, 200)
