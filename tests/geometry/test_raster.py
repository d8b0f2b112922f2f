import numpy as np
import pytest

from commonkit.geometry import (
    bezier_quadratic_equation,
    interpolate_n_points,
    make_lerp,
    points_to_fn,
    rasterize_bezier_quadratic,
)


def test_points_to_fn_interpolates_between_samples():
    fn = points_to_fn([(0, 0), (2, 4), (4, 0)])
    assert fn(1) == pytest.approx(2.0)
    assert fn(2) == pytest.approx(4.0)
    assert fn(3.5) == pytest.approx(1.0)

def test_points_to_fn_outside_domain():
    fn = points_to_fn([(1, 1), (3, 3)])
    assert fn(0.99) is None
    assert fn(3.01) is None
    assert fn(1) == pytest.approx(1.0)
    assert fn(3) == pytest.approx(3.0)

def test_points_to_fn_requires_samples():
    with pytest.raises(ValueError):
        points_to_fn([])

@pytest.mark.parametrize("k", [0, 1, 2, 5, 20])
def test_interpolate_n_points_cardinality(k):
    curve = make_lerp((0, 0), (10, 10))
    points = interpolate_n_points(curve, k)
    assert len(points) == k
    assert curve(0) not in points
    assert curve(1) not in points
    assert points == interpolate_n_points(curve, k)

def test_interpolate_n_points_spacing():
    points = interpolate_n_points(make_lerp((0,), (4,)), 3)
    assert np.allclose(points, [(1.0,), (2.0,), (3.0,)])

def test_interpolate_n_points_negative():
    assert interpolate_n_points(make_lerp((0,), (1,)), -3) == []

@pytest.mark.parametrize("start, end, control", [
    ((0, 0), (6, 0), (3, 3)),
    ((2, 10), (30, 0), (5, 0)),
    ((-5, 0), (5, 5), (0, 20)),
])
def test_rasterize_covers_every_x(start, end, control):
    raster = rasterize_bezier_quadratic(start, end, control)
    assert len(raster) == end[0] - start[0] + 1
    assert [x for x, _ in raster] == list(range(start[0], end[0] + 1))
    assert all(isinstance(y, int) for _, y in raster)

def test_rasterize_endpoints_and_shape():
    raster = rasterize_bezier_quadratic((0, 0), (6, 0), (3, 3))
    assert raster[0] == (0, 0)
    assert raster[-1] == (6, 0)
    # Peak of the curve is y = 1.5 at x = 3, rounded half up
    assert raster[3] == (3, 2)
    ys = [y for _, y in raster]
    assert ys == ys[::-1]

def test_rasterize_tracks_curve():
    start, end, control = (0, 0), (40, 40), (30, 5)
    curve = bezier_quadratic_equation(start, end, control)
    samples = [curve(i / 400) for i in range(401)]
    exact = points_to_fn(samples)
    for x, y in rasterize_bezier_quadratic(start, end, control):
        assert abs(y - exact(x)) <= 1

def test_rasterize_single_column():
    assert rasterize_bezier_quadratic((3, 7), (3, 9), (3, 8)) == [(3, 7)]

def test_rasterize_reversed_range():
    with pytest.raises(ValueError):
        rasterize_bezier_quadratic((5, 0), (1, 0), (3, 3))

@pytest.mark.parametrize("start, end", [((0.5, 0), (6, 0)), ((0, 0), (5.5, 0))])
def test_rasterize_fractional_x(start, end):
    with pytest.raises(ValueError, match="whole number"):
        rasterize_bezier_quadratic(start, end, (3, 3))

def test_rasterize_near_integer_x():
    raster = rasterize_bezier_quadratic((1e-12, 0), (6.0, 0), (3, 3))
    assert [x for x, _ in raster] == list(range(7))
