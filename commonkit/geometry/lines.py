"""
Straight-line primitives: point lerp and the slope-intercept line equation.
"""

from typing import Callable

from ..types.point_types import CurveFn, Point, PointLike, to_array, to_point


def _check_dims(*points) -> None:
    dims = {len(p) for p in points}
    if len(dims) > 1:
        raise ValueError(f"points must share one dimension, got dimensions {sorted(dims)}")


def lerp(p1: PointLike, p2: PointLike, t: float) -> Point:
    """
    Linear interpolation between two N-dimensional points.

    Args:
        p1: Start point
        p2: End point
        t: Fraction along the segment, 0 gives p1 and 1 gives p2

    Returns:
        ``p1 + t * (p2 - p1)`` as a tuple of floats
    """
    _check_dims(p1, p2)
    a = to_array(p1)
    b = to_array(p2)
    return to_point(a + t * (b - a))


def make_lerp(p1: PointLike, p2: PointLike) -> CurveFn:
    """
    Build a lerp function of ``t`` alone for two fixed points.

    The difference vector is computed once, so repeated evaluation only
    costs a multiply and an add. Outputs are identical to ``lerp``.
    """
    _check_dims(p1, p2)
    a = to_array(p1)
    delta = to_array(p2) - a

    def lerp_fn(t: float) -> Point:
        return to_point(a + t * delta)

    return lerp_fn


def straight_line_equation(p1: PointLike, p2: PointLike) -> Callable[[float], float]:
    """
    Return ``f(x) -> y`` for the line through two 2D points.

    The points must not share an x coordinate: vertical lines have no
    slope-intercept form and are not handled.
    """
    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])
    slope = (y2 - y1) / (x2 - x1)
    intercept = y1 - slope * x1

    def line_fn(x: float) -> float:
        return slope * x + intercept

    return line_fn
