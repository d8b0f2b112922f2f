"""
Bezier curve equations built from nested lerps (De Casteljau).

Curves are evaluated by repeated linear interpolation rather than the
expanded Bernstein polynomial, so intermediate results match a
lerp-by-lerp evaluation exactly.
"""

from ..types.point_types import CurveFn, Point, PointLike
from .lines import lerp, _check_dims


def bezier_quadratic_equation(start: PointLike, end: PointLike, control: PointLike) -> CurveFn:
    """
    Quadratic Bezier through ``start`` and ``end`` pulled towards ``control``.

    Note the argument order: start, end, then the control point.

    >>> bezier_quadratic_equation((0, 0), (6, 0), (3, 3))(0.5)
    (3.0, 1.5)
    """
    _check_dims(start, end, control)

    def quadratic_fn(t: float) -> Point:
        return lerp(lerp(start, control, t), lerp(control, end, t), t)

    return quadratic_fn


def bezier_cubic_equation(
    start: PointLike,
    control1: PointLike,
    control2: PointLike,
    end: PointLike,
) -> CurveFn:
    """
    Cubic Bezier from ``start`` to ``end`` with two control points.

    Each evaluation lerps the three legs of the control polygon and runs the
    quadratic construction over the resulting three points.
    """
    _check_dims(start, control1, control2, end)

    def cubic_fn(t: float) -> Point:
        p01 = lerp(start, control1, t)
        p12 = lerp(control1, control2, t)
        p23 = lerp(control2, end, t)
        return bezier_quadratic_equation(p01, p23, p12)(t)

    return cubic_fn
