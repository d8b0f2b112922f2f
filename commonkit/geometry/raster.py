"""
Sampling and rasterizing curves.
"""

from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..types.point_types import CurveFn, Point, PointLike
from ..utils.num_utils import is_close_to_int, round_half_up
from .bezier import bezier_quadratic_equation

# Parametric samples per unit of x when rasterizing a Bezier.
RASTER_OVERSAMPLE = 2


def points_to_fn(points: Sequence[PointLike]) -> Callable[[float], Optional[float]]:
    """
    Build ``f(x) -> y`` that interpolates linearly between (x, y) samples.

    Args:
        points: Samples ordered by non-decreasing x

    Returns:
        A function giving the interpolated y for x inside the sampled range,
        or None outside it (no extrapolation)
    """
    if len(points) == 0:
        raise ValueError("points_to_fn requires at least one sample")
    samples = np.asarray(points, dtype=np.float64)
    xs = samples[:, 0]
    ys = samples[:, 1]
    x_min, x_max = xs[0], xs[-1]

    def sample_fn(x: float) -> Optional[float]:
        if x < x_min or x > x_max:
            return None
        return float(np.interp(x, xs, ys))

    return sample_fn


def interpolate_n_points(fn: CurveFn, number: int) -> List[Point]:
    """
    Evaluate ``fn`` at ``number`` evenly spaced interior fractions.

    The fractions are ``1/(n+1) .. n/(n+1)``; the endpoints ``t=0`` and
    ``t=1`` are never included.
    """
    if number <= 0:
        return []
    step = 1.0 / (number + 1)
    return [fn(i * step) for i in range(1, number + 1)]


def rasterize_bezier_quadratic(
    start: PointLike,
    end: PointLike,
    control: PointLike,
) -> List[Tuple[int, int]]:
    """
    One integer y per integer x along a 2D quadratic Bezier.

    The curve is sampled at ``RASTER_OVERSAMPLE`` steps per unit of x, the
    samples are joined linearly, and every integer x from ``start[0]`` to
    ``end[0]`` is evaluated with y rounded to the nearest integer.

    Start and end x must be whole numbers (ValueError otherwise), and the
    control point's x must lie within [start x, end x] so that the sampled x
    values never decrease.
    """
    for label, point in (("start", start), ("end", end)):
        if not is_close_to_int(point[0]):
            raise ValueError(f"{label} x must be a whole number, got {point[0]}")
    x_start = int(round(start[0]))
    x_end = int(round(end[0]))
    if x_end < x_start:
        raise ValueError(f"end x ({x_end}) must not be less than start x ({x_start})")
    if x_end == x_start:
        return [(x_start, round_half_up(float(start[1])))]

    curve = bezier_quadratic_equation(start, end, control)
    steps = RASTER_OVERSAMPLE * (x_end - x_start)
    samples = [curve(i / steps) for i in range(1, steps)]
    # Pin the ends so float error never pushes x_start/x_end out of range.
    samples = [(float(x_start), float(start[1]))] + samples + [(float(x_end), float(end[1]))]
    sample_fn = points_to_fn(samples)

    raster = []
    for x in range(x_start, x_end + 1):
        y = sample_fn(x)
        raster.append((x, round_half_up(y)))
    return raster
