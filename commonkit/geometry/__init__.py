"""
Curve geometry: lerp, straight lines, Bezier equations, rasterizing and
multi-mode point interpolation.
"""

from .lines import lerp, make_lerp, straight_line_equation
from .bezier import bezier_quadratic_equation, bezier_cubic_equation
from .raster import (
    RASTER_OVERSAMPLE,
    points_to_fn,
    interpolate_n_points,
    rasterize_bezier_quadratic,
)
from .interpolation import (
    DEFAULT_EASE,
    DEFAULT_STEP_FRACTION,
    INTERPOLATORS,
    InterpolationType,
    InterpolationOptions,
    StepOptions,
    UnsupportedInterpolationError,
    interpolate,
    mask_dimensions,
)

__all__ = [
    "lerp",
    "make_lerp",
    "straight_line_equation",
    "bezier_quadratic_equation",
    "bezier_cubic_equation",
    "RASTER_OVERSAMPLE",
    "points_to_fn",
    "interpolate_n_points",
    "rasterize_bezier_quadratic",
    "DEFAULT_EASE",
    "DEFAULT_STEP_FRACTION",
    "INTERPOLATORS",
    "InterpolationType",
    "InterpolationOptions",
    "StepOptions",
    "UnsupportedInterpolationError",
    "interpolate",
    "mask_dimensions",
]
