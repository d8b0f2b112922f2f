"""
Multi-mode interpolation between two points.

``interpolate`` is the single entry point. The interpolation type selects a
strategy from ``INTERPOLATORS``; curve-based strategies build a curve
equation and sample ``number`` interior points from it, step strategies walk
from ``start`` in fixed increments. Every result is then masked by
``active_dimensions`` so unselected axes stay at ``start``.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..types.point_types import CurveFn, Point, PointLike, to_array, to_point
from ..utils.default import value_or_default
from ..utils.num_utils import clamp_value
from ..utils.seq_utils import compose_fns
from .bezier import bezier_cubic_equation, bezier_quadratic_equation
from .lines import make_lerp
from .raster import interpolate_n_points

DEFAULT_EASE = 0.42
DEFAULT_STEP_FRACTION = 0.1


class InterpolationType(str, Enum):
    LINEAR = "linear"
    QUADRATIC_BEZIER = "quadratic-bezier"
    CUBIC_BEZIER = "cubic-bezier"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    STEP_UP = "step-up"
    STEP_DOWN = "step-down"


class UnsupportedInterpolationError(ValueError):
    """Raised when asked to interpolate with an unknown mode."""

    def __init__(self, interpolation_type: Any):
        self.interpolation_type = interpolation_type
        super().__init__(f"unsupported interpolation mode: {interpolation_type}")


def to_interpolation_type(value: InterpolationType | str) -> InterpolationType:
    """Resolve a type tag (enum member or its string value)."""
    try:
        return InterpolationType(value)
    except ValueError as e:
        raise UnsupportedInterpolationError(value) from e


@dataclass(frozen=True)
class StepOptions:
    """
    Step interpolation settings.

    Attributes:
        fraction: Step size as a fraction of each dimension's range
        ranges: Per-dimension extent setting the step size; step-up also
            stops at it. Defaults to the top of the walk
    """
    fraction: float = DEFAULT_STEP_FRACTION
    ranges: Optional[Tuple[float, ...]] = None


@dataclass(frozen=True)
class InterpolationOptions:
    """
    Configuration for ``interpolate``.

    Attributes:
        type: Interpolation mode
        control1: First control point (quadratic and cubic Bezier)
        control2: Second control point (cubic Bezier)
        ease: Control point placement for the ease modes, expected in (0, 0.5]
        step: Step mode settings
        active_dimensions: Per-axis flags; False pins that axis to start
    """
    type: InterpolationType = InterpolationType.LINEAR
    control1: Optional[Tuple[float, ...]] = None
    control2: Optional[Tuple[float, ...]] = None
    ease: float = DEFAULT_EASE
    step: StepOptions = field(default_factory=StepOptions)
    active_dimensions: Optional[Tuple[bool, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "type", to_interpolation_type(self.type))
        if not 0.0 < self.ease <= 0.5:
            warnings.warn(
                f"ease={self.ease} is outside (0, 0.5]; ease curves will not be monotonic",
                UserWarning,
                stacklevel=3,
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> InterpolationOptions:
        """
        Build options from a plain mapping such as parsed JSON.

        Keys may use hyphens or underscores (``active-dimensions`` or
        ``active_dimensions``). Missing keys take their defaults.
        """
        normalized = {str(k).replace("-", "_"): v for k, v in data.items()}
        step_data = normalized.get("step") or {}
        ranges = step_data.get("ranges")
        step = StepOptions(
            fraction=step_data.get("fraction", DEFAULT_STEP_FRACTION),
            ranges=tuple(ranges) if ranges is not None else None,
        )
        active = normalized.get("active_dimensions")
        return cls(
            type=normalized.get("type", InterpolationType.LINEAR),
            control1=_optional_tuple(normalized.get("control1")),
            control2=_optional_tuple(normalized.get("control2")),
            ease=normalized.get("ease", DEFAULT_EASE),
            step=step,
            active_dimensions=tuple(bool(a) for a in active) if active is not None else None,
        )


def _optional_tuple(value: Optional[Sequence[float]]) -> Optional[Tuple[float, ...]]:
    return tuple(value) if value is not None else None


Interpolator = Callable[[PointLike, PointLike, int, InterpolationOptions], List[Point]]


# =============================================================================
# Curve-based strategies
# =============================================================================
def _curve_points(curve: CurveFn, number: int) -> List[Point]:
    return interpolate_n_points(curve, number)


def _linear(start, end, number, options):
    return _curve_points(make_lerp(start, end), number)


def _quadratic_bezier(start, end, number, options):
    control = value_or_default(options.control1, start)
    return _curve_points(bezier_quadratic_equation(start, end, control), number)


def _cubic_bezier(start, end, number, options):
    control1 = value_or_default(options.control1, start)
    control2 = value_or_default(options.control2, end)
    return _curve_points(bezier_cubic_equation(start, control1, control2, end), number)


# Ease control points scale the end point itself, not the start-end delta.
def _ease_in(start, end, number, options):
    control = to_point(options.ease * to_array(end))
    return _curve_points(bezier_quadratic_equation(start, end, control), number)


def _ease_out(start, end, number, options):
    control = to_point((1.0 - options.ease) * to_array(end))
    return _curve_points(bezier_quadratic_equation(start, end, control), number)


def _ease_in_out(start, end, number, options):
    end_arr = to_array(end)
    control1 = to_point(options.ease * end_arr)
    control2 = to_point((1.0 - options.ease) * end_arr)
    return _curve_points(bezier_cubic_equation(start, control1, control2, end), number)


# =============================================================================
# Step strategies
# =============================================================================
def _step_settings(options: InterpolationOptions, default_ranges: PointLike) -> Tuple[float, np.ndarray]:
    ranges = value_or_default(options.step.ranges, default_ranges)
    if len(ranges) != len(default_ranges):
        raise ValueError(f"step ranges must have {len(default_ranges)} entries, got {len(ranges)}")
    return options.step.fraction, to_array(ranges)


def _walk(
    start: PointLike,
    step: np.ndarray,
    count: int,
    bounds: Sequence[Tuple[float, float]],
) -> List[Point]:
    origin = to_array(start)
    points = []
    for j in range(1, count + 1):
        raw = origin + j * step
        points.append(tuple(clamp_value(v, lo, hi) for v, (lo, hi) in zip(raw, bounds)))
    return points


def _step_up(start, end, number, options):
    fraction, ranges = _step_settings(options, end)
    # Only the top is bounded; a walk may start below zero.
    bounds = [(-math.inf, float(r)) for r in ranges]
    return _walk(start, fraction * ranges, number + 1, bounds)


def _step_down(start, end, number, options):
    # Walking down, the top of the range is where the walk begins.
    fraction, ranges = _step_settings(options, start)
    bounds = [(0.0, math.inf)] * len(ranges)
    return _walk(start, -fraction * ranges, number + 1, bounds)


INTERPOLATORS: Dict[InterpolationType, Interpolator] = {
    InterpolationType.LINEAR: _linear,
    InterpolationType.QUADRATIC_BEZIER: _quadratic_bezier,
    InterpolationType.CUBIC_BEZIER: _cubic_bezier,
    InterpolationType.EASE_IN: _ease_in,
    InterpolationType.EASE_OUT: _ease_out,
    InterpolationType.EASE_IN_OUT: _ease_in_out,
    InterpolationType.STEP_UP: _step_up,
    InterpolationType.STEP_DOWN: _step_down,
}


# =============================================================================
# Dispatch
# =============================================================================
def mask_dimensions(
    start: PointLike,
    active_dimensions: Optional[Sequence[bool]],
) -> Callable[[List[Point]], List[Point]]:
    """Return a function pinning inactive axes of each point to ``start``."""
    if active_dimensions is None:
        return lambda points: points
    if len(active_dimensions) != len(start):
        raise ValueError(
            f"active_dimensions has {len(active_dimensions)} entries, points have {len(start)} dimensions"
        )
    pinned = to_point(start)

    def apply_mask(points: List[Point]) -> List[Point]:
        return [
            tuple(v if active else s for v, s, active in zip(point, pinned, active_dimensions))
            for point in points
        ]

    return apply_mask


def interpolate(
    start: PointLike,
    end: PointLike,
    number: int,
    options: Optional[InterpolationOptions | Mapping[str, Any]] = None,
) -> List[Point]:
    """
    Interpolate ``number`` points between ``start`` and ``end``.

    Args:
        start: Start point
        end: End point, same dimension as start
        number: How many points to generate; curve modes return this many
            interior points, step modes return ``number + 1`` steps
        options: ``InterpolationOptions`` or a mapping accepted by
            ``InterpolationOptions.from_dict``; defaults to linear

    Returns:
        List of points as tuples of floats

    Raises:
        UnsupportedInterpolationError: Unknown interpolation type
        ValueError: Mismatched point dimensions
    """
    if options is None:
        options = InterpolationOptions()
    elif not isinstance(options, InterpolationOptions):
        options = InterpolationOptions.from_dict(options)
    if len(start) != len(end):
        raise ValueError(f"start and end must have same length, got {len(start)} and {len(end)}")

    strategy = INTERPOLATORS.get(options.type)
    if strategy is None:
        raise UnsupportedInterpolationError(options.type)

    pipeline = compose_fns([
        lambda n: strategy(start, end, n, options),
        mask_dimensions(start, options.active_dimensions),
    ])
    return pipeline(number)
