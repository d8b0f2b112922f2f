import math
from typing import Sequence, Tuple

from boundednumbers.functions import clamp


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with halves going up.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); raster
    coordinates need ``2.5 -> 3`` and ``-2.5 -> -2``.
    """
    return int(math.floor(value + 0.5))


def round_to_places(value: float, places: int) -> float:
    """Round half-up to the given number of decimal places."""
    factor = 10 ** places
    return round_half_up(value * factor) / factor


def round_point(point: Sequence[float], places: int) -> Tuple[float, ...]:
    """Round every coordinate of a point to ``places`` decimals."""
    return tuple(round_to_places(v, places) for v in point)


def clamp_value(value: float, low: float, high: float) -> float:
    """Clamp value to the inclusive range [low, high]."""
    return float(clamp(value, low, high))
