from __future__ import annotations
from typing import Callable, Sequence, Tuple, TypeAlias, Union
import numpy as np
from numpy import ndarray

Point: TypeAlias = Tuple[float, ...]
PointLike: TypeAlias = Union[Sequence[float], ndarray]
CurveFn: TypeAlias = Callable[[float], Point]


def to_array(point: PointLike) -> ndarray:
    """Convert a point-like sequence to a 1D float64 array."""
    return np.asarray(point, dtype=np.float64)


def to_point(arr: PointLike) -> Point:
    """Convert an array (or any sequence) back to a tuple of Python floats."""
    return tuple(float(v) for v in np.asarray(arr).flat)
