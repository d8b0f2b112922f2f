import numpy as np
from numpy import ndarray as NDArray

from .to_hsv import hue_from_rgb, np_hue_from_rgb, _broadcast


def unit_rgb_to_hsl(r: float, g: float, b: float):
    """
    HSL from unit RGB.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360), s ∈ [0, 1], l ∈ [0, 1]
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    l = (mx + mn) / 2
    s = 0.0 if delta == 0 else delta / (1 - abs(2 * l - 1))
    return hue_from_rgb(r, g, b), s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized HSL from unit RGB.

    Returns:
        hsl: array of shape (..., 3)
    """
    r, g, b = _broadcast(r, g, b)
    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    delta = mx - mn
    l = (mx + mn) / 2
    denom = 1 - np.abs(2 * l - 1)
    s = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))
    return np.stack([np_hue_from_rgb(r, g, b), s, l], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float):
    l = v * (1 - s / 2)
    sl = 0.0 if l in (0.0, 1.0) else (v - l) / min(l, 1 - l)
    return h, sl, l


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = _broadcast(h, s, v)
    l = v * (1 - s / 2)
    denom = np.minimum(l, 1 - l)
    sl = np.where(denom == 0, 0.0, (v - l) / np.where(denom == 0, 1.0, denom))
    return np.stack([h, sl, l], axis=-1)
