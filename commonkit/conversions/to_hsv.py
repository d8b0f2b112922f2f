import numpy as np
from numpy import ndarray as NDArray
# No dependencies


def hue_from_rgb(r: float, g: float, b: float) -> float:
    """Hue angle in degrees [0, 360) of a unit RGB color; greys get 0."""
    mx = max(r, g, b)
    delta = mx - min(r, g, b)
    if delta == 0:
        return 0.0
    if mx == r:
        h = ((g - b) / delta) % 6
    elif mx == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return (60.0 * h) % 360.0


def np_hue_from_rgb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized ``hue_from_rgb``."""
    mx = np.maximum.reduce([r, g, b])
    delta = mx - np.minimum.reduce([r, g, b])
    safe = np.where(delta == 0, 1.0, delta)
    h = np.select(
        [delta == 0, mx == r, mx == g],
        [0.0, ((g - b) / safe) % 6, (b - r) / safe + 2],
        (r - g) / safe + 4,
    )
    return (60.0 * h) % 360.0


def _broadcast(*channels):
    arrays = [np.asarray(c, dtype=float) for c in channels]
    shape = np.broadcast(*arrays).shape
    return [np.broadcast_to(a, shape) for a in arrays]


def unit_rgb_to_hsv(r: float, g: float, b: float):
    """
    HSV from unit RGB.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1]
    """
    v = max(r, g, b)
    delta = v - min(r, g, b)
    s = 0.0 if v == 0 else delta / v
    return hue_from_rgb(r, g, b), s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized HSV from unit RGB.

    Returns:
        hsv: array of shape (..., 3)
    """
    r, g, b = _broadcast(r, g, b)
    v = np.maximum.reduce([r, g, b])
    delta = v - np.minimum.reduce([r, g, b])
    s = np.where(v == 0, 0.0, delta / np.where(v == 0, 1.0, v))
    return np.stack([np_hue_from_rgb(r, g, b), s, v], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float):
    v = l + s * min(l, 1 - l)
    sv = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, sv, v


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = _broadcast(h, s, l)
    v = l + s * np.minimum(l, 1 - l)
    sv = np.where(v == 0, 0.0, 2 * (1 - l / np.where(v == 0, 1.0, v)))
    return np.stack([h, sv, v], axis=-1)
