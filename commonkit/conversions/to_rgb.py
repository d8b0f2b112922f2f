import numpy as np
from numpy import ndarray as NDArray

from .to_hsv import _broadcast


def _chroma_to_rgb(h: float, c: float, m: float):
    hp = (h % 360) / 60
    x = c * (1 - abs(hp % 2 - 1))
    sector = int(hp) % 6
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sector]
    return r + m, g + m, b + m


def _np_chroma_to_rgb(h: NDArray, c: NDArray, m: NDArray) -> NDArray:
    hp = (h % 360) / 60
    x = c * (1 - np.abs(hp % 2 - 1))
    sector = np.floor(hp).astype(int) % 6
    zero = np.zeros_like(c)
    conds = [sector == i for i in range(6)]
    r = np.select(conds, [c, x, zero, zero, x, c])
    g = np.select(conds, [x, c, c, x, zero, zero])
    b = np.select(conds, [zero, zero, x, c, c, x])
    return np.stack([r + m, g + m, b + m], axis=-1)


def hsv_to_unit_rgb(h: float, s: float, v: float):
    """Unit RGB from HSV (hue in degrees, s and v in [0, 1])."""
    c = v * s
    return _chroma_to_rgb(h, c, v - c)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = _broadcast(h, s, v)
    c = v * s
    return _np_chroma_to_rgb(h, c, v - c)


def hsl_to_unit_rgb(h: float, s: float, l: float):
    """Unit RGB from HSL (hue in degrees, s and l in [0, 1])."""
    c = (1 - abs(2 * l - 1)) * s
    return _chroma_to_rgb(h, c, l - c / 2)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = _broadcast(h, s, l)
    c = (1 - np.abs(2 * l - 1)) * s
    return _np_chroma_to_rgb(h, c, l - c / 2)
