import numpy as np
from typing import Callable, Literal, cast

from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import COLOR_SPACES, ColorElement, ColorSpace, element_to_array

from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl

UnitConverter = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Keyed by (from, to) base space; every converter works on unit channels.
UNIT_CONVERTERS: dict[tuple[str, str], UnitConverter] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
}


def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space


def channel_scale(space: str, fmt: FormatType) -> np.ndarray:
    """
    Per-channel maxima of ``space`` in format ``fmt``.

    Dividing by this gives unit channels, multiplying maps them back. Hue
    stays in degrees, so its entry is always 1.
    """
    top = float(max_non_hue[fmt])
    scales = [1.0 if space.startswith("h") else top, top, top]
    if space.endswith("a"):
        scales.append(top)
    return np.array(scales)


def _from_unit(unit: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    scaled = unit * channel_scale(space, fmt)
    return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    unit = color / channel_scale(from_space, input_fmt)
    route = (from_space[:3], to_space[:3])
    if route in UNIT_CONVERTERS:
        channels = UNIT_CONVERTERS[route](unit[..., 0], unit[..., 1], unit[..., 2])
    else:
        channels = unit[..., :3]

    if to_space.endswith("a"):
        if from_space.endswith("a"):
            alpha = unit[..., 3:]
        else:
            alpha = np.ones(channels.shape[:-1] + (1,))  # opaque
        channels = np.concatenate([channels, alpha], axis=-1)
    return _from_unit(channels, to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space:   ColorSpace,
    input_type:  FormatType=FormatType.INT,
    output_type: FormatType=FormatType.INT,
 ) -> ColorElement:
    """
    Convert a single color between spaces and formats.

    Args:
        color: Channel tuple in ``from_space`` / ``input_type``
        from_space: Source space, e.g. "rgb" or "hsla"
        to_space: Target space
        input_type: Format of the input channels
        output_type: Format of the output channels

    Returns:
        Tuple of converted channels (ints for FormatType.INT)
    """
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    if from_space == to_space and FormatType(input_type) == FormatType(output_type):
        return color
    result = _convert_core(
        element_to_array(color),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
    return tuple(v.item() for v in result.flat) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space:   ColorSpace,
    input_type:  Literal["int","float","percentage"]="int",
    output_type: Literal["int","float","percentage"]="int",
) -> np.ndarray:
    """Vectorized ``convert`` over arrays shaped (..., channels)."""
    from_space = _check_space(from_space)
    to_space = _check_space(to_space)
    if from_space == to_space and FormatType(input_type) == FormatType(output_type):
        return color
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
