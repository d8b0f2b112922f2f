"""
Color Space Conversions
=======================

RGB ↔ HSV ↔ HSL conversions, scalar and vectorized (numpy), plus hex codes.

Formats
-------
- FormatType.INT: channels 0-255
- FormatType.FLOAT: channels 0.0-1.0
- FormatType.PERCENTAGE: channels 0-100

Hue is always in degrees [0, 360) regardless of format.

Examples
--------
>>> from commonkit.conversions import convert, hex_to_rgb
>>> convert(hex_to_rgb("#ff8000"), "rgb", "hsv")
(30, 255, 255)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb, hsl_to_unit_rgb, np_hsl_to_unit_rgb
from .hexcodes import hex_to_rgb, rgb_to_hex
from .wrapper import convert, np_convert
from ..types.format_type import FormatType

__all__ = [
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "hsl_to_hsv",
    "np_hsl_to_hsv",
    "unit_rgb_to_hsl",
    "np_unit_rgb_to_hsl",
    "hsv_to_hsl",
    "np_hsv_to_hsl",
    "hsv_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "convert",
    "np_convert",
    "FormatType",
]
