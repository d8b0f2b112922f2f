from .format_type import FormatType, max_non_hue
from .color_types import ColorSpace, ColorElement, element_to_array
from .point_types import Point, CurveFn, to_point, to_array

__all__ = [
    "FormatType",
    "max_non_hue",
    "ColorSpace",
    "ColorElement",
    "element_to_array",
    "Point",
    "CurveFn",
    "to_point",
    "to_array",
]
