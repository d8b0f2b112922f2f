"""commonkit: curve geometry, versioned assets and color conversion utilities."""

from .geometry import (
    lerp,
    make_lerp,
    straight_line_equation,
    bezier_quadratic_equation,
    bezier_cubic_equation,
    points_to_fn,
    interpolate_n_points,
    rasterize_bezier_quadratic,
    interpolate,
    InterpolationType,
    InterpolationOptions,
    StepOptions,
    UnsupportedInterpolationError,
)
from .versions import (
    new_asset,
    current_version,
    get_version,
    add_version,
    replace_current,
    set_version,
    mutate_version,
    delete_version,
    star_version,
    remove_unused_versions,
    rename,
    get_current_ref,
    get_ref_version,
    find_element_with_ref_name,
    replace_element_with_ref_name,
)
from .conversions import (
    convert,
    np_convert,
    hex_to_rgb,
    rgb_to_hex,
    FormatType,
)

__version__ = "0.1.0"

__all__ = [
    # geometry
    "lerp",
    "make_lerp",
    "straight_line_equation",
    "bezier_quadratic_equation",
    "bezier_cubic_equation",
    "points_to_fn",
    "interpolate_n_points",
    "rasterize_bezier_quadratic",
    "interpolate",
    "InterpolationType",
    "InterpolationOptions",
    "StepOptions",
    "UnsupportedInterpolationError",
    # versions
    "new_asset",
    "current_version",
    "get_version",
    "add_version",
    "replace_current",
    "set_version",
    "mutate_version",
    "delete_version",
    "star_version",
    "remove_unused_versions",
    "rename",
    "get_current_ref",
    "get_ref_version",
    "find_element_with_ref_name",
    "replace_element_with_ref_name",
    # conversions
    "convert",
    "np_convert",
    "hex_to_rgb",
    "rgb_to_hex",
    "FormatType",
]
