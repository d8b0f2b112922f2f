"""Basic commonkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from commonkit import (
    InterpolationOptions,
    StepOptions,
    bezier_cubic_equation,
    convert,
    hex_to_rgb,
    interpolate,
    rasterize_bezier_quadratic,
)
from commonkit.versions import (
    add_version,
    delete_version,
    get_current_ref,
    get_ref_version,
    mutate_version,
    new_asset,
    remove_unused_versions,
    star_version,
)


def demonstrate_curves() -> None:
    # Evaluate a cubic Bezier and sample a few interpolation modes.
    curve = bezier_cubic_equation((0, 0), (0.5, 3), (5, 2), (6, 6))
    print("Cubic Bezier at t=0.5:", curve(0.5))

    for mode in ("linear", "ease-in", "ease-out", "ease-in-out"):
        points = interpolate((0, 0), (100, 50), 3, InterpolationOptions(type=mode))
        print(f"{mode:>12}:", [tuple(round(v, 1) for v in p) for p in points])

    steps = interpolate(
        (0, 0), (10, 20), 4,
        InterpolationOptions(type="step-up", step=StepOptions(fraction=0.3)),
    )
    print("Step up (clamped):", steps)

    # One integer y per integer x, e.g. for a brightness ramp lookup table.
    print("Raster:", rasterize_bezier_quadratic((0, 0), (8, 8), (6, 1)))


def demonstrate_versions() -> None:
    asset = new_asset("palette", {"colors": ["#ff8000"]}, modified_time=1)
    asset = add_version(asset, {"colors": ["#ff8000", "#0080ff"], "modified_time": 2})
    asset = star_version(asset, 1)

    # Rapid edits from one drag gesture collapse into a single version.
    for i, x in enumerate((10, 12, 15)):
        asset = mutate_version("drag-1", asset, {"colors": ["#ff8000"], "x": x, "modified_time": 3 + i})
    print("Versions after drag:", sorted(asset["versions"]))

    asset = remove_unused_versions(asset)
    print("Versions after pruning:", sorted(asset["versions"]))

    asset = delete_version(asset, asset["current"])
    catalog = {"palette": asset}
    ref = get_current_ref(catalog, "palette")
    print("Current ref:", ref, "->", get_ref_version(catalog, ref))
    print("Missing ref:", get_current_ref(catalog, "fonts"))


def demonstrate_colors() -> None:
    rgb = hex_to_rgb("#ff8000")
    print("RGB:", rgb)
    print("HSV (int):", convert(rgb, "rgb", "hsv"))
    print("HSLA (float):", convert(rgb, "rgb", "hsla", "int", "float"))


def main() -> None:
    demonstrate_curves()
    demonstrate_versions()
    demonstrate_colors()


if __name__ == "__main__":
    main()
