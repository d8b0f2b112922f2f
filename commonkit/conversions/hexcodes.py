import re
from typing import Sequence, Tuple

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def hex_to_rgb(code: str) -> Tuple[int, int, int]:
    """
    Parse ``#rrggbb`` or ``#rgb`` (the ``#`` is optional) to 0-255 RGB.

    Raises:
        ValueError: Malformed hex code
    """
    match = _HEX_RE.match(code.strip())
    if match is None:
        raise ValueError(f"Invalid hex color code: {code!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: Sequence[int]) -> str:
    """Format 0-255 RGB as lowercase ``#rrggbb``; channels are clamped."""
    if len(rgb) != 3:
        raise ValueError(f"rgb_to_hex expects 3 channels, got {len(rgb)}")
    return "#" + "".join(f"{max(0, min(255, int(round(c)))):02x}" for c in rgb)
