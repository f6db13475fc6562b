"""
Color helpers for Open Pixel.

Colors are stored as normalized lowercase hex strings ("#rrggbb"), which
makes equality total and keeps rasters hashable.

Functions:
    normalize_color: Convert a hex string or RGB(A) tuple to "#rrggbb"
    is_valid_color: Check whether a value can be normalized
    hex_to_rgb: Split a color into its RGB components
    rgb_to_hex: Build a color from RGB components
"""

import re
from typing import Any, Tuple

RgbColor = Tuple[int, int, int]
RgbaColor = Tuple[int, int, int, int]
Color = str

_HEX_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


def rgb_to_hex(r: int, g: int, b: int) -> Color:
    """Convert RGB components to a "#rrggbb" string. Components are clamped to 0..255."""
    return f"#{_clamp_channel(r):02x}{_clamp_channel(g):02x}{_clamp_channel(b):02x}"


def normalize_color(value: Any) -> Color:
    """
    Normalize a color value to the "#rrggbb" form.

    Args:
        value: A "#RGB" / "#RRGGBB" string (any case) or an (r, g, b) or
            (r, g, b, a) tuple. Alpha is dropped.

    Returns:
        The lowercase six-digit hex string

    Raises:
        ValueError: If the value is not a recognizable color
    """
    if isinstance(value, str):
        text = value.strip()
        if not _HEX_PATTERN.match(text):
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = text[1:].lower()
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return f"#{digits}"

    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            r, g, b = (int(channel) for channel in value[:3])
        except (TypeError, ValueError):
            raise ValueError(f"Invalid color tuple: {value!r}")
        return rgb_to_hex(r, g, b)

    raise ValueError(f"Unsupported color value: {value!r}")


def is_valid_color(value: Any) -> bool:
    try:
        normalize_color(value)
    except ValueError:
        return False
    return True


def hex_to_rgb(color: Color) -> RgbColor:
    """Convert a hex color string to an (r, g, b) tuple."""
    digits = normalize_color(color)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
