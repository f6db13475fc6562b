"""
RasterLib - Immutable raster model

This module provides the color grid the editor paints on, its color
helpers and the error types shared by the rest of Open Pixel.
"""

from OP_Libs.RasterLib.colors import (
    Color,
    RgbColor,
    RgbaColor,
    normalize_color,
    is_valid_color,
    hex_to_rgb,
    rgb_to_hex,
)
from OP_Libs.RasterLib.errors import (
    PixelEditorError,
    InvalidDimensionError,
    OutOfBoundsError,
    EmptySourceError,
    InvalidActionError,
)
from OP_Libs.RasterLib.raster import Edit, GridPos, PixelWrite, Raster

__all__ = [
    "Color",
    "RgbColor",
    "RgbaColor",
    "normalize_color",
    "is_valid_color",
    "hex_to_rgb",
    "rgb_to_hex",
    "PixelEditorError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "EmptySourceError",
    "InvalidActionError",
    "Edit",
    "GridPos",
    "PixelWrite",
    "Raster",
]
