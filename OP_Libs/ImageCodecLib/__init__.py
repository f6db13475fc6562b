"""
ImageCodecLib - Raster import and export

This module converts rasters to and from RGBA bitmaps and image files.
"""

from OP_Libs.ImageCodecLib.image_codec import (
    from_bitmap,
    to_bitmap,
    raster_from_image,
    raster_to_image,
    load_raster,
    save_raster,
)

__all__ = [
    "from_bitmap",
    "to_bitmap",
    "raster_from_image",
    "raster_to_image",
    "load_raster",
    "save_raster",
]
