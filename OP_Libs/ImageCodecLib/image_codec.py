"""
Image import and export for Open Pixel.

This module converts between rasters and RGBA bitmaps. Imports keep the
top-left region of the bitmap, clamped to a maximum number of cells per
side; exports map one cell to one image pixel with no scaling.

Functions:
    from_bitmap: Build a raster from raw RGBA bytes
    to_bitmap: Encode a raster as raw RGBA bytes
    raster_from_image: Build a raster from a PIL Image
    raster_to_image: Render a raster as a PIL Image
    load_raster: Load a raster from an image file
    save_raster: Save a raster to an image file
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
from PIL import Image

from OP_Libs.constants import DEFAULT_OUTPUT_FORMAT, EXPORT_ALPHA, MAX_IMPORT_SIZE
from OP_Libs.RasterLib.colors import hex_to_rgb
from OP_Libs.RasterLib.errors import EmptySourceError
from OP_Libs.RasterLib.raster import Raster

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


def _as_byte_array(rgba_bytes: BytesLike) -> np.ndarray:
    if isinstance(rgba_bytes, np.ndarray):
        return rgba_bytes.astype(np.uint8, copy=False).ravel()
    return np.frombuffer(bytes(rgba_bytes), dtype=np.uint8)


def from_bitmap(
    bitmap_width: int,
    bitmap_height: int,
    rgba_bytes: BytesLike,
    max_size: int = MAX_IMPORT_SIZE,
) -> Raster:
    """
    Build a raster from a decoded RGBA bitmap.

    The raster is min(max_size, bitmap_width) x min(max_size, bitmap_height);
    cell (x, y) takes the color of bitmap pixel (x, y). Alpha is dropped.

    Args:
        bitmap_width: Width of the bitmap in pixels
        bitmap_height: Height of the bitmap in pixels
        rgba_bytes: Row-major RGBA bytes, 4 per pixel
        max_size: Maximum cells per side

    Returns:
        The imported Raster

    Raises:
        EmptySourceError: If no bitmap was supplied (None, no bytes or zero size)
        ValueError: If the buffer is shorter than the bitmap size requires
    """
    if rgba_bytes is None or bitmap_width <= 0 or bitmap_height <= 0:
        raise EmptySourceError("No bitmap supplied for import")

    data = _as_byte_array(rgba_bytes)
    if data.size == 0:
        raise EmptySourceError("No bitmap supplied for import")

    expected = bitmap_width * bitmap_height * 4
    if data.size < expected:
        raise ValueError(
            f"Bitmap of {bitmap_width}x{bitmap_height} needs {expected} bytes, got {data.size}"
        )

    width = min(max_size, bitmap_width)
    height = min(max_size, bitmap_height)

    pixels = data[:expected].reshape(bitmap_height, bitmap_width, 4)[:height, :width, :3]
    cells = tuple(
        f"#{r:02x}{g:02x}{b:02x}" for r, g, b in pixels.reshape(-1, 3).tolist()
    )

    if (width, height) != (bitmap_width, bitmap_height):
        logger.info(f"Clamped {bitmap_width}x{bitmap_height} import to {width}x{height}")

    return Raster(width, height, cells)


def to_bitmap(raster: Raster) -> bytes:
    """
    Encode a raster as row-major RGBA bytes, one pixel per cell.

    Returns:
        width * height * 4 bytes, fully opaque
    """
    palette: Dict[str, tuple] = {}
    for color in set(raster.cells):
        palette[color] = hex_to_rgb(color) + (EXPORT_ALPHA,)

    pixels = np.array([palette[color] for color in raster.cells], dtype=np.uint8)
    return pixels.tobytes()


def raster_from_image(image: Any, max_size: int = MAX_IMPORT_SIZE) -> Raster:
    """
    Build a raster from a PIL Image.

    Raises:
        EmptySourceError: If image is None
    """
    if image is None:
        raise EmptySourceError("No image supplied for import")

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    return from_bitmap(image.width, image.height, image.tobytes(), max_size=max_size)


def raster_to_image(raster: Raster) -> Any:
    """Render a raster as an RGBA PIL Image at one pixel per cell."""
    return Image.frombytes("RGBA", raster.size, to_bitmap(raster))


def load_raster(file_path: Path, max_size: int = MAX_IMPORT_SIZE) -> Raster:
    """
    Load a raster from an image file.

    Args:
        file_path: Path to a PNG, JPG, BMP, GIF, ... file
        max_size: Maximum cells per side

    Returns:
        The imported Raster

    Raises:
        FileNotFoundError: If the file does not exist
        IOError: If the file cannot be decoded as an image
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Image file not found: {file_path}")

    try:
        with Image.open(file_path) as img:
            rgba = img.convert("RGBA")
    except Exception as e:
        raise IOError(f"Failed to load image from {file_path}: {str(e)}")

    raster = raster_from_image(rgba, max_size=max_size)
    logger.info(f"Imported {file_path.name} as {raster.width}x{raster.height} raster")
    return raster


def save_raster(raster: Raster, file_path: Path, save_format: str = DEFAULT_OUTPUT_FORMAT) -> Path:
    """
    Save a raster as an image file at one pixel per cell.

    Raises:
        OSError: If the output directory does not exist or the file cannot be written
    """
    file_path = Path(file_path)
    if not file_path.parent.is_dir():
        raise OSError(f"Output directory does not exist: {file_path.parent}")

    raster_to_image(raster).save(file_path, format=save_format.upper())
    logger.info(f"Exported {raster.width}x{raster.height} raster to {file_path}")
    return file_path
