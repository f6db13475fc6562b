"""
Error types raised by the Open Pixel core.

Each error also derives from the built-in exception a caller would expect
(ValueError, IndexError), so generic handlers keep working.
"""

from typing import Optional


class PixelEditorError(Exception):
    """Base class for all Open Pixel errors."""


class InvalidDimensionError(PixelEditorError, ValueError):
    """Raised when a raster is constructed with a non-positive size."""


class OutOfBoundsError(PixelEditorError, IndexError):
    """Raised when a coordinate lies outside the raster grid."""

    def __init__(self, x: int, y: int, width: int, height: int, message: Optional[str] = None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            message or f"Coordinate ({x}, {y}) is outside the {width}x{height} grid"
        )


class EmptySourceError(PixelEditorError, ValueError):
    """Raised when an import is requested without a bitmap."""


class InvalidActionError(PixelEditorError, ValueError):
    """Raised when an action fragment fails boundary validation."""
