"""
Raster data model for Open Pixel.

A Raster is an immutable, fixed-size grid of colors. Editing never changes
a Raster in place: every edit returns a new Raster with a full copy of the
cell buffer, so earlier versions can be kept in the undo history as-is.

Classes:
    GridPos: An (x, y) grid coordinate
    PixelWrite: A single (x, y, color) cell write
    Raster: The immutable color grid

Type Aliases:
    Edit: An ordered sequence of cell writes applied atomically
"""

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple, Union

from OP_Libs.RasterLib.colors import Color, normalize_color
from OP_Libs.RasterLib.errors import InvalidDimensionError, OutOfBoundsError


class GridPos(NamedTuple):
    x: int
    y: int


class PixelWrite(NamedTuple):
    x: int
    y: int
    color: Color


Edit = Sequence[Union[PixelWrite, Tuple[int, int, Color]]]


def _validate_dimension(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(f"Raster {name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class Raster:
    """
    Immutable grid of colors.

    ``cells[x + y * width]`` holds the color at grid coordinate (x, y), with
    the origin at the top-left corner.

    Attributes:
        width: Number of columns (> 0)
        height: Number of rows (> 0)
        cells: Row-major tuple of "#rrggbb" colors, length width * height
    """

    width: int
    height: int
    cells: Tuple[Color, ...]

    def __post_init__(self):
        _validate_dimension("width", self.width)
        _validate_dimension("height", self.height)

        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))

        expected = self.width * self.height
        if len(self.cells) != expected:
            raise ValueError(
                f"Raster of {self.width}x{self.height} needs {expected} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, width: int, height: int, color: Color) -> "Raster":
        """
        Create a raster with every cell set to one color.

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
            ValueError: If color is not a valid color
        """
        _validate_dimension("width", width)
        _validate_dimension("height", height)
        fill = normalize_color(color)
        return cls(width, height, (fill,) * (width * height))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return x + y * self.width

    def pixel_at(self, x: int, y: int) -> Color:
        """
        Get the color at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid
        """
        return self.cells[self._index(x, y)]

    def with_edits(self, edit: Iterable[Union[PixelWrite, Tuple[int, int, Color]]]) -> "Raster":
        """
        Apply a batch of cell writes and return the resulting raster.

        Writes are applied in order over a full copy of the cells, so a later
        write to the same coordinate wins. The batch is atomic: if any write
        is out of bounds, OutOfBoundsError is raised and no raster is produced.

        Args:
            edit: Sequence of (x, y, color) writes; may be empty

        Returns:
            A new Raster of the same dimensions
        """
        copy = list(self.cells)
        for x, y, color in edit:
            copy[self._index(x, y)] = normalize_color(color)
        return Raster(self.width, self.height, tuple(copy))

    def rows(self) -> Iterable[Tuple[Color, ...]]:
        """Yield the grid one row at a time, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self.cells[start:start + self.width]
