# core/image.py
from typing import Callable, Iterator, List
import numpy as np
from core.pixel import Pixel


class Image:
    """
    A rectangular grid of 8-bit RGB pixels stored as a (height x width x 3)
    uint8 array. Rows run top-to-bottom, columns left-to-right.
    """
    def __init__(self, width: int, height: int):
        _check_dimension(width, "width")
        _check_dimension(height, "height")
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    @classmethod
    def new_assign(cls, width: int, height: int,
                   init: Callable[[int, int], Pixel]) -> "Image":
        """
        Build an image by calling init(row, col) once per cell, in row-major
        order.

        Args:
            width: Number of columns.
            height: Number of rows.
            init: Callback returning the Pixel (or any (r, g, b) iterable)
                for a cell.

        Returns:
            Image: The fully populated image.
        """
        image = cls(width, height)
        for row in range(height):
            for col in range(width):
                image.pixels[row, col] = tuple(Pixel(*init(row, col)))
        return image

    @classmethod
    def from_array(cls, array) -> "Image":
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected a (height, width, 3) array, got shape {array.shape}")
        if array.size and (array.min() < 0 or array.max() > 255):
            raise ValueError("Pixel values must lie in 0..255")
        image = cls(array.shape[1], array.shape[0])
        image.pixels[...] = array.astype(np.uint8)
        return image

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel(self, row: int, col: int) -> Pixel:
        r, g, b = self.pixels[row, col]
        return Pixel(int(r), int(g), int(b))

    def rows(self) -> Iterator[List[Pixel]]:
        for row in range(self.height):
            yield [self.pixel(row, col) for col in range(self.width)]

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"


def _check_dimension(value, name: str):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"Image {name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Image {name} must be non-negative, got {value}")
