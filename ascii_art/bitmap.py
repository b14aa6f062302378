"""Bitmap - Fixed-size grayscale pixel grid."""

from typing import Sequence

import numpy as np

from .tuning import Tuning

# Rows are padded to a multiple of this many bytes
PITCH_ALIGNMENT = 8


def _pitch_for(width: int) -> int:
    return (width + PITCH_ALIGNMENT - 1) // PITCH_ALIGNMENT * PITCH_ALIGNMENT


def _check_intensities(values: np.ndarray):
    if values.size and (values.min() < 0 or values.max() > 255):
        raise ValueError(
            f"Pixel values must be in 0-255, got range {values.min()}-{values.max()}"
        )


class Bitmap:
    """8-bit grayscale bitmap backed by a row-padded numpy buffer."""

    def __init__(self, width: int, height: int):
        """
        Create a zero-filled bitmap.

        Args:
            width: Width in pixels (> 0)
            height: Height in pixels (> 0)

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Bitmap size must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._pitch = _pitch_for(width)
        # Shape: (height, pitch), uint8. Columns past width are padding.
        self._data = np.zeros((height, self._pitch), dtype=np.uint8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Bitmap":
        """
        Create a bitmap from a literal table of intensities, one sequence per row.

        Raises:
            ValueError: If there are no rows, rows are empty or of unequal length,
                or a value is outside 0-255
        """
        if len(rows) == 0:
            raise ValueError("Bitmap needs at least one row")

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")

        return cls.from_array(np.asarray(rows, dtype=np.int64).reshape(len(rows), width))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Bitmap":
        """Create a bitmap from a 2D (height, width) array of intensities."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Bitmap array must be 2D, got shape {array.shape}")

        _check_intensities(array)
        height, width = array.shape
        bitmap = cls(width, height)
        bitmap._data[:, :width] = array
        return bitmap

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (height, width) view of the pixel values."""
        view = self._data[:, :self._width]
        view.flags.writeable = False
        return view

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of range for {self._width}x{self._height} bitmap"
            )

    def get(self, x: int, y: int) -> int:
        """Get pixel at (x, y). Raises IndexError outside the bitmap."""
        self._check_bounds(x, y)
        return int(self._data[y, x])

    def set(self, x: int, y: int, value: int):
        """Set pixel at (x, y). Raises IndexError outside the bitmap, ValueError past 0-255."""
        self._check_bounds(x, y)
        if not 0 <= value <= 255:
            raise ValueError(f"Pixel value must be in 0-255, got {value}")
        self._data[y, x] = value

    def get_or_default(self, x: int, y: int) -> int:
        """Get pixel at (x, y), or 0 if (x, y) is outside the bitmap."""
        if 0 <= x < self._width and 0 <= y < self._height:
            return int(self._data[y, x])
        return 0

    def apply(self, tuning: Tuning):
        """Replace every pixel value v with tuning(v), in place."""
        self._data[:, :self._width] = tuning.apply_to(self._data[:, :self._width])

    def copy(self) -> "Bitmap":
        """Create an independent copy of this bitmap."""
        new_bitmap = Bitmap(self._width, self._height)
        new_bitmap._data = self._data.copy()
        return new_bitmap

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Bitmap({self._width}x{self._height})"
