"""Tuning - Precomputed 8-bit intensity remapping table."""

import math
from typing import Literal

import numpy as np

TuningKind = Literal["identity", "binary", "linear"]


def _round(value: float) -> int:
    """Round half away from zero and clamp to the 8-bit range."""
    rounded = math.floor(abs(value) + 0.5)
    if value < 0:
        rounded = -rounded
    return max(0, min(255, rounded))


class Tuning:
    """
    Monotonic remapping of pixel intensities applied before glyph comparison.

    The mapping is built once into a 256-entry lookup table, so evaluating it
    is a single index operation.

    Kinds:
    - identity: output == input, parameters ignored
    - binary: 0 for input <= low_index, 255 otherwise
    - linear: three segments through (low_index, low_value) and
      (high_index, high_value). Unknown kinds fall back to linear.
    """

    def __init__(
        self,
        kind: TuningKind = "identity",
        low_index: int = 0,
        low_value: int = 0,
        high_index: int = 255,
        high_value: int = 255,
    ):
        """
        Build the lookup table.

        Args:
            kind: "identity", "binary" or "linear"
            low_index: Input where the low segment ends (binary threshold)
            low_value: Output at low_index
            high_index: Input where the high segment starts
            high_value: Output at high_index
        """
        if kind == "identity":
            low_index, low_value, high_index, high_value = 0, 0, 255, 255
        elif kind == "binary":
            low_value, high_index, high_value = 0, low_index, 255

        self.kind = kind
        self.low_index = low_index
        self.low_value = low_value
        self.high_index = high_index
        self.high_value = high_value

        table = np.zeros(256, dtype=np.uint8)
        for i in range(256):
            if i <= low_index:
                if low_index == 0:
                    table[i] = _round(low_value)
                else:
                    table[i] = _round(low_value * i / low_index)
            elif i > high_index:
                table[i] = _round(255 - (255 - high_value) * (255 - i) / (255 - high_index))
            else:
                table[i] = _round(
                    low_value
                    + (high_value - low_value) * (i - low_index) / (high_index - low_index)
                )
        table.flags.writeable = False
        self._table = table

    @property
    def table(self) -> np.ndarray:
        """Read-only 256-entry uint8 lookup table."""
        return self._table

    def __call__(self, value: int) -> int:
        if not 0 <= value <= 255:
            raise IndexError(f"Intensity must be in 0-255, got {value}")
        return int(self._table[value])

    def apply_to(self, array: np.ndarray) -> np.ndarray:
        """Map every element of a uint8 array through the table (returns a new array)."""
        return self._table[array]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuning):
            return NotImplemented
        return np.array_equal(self._table, other._table)

    def __hash__(self):
        return hash(self._table.tobytes())

    def __repr__(self) -> str:
        return (
            f"Tuning({self.kind!r}, low_index={self.low_index}, low_value={self.low_value}, "
            f"high_index={self.high_index}, high_value={self.high_value})"
        )
