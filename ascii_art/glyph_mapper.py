"""GlyphMapper - Nearest-neighbor mapping from bitmaps to output symbols."""

from typing import Generic, List, Optional, Protocol, Tuple, TypeVar

import numpy as np

from .bitmap import Bitmap
from .tuning import Tuning

Symbol = TypeVar("Symbol")


class DistanceFunction(Protocol):
    """Dissimilarity between a probe bitmap and a reference bitmap (smaller = closer)."""

    def __call__(self, probe: Bitmap, reference: Bitmap) -> float:
        ...


def glyph_distance(probe: Bitmap, reference: Bitmap) -> float:
    """
    Default distance: sum of absolute pixel differences over the reference area.

    For row i and column j of the reference, the reference pixel (x=j, y=i) is
    compared with the probe pixel (x=i, y=j), i.e. the probe is read transposed.
    Probe pixels outside the probe read as 0. For single-pixel bitmaps this is
    the plain absolute difference. Use symmetric_distance to compare both
    bitmaps on the same axes.
    """
    ref = reference.pixels.astype(np.int64)
    probe_t = probe.pixels.T
    aligned = np.zeros_like(ref)
    rows = min(reference.height, probe_t.shape[0])
    cols = min(reference.width, probe_t.shape[1])
    aligned[:rows, :cols] = probe_t[:rows, :cols]
    return float(np.abs(aligned - ref).sum())


def symmetric_distance(probe: Bitmap, reference: Bitmap) -> float:
    """Sum of absolute differences over the reference area, both bitmaps on the same axes."""
    ref = reference.pixels.astype(np.int64)
    aligned = np.zeros_like(ref)
    rows = min(reference.height, probe.height)
    cols = min(reference.width, probe.width)
    aligned[:rows, :cols] = probe.pixels[:rows, :cols]
    return float(np.abs(aligned - ref).sum())


class GlyphMapper(Generic[Symbol]):
    """
    Maps bitmaps to the symbol of the closest registered reference bitmap.

    Usage:
        mapper = GlyphMapper[str](default=" ")
        mapper.register(Bitmap.from_rows([[0]]), " ")
        mapper.register(Bitmap.from_rows([[255]]), "#")
        mapper.classify(Bitmap.from_rows([[200]]))  # "#"

    Not safe for concurrent registration and classification. Register
    everything first, then share the mapper read-only.
    """

    def __init__(
        self,
        default: Optional[Symbol] = None,
        input_tuning: Optional[Tuning] = None,
        distance_function: Optional[DistanceFunction] = None,
    ):
        """
        Initialize mapper.

        Args:
            default: Symbol returned when no references are registered
            input_tuning: Tuning applied to every probe (identity if None)
            distance_function: Callable (probe, reference) -> float
                (glyph_distance if None)
        """
        self.default = default
        self._mapping: List[Tuple[Bitmap, Symbol]] = []
        self._input_tuning = input_tuning or Tuning()
        self._distance_function: DistanceFunction = distance_function or glyph_distance

    @property
    def input_tuning(self) -> Tuning:
        return self._input_tuning

    @property
    def distance_function(self) -> DistanceFunction:
        return self._distance_function

    @property
    def mappings(self) -> List[Tuple[Bitmap, Symbol]]:
        """Registered (reference bitmap, symbol) pairs in insertion order."""
        return list(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def register(self, bitmap: Bitmap, symbol: Symbol):
        """Append a reference. The bitmap is copied, later changes to it have no effect."""
        self._mapping.append((bitmap.copy(), symbol))

    def set_input_tuning(self, tuning: Tuning):
        self._input_tuning = tuning

    def set_distance_function(self, distance_function: DistanceFunction):
        self._distance_function = distance_function

    def classify(self, bitmap: Bitmap) -> Symbol:
        """
        Return the symbol of the reference closest to the tuned bitmap.

        The caller's bitmap is not modified. Ties go to the reference
        registered first. With no references, returns self.default.
        """
        tuned = bitmap.copy()
        tuned.apply(self._input_tuning)

        best_symbol = self.default
        best_distance = None
        for reference, symbol in self._mapping:
            distance = self._distance_function(tuned, reference)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_symbol = symbol

        return best_symbol

    __call__ = classify
