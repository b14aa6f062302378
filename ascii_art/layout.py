"""Layout - Places classified glyph bitmaps side by side as lines of text."""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO, Tuple

import numpy as np

from .bitmap import Bitmap
from .glyph_mapper import GlyphMapper

logger = logging.getLogger(__name__)


@dataclass
class Glyph:
    """
    A rasterized glyph.

    Attributes:
        pixels: (rows, width) uint8 intensities, may be empty (e.g. space)
        left: Horizontal bearing, origin to the leftmost column
        top: Vertical bearing, baseline up to the top row
    """

    pixels: np.ndarray
    left: int = 0
    top: int = 0

    @property
    def width(self) -> int:
        return self.pixels.shape[1] if self.pixels.ndim == 2 else 0

    @property
    def rows(self) -> int:
        return self.pixels.shape[0] if self.pixels.ndim == 2 else 0


def glyph_to_lines(
    glyph: Glyph,
    pixel_size: int,
    mapper: GlyphMapper[str],
    cell_size: Tuple[int, int] = (1, 1),
) -> List[str]:
    """
    Convert one glyph into lines of symbols.

    The glyph origin sits at the bottom-left corner of a pixel_size x pixel_size
    area. The canvas grows to fit bitmaps that extend past it; pixels that
    would land above or left of the canvas are clipped. Each cell_size block
    touching the glyph bitmap is classified by the mapper, other positions
    are spaces.

    Args:
        glyph: Rasterized glyph
        pixel_size: Nominal glyph height in pixels
        mapper: Mapper from bitmaps to single-character symbols
        cell_size: (width, height) of the pixel block behind each symbol

    Raises:
        ValueError: If pixel_size or a cell dimension is not positive
    """
    if pixel_size <= 0:
        raise ValueError(f"pixel_size must be positive, got {pixel_size}")
    cell_w, cell_h = cell_size
    if cell_w <= 0 or cell_h <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_w}x{cell_h}")

    top = pixel_size - glyph.top
    left = glyph.left
    rows = max(top + glyph.rows, pixel_size)
    cols = max(left + glyph.width, pixel_size)

    canvas = np.zeros((rows, cols), dtype=np.uint8)
    inked = np.zeros((rows, cols), dtype=bool)

    # Visible region of the glyph bitmap
    src_y_start = max(0, -top)
    src_x_start = max(0, -left)
    if src_y_start or src_x_start:
        logger.debug(f"Clipping glyph at offset ({left}, {top}) to a {cols}x{rows} canvas")
    if src_y_start < glyph.rows and src_x_start < glyph.width:
        dst_y = top + src_y_start
        dst_x = left + src_x_start
        region = glyph.pixels[src_y_start:, src_x_start:]
        canvas[dst_y:dst_y + region.shape[0], dst_x:dst_x + region.shape[1]] = region
        inked[dst_y:dst_y + region.shape[0], dst_x:dst_x + region.shape[1]] = True

    lines = []
    for y in range(0, rows, cell_h):
        line = []
        for x in range(0, cols, cell_w):
            if not inked[y:y + cell_h, x:x + cell_w].any():
                line.append(" ")
                continue
            symbol = mapper.classify(Bitmap.from_array(canvas[y:y + cell_h, x:x + cell_w]))
            line.append(" " if symbol is None else str(symbol))
        lines.append("".join(line))

    return lines


def join_glyphs(blocks: Sequence[List[str]], separator: str = " ") -> List[str]:
    """
    Place glyph blocks side by side.

    Every block is followed by the separator. Blocks shorter than the tallest
    one are padded with blank rows of their own width.
    """
    rows = max((len(block) for block in blocks), default=0)

    lines = []
    for y in range(rows):
        parts = []
        for block in blocks:
            if y < len(block):
                parts.append(block[y])
            elif block:
                parts.append(" " * len(block[0]))
            parts.append(separator)
        lines.append("".join(parts))

    return lines


def print_lines(lines: Sequence[str], stream: Optional[TextIO] = None):
    """Write lines to stream (stdout by default) in a single write."""
    stream = stream or sys.stdout
    stream.write("".join(line + "\n" for line in lines))
    stream.flush()
