"""ascii-art - Render text as ASCII art by nearest-neighbor glyph quantization."""

from .bitmap import Bitmap
from .font import Font, FontError
from .glyph_mapper import (DistanceFunction, GlyphMapper, glyph_distance,
                           symmetric_distance)
from .layout import Glyph, glyph_to_lines, join_glyphs, print_lines
from .presets import binary_mapper, shaded_mapper
from .tuning import Tuning

__all__ = [
    "Tuning",
    "Bitmap",
    "GlyphMapper",
    "DistanceFunction",
    "glyph_distance",
    "symmetric_distance",
    "Glyph",
    "glyph_to_lines",
    "join_glyphs",
    "print_lines",
    "binary_mapper",
    "shaded_mapper",
    "Font",
    "FontError",
]
