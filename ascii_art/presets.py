"""Ready-made glyph mappers for terminal output."""

from .bitmap import Bitmap
from .glyph_mapper import GlyphMapper
from .tuning import Tuning


def binary_mapper() -> GlyphMapper[str]:
    """Any ink becomes '*', everything else a space."""
    mapper = GlyphMapper[str](default=" ", input_tuning=Tuning("binary", 0))
    mapper.register(Bitmap.from_rows([[0]]), " ")
    mapper.register(Bitmap.from_rows([[255]]), "*")
    return mapper


def shaded_mapper() -> GlyphMapper[str]:
    """Four-level shading: ' ', '+', '*', '#' from light to dark ink."""
    mapper = GlyphMapper[str](default=" ")
    mapper.register(Bitmap.from_rows([[0]]), " ")
    mapper.register(Bitmap.from_rows([[63]]), "+")
    mapper.register(Bitmap.from_rows([[127]]), "*")
    mapper.register(Bitmap.from_rows([[255]]), "#")
    return mapper


PRESETS = {
    "binary": binary_mapper,
    "shaded": shaded_mapper,
}
