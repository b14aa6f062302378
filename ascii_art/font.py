"""Font - FreeType glyph rasterization through Pillow."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, TextIO, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .glyph_mapper import GlyphMapper
from .layout import Glyph, glyph_to_lines, join_glyphs, print_lines
from .presets import binary_mapper

logger = logging.getLogger(__name__)

DEFAULT_FONT_PATH = "resources/font/NotoSansSC-Regular.otf"
DEFAULT_PIXEL_SIZE = 32


class FontError(RuntimeError):
    """Font could not be opened, or was used before being loaded."""


class Font:
    """
    Handle to a scalable font face.

    Glyphs are rendered as 8-bit grayscale bitmaps with their bearings, then
    converted to text with a GlyphMapper.

    Usage:
        with Font("NotoSansSC-Regular.otf") as font:
            font.print_glyphs("Hello!", 32)
    """

    def __init__(self, path: Optional[str | Path] = None):
        """
        Initialize font.

        Args:
            path: Font file to load right away (TTF/OTF). None leaves the font
                unloaded until load_font() is called.

        Raises:
            FontError: If the font file cannot be opened
        """
        self.path: Optional[Path] = None
        self._face: Optional[ImageFont.FreeTypeFont] = None
        # Face variants by pixel size
        self._sized_faces: Dict[int, ImageFont.FreeTypeFont] = {}

        if path is not None:
            self.load_font(path)

    @classmethod
    def from_pil(cls, face: ImageFont.FreeTypeFont) -> "Font":
        """Wrap an already opened Pillow FreeType font."""
        font = cls()
        font._face = face
        return font

    @property
    def loaded(self) -> bool:
        return self._face is not None

    def load_font(self, path: str | Path):
        """
        Open a font file, replacing any previously loaded face.

        Raises:
            FontError: If the file is missing or not a supported font format
        """
        path = Path(path)
        try:
            face = ImageFont.truetype(str(path), size=DEFAULT_PIXEL_SIZE)
        except OSError as e:
            raise FontError(f"Could not open font file {path}: {e}") from e

        self.close()
        self.path = path
        self._face = face
        family, style = face.getname()
        logger.info(f"Loaded font {path} ({family} {style})")

    def close(self):
        """Release the loaded face. The font can be loaded again afterwards."""
        self._face = None
        self._sized_faces.clear()

    def _face_for_size(self, pixel_size: int) -> ImageFont.FreeTypeFont:
        if pixel_size <= 0:
            raise ValueError(f"pixel_size must be positive, got {pixel_size}")
        if self._face is None:
            raise FontError("Font not loaded")

        if pixel_size not in self._sized_faces:
            self._sized_faces[pixel_size] = self._face.font_variant(size=pixel_size)
        return self._sized_faces[pixel_size]

    def render_glyph(self, char: str, pixel_size: int) -> Glyph:
        """
        Rasterize a single character.

        Args:
            char: Character to render
            pixel_size: Font size in pixels

        Returns:
            Glyph with grayscale pixels and bearings relative to the baseline origin

        Raises:
            FontError: If no font is loaded
            ValueError: If pixel_size is not positive
        """
        face = self._face_for_size(pixel_size)

        # Bounding box relative to the baseline origin ("ls" anchor), y grows down
        left, top, right, bottom = face.getbbox(char, anchor="ls")
        width = right - left
        height = bottom - top
        if width <= 0 or height <= 0:
            logger.debug(f"Glyph {char!r} at {pixel_size}px has no ink")
            return Glyph(np.zeros((0, 0), dtype=np.uint8), left=0, top=0)

        image = Image.new("L", (width, height), 0)
        draw = ImageDraw.Draw(image)
        draw.text((-left, -top), char, font=face, fill=255, anchor="ls")

        logger.debug(f"Glyph {char!r} at {pixel_size}px: {width}x{height}, bearing ({left}, {-top})")
        return Glyph(np.array(image, dtype=np.uint8), left=left, top=-top)

    def render_text(
        self,
        text: str,
        pixel_size: int,
        mapper: Optional[GlyphMapper[str]] = None,
        cell_size: Tuple[int, int] = (1, 1),
    ) -> List[str]:
        """
        Render text to lines of symbols, glyphs side by side.

        Line breaks in text start a new row of glyphs.

        Args:
            text: Text to render
            pixel_size: Font size in pixels
            mapper: Mapper from pixel blocks to symbols (binary_mapper() if None)
            cell_size: (width, height) of the pixel block behind each symbol
        """
        # Fail early for a bad size or an unloaded font, even on blank input
        self._face_for_size(pixel_size)
        if mapper is None:
            mapper = binary_mapper()

        lines = []
        for text_line in text.splitlines():
            if not text_line:
                # Blank line keeps the height of one row of glyphs
                lines.extend([""] * -(-pixel_size // cell_size[1]))
                continue
            blocks = [
                glyph_to_lines(self.render_glyph(char, pixel_size), pixel_size, mapper, cell_size)
                for char in text_line
            ]
            lines.extend(join_glyphs(blocks))
        return lines

    def print_glyphs(
        self,
        text: str,
        pixel_size: int,
        mapper: Optional[GlyphMapper[str]] = None,
        stream: Optional[TextIO] = None,
        cell_size: Tuple[int, int] = (1, 1),
    ):
        """Render text and write it to stream (stdout by default)."""
        print_lines(self.render_text(text, pixel_size, mapper, cell_size), stream)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
