"""Custom mapper demo: contrast tuning, 2x2 cells and a hand-made symbol table.

Usage:
    python examples/custom_mapper.py path/to/font.otf [text]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ascii_art import Bitmap, Font, GlyphMapper, Tuning, symmetric_distance


def build_block_mapper() -> GlyphMapper[str]:
    """Map 2x2 pixel blocks to quadrant-shaped characters."""
    mapper = GlyphMapper[str](default=" ")
    # Push faint anti-aliasing down and mid-tones up before matching
    mapper.set_input_tuning(Tuning("linear", 48, 0, 160, 255))
    mapper.set_distance_function(symmetric_distance)

    blocks = {
        " ": [[0, 0], [0, 0]],
        "'": [[255, 255], [0, 0]],
        ".": [[0, 0], [255, 255]],
        "[": [[255, 0], [255, 0]],
        "]": [[0, 255], [0, 255]],
        "/": [[0, 255], [255, 0]],
        "\\": [[255, 0], [0, 255]],
        "#": [[255, 255], [255, 255]],
    }
    for symbol, rows in blocks.items():
        mapper.register(Bitmap.from_rows(rows), symbol)
    return mapper


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    text = sys.argv[2] if len(sys.argv) > 2 else "Ag"
    with Font(sys.argv[1]) as font:
        font.print_glyphs(text, 32, build_block_mapper(), cell_size=(2, 2))


if __name__ == "__main__":
    main()
