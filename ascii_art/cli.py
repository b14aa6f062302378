"""Command line entry point: print text as ASCII art."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .font import DEFAULT_FONT_PATH, DEFAULT_PIXEL_SIZE, Font, FontError
from .presets import PRESETS

logger = logging.getLogger(__name__)

DEFAULT_TEXT = "Hello!"


def parse_cell_size(value: str) -> Tuple[int, int]:
    """Parse a 'WxH' cell size argument."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Cell size must look like 2x4, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Cell size must be positive, got {value!r}")
    return (width, height)


def decode_text(data: bytes) -> str:
    """Decode UTF-8 text, replacing invalid sequences and warning about the first one."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"Invalid UTF-8 encoding detected at byte {e.start}")
        return data.decode("utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ascii-art", description="Print text as ASCII art")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT, help="text to print")
    parser.add_argument("-f", "--textfile", help="text file to print (UTF-8)")
    parser.add_argument("--font", default=DEFAULT_FONT_PATH, help="font file name")
    parser.add_argument("--size", type=int, default=DEFAULT_PIXEL_SIZE,
                        help=f"glyph size in pixels (default {DEFAULT_PIXEL_SIZE})")
    parser.add_argument("--style", choices=sorted(PRESETS), default="shaded",
                        help="symbol set used for glyph pixels")
    parser.add_argument("--cell", type=parse_cell_size, default=(1, 1),
                        help="pixels per symbol as WxH (default 1x1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s.%(msecs)03d - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.size <= 0:
        parser.error(f"--size must be positive, got {args.size}")

    text = args.text
    if args.textfile:
        try:
            text = decode_text(Path(args.textfile).read_bytes())
        except OSError as e:
            logger.error(f"Could not open text file: {e}")
            return 1

    try:
        with Font(args.font) as font:
            font.print_glyphs(text, args.size, PRESETS[args.style](), cell_size=args.cell)
    except FontError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
