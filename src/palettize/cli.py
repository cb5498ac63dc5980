"""Command-line interface for palettize."""

import argparse
import logging
import sys

from palettize.defaults import MATRIX_ORDER, PALETTE_SIZE
from palettize.image_arrays import ImageReadError, ImageWriteError
from palettize.quantization import quantize_image


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="palettize",
        description="Reduce an image to a small palette with Bayer dithering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  palettize -i input.jpg -o output.png
  palettize -i input.jpg -o output.png --pal 8 --bay 2
        """,
    )

    parser.add_argument("-i", "--in", dest="source", required=True, help="Input image")

    parser.add_argument(
        "-o",
        "--out",
        dest="output",
        required=True,
        help="Output image file path (always written as png)",
    )

    parser.add_argument(
        "-p",
        "--pal",
        type=int,
        default=PALETTE_SIZE,
        help=f"Maximum size of the palette (default: {PALETTE_SIZE})",
    )

    parser.add_argument(
        "-b",
        "--bay",
        type=int,
        default=MATRIX_ORDER,
        help=f"Bayer matrix size: 2, 4 or 8 (default: {MATRIX_ORDER})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress messages"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line. Return an exit status."""
    args = create_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        output = quantize_image(args.source, args.output, args.pal, args.bay)
    except (ImageReadError, ImageWriteError) as e:
        logging.error(f"{e.message} ({e.__cause__})")
        return 1

    logging.info(f"wrote {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
