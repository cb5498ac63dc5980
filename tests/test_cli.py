"""Test the command line.

:created: 2026-10-19
"""

from pathlib import Path

import numpy as np
from numpy import typing as npt
from PIL import Image

from palettize.cli import create_parser, main
from palettize.defaults import MATRIX_ORDER, PALETTE_SIZE
from palettize.quantization import quantize


class TestParser:
    def test_defaults(self) -> None:
        """Palette size and matrix order fall back to defaults."""
        args = create_parser().parse_args(["-i", "a.jpg", "-o", "b.png"])
        assert args.source == "a.jpg"
        assert args.output == "b.png"
        assert args.pal == PALETTE_SIZE
        assert args.bay == MATRIX_ORDER
        assert not args.verbose

    def test_long_flags(self) -> None:
        """Long flag names match the short ones."""
        args = create_parser().parse_args(
            ["--in", "a.jpg", "--out", "b.png", "--pal", "8", "--bay", "2"]
        )
        assert (args.source, args.output, args.pal, args.bay) == ("a.jpg", "b.png", 8, 2)


class TestMain:
    def test_success(
        self, tmp_path: Path, random_pixels: npt.NDArray[np.uint8]
    ) -> None:
        """Write the quantized image and return 0."""
        rgb = np.ascontiguousarray(random_pixels[:, :, :3])
        source = tmp_path / "source.png"
        output = tmp_path / "out.png"
        Image.fromarray(rgb).save(source)
        status = main(["-i", str(source), "-o", str(output), "-p", "3", "-b", "9"])
        assert status == 0
        with Image.open(output) as image:
            written = np.array(image.convert("RGBA"))
        np.testing.assert_array_equal(written, quantize(rgb, 3, 8))

    def test_read_failure(self, tmp_path: Path) -> None:
        """Return 1 when the input cannot be read."""
        status = main(["-i", str(tmp_path / "missing.png"), "-o", str(tmp_path / "o")])
        assert status == 1

    def test_write_failure(
        self, tmp_path: Path, gray_pixels: npt.NDArray[np.uint8]
    ) -> None:
        """Return 1 when the output cannot be written."""
        source = tmp_path / "source.png"
        Image.fromarray(gray_pixels).save(source)
        status = main(["-i", str(source), "-o", str(tmp_path / "no" / "out.png")])
        assert status == 1
