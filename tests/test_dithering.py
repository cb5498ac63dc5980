"""Test ordered dithering.

:created: 2026-10-19
"""

import itertools as it

import numpy as np
import pytest
from numpy import typing as npt

from palettize.color_math import Color
from palettize.dithering import dither, dither_pixels


class TestDither:
    def test_offset(self) -> None:
        """Channels are offset by 255 / palette_size * coefficient."""
        # coefficient at (0, 1) for order 2 is 0.25, step for 4 colors is 63.75
        assert dither(Color(100, 150, 200), 0, 1, 4, 2) == Color(115, 165, 215)

    def test_negative_offset_truncates(self) -> None:
        """Negative offsets are applied then truncated."""
        # coefficient at (0, 0) is -0.5, so the offset is -31.875
        assert dither(Color(100, 150, 200), 0, 0, 4, 2) == Color(68, 118, 168)

    def test_clamp_low(self) -> None:
        """Channels do not drop below 0."""
        assert dither(Color(0, 10, 200), 0, 0, 2, 2) == Color(0, 0, 136)

    def test_clamp_high(self) -> None:
        """Channels do not rise above 255."""
        assert dither(Color(255, 250, 3), 0, 1, 1, 2) == Color(255, 255, 66)

    @pytest.mark.parametrize("palette_size", [1, 2, 16])
    def test_range(self, palette_size: int) -> None:
        """Dithered black and white stay inside [0, 255]."""
        for x, y in it.product(range(8), repeat=2):
            for color in (Color(0, 0, 0), Color(255, 255, 255)):
                result = dither(color, x, y, palette_size, 8)
                assert all(0 <= c <= 255 for c in result.rgb)

    def test_opaque(self) -> None:
        """Alpha is always 255 after dithering."""
        assert dither(Color(10, 10, 10, 0), 3, 2, 4, 4).a == 255

    def test_deterministic(self) -> None:
        """The same arguments give the same color."""
        args = (Color(33, 66, 99), 5, 6, 3, 8)
        assert dither(*args) == dither(*args)


class TestDitherPixels:
    @pytest.mark.parametrize(
        ("palette_size", "matrix_order"), it.product([1, 2, 7], [2, 4, 8, 5])
    )
    def test_match_scalar(
        self, random_pixels: npt.NDArray[np.uint8], palette_size: int, matrix_order: int
    ) -> None:
        """Every array value matches dither at the same coordinate."""
        result = dither_pixels(random_pixels, palette_size, matrix_order)
        height, width = random_pixels.shape[:2]
        assert result.shape == (height, width, 3)
        for y, x in it.product(range(height), range(width)):
            source = Color.from_rgb(random_pixels[y, x])
            expect = dither(source, x, y, palette_size, matrix_order)
            assert tuple(result[y, x].tolist()) == expect.rgb

    def test_input_unchanged(self, random_pixels: npt.NDArray[np.uint8]) -> None:
        """Dithering does not modify the image."""
        before = random_pixels.copy()
        _ = dither_pixels(random_pixels, 2, 4)
        np.testing.assert_array_equal(random_pixels, before)
