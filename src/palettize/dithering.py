"""Ordered (Bayer) dithering.

Before a pixel is snapped to the palette, a Bayer coefficient in [-0.5, 0.5) is
scaled by the width of one quantization step (255 / palette size) and added to each
rgb channel. Coarser palettes get proportionally larger offsets.

:created: 2026-10-19
"""

from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from palettize.bayer import get_bayer_coefficient, get_bayer_coefficients
from palettize.color_math import Color, clamp
from palettize.image_arrays import get_rgb_pixels

_MAX_8BIT = 255

_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,3|4)"]
_RgbPixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,3)"]


def _get_step(palette_size: int) -> float:
    """Approximate width of one quantization interval for a palette."""
    return _MAX_8BIT / palette_size


def dither(
    color: Color, x: int, y: int, palette_size: int, matrix_order: int
) -> Color:
    """Offset one pixel color by its Bayer threshold.

    :param color: source color of the pixel
    :param x: pixel column
    :param y: pixel row
    :param palette_size: number of colors in the palette
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: dithered color with alpha 255. Each channel is clamped to [0, 255]
        then truncated.
    """
    offset = _get_step(palette_size) * get_bayer_coefficient(x, y, matrix_order)
    r, g, b = (int(clamp(float(c) + offset, 0, _MAX_8BIT)) for c in color.rgb)
    return Color(r, g, b)


def dither_pixels(
    pixels: _Pixels, palette_size: int, matrix_order: int
) -> _RgbPixels:
    """Offset every pixel of an image by its Bayer threshold.

    :param pixels: (h, w, 3) or (h, w, 4) array of 8-bit colors. Alpha is ignored.
    :param palette_size: number of colors in the palette
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: (h, w, 3) array of dithered colors. Every value matches `dither` at the
        same coordinate.
    """
    rgb = get_rgb_pixels(pixels)
    height, width = rgb.shape[:2]
    coefficients = get_bayer_coefficients(width, height, matrix_order)
    offsets = _get_step(palette_size) * coefficients
    dithered = rgb.astype(np.float64) + offsets[:, :, np.newaxis]
    return np.clip(dithered, 0, _MAX_8BIT).astype(np.uint8)
