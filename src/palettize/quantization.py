"""Reduce an image to a small palette with ordered dithering.

The palette is built from every pixel of the source before any pixel is dithered.
After that, each output pixel depends only on the source pixel at the same
coordinate, the palette, and the Bayer table, so the whole image is processed as
one set of array operations.

:created: 2026-10-19
"""

import logging
import os
from pathlib import Path
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from palettize.color_mapping import map_to_palette, nearest_color
from palettize.color_math import Color
from palettize.defaults import MATRIX_ORDER, PALETTE_SIZE
from palettize.dithering import dither, dither_pixels
from palettize.image_arrays import (
    get_rgb_pixels,
    read_image_pixels,
    write_image_pixels,
)
from palettize.palette import build_palette

_MAX_8BIT = 255

_Colors: TypeAlias = Annotated[npt.NDArray[np.uint8], "(k,3)"]
_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,3|4)"]
_RgbaPixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,4)"]


def quantize_pixel(
    pixels: _Pixels, x: int, y: int, palette: _Colors, matrix_order: int
) -> Color:
    """Dither and snap one pixel of an image.

    :param pixels: (h, w, 3) or (h, w, 4) source image
    :param x: pixel column
    :param y: pixel row
    :param palette: (k, 3) palette built from the whole source image
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: the output color for (x, y), always opaque
    """
    source = Color.from_rgb(pixels[y, x])
    dithered = dither(source, x, y, len(palette), matrix_order)
    return nearest_color(dithered, palette)


def quantize(
    pixels: _Pixels,
    max_palette_size: int = PALETTE_SIZE,
    matrix_order: int = MATRIX_ORDER,
) -> _RgbaPixels:
    """Reduce an image to at most max_palette_size colors.

    :param pixels: (h, w, 3) or (h, w, 4) array of 8-bit colors. Alpha is ignored
        and the input is not modified.
    :param max_palette_size: maximum number of palette colors (at least 2 will be
        requested)
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: new (h, w, 4) array of palette colors with alpha 255. The value at
        every coordinate matches `quantize_pixel`.
    """
    rgb = get_rgb_pixels(pixels)
    palette = build_palette(rgb, max_palette_size)
    height, width = rgb.shape[:2]

    dithered = dither_pixels(rgb, len(palette), matrix_order)
    indices = map_to_palette(dithered.reshape(-1, 3), palette)

    quantized = np.full((height, width, 4), _MAX_8BIT, dtype=np.uint8)
    quantized[:, :, :3] = palette[indices].reshape(height, width, 3)
    return quantized


def quantize_image(
    source: str | os.PathLike[str],
    output: str | os.PathLike[str],
    max_palette_size: int = PALETTE_SIZE,
    matrix_order: int = MATRIX_ORDER,
) -> Path:
    """Quantize an image file and write the result as a png.

    :param source: path to any image Pillow can decode
    :param output: path to the output png
    :param max_palette_size: maximum number of palette colors
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: path to the output file
    :raises ImageReadError: if source cannot be read. Nothing is processed.
    :raises ImageWriteError: if output cannot be written
    """
    pixels = read_image_pixels(source)
    logging.info(f"quantizing {pixels.shape[1]}x{pixels.shape[0]} image")
    return write_image_pixels(quantize(pixels, max_palette_size, matrix_order), output)
