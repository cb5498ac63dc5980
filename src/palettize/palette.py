"""Build a palette from the colors of an image.

Pixels are sorted by their red channel, cut into equal-sized runs (buckets), and
each bucket is averaged into one palette color. This is a single cut along the red
axis, not a recursive median cut. The result is deterministic and may contain
duplicate colors.

:created: 2026-10-19
"""

import logging
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from palettize.defaults import MIN_PALETTE_SIZE
from palettize.image_arrays import get_rgb_pixels

_Colors: TypeAlias = Annotated[npt.NDArray[np.uint8], "(m,3)"]
_Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(h,w,3|4)"]


def get_red_sorted_pixels(pixels: _Pixels) -> _Colors:
    """Flatten an image to a list of colors sorted by red.

    :param pixels: (h, w, 3) or (h, w, 4) array of 8-bit colors
    :return: (h * w, 3) array of rgb colors, ascending by the red channel

    Colors are collected in raster order before sorting. The sort is stable, so
    pixels with the same red value stay in raster order.
    """
    colors = get_rgb_pixels(pixels).reshape(-1, 3)
    order = np.argsort(colors[:, 0], kind="stable")
    return colors[order]


def _get_mean_color(colors: _Colors) -> Annotated[npt.NDArray[np.uint8], (3,)]:
    """Average a run of colors, truncating each channel to an 8-bit integer."""
    return np.mean(colors, axis=0, dtype=np.float64).astype(np.uint8)


def get_bucket_bounds(pixel_count: int, palette_size: int) -> list[tuple[int, int]]:
    """Get [begin, end) indices for each bucket of a sorted color list.

    :param pixel_count: number of colors to split
    :param palette_size: number of buckets. Must be in [1, pixel_count].
    :return: one (begin, end) pair per bucket

    All buckets have pixel_count // palette_size colors except the last, which runs
    to pixel_count and so picks up any remainder.
    """
    bucket_size = pixel_count // palette_size
    bounds: list[tuple[int, int]] = []
    for i in range(palette_size):
        begin = i * bucket_size
        end = begin + bucket_size if i < palette_size - 1 else pixel_count
        bounds.append((begin, min(end, pixel_count)))
    return bounds


def build_palette(pixels: _Pixels, max_size: int) -> _Colors:
    """Create a palette of at most max_size colors from an image.

    :param pixels: (h, w, 3) or (h, w, 4) array of 8-bit colors. Alpha is ignored.
    :param max_size: maximum number of palette colors. Values below 2 are raised
        to 2.
    :return: (k, 3) array of palette colors where k = min(max(max_size, 2), h * w)
    :raises ValueError: if the image has no pixels
    """
    max_size = max(max_size, MIN_PALETTE_SIZE)
    logging.info(f"palette max size: {max_size}")

    colors = get_red_sorted_pixels(pixels)
    pixel_count = len(colors)
    if pixel_count == 0:
        msg = "Cannot build a palette from an image with no pixels."
        raise ValueError(msg)

    # very small images have fewer pixels than requested colors
    palette_size = min(max_size, pixel_count)
    logging.info(f"palette size: {palette_size}")
    logging.info(f"bucket size: {pixel_count // palette_size}")

    bounds = get_bucket_bounds(pixel_count, palette_size)
    return np.array(
        [_get_mean_color(colors[begin:end]) for begin, end in bounds], dtype=np.uint8
    )
