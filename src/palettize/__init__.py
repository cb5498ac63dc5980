"""Import functions into the package namespace.

:created: 2026-10-19
"""

from palettize.bayer import get_bayer_coefficient
from palettize.color_mapping import EmptyPaletteError, nearest_color
from palettize.color_math import Color
from palettize.dithering import dither
from palettize.image_arrays import ImageReadError, ImageWriteError
from palettize.palette import build_palette
from palettize.quantization import quantize, quantize_image, quantize_pixel

__all__ = [
    "Color",
    "EmptyPaletteError",
    "ImageReadError",
    "ImageWriteError",
    "build_palette",
    "dither",
    "get_bayer_coefficient",
    "nearest_color",
    "quantize",
    "quantize_image",
    "quantize_pixel",
]
