"""Convert image files to numpy arrays and back.

The quantization functions work on (h, w, 3) or (h, w, 4) uint8 arrays. This module
reads any image Pillow can decode into that form and writes results as png.

:created: 2026-10-19
"""

import logging
import os
from pathlib import Path
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt
from PIL import Image, UnidentifiedImageError

_RgbPixels: TypeAlias = Annotated[npt.NDArray[np.uint8], (-1, -1, 3)]
_RgbaPixels: TypeAlias = Annotated[npt.NDArray[np.uint8], (-1, -1, 4)]


class ImageReadError(Exception):
    """Exception raised when an image file cannot be opened or decoded."""

    def __init__(self, message: str = "Cannot read image.") -> None:
        self.message = message
        super().__init__(self.message)


class ImageWriteError(Exception):
    """Exception raised when an image file cannot be created or encoded."""

    def __init__(self, message: str = "Cannot write image.") -> None:
        self.message = message
        super().__init__(self.message)


def get_rgb_pixels(pixels: npt.NDArray[np.uint8]) -> _RgbPixels:
    """Drop the alpha channel from an image array.

    :param pixels: (h, w, 3) or (h, w, 4) array of 8-bit colors
    :return: (h, w, 3) view of the rgb channels
    :raises ValueError: if pixels is not an (h, w, 3) or (h, w, 4) array
    """
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        msg = f"Expected an (h, w, 3) or (h, w, 4) array, got shape {pixels.shape}."
        raise ValueError(msg)
    return pixels[:, :, :3]


def read_image_pixels(filename: str | os.PathLike[str]) -> _RgbPixels:
    """Read an image file into an array of rgb colors.

    :param filename: path to any image Pillow can decode
    :return: (h, w, 3) array of uint8 values
    :raises ImageReadError: if the file cannot be opened or decoded
    """
    logging.info(f"reading {Path(filename).name}")
    try:
        with Image.open(filename) as image:
            return np.array(image.convert("RGB"), dtype=np.uint8)
    except (OSError, UnidentifiedImageError) as e:
        msg = f"Cannot read image '{filename}'."
        raise ImageReadError(msg) from e


def write_image_pixels(pixels: _RgbaPixels, filename: str | os.PathLike[str]) -> Path:
    """Write an array of rgba colors to a png file.

    :param pixels: (h, w, 4) array of uint8 values
    :param filename: path to output file. The file is png encoded whatever the
        extension.
    :return: path to the output file
    :raises ImageWriteError: if the file cannot be created or encoded
    :effects: writes an image to the filesystem
    """
    path = Path(filename)
    logging.info(f"writing {path.name}")
    image = Image.fromarray(pixels)
    try:
        image.save(path, format="PNG")
    except (OSError, ValueError) as e:
        msg = f"Cannot write image '{filename}'."
        raise ImageWriteError(msg) from e
    return path
