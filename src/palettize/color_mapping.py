"""Snap colors to the nearest palette color.

Distance is Euclidean in rgb space. When two palette colors are the same distance
from a color, the one earlier in the palette wins. Palettes may hold duplicate
colors, so ties are common.

:created: 2026-10-19
"""

from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from palettize.color_math import Color, distance

_Colors: TypeAlias = Annotated[npt.NDArray[np.uint8], "(m,3)"]
_Indices: TypeAlias = Annotated[npt.NDArray[np.intp], "(m,)"]


class EmptyPaletteError(Exception):
    """Exception raised when a color is mapped to a palette with no colors.

    Palettes built by this package always have at least one color, so this
    indicates a bug in the caller.
    """

    def __init__(self, message: str = "Palette has no colors.") -> None:
        self.message = message
        super().__init__(self.message)


def nearest_color(color: Color, palette: _Colors) -> Color:
    """Find the palette color closest to a color.

    :param color: color to match. Alpha is ignored.
    :param palette: (k, 3) array of palette colors, k >= 1
    :return: the nearest palette color (alpha 255). On a tie, the first palette
        color at the minimum distance.
    :raises EmptyPaletteError: if the palette is empty
    """
    if len(palette) == 0:
        raise EmptyPaletteError
    candidates = [Color.from_rgb(x) for x in palette]
    nearest = candidates[0]
    min_dist = distance(color, nearest)
    for candidate in candidates[1:]:
        dist = distance(color, candidate)
        if dist < min_dist:
            min_dist = dist
            nearest = candidate
    return nearest


def map_to_palette(colors: _Colors, palette: _Colors) -> _Indices:
    """Map a full set of colors to a palette.

    :param colors: (m, 3) array of colors
    :param palette: (k, 3) array of palette colors, k >= 1
    :return: (m,) array of indices into the palette
    :raises EmptyPaletteError: if the palette is empty

    For each color, find the index of the closest palette color. np.argmin returns
    the first index of the minimum, so ties resolve the same way as nearest_color.
    Each unique color is measured once.
    """
    if len(palette) == 0:
        raise EmptyPaletteError
    unique_colors, reverse_index = np.unique(colors, axis=0, return_inverse=True)
    deltas = (
        unique_colors[:, np.newaxis, :].astype(np.float64)
        - palette[np.newaxis, :, :].astype(np.float64)
    )
    dists = np.sqrt(np.sum(deltas**2, axis=2))
    return np.argmin(dists, axis=1)[reverse_index.reshape(-1)]
