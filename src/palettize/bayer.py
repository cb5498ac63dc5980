"""Bayer matrices for ordered dithering.

Each table is a permutation of [0, n*n) arranged so that neighboring pixels get
widely separated thresholds. Tables are stored (n, n) and indexed [y % n, x % n],
which is the same as indexing the row-major flat table at (y % n) * n + (x % n).

:created: 2026-10-19
"""

from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt

from palettize.defaults import FALLBACK_MATRIX_ORDER, MATRIX_ORDERS

_Coefficients: TypeAlias = Annotated[npt.NDArray[np.float64], "(h,w)"]


def _new_table(*values: int) -> npt.NDArray[np.intp]:
    """Create a read-only (n, n) table from n*n row-major values."""
    order = int(np.sqrt(len(values)))
    table = np.array(values, dtype=np.intp).reshape(order, order)
    table.setflags(write=False)
    return table


# fmt: off
_BAYER_2 = _new_table(
    0, 2,
    3, 1,
)

_BAYER_4 = _new_table(
    0, 8, 2, 10,
    12, 4, 14, 6,
    3, 11, 1, 9,
    15, 7, 13, 5,
)

_BAYER_8 = _new_table(
    0, 32, 8, 40, 2, 34, 10, 42,
    48, 16, 56, 24, 50, 18, 58, 26,
    12, 44, 4, 36, 14, 46, 6, 38,
    60, 28, 52, 20, 62, 30, 54, 22,
    3, 35, 11, 43, 1, 33, 9, 41,
    51, 19, 59, 27, 49, 17, 57, 25,
    15, 47, 7, 39, 13, 45, 5, 37,
    63, 31, 55, 23, 61, 29, 53, 21,
)
# fmt: on

BAYER_TABLES: dict[int, npt.NDArray[np.intp]] = {
    2: _BAYER_2,
    4: _BAYER_4,
    8: _BAYER_8,
}


def normalize_matrix_order(matrix_order: int) -> int:
    """Return matrix_order if there is a table for it, else the fallback order.

    :param matrix_order: requested Bayer matrix order
    :return: 2, 4, or 8

    This is not an error. Any unsupported order silently becomes 8.
    """
    if matrix_order in MATRIX_ORDERS:
        return matrix_order
    return FALLBACK_MATRIX_ORDER


def get_bayer_coefficient(x: int, y: int, matrix_order: int) -> float:
    """Get the dithering coefficient for one pixel.

    :param x: pixel column
    :param y: pixel row
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: coefficient in [-0.5, 0.5)
    """
    order = normalize_matrix_order(matrix_order)
    table = BAYER_TABLES[order]
    return float(table[y % order, x % order]) / (order * order) - 0.5


def get_bayer_coefficients(width: int, height: int, matrix_order: int) -> _Coefficients:
    """Get the dithering coefficient for every pixel of an image.

    :param width: image width
    :param height: image height
    :param matrix_order: Bayer matrix order (2, 4, or 8; anything else means 8)
    :return: (height, width) array of coefficients in [-0.5, 0.5)

    Each value is identical to get_bayer_coefficient at the same coordinate.
    """
    order = normalize_matrix_order(matrix_order)
    table = BAYER_TABLES[order]
    rows = np.arange(height)[:, np.newaxis] % order
    cols = np.arange(width)[np.newaxis, :] % order
    return table[rows, cols].astype(np.float64) / (order * order) - 0.5
