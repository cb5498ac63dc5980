"""Clamped arithmetic on 8-bit RGB colors.

Every function here ignores alpha when comparing or combining colors. Results are
truncated (not rounded) to 8-bit integers.

:created: 2026-10-19
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable

_MAX_8BIT = 255


@dataclasses.dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels.

    Alpha is carried through but never used for distance. Quantized output always
    has alpha 255.
    """

    r: int
    g: int
    b: int
    a: int = _MAX_8BIT

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the color channels without alpha."""
        return self.r, self.g, self.b

    @classmethod
    def from_rgb(cls, values: Iterable[int]) -> Color:
        """Create an opaque color from the first three values of an iterable.

        :param values: r, g, b (and optionally more, which are ignored)
        :return: an opaque Color
        """
        r, g, b = (int(x) for x in list(values)[:3])
        return cls(r, g, b)


def clamp(x: float, low: float, high: float) -> float:
    """Clamp a float into [low, high]."""
    return min(max(x, low), high)


def add(color_a: Color, color_b: Color) -> Color:
    """Add the color channels of two colors, saturating at 255.

    :param color_a: first color
    :param color_b: second color
    :return: sum of the rgb channels with alpha 255
    """
    r, g, b = (
        min(x + y, _MAX_8BIT) for x, y in zip(color_a.rgb, color_b.rgb)
    )
    return Color(r, g, b)


def scale(lam: float, color: Color) -> Color:
    """Multiply the rgb channels of a color by a scalar.

    :param lam: scalar, clamped to [0, 1]
    :param color: color to scale
    :return: scaled color with the alpha of the input
    """
    lam = clamp(lam, 0, 1)
    r, g, b = (int(lam * x) for x in color.rgb)
    return Color(r, g, b, color.a)


def linear_gradient(s: float, color_a: Color, t: float, color_b: Color) -> Color:
    """Return s * color_a + t * color_b with alpha 255."""
    return add(scale(s, color_a), scale(t, color_b))


def distance(color_a: Color, color_b: Color) -> float:
    """Euclidean distance between two colors in rgb space. Alpha is ignored."""
    return math.sqrt(
        sum((float(x) - float(y)) ** 2 for x, y in zip(color_a.rgb, color_b.rgb))
    )
