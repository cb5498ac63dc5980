"""Shared fixtures. See full diffs in pytest.

:created: 2026-10-19
"""

from typing import Any

import numpy as np
import pytest
from numpy import typing as npt


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


@pytest.fixture
def gray_pixels() -> npt.NDArray[np.uint8]:
    """Return an 8x8 image where every pixel is (128, 128, 128)."""
    return np.full((8, 8, 3), 128, dtype=np.uint8)


@pytest.fixture
def random_pixels() -> npt.NDArray[np.uint8]:
    """Return a seeded random 13x11 rgba image."""
    rng = np.random.default_rng(20261019)
    return rng.integers(0, 256, size=(11, 13, 4), dtype=np.uint8)


@pytest.fixture
def gradient_pixels() -> npt.NDArray[np.uint8]:
    """Return a 16x4 horizontal gray gradient from black to white."""
    row = np.linspace(0, 255, 16).astype(np.uint8)
    gray = np.tile(row, (4, 1))
    return np.stack([gray, gray, gray], axis=2)
