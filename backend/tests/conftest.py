"""Shared synthetic images and fixtures."""

from __future__ import annotations

import numpy as np
import pytest

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def solid_image(width: int, height: int, color=WHITE, alpha: int = 255) -> np.ndarray:
    """Uniform ``(height, width, 4)`` RGBA image."""
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[..., :3] = color
    img[..., 3] = alpha
    return img


def vertical_bars_image(
    width: int = 600,
    height: int = 200,
    bars: tuple[int, ...] = (200, 300, 400),
    bar_width: int = 4,
    bar_color=BLACK,
    background=WHITE,
) -> np.ndarray:
    """Uniform background crossed by full-height vertical bars starting at ``bars``."""
    img = solid_image(width, height, background)
    for x in bars:
        img[:, x : x + bar_width, :3] = bar_color
    return img


def horizontal_bars_image(**kwargs) -> np.ndarray:
    """Same as ``vertical_bars_image`` but rotated: bars run across the width."""
    width = kwargs.pop("width", 200)
    height = kwargs.pop("height", 600)
    img = vertical_bars_image(width=height, height=width, **kwargs)
    return np.ascontiguousarray(img.transpose(1, 0, 2))


def bar_midpoints(bars: tuple[int, ...], bar_width: int = 4) -> list[int]:
    return [(x + x + bar_width - 1) // 2 for x in bars]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def bars_image() -> np.ndarray:
    return vertical_bars_image()
