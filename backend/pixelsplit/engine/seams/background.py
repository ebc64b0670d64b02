"""BackgroundColorEstimator — modal border color.

Roughly ``samples`` evenly spaced points are read along each of the four
image borders. Colors are bucketed per channel; the first full-precision
sample that fell into the most frequent bucket is the background. A mode is
robust to watermarks and small foreground intrusions where a mean is not.
"""

from __future__ import annotations

from collections import Counter

import numpy as np
from numpy.typing import NDArray

# Returned when there is nothing to sample (0×0 image).
DEFAULT_BACKGROUND: tuple[int, int, int] = (255, 255, 255)


def _border_samples(rgba: NDArray[np.uint8], samples: int) -> NDArray[np.uint8]:
    height, width = rgba.shape[:2]
    if width == 0 or height == 0:
        return np.empty((0, 3), dtype=np.uint8)

    x_step = max(1, width // samples)
    y_step = max(1, height // samples)
    xs = np.arange(0, width, x_step)
    ys = np.arange(0, height, y_step)

    # Order matters for tie-breaks: top, bottom, left, right.
    return np.concatenate([
        rgba[0, xs, :3],
        rgba[height - 1, xs, :3],
        rgba[ys, 0, :3],
        rgba[ys, width - 1, :3],
    ])


def estimate_background(
    rgba: NDArray[np.uint8],
    samples: int = 50,
    bucket: int = 10,
) -> tuple[int, int, int]:
    """Estimate the background color of a ``(height, width, 4)`` image."""
    colors = _border_samples(rgba, samples)
    if len(colors) == 0:
        return DEFAULT_BACKGROUND

    keys = [tuple(int(c) // bucket for c in color) for color in colors]
    # most_common keeps first-seen order among equal counts
    modal_key, _ = Counter(keys).most_common(1)[0]

    first = keys.index(modal_key)
    r, g, b = (int(c) for c in colors[first])
    return (r, g, b)
