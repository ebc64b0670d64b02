"""FloodFillMask — magic-wand transparency from a seed pixel.

4-connected region growing over an explicit stack, so depth is bounded on
images with millions of pixels. A pixel matches when it is not already
transparent and each of its R, G, B channels is within ``tolerance`` of the
seed color (per-channel test, not Euclidean). Matching pixels get alpha 0;
the buffer is edited in place.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from pixelsplit.engine.buffers import as_rgba
from pixelsplit.engine.errors import OutOfBounds

logger = logging.getLogger(__name__)


def flood_fill(
    pixels: Any,
    width: int,
    height: int,
    seed_x: int,
    seed_y: int,
    tolerance: int,
) -> int:
    """Clear alpha on the region connected to ``(seed_x, seed_y)``.

    Returns the number of pixels made transparent; 0 when the seed pixel is
    already transparent.
    """
    if not 0 <= tolerance <= 255:
        raise ValueError(f"tolerance must be in [0, 255], got {tolerance}")

    rgba = as_rgba(pixels, width, height, writable=True)
    if not (0 <= seed_x < width and 0 <= seed_y < height):
        raise OutOfBounds(f"Seed ({seed_x}, {seed_y}) outside {width}x{height} image")

    if rgba[seed_y, seed_x, 3] == 0:
        return 0

    start = rgba[seed_y, seed_x, :3].astype(np.int16)
    distance = np.abs(rgba[..., :3].astype(np.int16) - start).max(axis=-1)
    matches = (distance <= tolerance) & (rgba[..., 3] != 0)

    visited = np.zeros((height, width), dtype=bool)
    stack = [(seed_x, seed_y)]
    cleared = 0

    while stack:
        x, y = stack.pop()
        if visited[y, x]:
            continue
        visited[y, x] = True
        if not matches[y, x]:
            continue

        rgba[y, x, 3] = 0
        cleared += 1

        if x > 0:
            stack.append((x - 1, y))
        if x < width - 1:
            stack.append((x + 1, y))
        if y > 0:
            stack.append((x, y - 1))
        if y < height - 1:
            stack.append((x, y + 1))

    logger.debug("Flood fill from (%d, %d) tol=%d cleared %d pixels", seed_x, seed_y, tolerance, cleared)
    return cleared
