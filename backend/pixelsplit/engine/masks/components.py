"""ConnectedComponentFilter — keep only the dominant foreground blob.

Segmentation models tend to return the object plus a scatter of small
positive islands. Thresholding the logits at 0, labelling 4-connected
foreground and zeroing everything outside the largest component removes
them before the mask is composited.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.ndimage import label

from pixelsplit.engine.buffers import as_mask

logger = logging.getLogger(__name__)

# 4-connectivity: edges only, no diagonals.
_FOUR_CONNECTED = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool)


def label_components(foreground: NDArray[np.bool_]) -> tuple[NDArray[np.int32], NDArray[np.int64]]:
    """Label 4-connected foreground regions.

    Returns a label map (``-1`` = background, ``>= 0`` = component id) and
    the size of each component. Ids follow raster scan order of each
    component's first pixel.
    """
    labels, n_components = label(foreground, structure=_FOUR_CONNECTED)
    flat = labels.ravel()

    # Renumber by first occurrence so ids are raster-ordered regardless of
    # how the labeller numbered them.
    ids, first_seen = np.unique(flat, return_index=True)
    foreground_ids = ids[ids > 0]
    order = foreground_ids[np.argsort(first_seen[ids > 0], kind="stable")]

    remap = np.full(n_components + 1, -1, dtype=np.int32)
    remap[order] = np.arange(len(order), dtype=np.int32)
    sizes = np.bincount(flat, minlength=n_components + 1)[order]
    return remap[labels], sizes


def largest_component(mask: Any, width: int, height: int) -> NDArray[np.float32]:
    """Return a copy of ``mask`` where only the largest positive component survives.

    Every other position is set to 0. Equal-sized largest components resolve
    to the one discovered first in raster order. Raises ``ShapeMismatch``
    before touching anything when ``mask`` does not hold ``width * height``
    values.
    """
    flat = as_mask(mask, width, height)
    grid = flat.reshape(height, width)

    label_map, sizes = label_components(grid > 0)
    if sizes.size == 0:
        result = np.zeros_like(grid)
    else:
        keep = int(np.argmax(sizes))  # first maximum wins
        result = np.where(label_map == keep, grid, np.float32(0)).astype(np.float32)
        logger.debug(
            "Largest component %d/%d kept %d of %d foreground pixels",
            keep,
            sizes.size,
            int(sizes[keep]),
            int(sizes.sum()),
        )

    return result.reshape(np.shape(mask))
