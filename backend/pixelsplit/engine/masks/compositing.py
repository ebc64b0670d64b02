"""Mask compositing and the segmentation-model round trip.

The model runtime itself is an injected collaborator: anything with a
``generate_mask(points)`` method returning ``(logits, width, height)``.
Loading and caching it is the caller's business.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np

from pixelsplit.engine.buffers import as_mask, as_rgba
from pixelsplit.engine.errors import ShapeMismatch
from pixelsplit.engine.masks.components import largest_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptPoint:
    x: float
    y: float
    label: int = 1  # 1 = foreground click, 0 = background click


class MaskGenerator(Protocol):
    def generate_mask(self, points: Sequence[PromptPoint]) -> tuple[Any, int, int]: ...


def apply_mask(pixels: Any, mask: Any, width: int, height: int) -> int:
    """Make every pixel whose mask value is ``<= 0`` transparent, in place.

    Returns the number of pixels whose alpha was set to 0.
    """
    values = as_mask(mask, width, height)
    rgba = as_rgba(pixels, width, height, writable=True)

    background = (values <= 0).reshape(height, width)
    rgba[..., 3][background] = 0
    cleared = int(np.count_nonzero(background))
    logger.debug("Applied mask: %d of %d pixels transparent", cleared, width * height)
    return cleared


def segment_with_model(
    generator: MaskGenerator,
    pixels: Any,
    width: int,
    height: int,
    points: Sequence[PromptPoint],
) -> int:
    """Ask the model for a mask, keep its largest blob and cut the image with it."""
    logits, mask_width, mask_height = generator.generate_mask(points)
    if mask_width * mask_height != width * height:
        raise ShapeMismatch(
            f"Model mask {mask_width}x{mask_height} does not match image {width}x{height}"
        )

    cleaned = largest_component(logits, mask_width, mask_height)
    return apply_mask(pixels, cleaned, width, height)
