"""pixelsplit pixel-buffer engine: grid seam detection and mask refinement."""

from pixelsplit.engine.config import SeamConfig
from pixelsplit.engine.errors import DecodeError, OutOfBounds, PixelsplitError, ShapeMismatch
from pixelsplit.engine.masks import (
    MaskGenerator,
    PromptPoint,
    apply_mask,
    flood_fill,
    largest_component,
    segment_with_model,
)
from pixelsplit.engine.pipeline import AxisReport, SeamDetection, detect_axis, detect_seams
from pixelsplit.engine.tiles import Tile, split_grid

__all__ = [
    "AxisReport",
    "DecodeError",
    "MaskGenerator",
    "OutOfBounds",
    "PixelsplitError",
    "PromptPoint",
    "SeamConfig",
    "SeamDetection",
    "ShapeMismatch",
    "Tile",
    "apply_mask",
    "detect_axis",
    "detect_seams",
    "flood_fill",
    "largest_component",
    "segment_with_model",
    "split_grid",
]
