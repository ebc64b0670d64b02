"""Mask refinement — magic-wand flood fill and segmentation cleanup."""

from pixelsplit.engine.masks.components import label_components, largest_component
from pixelsplit.engine.masks.compositing import MaskGenerator, PromptPoint, apply_mask, segment_with_model
from pixelsplit.engine.masks.flood_fill import flood_fill

__all__ = [
    "MaskGenerator",
    "PromptPoint",
    "apply_mask",
    "flood_fill",
    "label_components",
    "largest_component",
    "segment_with_model",
]
