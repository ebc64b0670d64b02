"""Error kinds raised at the engine's validation boundaries.

All three are fatal to the call that raised them. Nothing in the engine
retries or recovers; the caller decides what to show the user.
"""

from __future__ import annotations


class PixelsplitError(ValueError):
    """Base class for engine input errors."""


class DecodeError(PixelsplitError):
    """Pixel buffer cannot be interpreted at the given dimensions."""


class ShapeMismatch(PixelsplitError):
    """Mask and image dimensions disagree."""


class OutOfBounds(PixelsplitError):
    """A coordinate lies outside the image."""
