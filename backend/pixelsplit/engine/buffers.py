"""Pixel and mask buffer coercion.

Callers hand the engine whatever they decoded the image into: a flat
``bytes``/``bytearray``, a ``memoryview``, or a numpy array (flat or
``(height, width, 4)``). Everything is normalised here to a
``(height, width, 4)`` uint8 view so the detectors only ever see one shape.
"""

from __future__ import annotations

import enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.errors import DecodeError, ShapeMismatch

_CHANNELS = 4  # R, G, B, A


class Axis(enum.Enum):
    ROWS = "rows"  # horizontal seams, y-coordinates
    COLUMNS = "columns"  # vertical seams, x-coordinates


def as_rgba(pixels: Any, width: int, height: int, *, writable: bool = False) -> NDArray[np.uint8]:
    """View ``pixels`` as a ``(height, width, 4)`` uint8 array.

    No copy is made for contiguous inputs, so writes through the returned
    array land in the caller's buffer. With ``writable=True`` a read-only or
    non-contiguous input is rejected instead of silently copied.
    """
    if width < 0 or height < 0:
        raise DecodeError(f"Invalid dimensions {width}x{height}")

    if isinstance(pixels, np.ndarray):
        arr = pixels
        if arr.dtype != np.uint8:
            raise DecodeError(f"Pixel buffer must be uint8, got {arr.dtype}")
    elif isinstance(pixels, (bytes, bytearray, memoryview)):
        arr = np.frombuffer(pixels, dtype=np.uint8)
    else:
        raise DecodeError(f"Unsupported pixel buffer type: {type(pixels).__name__}")

    expected = width * height * _CHANNELS
    if arr.size != expected:
        raise DecodeError(
            f"Pixel buffer holds {arr.size} bytes, expected {expected} for {width}x{height} RGBA"
        )

    if writable:
        if not arr.flags.writeable:
            raise DecodeError("Pixel buffer is read-only")
        if not arr.flags.c_contiguous:
            raise DecodeError("Pixel buffer must be C-contiguous to be edited in place")

    return arr.reshape(height, width, _CHANNELS)


def axis_lines(rgba: NDArray[np.uint8], axis: Axis) -> NDArray[np.uint8]:
    """Return a ``(limit, cross_limit, 4)`` view where index 0 walks along ``axis``.

    For ``Axis.ROWS`` line ``i`` is image row ``i``; for ``Axis.COLUMNS`` it is
    image column ``i`` read top to bottom.
    """
    if axis is Axis.ROWS:
        return rgba
    return rgba.transpose(1, 0, 2)


def as_mask(mask: Any, width: int, height: int) -> NDArray[np.float32]:
    """Flatten ``mask`` to float32 logits, enforcing ``len == width * height``."""
    arr = np.asarray(mask, dtype=np.float32).reshape(-1)
    expected = width * height
    if arr.size != expected:
        raise ShapeMismatch(f"Mask holds {arr.size} values, expected {expected} for {width}x{height}")
    return arr
