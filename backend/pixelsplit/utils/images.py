"""Image transport helpers — data URLs in, RGBA arrays out, PNG data URLs back."""

from __future__ import annotations

import base64
import binascii
import io

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from pixelsplit.engine.errors import DecodeError


def decode_data_url(data_url: str, max_pixels: int | None = None) -> NDArray[np.uint8]:
    """Decode a ``data:image/...;base64,`` URL (or bare base64) to a ``(h, w, 4)`` array."""
    payload = data_url
    if data_url.startswith("data:"):
        _, sep, payload = data_url.partition(",")
        if not sep:
            raise DecodeError("Data URL has no payload")

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 image payload: {e}") from e

    try:
        with Image.open(io.BytesIO(raw)) as img:
            if max_pixels is not None and img.width * img.height > max_pixels:
                raise DecodeError(f"Image {img.width}x{img.height} exceeds {max_pixels} pixels")
            rgba = np.array(img.convert("RGBA"))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeError(f"Cannot decode image: {e}") from e

    return np.ascontiguousarray(rgba, dtype=np.uint8)


def encode_png_data_url(rgba: NDArray[np.uint8]) -> str:
    buf = io.BytesIO()
    Image.fromarray(rgba).save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")
