"""POST /api/flood-fill, /api/largest-component, /api/apply-mask — mask editing."""

from __future__ import annotations

import logging

import numpy as np
from fastapi import APIRouter, Depends

from pixelsplit.api.executor import run_cpu
from pixelsplit.config import Settings
from pixelsplit.dependencies import get_settings
from pixelsplit.engine import ShapeMismatch, apply_mask, flood_fill, largest_component
from pixelsplit.models.requests import ApplyMaskRequest, FloodFillRequest, LargestComponentRequest
from pixelsplit.models.responses import ImageEditResponse, LargestComponentResponse
from pixelsplit.utils.images import decode_data_url, encode_png_data_url

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/flood-fill", response_model=ImageEditResponse)
async def flood_fill_endpoint(req: FloodFillRequest, settings: Settings = Depends(get_settings)) -> ImageEditResponse:
    rgba = await run_cpu(decode_data_url, req.image, settings.max_image_pixels)
    height, width = rgba.shape[:2]

    cleared = await run_cpu(flood_fill, rgba, width, height, req.x, req.y, req.tolerance)
    return ImageEditResponse(image=await run_cpu(encode_png_data_url, rgba), cleared=cleared)


@router.post("/largest-component", response_model=LargestComponentResponse)
async def largest_component_endpoint(req: LargestComponentRequest) -> LargestComponentResponse:
    cleaned = await run_cpu(largest_component, req.mask, req.width, req.height)
    return LargestComponentResponse(
        mask=cleaned.tolist(),
        kept=int(np.count_nonzero(cleaned > 0)),
    )


@router.post("/apply-mask", response_model=ImageEditResponse)
async def apply_mask_endpoint(req: ApplyMaskRequest, settings: Settings = Depends(get_settings)) -> ImageEditResponse:
    rgba = await run_cpu(decode_data_url, req.image, settings.max_image_pixels)
    height, width = rgba.shape[:2]
    if (req.width, req.height) != (width, height):
        raise ShapeMismatch(f"Mask is {req.width}x{req.height} but image is {width}x{height}")

    mask = req.mask
    if req.keep_largest:
        mask = await run_cpu(largest_component, mask, width, height)
    cleared = await run_cpu(apply_mask, rgba, mask, width, height)
    logger.info(
        "Applied %s mask to %dx%d image: %d pixels cleared",
        "filtered" if req.keep_largest else "raw",
        width,
        height,
        cleared,
    )
    return ImageEditResponse(image=await run_cpu(encode_png_data_url, rgba), cleared=cleared)
