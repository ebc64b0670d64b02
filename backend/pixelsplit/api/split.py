"""POST /api/split — cut an image into tiles along seams."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pixelsplit.api.executor import run_cpu
from pixelsplit.config import Settings
from pixelsplit.dependencies import get_settings
from pixelsplit.engine import Tile, split_grid
from pixelsplit.models.requests import SplitRequest
from pixelsplit.models.responses import SplitResponse, TileOut
from pixelsplit.utils.images import decode_data_url, encode_png_data_url

router = APIRouter()


def _encode_tiles(tiles: list[Tile]) -> list[str]:
    return [encode_png_data_url(t.pixels) for t in tiles]


@router.post("/split", response_model=SplitResponse)
async def split(req: SplitRequest, settings: Settings = Depends(get_settings)) -> SplitResponse:
    rgba = await run_cpu(decode_data_url, req.image, settings.max_image_pixels)
    height, width = rgba.shape[:2]

    tiles = await run_cpu(split_grid, rgba, width, height, req.row_splits, req.col_splits)
    images = await run_cpu(_encode_tiles, tiles)
    return SplitResponse(tiles=[
        TileOut(row=t.row, col=t.col, x=t.x, y=t.y, width=t.width, height=t.height, image=image)
        for t, image in zip(tiles, images)
    ])
