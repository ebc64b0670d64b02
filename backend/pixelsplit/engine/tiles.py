"""Cut an image into grid tiles along confirmed seams."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.buffers import as_rgba
from pixelsplit.engine.errors import OutOfBounds


@dataclass
class Tile:
    row: int
    col: int
    x: int
    y: int
    width: int
    height: int
    pixels: NDArray[np.uint8]  # (height, width, 4) copy


def _cut_points(splits: Sequence[int], limit: int, name: str) -> list[int]:
    for s in splits:
        if not 0 <= s <= limit:
            raise OutOfBounds(f"{name} split {s} outside [0, {limit}]")
    return [0, *sorted(int(s) for s in splits), limit]


def split_grid(
    pixels: Any,
    width: int,
    height: int,
    row_splits: Sequence[int],
    col_splits: Sequence[int],
) -> list[Tile]:
    """Return tiles in row-major order; zero-sized cells are skipped."""
    rgba = as_rgba(pixels, width, height)
    rows = _cut_points(row_splits, height, "row")
    cols = _cut_points(col_splits, width, "column")

    tiles: list[Tile] = []
    for r, (y0, y1) in enumerate(zip(rows, rows[1:])):
        if y1 <= y0:
            continue
        for c, (x0, x1) in enumerate(zip(cols, cols[1:])):
            if x1 <= x0:
                continue
            tiles.append(Tile(
                row=r,
                col=c,
                x=x0,
                y=y0,
                width=x1 - x0,
                height=y1 - y0,
                pixels=rgba[y0:y1, x0:x1].copy(),
            ))
    return tiles
