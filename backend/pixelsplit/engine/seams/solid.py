"""SolidLineDetector — drawn separator strokes.

A line qualifies when it is flat (low variance), uses at most a handful of
quantized colors, and its average color is clearly not the background.
Adjacent qualifying lines form one stroke reported at its midpoint with the
highest score of any source.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.seams.candidates import Candidate, CandidateSource, find_runs, midpoint


def is_solid_line(
    line: NDArray[np.uint8],
    background: tuple[int, int, int],
    stride: int = 2,
    bucket: int = 32,
    max_colors: int = 3,
    distance: int = 30,
) -> bool:
    sampled = line[::stride, :3]
    if len(sampled) == 0:
        return False

    distinct = np.unique(sampled // bucket, axis=0)
    if len(distinct) > max_colors:
        return False

    average = sampled.astype(np.float64).mean(axis=0)
    return bool(np.any(np.abs(average - np.asarray(background, dtype=np.float64)) >= distance))


def find_solid_lines(
    lines: NDArray[np.uint8],
    variance: NDArray[np.float64],
    background: tuple[int, int, int],
    max_variance: float = 30.0,
    stride: int = 2,
    bucket: int = 32,
    max_colors: int = 3,
    distance: int = 30,
    score: float = 200.0,
) -> list[Candidate]:
    solid = np.zeros(len(variance), dtype=bool)
    for i in np.flatnonzero(variance < max_variance):
        solid[i] = is_solid_line(lines[i], background, stride, bucket, max_colors, distance)

    return [
        Candidate(midpoint(start, end), score, CandidateSource.SOLID)
        for start, end in find_runs(solid, max_step=1)
    ]
