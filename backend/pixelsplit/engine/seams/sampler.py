"""PixelSampler — grayscale mean and variance per line.

Every ``stride``-th cross-pixel of a line is converted to grayscale with
``(R + G + B) / 3``; variance is ``E[x²] − E[x]²`` over those samples.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class LineStatistic:
    index: int
    mean: float
    variance: float


@dataclass
class LineStats:
    """Column-oriented statistics for every line along one axis."""

    mean: NDArray[np.float64]
    variance: NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.mean)

    def __getitem__(self, index: int) -> LineStatistic:
        return LineStatistic(index=index, mean=float(self.mean[index]), variance=float(self.variance[index]))


def _gray(samples: NDArray[np.uint8]) -> NDArray[np.float64]:
    return samples[..., :3].astype(np.float64).sum(axis=-1) / 3.0


def line_statistic(lines: NDArray[np.uint8], index: int, stride: int = 4) -> LineStatistic:
    """Statistics for a single line of a ``(limit, cross_limit, 4)`` view."""
    gray = _gray(lines[index, ::stride])
    if gray.size == 0:
        return LineStatistic(index=index, mean=0.0, variance=0.0)
    mean = float(gray.mean())
    variance = float((gray * gray).mean() - mean * mean)
    return LineStatistic(index=index, mean=mean, variance=variance)


def line_statistics(lines: NDArray[np.uint8], stride: int = 4) -> LineStats:
    """Vectorised ``line_statistic`` over every line."""
    limit, cross_limit = lines.shape[:2]
    if limit == 0 or cross_limit == 0:
        zeros = np.zeros(limit, dtype=np.float64)
        return LineStats(mean=zeros, variance=zeros.copy())

    gray = _gray(lines[:, ::stride])
    mean = gray.mean(axis=1)
    variance = (gray * gray).mean(axis=1) - mean * mean
    return LineStats(mean=mean, variance=variance)
