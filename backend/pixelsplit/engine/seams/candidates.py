"""Candidate seam positions and the run helpers the detectors share."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


class CandidateSource(enum.Enum):
    SOLID = "solid"
    BACKGROUND_GAP = "background_gap"
    VARIANCE_GAP = "variance_gap"
    EDGE = "edge"  # reported in AxisReport.edges, never merged


@dataclass(frozen=True)
class Candidate:
    position: int
    score: float
    source: CandidateSource


def find_runs(flags: NDArray[np.bool_], max_step: int = 1) -> list[tuple[int, int]]:
    """Group flagged line indices into inclusive ``(start, end)`` runs.

    Two flagged indices belong to the same run when they are at most
    ``max_step`` apart.
    """
    indices = np.flatnonzero(flags)
    if indices.size == 0:
        return []

    runs: list[tuple[int, int]] = []
    start = prev = int(indices[0])
    for idx in indices[1:]:
        idx = int(idx)
        if idx - prev > max_step:
            runs.append((start, prev))
            start = idx
        prev = idx
    runs.append((start, prev))
    return runs


def midpoint(start: int, end: int) -> int:
    return (start + end) // 2


def is_interior(start: int, end: int, limit: int) -> bool:
    """True when a run touches neither end of the axis (outer padding is not a seam)."""
    return start > 0 and end < limit - 1
