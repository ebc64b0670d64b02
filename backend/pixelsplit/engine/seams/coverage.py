"""BackgroundCoverageDetector — lines made almost entirely of background."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.seams.candidates import Candidate, CandidateSource, find_runs, is_interior, midpoint


def background_match_ratio(
    lines: NDArray[np.uint8],
    background: tuple[int, int, int],
    stride: int = 4,
    distance: int = 30,
) -> NDArray[np.float64]:
    """Fraction of sampled pixels per line within ``distance`` of ``background`` on every channel."""
    limit, cross_limit = lines.shape[:2]
    if cross_limit == 0:
        return np.zeros(limit, dtype=np.float64)

    sampled = lines[:, ::stride, :3].astype(np.int16)
    diff = np.abs(sampled - np.asarray(background, dtype=np.int16))
    matches = np.all(diff < distance, axis=-1)
    return matches.mean(axis=1)


def find_background_gaps(
    lines: NDArray[np.uint8],
    background: tuple[int, int, int],
    stride: int = 4,
    distance: int = 30,
    ratio: float = 0.98,
    min_run: int = 1,
    score: float = 100.0,
) -> list[Candidate]:
    limit = lines.shape[0]
    covered = background_match_ratio(lines, background, stride, distance) >= ratio

    candidates: list[Candidate] = []
    for start, end in find_runs(covered):
        if end - start + 1 < min_run or not is_interior(start, end, limit):
            continue
        candidates.append(Candidate(midpoint(start, end), score, CandidateSource.BACKGROUND_GAP))
    return candidates
