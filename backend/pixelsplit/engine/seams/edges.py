"""EdgeDetector — gradient peaks between consecutive lines.

1. ``score[i]`` is the mean Manhattan RGB distance between line ``i`` and
   line ``i - 1`` over every ``stride``-th cross-pixel (``score[0] = 0``).
2. Scores are smoothed with a centred moving average of ``2·radius + 1``
   points, truncated at the axis ends.
3. ``threshold = mean + sigma·std`` over the non-zero smoothed scores.
4. A line above threshold is a peak when nothing in ``±peak_radius`` beats
   it; on a plateau the earliest index wins.
5. Peaks are suppressed greedily by score: the strongest remaining peak is
   kept and every other peak within ``max(min_spacing, limit / divisor)`` is
   dropped, so a strong edge always beats a weaker but earlier one.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.seams.candidates import Candidate, CandidateSource


def gradient_scores(lines: NDArray[np.uint8], stride: int = 2) -> NDArray[np.float64]:
    limit, cross_limit = lines.shape[:2]
    scores = np.zeros(limit, dtype=np.float64)
    if limit < 2 or cross_limit == 0:
        return scores

    sampled = lines[:, ::stride, :3].astype(np.int16)
    diffs = np.abs(np.diff(sampled, axis=0)).sum(axis=-1)
    scores[1:] = diffs.mean(axis=1)
    return scores


def smooth(scores: NDArray[np.float64], radius: int = 2) -> NDArray[np.float64]:
    """Centred moving average; windows shrink at the ends instead of padding."""
    limit = len(scores)
    if limit == 0:
        return scores.copy()

    cumsum = np.concatenate([[0.0], np.cumsum(scores)])
    idx = np.arange(limit)
    lo = np.maximum(idx - radius, 0)
    hi = np.minimum(idx + radius, limit - 1) + 1
    return (cumsum[hi] - cumsum[lo]) / (hi - lo)


def _local_peaks(smoothed: NDArray[np.float64], threshold: float, radius: int) -> list[int]:
    limit = len(smoothed)
    peaks: list[int] = []
    for i in np.flatnonzero(smoothed > threshold):
        i = int(i)
        if i == 0:
            continue
        value = smoothed[i]
        lo = max(0, i - radius)
        hi = min(limit, i + radius + 1)
        if smoothed[lo:hi].max() > value:
            continue
        # Plateau: an equal value earlier in the window already claimed it
        if np.any(smoothed[lo:i] == value):
            continue
        peaks.append(i)
    return peaks


def _suppress_by_score(peaks: list[int], smoothed: NDArray[np.float64], min_distance: float) -> list[int]:
    remaining = sorted(peaks, key=lambda p: (-smoothed[p], p))
    kept: list[int] = []
    while remaining:
        best = remaining.pop(0)
        kept.append(best)
        remaining = [p for p in remaining if abs(p - best) >= min_distance]
    return sorted(kept)


def find_edge_peaks(
    lines: NDArray[np.uint8],
    stride: int = 2,
    smooth_radius: int = 2,
    sigma: float = 3.5,
    peak_radius: int = 10,
    min_spacing: int = 50,
    spacing_divisor: int = 15,
) -> list[Candidate]:
    limit = lines.shape[0]
    smoothed = smooth(gradient_scores(lines, stride), smooth_radius)

    nonzero = smoothed[smoothed > 0]
    if nonzero.size == 0:
        return []

    threshold = float(nonzero.mean() + sigma * nonzero.std())
    peaks = _local_peaks(smoothed, threshold, peak_radius)
    min_distance = max(min_spacing, limit / spacing_divisor)

    return [
        Candidate(p, float(smoothed[p]), CandidateSource.EDGE)
        for p in _suppress_by_score(peaks, smoothed, min_distance)
    ]
