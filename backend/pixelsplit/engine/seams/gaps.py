"""GapDetector — blank padding found as runs of low-variance lines."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.seams.candidates import Candidate, CandidateSource, find_runs, is_interior, midpoint


def find_variance_gaps(
    variance: NDArray[np.float64],
    threshold: float = 100.0,
    min_run: int = 2,
    score: float = 50.0,
) -> list[Candidate]:
    """Collapse each interior run of ``variance < threshold`` lines to its midpoint.

    A run still open at the end of the axis touches the border and so is
    treated as outer padding like any other border run.
    """
    limit = len(variance)
    candidates: list[Candidate] = []
    for start, end in find_runs(variance < threshold):
        if end - start + 1 < min_run or not is_interior(start, end, limit):
            continue
        candidates.append(Candidate(midpoint(start, end), score, CandidateSource.VARIANCE_GAP))
    return candidates
