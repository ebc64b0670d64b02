"""CandidateMerger — rank, dedupe and regularise seam candidates.

Priority: every SOLID candidate is kept; BACKGROUND_GAP candidates join only
when nothing already lies within ``dedupe_distance``; VARIANCE_GAP
candidates are used only when nothing else fired. Edge peaks never become
seams; they are reported for diagnostics only.

The ranked list is then sorted, stripped of the outer margin, thinned so
consecutive seams are at least ``limit / spacing_divisor`` apart, and finally
checked against the dominant grid spacing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pixelsplit.engine.seams.candidates import Candidate

logger = logging.getLogger(__name__)


@dataclass
class _GapCluster:
    mean: float
    count: int = 1

    def add(self, value: float) -> None:
        self.count += 1
        self.mean += (value - self.mean) / self.count


def rank_candidates(
    solid: Sequence[Candidate],
    background: Sequence[Candidate],
    variance: Sequence[Candidate],
    dedupe_distance: int = 10,
) -> list[Candidate]:
    ranked = list(solid)
    for cand in background:
        if all(abs(cand.position - kept.position) > dedupe_distance for kept in ranked):
            ranked.append(cand)

    if not ranked:
        ranked = list(variance)
    return ranked


def filter_margin(candidates: Sequence[Candidate], limit: int, ratio: float = 0.02) -> list[Candidate]:
    low = limit * ratio
    high = limit * (1.0 - ratio)
    return [c for c in candidates if low < c.position < high]


def thin_by_spacing(candidates: Sequence[Candidate], min_gap: float) -> list[Candidate]:
    """Positional thinning: keep a candidate only if far enough from the last kept one."""
    kept: list[Candidate] = []
    for cand in candidates:
        if not kept or cand.position - kept[-1].position >= min_gap:
            kept.append(cand)
    return kept


def grid_base_unit(positions: Sequence[int], tolerance: float, min_members: int = 2) -> float | None:
    """Dominant spacing among ``positions``, or None when no spacing repeats.

    The first position counts as a gap measured from 0.
    """
    gaps = [positions[0]] + [b - a for a, b in zip(positions, positions[1:])] if positions else []

    clusters: list[_GapCluster] = []
    for gap in gaps:
        for cluster in clusters:
            if abs(gap - cluster.mean) <= tolerance:
                cluster.add(gap)
                break
        else:
            clusters.append(_GapCluster(mean=float(gap)))

    if not clusters:
        return None
    best = max(clusters, key=lambda c: c.count)
    if best.count < min_members or best.mean <= 0:
        return None
    return best.mean


def filter_grid_regular(
    candidates: Sequence[Candidate],
    tolerance: float,
    min_members: int = 2,
) -> list[Candidate]:
    positions = [c.position for c in candidates]
    base = grid_base_unit(positions, tolerance, min_members)
    if base is None:
        return list(candidates)

    regular = []
    for cand in candidates:
        multiple = max(1, round(cand.position / base))
        if abs(cand.position - multiple * base) <= tolerance:
            regular.append(cand)

    if not regular:
        logger.debug("Grid filter (base %.1f) rejected every candidate; keeping unfiltered", base)
        return list(candidates)
    return regular


def merge_candidates(
    limit: int,
    solid: Sequence[Candidate],
    background: Sequence[Candidate],
    variance: Sequence[Candidate],
    *,
    dedupe_distance: int = 10,
    margin_ratio: float = 0.02,
    spacing_divisor: int = 8,
    grid_tolerance_ratio: float = 0.08,
    grid_min_members: int = 2,
) -> list[int]:
    """Reduce all detector output for one axis to sorted, unique seam positions."""
    ranked = rank_candidates(solid, background, variance, dedupe_distance)
    ordered = sorted(ranked, key=lambda c: c.position)
    inside = filter_margin(ordered, limit, margin_ratio)
    thinned = thin_by_spacing(inside, limit / spacing_divisor)
    regular = filter_grid_regular(thinned, limit * grid_tolerance_ratio, grid_min_members)
    return sorted({c.position for c in regular})
