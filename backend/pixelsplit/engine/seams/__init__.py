"""Per-axis seam detectors. Each one is a pure function over line views."""

from pixelsplit.engine.seams.background import estimate_background
from pixelsplit.engine.seams.candidates import Candidate, CandidateSource
from pixelsplit.engine.seams.coverage import find_background_gaps
from pixelsplit.engine.seams.edges import find_edge_peaks
from pixelsplit.engine.seams.gaps import find_variance_gaps
from pixelsplit.engine.seams.merger import merge_candidates
from pixelsplit.engine.seams.sampler import LineStatistic, LineStats, line_statistic, line_statistics
from pixelsplit.engine.seams.solid import find_solid_lines

__all__ = [
    "Candidate",
    "CandidateSource",
    "LineStatistic",
    "LineStats",
    "estimate_background",
    "find_background_gaps",
    "find_edge_peaks",
    "find_solid_lines",
    "find_variance_gaps",
    "line_statistic",
    "line_statistics",
    "merge_candidates",
]
