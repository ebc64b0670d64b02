"""Seam pipeline orchestrator — runs every detector once per axis.

``detect_seams`` is the public entry point. The background color is
estimated once per call and shared read-only by both axis runs; nothing
else is shared, and nothing survives the call.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pixelsplit.engine.buffers import Axis, as_rgba, axis_lines
from pixelsplit.engine.config import SeamConfig
from pixelsplit.engine.seams import (
    Candidate,
    estimate_background,
    find_background_gaps,
    find_edge_peaks,
    find_solid_lines,
    find_variance_gaps,
    line_statistics,
    merge_candidates,
)

logger = logging.getLogger(__name__)


@dataclass
class AxisReport:
    """Everything one axis run produced, kept for diagnostics."""

    axis: Axis
    limit: int
    background: tuple[int, int, int]
    solid: list[Candidate] = field(default_factory=list)
    background_gaps: list[Candidate] = field(default_factory=list)
    variance_gaps: list[Candidate] = field(default_factory=list)
    edges: list[Candidate] = field(default_factory=list)
    splits: list[int] = field(default_factory=list)


@dataclass
class SeamDetection:
    row_splits: list[int]
    col_splits: list[int]
    rows: AxisReport | None = None
    cols: AxisReport | None = None


def detect_axis(
    rgba: NDArray[np.uint8],
    axis: Axis,
    background: tuple[int, int, int],
    config: SeamConfig | None = None,
) -> AxisReport:
    """Run the full detector chain along one axis of a ``(height, width, 4)`` image."""
    cfg = config or SeamConfig()
    lines = axis_lines(rgba, axis)
    limit = lines.shape[0]
    report = AxisReport(axis=axis, limit=limit, background=background)
    if limit == 0 or lines.shape[1] == 0:
        return report

    t0 = time.perf_counter()
    stats = line_statistics(lines, cfg.variance_stride)

    report.variance_gaps = find_variance_gaps(
        stats.variance, cfg.gap_variance, cfg.gap_min_run, cfg.variance_score
    )
    report.edges = find_edge_peaks(
        lines,
        stride=cfg.edge_stride,
        smooth_radius=cfg.edge_smooth_radius,
        sigma=cfg.edge_sigma,
        peak_radius=cfg.edge_peak_radius,
        min_spacing=cfg.edge_min_spacing,
        spacing_divisor=cfg.edge_spacing_divisor,
    )
    report.background_gaps = find_background_gaps(
        lines,
        background,
        stride=cfg.coverage_stride,
        distance=cfg.color_distance,
        ratio=cfg.coverage_ratio,
        min_run=cfg.coverage_min_run,
        score=cfg.background_score,
    )
    report.solid = find_solid_lines(
        lines,
        stats.variance,
        background,
        max_variance=cfg.solid_variance,
        stride=cfg.solid_stride,
        bucket=cfg.solid_bucket,
        max_colors=cfg.solid_max_colors,
        distance=cfg.color_distance,
        score=cfg.solid_score,
    )
    report.splits = merge_candidates(
        limit,
        report.solid,
        report.background_gaps,
        report.variance_gaps,
        dedupe_distance=cfg.dedupe_distance,
        margin_ratio=cfg.margin_ratio,
        spacing_divisor=cfg.spacing_divisor,
        grid_tolerance_ratio=cfg.grid_tolerance_ratio,
        grid_min_members=cfg.grid_min_members,
    )

    logger.debug(
        "  %s: %d solid, %d background, %d variance, %d edge -> %d splits in %.1fms",
        axis.value,
        len(report.solid),
        len(report.background_gaps),
        len(report.variance_gaps),
        len(report.edges),
        len(report.splits),
        (time.perf_counter() - t0) * 1000,
    )
    return report


def detect_seams(
    pixels: Any,
    width: int,
    height: int,
    config: SeamConfig | None = None,
) -> SeamDetection:
    """Locate grid seams in an RGBA buffer.

    Returns y-coordinates of horizontal seams (``row_splits``) and
    x-coordinates of vertical seams (``col_splits``), both sorted and
    unique. Raises ``DecodeError`` when the buffer does not match the
    dimensions; degenerate images simply yield no seams.
    """
    cfg = config or SeamConfig()
    rgba = as_rgba(pixels, width, height)

    start = time.perf_counter()
    background = estimate_background(rgba, cfg.border_samples, cfg.background_bucket)
    rows = detect_axis(rgba, Axis.ROWS, background, cfg)
    cols = detect_axis(rgba, Axis.COLUMNS, background, cfg)

    logger.info(
        "Seams %dx%d: %d row / %d col splits (background %s) in %.0fms",
        width,
        height,
        len(rows.splits),
        len(cols.splits),
        background,
        (time.perf_counter() - start) * 1000,
    )
    return SeamDetection(row_splits=rows.splits, col_splits=cols.splits, rows=rows, cols=cols)
