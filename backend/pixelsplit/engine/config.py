"""Seam detection configuration — every numeric heuristic in one place."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SeamConfig:
    """Tunables for the per-axis seam pipeline. Defaults are the production values."""

    # Line sampling
    variance_stride: int = 4  # every 4th cross-pixel for mean/variance
    edge_stride: int = 2  # every 2nd cross-pixel for gradients
    coverage_stride: int = 4
    solid_stride: int = 2

    # Background estimation
    border_samples: int = 50  # per edge
    background_bucket: int = 10  # floor(c / 10) per channel

    # Variance gaps
    gap_variance: float = 100.0
    gap_min_run: int = 2

    # Edge peaks
    edge_smooth_radius: int = 2  # 5-point moving average
    edge_sigma: float = 3.5
    edge_peak_radius: int = 10
    edge_min_spacing: int = 50
    edge_spacing_divisor: int = 15

    # Background coverage
    color_distance: int = 30  # per-channel "same color" bound
    coverage_ratio: float = 0.98
    coverage_min_run: int = 1

    # Solid separator lines
    solid_variance: float = 30.0
    solid_bucket: int = 32  # 8 levels per channel
    solid_max_colors: int = 3

    # Candidate scores
    solid_score: float = 200.0
    background_score: float = 100.0
    variance_score: float = 50.0

    # Merging
    dedupe_distance: int = 10
    margin_ratio: float = 0.02
    spacing_divisor: int = 8
    grid_tolerance_ratio: float = 0.08
    grid_min_members: int = 2
