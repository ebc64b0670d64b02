"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"


class CandidateOut(BaseModel):
    position: int
    score: float
    source: str


class AxisReportOut(BaseModel):
    background: tuple[int, int, int]
    solid: list[CandidateOut] = Field(default_factory=list)
    background_gaps: list[CandidateOut] = Field(default_factory=list)
    variance_gaps: list[CandidateOut] = Field(default_factory=list)
    edges: list[CandidateOut] = Field(default_factory=list)


class SeamsResponse(BaseModel):
    width: int
    height: int
    row_splits: list[int] = Field(default_factory=list)
    col_splits: list[int] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    rows: AxisReportOut | None = None
    cols: AxisReportOut | None = None


class ImageEditResponse(BaseModel):
    image: str
    cleared: int = 0


class LargestComponentResponse(BaseModel):
    mask: list[float]
    kept: int = 0


class TileOut(BaseModel):
    row: int
    col: int
    x: int
    y: int
    width: int
    height: int
    image: str


class SplitResponse(BaseModel):
    tiles: list[TileOut] = Field(default_factory=list)
