"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SeamsRequest(BaseModel):
    image: str = Field(..., description="Image as a data URL or bare base64")
    include_report: bool = Field(default=False, description="Return per-detector candidates")


class FloodFillRequest(BaseModel):
    image: str = Field(..., description="Image as a data URL or bare base64")
    x: int = Field(..., description="Seed x coordinate")
    y: int = Field(..., description="Seed y coordinate")
    tolerance: int = Field(default=32, ge=0, le=255, description="Per-channel color tolerance")


class LargestComponentRequest(BaseModel):
    mask: list[float] = Field(..., description="Row-major logits, > 0 is foreground")
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)


class ApplyMaskRequest(BaseModel):
    image: str = Field(..., description="Image as a data URL or bare base64")
    mask: list[float] = Field(..., description="Row-major logits, <= 0 becomes transparent")
    width: int = Field(..., ge=0, description="Mask width, must match the image")
    height: int = Field(..., ge=0, description="Mask height, must match the image")
    keep_largest: bool = Field(default=True, description="Drop all but the largest blob first")


class SplitRequest(BaseModel):
    image: str = Field(..., description="Image as a data URL or bare base64")
    row_splits: list[int] = Field(default_factory=list)
    col_splits: list[int] = Field(default_factory=list)
