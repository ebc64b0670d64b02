"""POST /api/seams — grid seam detection."""

from __future__ import annotations

import time
from collections.abc import Sequence

from fastapi import APIRouter, Depends

from pixelsplit.api.executor import run_cpu
from pixelsplit.config import Settings
from pixelsplit.dependencies import get_settings
from pixelsplit.engine import AxisReport, detect_seams
from pixelsplit.engine.seams import Candidate
from pixelsplit.models.requests import SeamsRequest
from pixelsplit.models.responses import AxisReportOut, CandidateOut, SeamsResponse
from pixelsplit.utils.images import decode_data_url

router = APIRouter()


def _candidates_out(cands: Sequence[Candidate]) -> list[CandidateOut]:
    return [CandidateOut(position=c.position, score=c.score, source=c.source.value) for c in cands]


def _report_out(report: AxisReport | None) -> AxisReportOut | None:
    if report is None:
        return None
    return AxisReportOut(
        background=report.background,
        solid=_candidates_out(report.solid),
        background_gaps=_candidates_out(report.background_gaps),
        variance_gaps=_candidates_out(report.variance_gaps),
        edges=_candidates_out(report.edges),
    )


@router.post("/seams", response_model=SeamsResponse)
async def seams(req: SeamsRequest, settings: Settings = Depends(get_settings)) -> SeamsResponse:
    start = time.perf_counter()
    rgba = await run_cpu(decode_data_url, req.image, settings.max_image_pixels)
    height, width = rgba.shape[:2]

    result = await run_cpu(detect_seams, rgba, width, height)

    return SeamsResponse(
        width=width,
        height=height,
        row_splits=result.row_splits,
        col_splits=result.col_splits,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
        rows=_report_out(result.rows) if req.include_report else None,
        cols=_report_out(result.cols) if req.include_report else None,
    )
