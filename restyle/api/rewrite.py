"""POST /api/rewrite -- apply the size, stroke-width and colour transducers to one SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from restyle.config import Settings
from restyle.dependencies import get_pipeline, get_settings
from restyle.engine.pipeline import Pipeline
from restyle.models.requests import RewriteRequest
from restyle.models.responses import RewriteResponse
from restyle.models.targets import TargetValues
from restyle.svg.writer import SerializationError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/rewrite", response_model=RewriteResponse)
async def rewrite(
    req: RewriteRequest,
    pipeline: Pipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> RewriteResponse:
    # Request values win; settings supply batch-wide defaults
    targets = TargetValues(
        size=req.size if req.size is not None else settings.size,
        stroke_width=req.stroke_width if req.stroke_width is not None else settings.stroke_width,
        stroke_colour=req.stroke_colour if req.stroke_colour is not None else settings.stroke_colour,
    )

    try:
        result = pipeline.run(req.svg.encode("utf-8"), targets)
    except SerializationError as e:
        logger.error("Rewrite failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    if result.truncated:
        logger.warning("Rewrite stopped early on malformed input: %s", result.truncated_at)

    return RewriteResponse(
        svg=result.data.decode("utf-8", errors="replace"),
        applied=result.applied,
        truncated=result.truncated,
        truncated_at=result.truncated_at,
        processing_time_ms=result.processing_time_ms,
    )
