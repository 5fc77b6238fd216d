"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from restyle import __version__
from restyle.engine.registry import get_registry
from restyle.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transducers_registered=get_registry().count,
    )
