"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transducers_registered: int = 0


class RewriteResponse(BaseModel):
    svg: str
    applied: list[str] = Field(default_factory=list)
    truncated: bool = False
    truncated_at: dict[str, int] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
