"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RewriteRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    size: str | None = Field(default=None, description="Root width/height")
    stroke_width: str | None = Field(default=None, description="stroke-width value")
    stroke_colour: str | None = Field(default=None, description="stroke colour value")
