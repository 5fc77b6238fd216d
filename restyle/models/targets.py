"""Target values applied to every document of a batch."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TargetValues(BaseModel):
    """The three replacement strings, written verbatim wherever they are substituted."""

    model_config = ConfigDict(frozen=True)

    size: str | None = Field(default=None, description="Root width/height, e.g. 256")
    stroke_width: str | None = Field(default=None, description="stroke-width, e.g. 1")
    stroke_colour: str | None = Field(default=None, description="stroke colour, e.g. currentColor")

    def value_for(self, target: str) -> str | None:
        return getattr(self, target)
