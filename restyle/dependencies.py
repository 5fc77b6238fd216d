"""FastAPI dependency injection."""

from __future__ import annotations

from restyle.config import Settings, settings
from restyle.engine.config import PipelineConfig
from restyle.engine.pipeline import Pipeline, create_pipeline


def get_settings() -> Settings:
    return settings


def get_pipeline() -> Pipeline:
    return create_pipeline(
        PipelineConfig(duplicate_root_attributes=settings.duplicate_root_attributes)
    )
