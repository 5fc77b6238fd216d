"""SVG restyle transducer engine."""

from restyle.engine.registry import transducer, get_registry
from restyle.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transducer",
    "get_registry",
    "Pipeline",
    "create_pipeline",
]
