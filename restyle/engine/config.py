"""Pipeline configuration — behaviour switches shared by all transducers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Options threaded through a pipeline run."""

    # Legacy root-tag behaviour of the size transducer (see engine.size)
    duplicate_root_attributes: bool = False
    # Transducers with no target value are skipped instead of failing
    skip_missing_targets: bool = True
