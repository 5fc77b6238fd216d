"""Pipeline orchestrator — runs registered transducers in order, each on the previous output."""

from __future__ import annotations

import importlib
import logging
import time
from dataclasses import dataclass, field

from restyle.engine.config import PipelineConfig
from restyle.engine.registry import TransducerRegistry, get_registry
from restyle.models.targets import TargetValues
from restyle.svg.transducer import transduce

logger = logging.getLogger(__name__)

_TRANSDUCER_MODULES = (
    "restyle.engine.size",
    "restyle.engine.stroke_width",
    "restyle.engine.colour",
)


def register_transducers() -> None:
    """Import all transducer modules so @transducer decorators fire."""
    for module_name in _TRANSDUCER_MODULES:
        importlib.import_module(module_name)


@dataclass
class PipelineResult:
    data: bytes
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    # transducer id -> byte offset (in that pass's input) where tokenizing stopped
    truncated_at: dict[str, int] = field(default_factory=dict)
    processing_time_ms: float = 0.0

    @property
    def truncated(self) -> bool:
        return bool(self.truncated_at)


class Pipeline:
    """Applies every registered transducer to a document, in registry order."""

    def __init__(
        self,
        registry: TransducerRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        if registry is None:
            register_transducers()
            registry = get_registry()
        self.registry = registry
        self.config = config or PipelineConfig()

    def run(self, data: bytes, targets: TargetValues) -> PipelineResult:
        """Rewrite `data` with `targets`. SerializationError propagates to the caller."""
        start = time.perf_counter()
        result = PipelineResult(data=data)

        for spec in self.registry.all():
            new_value = targets.value_for(spec.target)
            if new_value is None:
                if not self.config.skip_missing_targets:
                    raise ValueError(f"No target value for transducer {spec.id!r} ({spec.target})")
                result.skipped.append(spec.id)
                continue

            policy = spec.policy.configure(self.config)
            pass_result = transduce(result.data, policy, new_value)
            result.data = pass_result.data
            result.applied.append(spec.id)
            if pass_result.truncated_at is not None:
                result.truncated_at[spec.id] = pass_result.truncated_at

        result.processing_time_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pipeline: %d applied, %d skipped in %.1fms",
            len(result.applied),
            len(result.skipped),
            result.processing_time_ms,
        )
        return result


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    return Pipeline(config=config)
