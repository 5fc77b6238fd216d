"""Transducer registry — every rewrite policy is a class registered via decorator.

Usage:
    @transducer(id="colour", order=2, target="stroke_colour")
    class ColourPolicy(RewritePolicy):
        ...

The pipeline applies registered transducers in ascending `order`; each pass
consumes the bytes produced by the previous one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from restyle.svg.transducer import RewritePolicy

logger = logging.getLogger(__name__)


@dataclass
class TransducerSpec:
    id: str
    order: int
    # Name of the TargetValues field feeding this transducer
    target: str
    policy: RewritePolicy
    description: str = ""


class TransducerRegistry:
    """Registry of transducers keyed by id."""

    def __init__(self) -> None:
        self._transducers: dict[str, TransducerSpec] = {}

    def register(self, spec: TransducerSpec) -> None:
        if spec.id in self._transducers:
            raise ValueError(f"Duplicate transducer ID: {spec.id}")
        if any(s.order == spec.order for s in self._transducers.values()):
            raise ValueError(f"Duplicate transducer order {spec.order} for {spec.id}")
        self._transducers[spec.id] = spec
        logger.debug("Registered transducer %s (order %d)", spec.id, spec.order)

    def get(self, transducer_id: str) -> TransducerSpec:
        return self._transducers[transducer_id]

    def all(self) -> list[TransducerSpec]:
        return sorted(self._transducers.values(), key=lambda s: s.order)

    @property
    def count(self) -> int:
        return len(self._transducers)


# Module-level singleton
_registry = TransducerRegistry()


def get_registry() -> TransducerRegistry:
    return _registry


def transducer(*, id: str, order: int, target: str, description: str = ""):
    """Class decorator registering a RewritePolicy subclass."""

    def decorator(cls: type[RewritePolicy]):
        cls.id = id
        policy = cls()
        _registry.register(
            TransducerSpec(id=id, order=order, target=target, policy=policy, description=description)
        )
        return cls

    return decorator
