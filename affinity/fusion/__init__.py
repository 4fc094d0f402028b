"""Composite module for combining sub-scores into the final affinity."""

from .composite import (
    CompositeAggregator,
    CompositeOutcome,
    compose_from_sources,
    create_aggregator_from_config,
    shared_strengths,
    dispersion_mean,
)

__all__ = [
    "CompositeAggregator",
    "CompositeOutcome",
    "compose_from_sources",
    "create_aggregator_from_config",
    "shared_strengths",
    "dispersion_mean",
]
