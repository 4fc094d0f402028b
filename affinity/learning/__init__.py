"""Preference learning module for the composite bias factor."""

from .preferences import (
    BiasLearner,
    HeuristicBiasLearner,
    PreferenceLearningConfig,
    learn_preferences,
)

__all__ = [
    "BiasLearner",
    "HeuristicBiasLearner",
    "PreferenceLearningConfig",
    "learn_preferences",
]
