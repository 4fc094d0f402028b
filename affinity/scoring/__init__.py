"""Sub-score computation: growth, understanding, talent synergy, collaboration."""

from .growth import growth_score, GrowthBreakdown
from .understanding import understanding_score
from .collaboration import (
    collaboration_score,
    talent_synergy,
    style_compatibility,
    relational_mean,
    STYLE_COMPATIBILITY,
)

__all__ = [
    "growth_score",
    "GrowthBreakdown",
    "understanding_score",
    "collaboration_score",
    "talent_synergy",
    "style_compatibility",
    "relational_mean",
    "STYLE_COMPATIBILITY",
]
