"""
Understanding sub-score: weighted outcome distance.

Formula:
    dist = sum(|A_k - B_k| * w_k) / sum(w_k)   (67.5 substituted per missing side)
    understanding = clamp(135 - dist, 0, 135)
"""

import logging
from typing import Mapping

from ..metrics import clamp, NEUTRAL_SCORE, SCALE_MAX
from ..schema import OutcomeProfile

logger = logging.getLogger(__name__)


def understanding_score(
    subject: OutcomeProfile,
    counterpart: OutcomeProfile,
    outcome_weights: Mapping[str, float]
) -> float:
    """
    Compute the understanding sub-score for a pair of outcome profiles.

    Args:
        subject: Outcome subfactors of the subject
        counterpart: Outcome subfactors of the counterpart
        outcome_weights: Per-subfactor weights for the context

    Returns:
        Understanding score on 0-135
    """
    accumulated = 0.0
    weight_sum = 0.0

    for key, weight in outcome_weights.items():
        a = subject.get(key)
        b = counterpart.get(key)
        a = NEUTRAL_SCORE if a is None else a
        b = NEUTRAL_SCORE if b is None else b
        accumulated += abs(a - b) * weight
        weight_sum += weight

    mean_dist = accumulated / weight_sum if weight_sum else NEUTRAL_SCORE
    return clamp(SCALE_MAX - mean_dist, 0, SCALE_MAX)
