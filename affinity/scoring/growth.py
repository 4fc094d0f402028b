"""
Growth sub-score: competency similarity blended with joint level.

Formula:
    diff_k = |A_k - B_k| * w_k              (only keys present on both sides)
    similarity = clamp(135 - mean(diff), 0, 135)
    level = clamp((mean(A) + mean(B)) / 2, 0, 135)   (67.5 for an empty side)
    growth = clamp(0.55 * similarity + 0.45 * level, 0, 135)

The 55/45 blend rewards being close to each other more than being
generically high-scoring, while still crediting absolute strength.
"""

import logging
from dataclasses import dataclass
from typing import Mapping

from ..metrics import clamp, mean, NEUTRAL_SCORE, SCALE_MAX
from ..schema import CompetencyProfile

logger = logging.getLogger(__name__)

SIMILARITY_WEIGHT = 0.55
LEVEL_WEIGHT = 0.45


@dataclass
class GrowthBreakdown:
    """Growth score and the two terms it blends."""
    score: float
    similarity: float
    level: float


def growth_score(
    subject: CompetencyProfile,
    counterpart: CompetencyProfile,
    competency_weights: Mapping[str, float]
) -> GrowthBreakdown:
    """
    Compute the growth sub-score for a pair of competency profiles.

    Args:
        subject: Competencies of the subject
        counterpart: Competencies of the counterpart
        competency_weights: Per-competency weights for the context

    Returns:
        GrowthBreakdown with score, similarity and level on 0-135
    """
    diffs = []
    subject_values = []
    counterpart_values = []

    for key, weight in competency_weights.items():
        a = subject.get(key)
        b = counterpart.get(key)
        if a is not None:
            subject_values.append(a)
        if b is not None:
            counterpart_values.append(b)
        if a is not None and b is not None:
            diffs.append(abs(a - b) * weight)

    mean_weighted_diff = mean(diffs) if diffs else 0.0
    similarity = clamp(SCALE_MAX - mean_weighted_diff, 0, SCALE_MAX)

    subject_mean = mean(subject_values)
    counterpart_mean = mean(counterpart_values)
    if subject_mean is None:
        subject_mean = NEUTRAL_SCORE
    if counterpart_mean is None:
        counterpart_mean = NEUTRAL_SCORE
    level = clamp((subject_mean + counterpart_mean) / 2, 0, SCALE_MAX)

    score = clamp(SIMILARITY_WEIGHT * similarity + LEVEL_WEIGHT * level, 0, SCALE_MAX)
    logger.debug(f"growth: similarity={similarity:.2f} level={level:.2f} score={score:.2f}")

    return GrowthBreakdown(score=score, similarity=similarity, level=level)
