"""
Collaboration sub-score and talent synergy.

Collaboration blends cognitive-style compatibility with the relational
competencies of both people, then scales by talent synergy:

    style135 = style_table[A][B] / 100 * 135      (60 when unknown)
    relational = mean over EMP, NE, IM, NG, RP, ACT of pair means
                 (67.5 for a key missing on either side)
    collaboration = clamp((0.55 * style135 + 0.45 * relational) * synergy, 0, 135)

Talent synergy:
    norm_k = clamp(mean(A_k, B_k) / 135, 0, 1)    (talents present on both sides)
    synergy = 0.9 + 0.2 * sum(norm_k * w_k) / sum(w_k)   in [0.9, 1.1]
    synergy = 1.0 when no weighted talent overlaps
"""

import logging
from typing import Mapping, Optional

from ..metrics import clamp, mean, NEUTRAL_SCORE, SCALE_MAX
from ..schema import CognitiveStyle, CompetencyProfile, TalentProfile

logger = logging.getLogger(__name__)

STYLE_WEIGHT = 0.55
RELATIONAL_WEIGHT = 0.45

DEFAULT_STYLE_SCORE = 60
NEUTRAL_SYNERGY = 1.0
SYNERGY_FLOOR = 0.9
SYNERGY_SPAN = 0.2

RELATIONAL_KEYS = ("EMP", "NE", "IM", "NG", "RP", "ACT")

_S = CognitiveStyle

# Ease of collaboration (0-100). Self-pairs sit below every cross-style pair.
STYLE_COMPATIBILITY = {
    _S.STRATEGIST: {_S.STRATEGIST: 60, _S.SCIENTIST: 95, _S.GUARDIAN: 80, _S.DELIVERER: 85,
                    _S.INVENTOR: 90, _S.ENERGIZER: 85, _S.SAGE: 80, _S.VISIONARY: 92},
    _S.SCIENTIST: {_S.STRATEGIST: 95, _S.SCIENTIST: 60, _S.GUARDIAN: 75, _S.DELIVERER: 80,
                   _S.INVENTOR: 85, _S.ENERGIZER: 80, _S.SAGE: 75, _S.VISIONARY: 82},
    _S.GUARDIAN: {_S.STRATEGIST: 80, _S.SCIENTIST: 75, _S.GUARDIAN: 60, _S.DELIVERER: 70,
                  _S.INVENTOR: 75, _S.ENERGIZER: 70, _S.SAGE: 80, _S.VISIONARY: 72},
    _S.DELIVERER: {_S.STRATEGIST: 85, _S.SCIENTIST: 80, _S.GUARDIAN: 70, _S.DELIVERER: 60,
                   _S.INVENTOR: 80, _S.ENERGIZER: 75, _S.SAGE: 75, _S.VISIONARY: 88},
    _S.INVENTOR: {_S.STRATEGIST: 90, _S.SCIENTIST: 85, _S.GUARDIAN: 75, _S.DELIVERER: 80,
                  _S.INVENTOR: 60, _S.ENERGIZER: 85, _S.SAGE: 75, _S.VISIONARY: 78},
    _S.ENERGIZER: {_S.STRATEGIST: 85, _S.SCIENTIST: 80, _S.GUARDIAN: 70, _S.DELIVERER: 75,
                   _S.INVENTOR: 85, _S.ENERGIZER: 60, _S.SAGE: 75, _S.VISIONARY: 86},
    _S.SAGE: {_S.STRATEGIST: 80, _S.SCIENTIST: 75, _S.GUARDIAN: 80, _S.DELIVERER: 75,
              _S.INVENTOR: 75, _S.ENERGIZER: 75, _S.SAGE: 60, _S.VISIONARY: 78},
    _S.VISIONARY: {_S.STRATEGIST: 92, _S.SCIENTIST: 82, _S.GUARDIAN: 72, _S.DELIVERER: 88,
                   _S.INVENTOR: 78, _S.ENERGIZER: 86, _S.SAGE: 78, _S.VISIONARY: 60},
}


def style_compatibility(
    subject: Optional[CognitiveStyle],
    counterpart: Optional[CognitiveStyle]
) -> int:
    """Ease of collaboration (0-100) for a style pair; 60 when either is unknown."""
    if subject is None or counterpart is None:
        return DEFAULT_STYLE_SCORE
    return STYLE_COMPATIBILITY.get(subject, {}).get(counterpart, DEFAULT_STYLE_SCORE)


def talent_synergy(
    subject: TalentProfile,
    counterpart: TalentProfile,
    talent_weights: Mapping[str, float]
) -> float:
    """
    Multiplier derived from shared talent strength.

    Args:
        subject: Talents of the subject
        counterpart: Talents of the counterpart
        talent_weights: Talent weights for the context

    Returns:
        Multiplier in [0.9, 1.1]; exactly 1.0 when no weighted talent overlaps
    """
    accumulated = 0.0
    weight_sum = 0.0

    for key, weight in talent_weights.items():
        a = subject.get(key)
        b = counterpart.get(key)
        if a is None or b is None:
            continue
        normalized = clamp(((a + b) / 2) / SCALE_MAX, 0, 1)
        accumulated += normalized * weight
        weight_sum += weight

    if not weight_sum:
        return NEUTRAL_SYNERGY

    return SYNERGY_FLOOR + SYNERGY_SPAN * (accumulated / weight_sum)


def relational_mean(subject: CompetencyProfile, counterpart: CompetencyProfile) -> float:
    """Mean of the relational competencies across both profiles."""
    pair_means = []
    for key in RELATIONAL_KEYS:
        a = subject.get(key)
        b = counterpart.get(key)
        if a is not None and b is not None:
            pair_means.append((a + b) / 2)
        else:
            pair_means.append(NEUTRAL_SCORE)
    return mean(pair_means)


def collaboration_score(
    subject_style: Optional[CognitiveStyle],
    counterpart_style: Optional[CognitiveStyle],
    subject: CompetencyProfile,
    counterpart: CompetencyProfile,
    synergy: float = NEUTRAL_SYNERGY
) -> float:
    """
    Compute the collaboration sub-score.

    Args:
        subject_style: Cognitive style of the subject (None if unknown)
        counterpart_style: Cognitive style of the counterpart (None if unknown)
        subject: Competencies of the subject
        counterpart: Competencies of the counterpart
        synergy: Talent synergy multiplier

    Returns:
        Collaboration score on 0-135
    """
    style135 = style_compatibility(subject_style, counterpart_style) / 100 * SCALE_MAX
    relational = relational_mean(subject, counterpart)
    score = clamp((STYLE_WEIGHT * style135 + RELATIONAL_WEIGHT * relational) * synergy, 0, SCALE_MAX)
    logger.debug(
        f"collaboration: style135={style135:.2f} relational={relational:.2f} "
        f"synergy={synergy:.3f} score={score:.2f}"
    )
    return score
