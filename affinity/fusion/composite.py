"""
Composite aggregation of the three affinity sub-scores.

This module implements score-level fusion of growth, collaboration and
understanding into one bounded composite on the 0-135 scale.

Fusion Formula:
    raw = (Wg * growth + Wc * collaboration + Wu * understanding)
          * min(bias, bias_cap) * calibration * closeness

Post-adjustments (before clamping):
- Shared-strength bonus: enough context talents >= 108 on both sides
- Dispersion penalty (leadership): the subject's competencies deviate on
  average more than 15 points from the growth level

    composite = clamp(raw * bonus * penalty, 0, 135)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Callable, List, Optional

from ..configs.context_weights import ContextProfile, SHARED_STRENGTH_THRESHOLD, apply_overrides
from ..metrics import clamp, rescale_135_to_100, classify_level, classify_band, SCALE_MAX
from ..schema import CompetencyProfile, TalentProfile, SubScores

logger = logging.getLogger(__name__)


@dataclass
class CompositeOutcome:
    """
    Result of composite aggregation.

    Attributes:
        composite: Final score clamped to [0, 135]
        heat: Composite rescaled to [0, 100]
        level: Qualitative level
        band: hot / warm / cold
        adjustments: Every multiplier that was applied
        shared_strengths: Bonus-set talents strong on both sides
    """
    composite: float
    heat: int
    level: str
    band: str
    adjustments: Dict[str, float] = field(default_factory=dict)
    shared_strengths: List[str] = field(default_factory=list)


def shared_strengths(
    talents: List[str],
    subject: Optional[TalentProfile],
    counterpart: Optional[TalentProfile],
    threshold: float = SHARED_STRENGTH_THRESHOLD
) -> List[str]:
    """Talents from `talents` that reach `threshold` on both sides."""
    if subject is None or counterpart is None:
        return []
    shared = []
    for key in talents:
        a = subject.get(key)
        b = counterpart.get(key)
        if a is not None and b is not None and a >= threshold and b >= threshold:
            shared.append(key)
    return shared


def dispersion_mean(competencies: Optional[CompetencyProfile], baseline: float) -> float:
    """
    Mean absolute deviation of a profile's competencies from a baseline.

    Returns 0 when fewer than two values are present.
    """
    if competencies is None:
        return 0.0
    values = competencies.present_values()
    if len(values) < 2:
        return 0.0
    return sum(abs(v - baseline) for v in values) / len(values)


class CompositeAggregator:
    """
    Composite combiner for affinity sub-scores.

    Combines growth, collaboration and understanding with the weights and
    adjustments of one context profile.

    Attributes:
        profile: ContextProfile supplying weights and adjustments
    """

    def __init__(self, profile: ContextProfile):
        """
        Initialize the aggregator.

        Args:
            profile: ContextProfile instance
        """
        self.profile = profile
        self.profile.validate()

    def aggregate(
        self,
        parts: SubScores,
        bias: float = 1.0,
        closeness_multiplier: float = 1.0,
        subject_talents: Optional[TalentProfile] = None,
        counterpart_talents: Optional[TalentProfile] = None,
        subject_competencies: Optional[CompetencyProfile] = None,
        growth_level: Optional[float] = None
    ) -> CompositeOutcome:
        """
        Combine sub-scores into the bounded composite.

        Args:
            parts: The three sub-scores
            bias: Learned preference bias (capped per context)
            closeness_multiplier: 1.0 close / 0.9 neutral / 0.75 far
            subject_talents: Talents of the subject, for the shared-strength bonus
            counterpart_talents: Talents of the counterpart, for the bonus
            subject_competencies: Competencies of the subject, for the dispersion penalty
            growth_level: Growth level term used as the dispersion baseline

        Returns:
            CompositeOutcome with composite, heat, level, band and adjustments
        """
        p = self.profile
        weighted = (
            p.growth * parts.growth
            + p.collaboration * parts.collaboration
            + p.understanding * parts.understanding
        )
        capped_bias = min(bias, p.bias_cap)
        raw = weighted * capped_bias * p.calibration * closeness_multiplier

        bonus = 1.0
        strengths = []
        if p.bonus is not None:
            strengths = shared_strengths(list(p.bonus.talents), subject_talents, counterpart_talents)
            if len(strengths) >= p.bonus.min_shared:
                bonus = p.bonus.factor

        penalty = 1.0
        if p.dispersion is not None and growth_level is not None:
            deviation = dispersion_mean(subject_competencies, growth_level)
            if deviation > p.dispersion.max_mean_deviation:
                penalty = p.dispersion.factor

        composite = clamp(raw * bonus * penalty, 0, SCALE_MAX)
        logger.debug(
            f"{p.context.value}: weighted={weighted:.2f} bias={capped_bias:.3f} "
            f"bonus={bonus} penalty={penalty} composite={composite:.2f}"
        )

        return CompositeOutcome(
            composite=composite,
            heat=rescale_135_to_100(composite),
            level=classify_level(composite),
            band=classify_band(composite),
            adjustments={
                "bias": capped_bias,
                "calibration": p.calibration,
                "closeness": closeness_multiplier,
                "bonus": bonus,
                "penalty": penalty
            },
            shared_strengths=strengths
        )

    def get_effective_weights(self) -> Dict[str, float]:
        """Top-level weights of the configured context."""
        return self.profile.top_level_weights


def _evaluate_source(name: str, source: Callable[[], float]) -> float:
    try:
        value = float(source())
    except Exception as e:
        logger.warning(f"Sub-score '{name}' failed, using 0: {e}")
        return 0.0
    return clamp(value, 0, SCALE_MAX)


def compose_from_sources(
    profile: ContextProfile,
    growth: Callable[[], float],
    collaboration: Callable[[], float],
    understanding: Callable[[], float],
    bias: float = 1.0,
    closeness_multiplier: float = 1.0
) -> CompositeOutcome:
    """
    Aggregate sub-scores produced by independent sources.

    Each source is evaluated separately; a source that raises is logged and
    its sub-score treated as 0 so the composite is still produced.

    Args:
        profile: ContextProfile for the context
        growth: Callable returning the growth sub-score
        collaboration: Callable returning the collaboration sub-score
        understanding: Callable returning the understanding sub-score
        bias: Learned preference bias
        closeness_multiplier: Closeness multiplier

    Returns:
        CompositeOutcome (degraded when a source failed)
    """
    parts = SubScores(
        growth=_evaluate_source("growth", growth),
        collaboration=_evaluate_source("collaboration", collaboration),
        understanding=_evaluate_source("understanding", understanding)
    )
    return CompositeAggregator(profile).aggregate(
        parts, bias=bias, closeness_multiplier=closeness_multiplier
    )


def create_aggregator_from_config(profile: ContextProfile, config: Optional[Dict[str, Any]] = None) -> CompositeAggregator:
    """
    Factory function to create a CompositeAggregator with config overrides.

    Args:
        profile: Built-in ContextProfile
        config: Main configuration dictionary

    Returns:
        Configured CompositeAggregator instance
    """
    overrides = ((config or {}).get("contexts") or {}).get(profile.context.value)
    return CompositeAggregator(apply_overrides(profile, overrides))
