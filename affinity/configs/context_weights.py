"""
Per-context weight tables.

Each relational context is plain data: a frozen ContextProfile record
holding the top-level blend weights, the per-key weights used by the
sub-scorers, and the composite adjustments (bias cap, calibration,
shared-strength bonus, dispersion penalty).

Top-level weights (growth / collaboration / understanding):
    innovation    0.40 / 0.35 / 0.25
    execution     0.25 / 0.55 / 0.20
    leadership    0.35 / 0.35 / 0.30
    conversation  0.20 / 0.25 / 0.55
    relationship  0.25 / 0.30 / 0.45
    decision      0.30 / 0.45 / 0.25

Every weight map within a context sums to WEIGHT_TOTAL.
"""

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional, Tuple, List

from ..schema import RelationalContext

logger = logging.getLogger(__name__)

WEIGHT_TOTAL = 1.0
WEIGHT_TOLERANCE = 0.01

# A talent counts as a shared strength when both sides reach this score
SHARED_STRENGTH_THRESHOLD = 108.0


@dataclass(frozen=True)
class BonusRule:
    """
    Shared-strength bonus.

    Applies when at least `min_shared` of `talents` reach the shared-strength
    threshold on both sides.
    """
    talents: Tuple[str, ...]
    factor: float
    min_shared: int = 2


@dataclass(frozen=True)
class DispersionRule:
    """Penalty for a subject whose competencies scatter around the growth level."""
    max_mean_deviation: float = 15.0
    factor: float = 0.95


@dataclass(frozen=True)
class ContextProfile:
    """
    Static configuration for one relational context.

    Attributes:
        context: The context this record describes
        growth: Top-level weight of the growth sub-score
        collaboration: Top-level weight of the collaboration sub-score
        understanding: Top-level weight of the understanding sub-score
        competency_weights: Per-competency weights (8 entries)
        outcome_weights: Per-outcome-subfactor weights (8 entries)
        talent_weights: Weights for the talents meaningful in this context
        bias_cap: Ceiling applied to the learned preference bias
        calibration: Deflator keeping multi-factor composites from overshooting
        bonus: Optional shared-strength bonus
        dispersion: Optional dispersion penalty
    """
    context: RelationalContext
    growth: float
    collaboration: float
    understanding: float
    competency_weights: Mapping[str, float]
    outcome_weights: Mapping[str, float]
    talent_weights: Mapping[str, float]
    bias_cap: float
    calibration: float
    bonus: Optional[BonusRule] = None
    dispersion: Optional[DispersionRule] = None

    @property
    def top_level_weights(self) -> Dict[str, float]:
        return {
            "growth": self.growth,
            "collaboration": self.collaboration,
            "understanding": self.understanding
        }

    def validate(self) -> None:
        """Validate weight totals and adjustment bounds."""
        triple = self.growth + self.collaboration + self.understanding
        if abs(triple - WEIGHT_TOTAL) > WEIGHT_TOLERANCE:
            raise ValueError(
                f"{self.context.value}: top-level weights must sum to {WEIGHT_TOTAL}, got {triple:.3f}"
            )
        for name in ("competency_weights", "outcome_weights", "talent_weights"):
            total = sum(getattr(self, name).values())
            if abs(total - WEIGHT_TOTAL) > WEIGHT_TOLERANCE:
                raise ValueError(
                    f"{self.context.value}: {name} must sum to {WEIGHT_TOTAL}, got {total:.3f}"
                )
        if self.bias_cap < 1.0:
            raise ValueError(f"{self.context.value}: bias_cap must be >= 1.0, got {self.bias_cap}")
        if not 0 < self.calibration <= 1.0:
            raise ValueError(
                f"{self.context.value}: calibration must be in (0, 1], got {self.calibration}"
            )


def _frozen(d: Dict[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(d))


_PROFILES = [
    ContextProfile(
        context=RelationalContext.INNOVATION,
        growth=0.40, collaboration=0.35, understanding=0.25,
        competency_weights=_frozen({
            "EL": 0.10, "RP": 0.10, "ACT": 0.10, "NE": 0.15,
            "IM": 0.15, "OP": 0.15, "EMP": 0.10, "NG": 0.15,
        }),
        outcome_weights=_frozen({
            "influence": 0.13, "decisionMaking": 0.15, "network": 0.13, "community": 0.12,
            "balance": 0.10, "health": 0.10, "achievement": 0.14, "satisfaction": 0.13,
        }),
        talent_weights=_frozen({
            "imagination": 0.22, "vision": 0.18, "design": 0.12, "riskTolerance": 0.12,
            "connection": 0.10, "collaboration": 0.12, "proactivity": 0.07, "problemSolving": 0.07,
        }),
        bias_cap=1.06,
        calibration=0.93,
        bonus=BonusRule(talents=("imagination", "vision", "design", "riskTolerance"), factor=1.04),
    ),
    ContextProfile(
        context=RelationalContext.EXECUTION,
        growth=0.25, collaboration=0.55, understanding=0.20,
        competency_weights=_frozen({
            "EL": 0.10, "RP": 0.15, "ACT": 0.20, "NE": 0.20,
            "IM": 0.10, "OP": 0.10, "EMP": 0.07, "NG": 0.08,
        }),
        outcome_weights=_frozen({
            "influence": 0.12, "decisionMaking": 0.20, "network": 0.12, "community": 0.12,
            "balance": 0.11, "health": 0.11, "achievement": 0.11, "satisfaction": 0.11,
        }),
        talent_weights=_frozen({
            "prioritizing": 0.20, "problemSolving": 0.20, "commitment": 0.15,
            "dataMining": 0.10, "modeling": 0.10, "proactivity": 0.10,
            "collaboration": 0.05, "adaptability": 0.05, "criticalThinking": 0.05,
        }),
        # Execution tolerates the most positive bias
        bias_cap=1.07,
        calibration=0.90,
        bonus=BonusRule(talents=("prioritizing", "commitment", "problemSolving"), factor=1.04),
    ),
    ContextProfile(
        context=RelationalContext.LEADERSHIP,
        growth=0.35, collaboration=0.35, understanding=0.30,
        competency_weights=_frozen({
            "EL": 0.12, "RP": 0.13, "ACT": 0.15, "NE": 0.15,
            "IM": 0.10, "OP": 0.10, "EMP": 0.12, "NG": 0.13,
        }),
        outcome_weights=_frozen({
            "influence": 0.16, "decisionMaking": 0.15, "network": 0.14, "community": 0.14,
            "balance": 0.10, "health": 0.10, "achievement": 0.11, "satisfaction": 0.10,
        }),
        talent_weights=_frozen({
            "emotionalInsight": 0.18, "collaboration": 0.18, "adaptability": 0.12,
            "criticalThinking": 0.12, "vision": 0.12, "commitment": 0.12,
            "proactivity": 0.08, "problemSolving": 0.08,
        }),
        bias_cap=1.05,
        calibration=0.94,
        dispersion=DispersionRule(),
    ),
    ContextProfile(
        context=RelationalContext.CONVERSATION,
        growth=0.20, collaboration=0.25, understanding=0.55,
        competency_weights=_frozen({
            "EL": 0.15, "RP": 0.12, "ACT": 0.08, "NE": 0.15,
            "IM": 0.10, "OP": 0.10, "EMP": 0.15, "NG": 0.15,
        }),
        outcome_weights=_frozen({
            "influence": 0.14, "decisionMaking": 0.12, "network": 0.13, "community": 0.14,
            "balance": 0.11, "health": 0.11, "achievement": 0.12, "satisfaction": 0.13,
        }),
        talent_weights=_frozen({
            "connection": 0.24, "emotionalInsight": 0.22, "reflecting": 0.18,
            "collaboration": 0.18, "adaptability": 0.18,
        }),
        bias_cap=1.04,
        calibration=0.95,
        bonus=BonusRule(
            talents=("connection", "reflecting", "collaboration", "adaptability"), factor=1.05
        ),
    ),
    ContextProfile(
        context=RelationalContext.RELATIONSHIP,
        growth=0.25, collaboration=0.30, understanding=0.45,
        competency_weights=_frozen({
            "EL": 0.12, "RP": 0.10, "ACT": 0.08, "NE": 0.12,
            "IM": 0.10, "OP": 0.10, "EMP": 0.18, "NG": 0.20,
        }),
        outcome_weights=_frozen({
            "influence": 0.12, "decisionMaking": 0.10, "network": 0.15, "community": 0.18,
            "balance": 0.12, "health": 0.12, "achievement": 0.10, "satisfaction": 0.11,
        }),
        talent_weights=_frozen({
            "connection": 0.26, "emotionalInsight": 0.22, "collaboration": 0.18,
            "adaptability": 0.18, "reflecting": 0.16,
        }),
        bias_cap=1.05,
        calibration=0.92,
    ),
    ContextProfile(
        context=RelationalContext.DECISION,
        growth=0.30, collaboration=0.45, understanding=0.25,
        competency_weights=_frozen({
            "EL": 0.10, "RP": 0.15, "ACT": 0.22, "NE": 0.15,
            "IM": 0.08, "OP": 0.10, "EMP": 0.10, "NG": 0.10,
        }),
        outcome_weights=_frozen({
            "influence": 0.12, "decisionMaking": 0.24, "network": 0.10, "community": 0.10,
            "balance": 0.10, "health": 0.10, "achievement": 0.12, "satisfaction": 0.12,
        }),
        talent_weights=_frozen({
            "criticalThinking": 0.28, "modeling": 0.20, "dataMining": 0.18,
            "prioritizing": 0.18, "problemSolving": 0.16,
        }),
        bias_cap=1.05,
        calibration=0.92,
        bonus=BonusRule(talents=("criticalThinking", "modeling", "dataMining"), factor=1.04),
    ),
]

CONTEXT_PROFILES: Mapping[RelationalContext, ContextProfile] = MappingProxyType(
    {p.context: p for p in _PROFILES}
)

# Keys accepted under a context in the "contexts" config section
OVERRIDABLE_FIELDS = ("growth", "collaboration", "understanding", "bias_cap", "calibration")


def get_context_profile(context: RelationalContext) -> ContextProfile:
    """Built-in profile for a canonical context."""
    return CONTEXT_PROFILES[context]


def apply_overrides(profile: ContextProfile, overrides: Optional[Dict[str, Any]]) -> ContextProfile:
    """
    Return a copy of `profile` with runtime overrides applied.

    Args:
        profile: Built-in context profile
        overrides: Subset of OVERRIDABLE_FIELDS with new values

    Returns:
        A validated ContextProfile (the built-in one when there is nothing to override)

    Raises:
        ValueError: If an override key is unknown or the result is invalid
    """
    if not overrides:
        return profile

    unknown = set(overrides) - set(OVERRIDABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown override keys for {profile.context.value}: {sorted(unknown)}")

    updated = replace(profile, **{k: float(v) for k, v in overrides.items()})
    updated.validate()
    logger.info(f"Applied overrides to {profile.context.value}: {overrides}")
    return updated


def resolve_context_profiles(config: Optional[Dict[str, Any]] = None) -> Dict[RelationalContext, ContextProfile]:
    """
    Build the effective profile table from the built-ins and the "contexts"
    section of a loaded configuration.
    """
    section = (config or {}).get("contexts") or {}
    resolved = {}
    for context, profile in CONTEXT_PROFILES.items():
        resolved[context] = apply_overrides(profile, section.get(context.value))
    return resolved


def check_override_section(section: Dict[str, Any]) -> List[str]:
    """List problems in a "contexts" config section without raising."""
    issues = []
    known = {c.value for c in RelationalContext}
    for name, overrides in section.items():
        if name not in known:
            issues.append(f"Unknown context in overrides: {name}")
            continue
        try:
            apply_overrides(CONTEXT_PROFILES[RelationalContext(name)], overrides)
        except (TypeError, ValueError) as e:
            issues.append(str(e))
    return issues
