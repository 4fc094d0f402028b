"""
Affinity scoring for one (subject, counterpart, context).

This module provides the end-to-end scoring path that:
1. Normalizes the context and closeness inputs
2. Short-circuits when either side has no assessment data
3. Computes growth, talent synergy, collaboration and understanding
4. Learns (or accepts) the subject's preference bias
5. Aggregates into the bounded composite with presentation fields

The engine is pure: no I/O, no shared mutable state.
"""

import logging
from typing import Dict, Any, Iterable, Optional

from ..configs.context_weights import ContextProfile, resolve_context_profiles
from ..fusion import CompositeAggregator
from ..learning import BiasLearner, HeuristicBiasLearner, PreferenceLearningConfig
from ..normalization import normalize_context, normalize_closeness, CLOSENESS_MULTIPLIERS
from ..schema import (
    AffinityResult,
    PersonProfile,
    PreferenceBias,
    RelationalContext,
    SubScores,
)
from ..scoring import growth_score, understanding_score, talent_synergy, collaboration_score
from .insights import build_insights

logger = logging.getLogger(__name__)

REASON_SUBJECT_MISSING = "subject has no assessment data"
REASON_COUNTERPART_MISSING = "counterpart has no assessment data"


class AffinityEngine:
    """
    Affinity scorer.

    Attributes:
        profiles: Effective context profiles (built-ins plus config overrides)
        bias_learner: Learner turning message history into a PreferenceBias
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        bias_learner: Optional[BiasLearner] = None
    ):
        """
        Initialize the engine.

        Args:
            config: Loaded configuration dictionary (optional)
            bias_learner: Replacement preference learner (optional)
        """
        self.profiles = resolve_context_profiles(config)
        self.bias_learner = bias_learner or HeuristicBiasLearner(
            PreferenceLearningConfig.from_config(config)
        )
        self._aggregators = {ctx: CompositeAggregator(p) for ctx, p in self.profiles.items()}

    def context_profile(self, context: Optional[str]) -> ContextProfile:
        return self.profiles[normalize_context(context)]

    def score(
        self,
        subject: Optional[PersonProfile],
        counterpart: Optional[PersonProfile],
        context: Optional[str] = None,
        closeness: Optional[str] = None,
        messages: Optional[Iterable[str]] = None,
        preferences: Optional[PreferenceBias] = None,
        include_insights: bool = True
    ) -> AffinityResult:
        """
        Compute affinity between two people.

        Args:
            subject: Profile of the person asking
            counterpart: Profile of the person being evaluated
            context: Free-text context (normalized; execution by default)
            closeness: Free-text closeness (normalized; neutral by default)
            messages: Subject's recent messages for preference learning
            preferences: Precomputed preferences (takes precedence over messages)
            include_insights: Whether to attach the insight block

        Returns:
            AffinityResult, or a not-available result when either side has
            no assessment data
        """
        ctx = normalize_context(context)
        subject_id = subject.person_id if subject else None
        counterpart_id = counterpart.person_id if counterpart else None

        if subject is None or not subject.has_assessment_data:
            logger.info(f"Skipping {ctx.value} affinity: {REASON_SUBJECT_MISSING}")
            return AffinityResult.not_available(
                ctx.value, REASON_SUBJECT_MISSING, subject_id, counterpart_id
            )
        if counterpart is None or not counterpart.has_assessment_data:
            logger.info(f"Skipping {ctx.value} affinity: {REASON_COUNTERPART_MISSING}")
            return AffinityResult.not_available(
                ctx.value, REASON_COUNTERPART_MISSING, subject_id, counterpart_id
            )

        profile = self.profiles[ctx]

        growth = growth_score(subject.competencies, counterpart.competencies, profile.competency_weights)
        synergy = talent_synergy(subject.talents, counterpart.talents, profile.talent_weights)
        collaboration = collaboration_score(
            subject.style, counterpart.style,
            subject.competencies, counterpart.competencies,
            synergy
        )
        understanding = understanding_score(subject.outcomes, counterpart.outcomes, profile.outcome_weights)
        parts = SubScores(growth=growth.score, collaboration=collaboration, understanding=understanding)

        if preferences is None:
            preferences = self.bias_learner.learn(messages or [])

        closeness_key = normalize_closeness(closeness)
        outcome = self._aggregators[ctx].aggregate(
            parts,
            bias=preferences.bias_factor,
            closeness_multiplier=CLOSENESS_MULTIPLIERS[closeness_key],
            subject_talents=subject.talents,
            counterpart_talents=counterpart.talents,
            subject_competencies=subject.competencies,
            growth_level=growth.level
        )

        adjustments = dict(outcome.adjustments)
        adjustments["talent_synergy"] = synergy

        insights = None
        if include_insights:
            insights = build_insights(subject, counterpart, collaboration, preferences)
            insights["bonus_talents"] = outcome.shared_strengths

        logger.debug(
            f"{ctx.value} affinity {subject_id} -> {counterpart_id}: "
            f"composite={outcome.composite:.2f} heat={outcome.heat}"
        )

        return AffinityResult(
            context=ctx.value,
            composite=outcome.composite,
            heat=outcome.heat,
            level=outcome.level,
            band=outcome.band,
            parts=parts,
            closeness=closeness_key.value,
            adjustments=adjustments,
            insights=insights,
            subject_id=subject_id,
            counterpart_id=counterpart_id
        )

    def score_all_contexts(
        self,
        subject: PersonProfile,
        counterpart: PersonProfile,
        closeness: Optional[str] = None,
        messages: Optional[Iterable[str]] = None
    ) -> Dict[str, AffinityResult]:
        """Score one pair under every context, learning preferences once."""
        preferences = self.bias_learner.learn(messages or [])
        return {
            ctx.value: self.score(
                subject, counterpart, ctx.value, closeness,
                preferences=preferences, include_insights=False
            )
            for ctx in RelationalContext
        }
