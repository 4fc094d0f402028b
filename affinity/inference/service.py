"""
Caller-side orchestration around the pure engine.

The service fetches profiles and message history through injected
callables, refuses to score when a profile is missing, stores results in
the snapshot cache, and optionally asks a summarizer for a short note.
Whether a caller is entitled to a summary is decided outside this module.
"""

import logging
from typing import Dict, Any, Callable, Iterable, List, Optional, Tuple

from ..configs import get_config_value
from ..learning import PreferenceLearningConfig
from ..schema import AffinityResult, PersonProfile, PreferenceBias
from .cache import SnapshotCache
from .engine import AffinityEngine
from .summary import Summarizer, SummaryRequest, summarize_or_fallback, DEFAULT_FALLBACK_TEXT

logger = logging.getLogger(__name__)

ProfileSource = Callable[[str], Optional[PersonProfile]]
HistorySource = Callable[[str, int], Iterable[str]]


class AffinityService:
    """
    Affinity computation with persistence and optional summaries.

    Attributes:
        profile_source: Returns the PersonProfile for an identity, or None
        history_source: Returns an identity's most recent messages
        cache: Snapshot cache receiving every available result
        summarizer: Optional natural-language summarizer
        engine: AffinityEngine used for scoring
    """

    def __init__(
        self,
        profile_source: ProfileSource,
        history_source: Optional[HistorySource] = None,
        cache: Optional[SnapshotCache] = None,
        summarizer: Optional[Summarizer] = None,
        config: Optional[Dict[str, Any]] = None,
        engine: Optional[AffinityEngine] = None
    ):
        self.profile_source = profile_source
        self.history_source = history_source
        self.cache = cache if cache is not None else SnapshotCache()
        self.summarizer = summarizer
        self.engine = engine or AffinityEngine(config)
        self.history_limit = PreferenceLearningConfig.from_config(config).history_limit
        self.fallback_text = get_config_value(config or {}, "summary.fallback_text", DEFAULT_FALLBACK_TEXT)

    def _fetch_history(self, subject_id: str) -> List[str]:
        if self.history_source is None:
            return []
        try:
            return list(self.history_source(subject_id, self.history_limit))
        except Exception as e:
            logger.warning(f"Message history unavailable for {subject_id}, scoring without bias: {e}")
            return []

    def learn_preferences(self, subject_id: str) -> PreferenceBias:
        return self.engine.bias_learner.learn(self._fetch_history(subject_id))

    def compute(
        self,
        subject_id: str,
        counterpart_id: str,
        context: Optional[str] = None,
        closeness: Optional[str] = None,
        with_summary: bool = False,
        preferences: Optional[PreferenceBias] = None
    ) -> AffinityResult:
        """
        Compute, cache and return affinity for one pair.

        Args:
            subject_id: Identity of the subject
            counterpart_id: Identity of the counterpart
            context: Free-text context
            closeness: Free-text closeness
            with_summary: Ask the summarizer for a note (caller checks entitlement)
            preferences: Precomputed preferences (skips history fetch)

        Returns:
            AffinityResult; not-available results are returned but not cached
        """
        subject = self.profile_source(subject_id)
        counterpart = self.profile_source(counterpart_id)

        if preferences is None:
            preferences = self.learn_preferences(subject_id)

        result = self.engine.score(
            subject, counterpart, context, closeness, preferences=preferences
        )
        result.subject_id = subject_id
        result.counterpart_id = counterpart_id

        if not result.available:
            return result

        if with_summary:
            result.summary = summarize_or_fallback(
                self.summarizer,
                SummaryRequest(
                    subject_name=subject.name or "You",
                    counterpart_name=counterpart.name or "Member",
                    context=result.context,
                    heat=result.heat,
                    level=result.level,
                    band=result.band
                ),
                self.fallback_text
            )
        else:
            result.summary = self.fallback_text

        self.cache.put(subject_id, counterpart_id, result.context, result)
        return result

    def recalculate(
        self,
        subject_id: str,
        counterparts: Iterable[Tuple[str, Optional[str]]],
        context: Optional[str] = None
    ) -> List[AffinityResult]:
        """
        Recompute affinity between a subject and many counterparts.

        Args:
            subject_id: Identity of the subject
            counterparts: (counterpart_id, closeness) pairs
            context: Free-text context applied to every pair

        Returns:
            One result per counterpart, in input order
        """
        preferences = self.learn_preferences(subject_id)
        results = [
            self.compute(subject_id, counterpart_id, context, closeness, preferences=preferences)
            for counterpart_id, closeness in counterparts
        ]
        available = sum(1 for r in results if r.available)
        logger.info(
            f"Recalculated {available}/{len(results)} affinities for {subject_id} "
            f"({results[0].context if results else context})"
        )
        return results
