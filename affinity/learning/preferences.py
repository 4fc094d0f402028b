"""
Preference bias learning from a subject's recent messages.

This is a coarse token-counting heuristic, not an NLP model. Its output is
only ever used as a bounded multiplicative nudge on the composite.

Heuristic:
    numeric = count of tokens matching \\d[\\d.,]*
    why     = count of reasoning markers (why, because, how, por qué, porque, cómo)

    numeric_bias   = 1.08 if numeric > 1.5 * why   else 1.0
    narrative_bias = 1.06 if why > 1.3 * numeric   else 1.0
    tone_factor    = 1.05 if a directive verb appears else 1.0
    detail_factor  = 1.05 if len > 1500, 0.98 if len < 300, else 1.0

    bias_factor = max(numeric_bias, narrative_bias) * tone_factor * detail_factor
"""

import logging
import re
from dataclasses import dataclass, asdict
from typing import Dict, Any, Iterable, Optional, Protocol

from ..schema import PreferenceBias

logger = logging.getLogger(__name__)

NUMERIC_PATTERN = re.compile(r"\d[\d.,]*")
REASONING_PATTERN = re.compile(r"\b(?:por qué|porque|cómo|why|because|how)\b", re.IGNORECASE)
DIRECTIVE_PATTERN = re.compile(
    r"\b(?:do|define|prioritize|list|summarize|steps|plan|haz|prioriza|lista|resume|pasos)\b",
    re.IGNORECASE,
)

DEFAULT_HISTORY_LIMIT = 50


class BiasLearner(Protocol):
    """Anything that turns message history into a PreferenceBias."""

    def learn(self, messages: Iterable[str]) -> PreferenceBias:
        ...


@dataclass
class PreferenceLearningConfig:
    """
    Parameters of the heuristic learner.

    Attributes:
        history_limit: Most recent messages considered
        numeric_ratio: Numeric tokens must exceed this multiple of reasoning markers
        narrative_ratio: Reasoning markers must exceed this multiple of numeric tokens
        numeric_bias: Bias when the numeric style dominates
        narrative_bias: Bias when the narrative style dominates
        directive_factor: Tone factor for directive phrasing
        long_text_chars: Above this length the detail factor is `long_factor`
        short_text_chars: Below this length the detail factor is `short_factor`
    """
    history_limit: int = DEFAULT_HISTORY_LIMIT
    numeric_ratio: float = 1.5
    narrative_ratio: float = 1.3
    numeric_bias: float = 1.08
    narrative_bias: float = 1.06
    directive_factor: float = 1.05
    long_text_chars: int = 1500
    long_factor: float = 1.05
    short_text_chars: int = 300
    short_factor: float = 0.98

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "PreferenceLearningConfig":
        """Create from main config dictionary."""
        learning = (config or {}).get("learning", {}) or {}
        return cls(history_limit=learning.get("history_limit", DEFAULT_HISTORY_LIMIT))


class HeuristicBiasLearner:
    """
    Regex/token-count preference learner.

    Attributes:
        config: PreferenceLearningConfig with thresholds and factors
    """

    def __init__(self, config: Optional[PreferenceLearningConfig] = None):
        self.config = config or PreferenceLearningConfig()

    def learn(self, messages: Iterable[str]) -> PreferenceBias:
        """
        Learn communication preferences from recent messages.

        Args:
            messages: Messages ordered most recent first; only the first
                `history_limit` are used

        Returns:
            PreferenceBias; neutral when there are no messages at all
        """
        recent = [m for m in list(messages or [])[:self.config.history_limit] if m]
        if not recent:
            return PreferenceBias.neutral()

        return self.learn_from_text(" ".join(str(m) for m in recent))

    def learn_from_text(self, text: str) -> PreferenceBias:
        """Apply the heuristic to already-concatenated text."""
        cfg = self.config
        numeric_count = len(NUMERIC_PATTERN.findall(text))
        why_count = len(REASONING_PATTERN.findall(text))

        numeric_bias = cfg.numeric_bias if numeric_count > why_count * cfg.numeric_ratio else 1.0
        narrative_bias = cfg.narrative_bias if why_count > numeric_count * cfg.narrative_ratio else 1.0
        tone_factor = cfg.directive_factor if DIRECTIVE_PATTERN.search(text) else 1.0

        if len(text) > cfg.long_text_chars:
            detail_factor = cfg.long_factor
        elif len(text) < cfg.short_text_chars:
            detail_factor = cfg.short_factor
        else:
            detail_factor = 1.0

        if numeric_bias > 1.0:
            style_label = "numeric"
        elif narrative_bias > 1.0:
            style_label = "narrative"
        else:
            style_label = "balanced"

        bias = PreferenceBias(
            style_label=style_label,
            tone_factor=tone_factor,
            detail_factor=detail_factor,
            bias_factor=max(numeric_bias, narrative_bias) * tone_factor * detail_factor
        )
        logger.debug(
            f"Learned preferences: numeric={numeric_count} why={why_count} "
            f"chars={len(text)} -> {bias.to_dict()}"
        )
        return bias


def learn_preferences(messages: Iterable[str], history_limit: int = DEFAULT_HISTORY_LIMIT) -> PreferenceBias:
    """Convenience wrapper around HeuristicBiasLearner."""
    return HeuristicBiasLearner(PreferenceLearningConfig(history_limit=history_limit)).learn(messages)
