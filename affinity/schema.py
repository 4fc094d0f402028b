"""
Data model for affinity scoring.

Defines the profile structures supplied by the assessment store and the
result structure returned by the engine.

Profiles:
- CompetencyProfile: 8 emotional-intelligence competencies (EL ... NG)
- OutcomeProfile: 8 life/work outcome subfactors
- TalentProfile: 19 behavioral talents
- CognitiveStyle: one of 8 categorical thinking styles

All numeric scores are on the 0-135 assessment scale (typically 65-135).
A missing score is stored as None and means "unknown", never zero.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Iterable

from .metrics import safe_number


COMPETENCY_KEYS = ("EL", "RP", "ACT", "NE", "IM", "OP", "EMP", "NG")

OUTCOME_KEYS = (
    "influence", "decisionMaking", "network", "community",
    "balance", "health", "achievement", "satisfaction",
)

TALENT_KEYS = (
    "dataMining", "modeling", "prioritizing", "connection",
    "emotionalInsight", "collaboration", "reflecting", "adaptability",
    "criticalThinking", "resilience", "riskTolerance", "imagination",
    "vision", "design", "entrepreneurship", "proactivity",
    "commitment", "problemSolving", "brainAgility",
)

# Stored spellings that differ from the canonical key
TALENT_ALIASES = {"designing": "design"}


class RelationalContext(Enum):
    """Relational lens under which affinity is computed."""
    INNOVATION = "innovation"
    EXECUTION = "execution"
    LEADERSHIP = "leadership"
    CONVERSATION = "conversation"
    RELATIONSHIP = "relationship"
    DECISION = "decision"


class Closeness(Enum):
    """How close the subject feels to the counterpart."""
    CLOSE = "close"
    NEUTRAL = "neutral"
    FAR = "far"


class CognitiveStyle(Enum):
    """Brain-profile style clusters."""
    STRATEGIST = "Strategist"
    SCIENTIST = "Scientist"
    GUARDIAN = "Guardian"
    DELIVERER = "Deliverer"
    INVENTOR = "Inventor"
    ENERGIZER = "Energizer"
    SAGE = "Sage"
    VISIONARY = "Visionary"


def _coerce_scores(
    raw: Optional[Dict[str, Any]],
    allowed: Iterable[str],
    kind: str,
    aliases: Optional[Dict[str, str]] = None
) -> Dict[str, Optional[float]]:
    """Validate keys against the canonical set and coerce values."""
    allowed = set(allowed)
    aliases = aliases or {}
    scores = {}
    for key, value in (raw or {}).items():
        key = aliases.get(key, key)
        if key not in allowed:
            raise ValueError(f"Unknown {kind} key: {key!r}")
        number = safe_number(value)
        # A missing value never overwrites a present one for the same key
        if number is None and scores.get(key) is not None:
            continue
        scores[key] = number
    return scores


@dataclass
class _ScoreProfile:
    """Mapping from canonical key to optional score."""
    scores: Dict[str, Optional[float]] = field(default_factory=dict)

    _keys = ()
    _kind = "score"
    _aliases = {}

    def __post_init__(self):
        """Validate keys and coerce values to finite floats or None."""
        self.scores = _coerce_scores(self.scores, self._keys, self._kind, self._aliases)

    def get(self, key: str) -> Optional[float]:
        return self.scores.get(key)

    def present_values(self) -> List[float]:
        """Scores that are not missing, in canonical key order."""
        return [self.scores[k] for k in self._keys if self.scores.get(k) is not None]

    def is_empty(self) -> bool:
        return not self.present_values()

    def to_dict(self) -> Dict[str, Optional[float]]:
        return dict(self.scores)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        return cls(scores=dict(data or {}))


@dataclass
class CompetencyProfile(_ScoreProfile):
    """Emotional-intelligence competency scores (EL, RP, ACT, NE, IM, OP, EMP, NG)."""
    _keys = COMPETENCY_KEYS
    _kind = "competency"


@dataclass
class OutcomeProfile(_ScoreProfile):
    """Outcome subfactor scores (influence, decisionMaking, ...)."""
    _keys = OUTCOME_KEYS
    _kind = "outcome"


@dataclass
class TalentProfile(_ScoreProfile):
    """Behavioral talent scores (prioritizing, imagination, connection, ...)."""
    _keys = TALENT_KEYS
    _kind = "talent"
    _aliases = TALENT_ALIASES


@dataclass
class ContactFields:
    """Optional contact handles used for channel inference."""
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "linkedin": self.linkedin,
            "twitter": self.twitter,
            "instagram": self.instagram,
            "website": self.website
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ContactFields":
        """Create from dictionary, rejecting unknown handles."""
        data = data or {}
        unknown = set(data) - {"linkedin", "twitter", "instagram", "website"}
        if unknown:
            raise ValueError(f"Unknown contact keys: {sorted(unknown)}")
        return cls(**data)


@dataclass
class PersonProfile:
    """
    Complete assessment bundle for one person.

    Attributes:
        competencies: CompetencyProfile instance
        outcomes: OutcomeProfile instance
        talents: TalentProfile instance
        style: Cognitive style, or None if unknown
        person_id: Optional identifier for the person
        name: Optional display name
        contact: Optional contact handles
    """
    competencies: CompetencyProfile = field(default_factory=CompetencyProfile)
    outcomes: OutcomeProfile = field(default_factory=OutcomeProfile)
    talents: TalentProfile = field(default_factory=TalentProfile)
    style: Optional[CognitiveStyle] = None
    person_id: Optional[str] = None
    name: Optional[str] = None
    contact: ContactFields = field(default_factory=ContactFields)

    def __post_init__(self):
        """Accept plain dictionaries and style strings."""
        if isinstance(self.competencies, dict):
            self.competencies = CompetencyProfile.from_dict(self.competencies)
        if isinstance(self.outcomes, dict):
            self.outcomes = OutcomeProfile.from_dict(self.outcomes)
        if isinstance(self.talents, dict):
            self.talents = TalentProfile.from_dict(self.talents)
        if isinstance(self.contact, dict):
            self.contact = ContactFields.from_dict(self.contact)
        if not isinstance(self.style, CognitiveStyle):
            from .normalization import parse_cognitive_style
            self.style = parse_cognitive_style(self.style)

    @property
    def has_assessment_data(self) -> bool:
        """False when competency and outcome data are both entirely absent."""
        return not (self.competencies.is_empty() and self.outcomes.is_empty())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "person_id": self.person_id,
            "name": self.name,
            "style": self.style.value if self.style else None,
            "competencies": self.competencies.to_dict(),
            "outcomes": self.outcomes.to_dict(),
            "talents": self.talents.to_dict(),
            "contact": self.contact.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonProfile":
        """Create from dictionary (as produced by to_dict or a JSON payload)."""
        return cls(
            competencies=CompetencyProfile.from_dict(data.get("competencies")),
            outcomes=OutcomeProfile.from_dict(data.get("outcomes")),
            talents=TalentProfile.from_dict(data.get("talents")),
            style=data.get("style"),
            person_id=data.get("person_id"),
            name=data.get("name"),
            contact=ContactFields.from_dict(data.get("contact"))
        )


@dataclass
class PreferenceBias:
    """
    Communication preferences learned from a subject's recent messages.

    Attributes:
        style_label: "numeric", "narrative" or "balanced"
        tone_factor: 1.05 for a directive tone, else 1.0
        detail_factor: 1.05 verbose, 0.98 terse, else 1.0
        bias_factor: Combined multiplicative nudge for the composite
    """
    style_label: str = "balanced"
    tone_factor: float = 1.0
    detail_factor: float = 1.0
    bias_factor: float = 1.0

    @classmethod
    def neutral(cls) -> "PreferenceBias":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "style_label": self.style_label,
            "tone_factor": self.tone_factor,
            "detail_factor": self.detail_factor,
            "bias_factor": self.bias_factor
        }


@dataclass
class SubScores:
    """The three raw sub-scores, each on 0-135."""
    growth: float
    collaboration: float
    understanding: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "growth": self.growth,
            "collaboration": self.collaboration,
            "understanding": self.understanding
        }


@dataclass
class AffinityResult:
    """
    Result of affinity scoring for one (subject, counterpart, context).

    Attributes:
        context: Canonical context value
        available: False when either side had no assessment data
        reason: Why the result is unavailable (None when available)
        composite: Composite score, clamped to [0, 135]
        heat: Composite rescaled to an integer in [0, 100]
        level: Qualitative level (Challenge ... Expert)
        band: hot / warm / cold
        parts: Raw sub-scores for transparency
        adjustments: Multipliers applied on top of the weighted blend
        insights: Optional relationship insights (shared talents, style hints)
        summary: Optional natural-language note from the summarizer
    """
    context: str
    available: bool = True
    reason: Optional[str] = None
    composite: Optional[float] = None
    heat: Optional[int] = None
    level: Optional[str] = None
    band: Optional[str] = None
    parts: Optional[SubScores] = None
    closeness: Optional[str] = None
    adjustments: Dict[str, float] = field(default_factory=dict)
    insights: Optional[Dict[str, Any]] = None
    summary: Optional[str] = None
    subject_id: Optional[str] = None
    counterpart_id: Optional[str] = None

    @classmethod
    def not_available(
        cls,
        context: str,
        reason: str,
        subject_id: Optional[str] = None,
        counterpart_id: Optional[str] = None
    ) -> "AffinityResult":
        """Explicit "no data" result; never carries a score."""
        return cls(
            context=context,
            available=False,
            reason=reason,
            subject_id=subject_id,
            counterpart_id=counterpart_id
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "context": self.context,
            "available": self.available,
            "subject_id": self.subject_id,
            "counterpart_id": self.counterpart_id
        }
        if not self.available:
            result["reason"] = self.reason
            return result
        result.update({
            "composite": self.composite,
            "heat": self.heat,
            "level": self.level,
            "band": self.band,
            "closeness": self.closeness,
            "parts": self.parts.to_dict() if self.parts else None,
            "adjustments": dict(self.adjustments)
        })
        if self.insights is not None:
            result["insights"] = self.insights
        if self.summary is not None:
            result["summary"] = self.summary
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AffinityResult":
        """Create from dictionary."""
        parts = data.get("parts")
        return cls(
            context=data["context"],
            available=data.get("available", True),
            reason=data.get("reason"),
            composite=data.get("composite"),
            heat=data.get("heat"),
            level=data.get("level"),
            band=data.get("band"),
            parts=SubScores(**parts) if parts else None,
            closeness=data.get("closeness"),
            adjustments=dict(data.get("adjustments") or {}),
            insights=data.get("insights"),
            summary=data.get("summary"),
            subject_id=data.get("subject_id"),
            counterpart_id=data.get("counterpart_id")
        )
