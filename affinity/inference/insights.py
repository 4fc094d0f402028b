"""
Relationship insights shown next to an affinity score.

- Shared talents: both sides >= 100
- Complementary talents: one side >= 110 while the other is < 90
- Strong competencies: both sides >= 100
- Style hints: preferred channel, tone and detail level
"""

from typing import Dict, Any, List

from ..metrics import round_half_up, SCALE_MAX
from ..schema import (
    PersonProfile,
    PreferenceBias,
    COMPETENCY_KEYS,
    TALENT_KEYS,
)
from .channels import infer_channel

STRENGTH_THRESHOLD = 100.0
COMPLEMENT_HIGH = 110.0
COMPLEMENT_LOW = 90.0


def shared_talents(subject: PersonProfile, counterpart: PersonProfile) -> List[str]:
    shared = []
    for key in TALENT_KEYS:
        a = subject.talents.get(key)
        b = counterpart.talents.get(key)
        if a is not None and b is not None and a >= STRENGTH_THRESHOLD and b >= STRENGTH_THRESHOLD:
            shared.append(key)
    return shared


def complementary_talents(subject: PersonProfile, counterpart: PersonProfile) -> List[Dict[str, str]]:
    """Talents where one side is strong and the other notably weak."""
    pairs = []
    for key in TALENT_KEYS:
        a = subject.talents.get(key)
        b = counterpart.talents.get(key)
        if a is None or b is None:
            continue
        if a >= COMPLEMENT_HIGH and b < COMPLEMENT_LOW:
            pairs.append({"talent": key, "strong_side": "subject"})
        elif b >= COMPLEMENT_HIGH and a < COMPLEMENT_LOW:
            pairs.append({"talent": key, "strong_side": "counterpart"})
    return pairs


def strong_competencies(subject: PersonProfile, counterpart: PersonProfile) -> List[str]:
    strong = []
    for key in COMPETENCY_KEYS:
        a = subject.competencies.get(key)
        b = counterpart.competencies.get(key)
        if a is not None and b is not None and a >= STRENGTH_THRESHOLD and b >= STRENGTH_THRESHOLD:
            strong.append(key)
    return strong


def style_hints(counterpart: PersonProfile, preferences: PreferenceBias) -> Dict[str, str]:
    """How the subject should approach the counterpart."""
    return {
        "channel": infer_channel(counterpart.contact).channel,
        "tone": "direct" if preferences.tone_factor > 1.0 else "warm",
        "detail": "deep" if preferences.detail_factor > 1.02 else "standard",
    }


def build_insights(
    subject: PersonProfile,
    counterpart: PersonProfile,
    collaboration: float,
    preferences: PreferenceBias
) -> Dict[str, Any]:
    """
    Assemble the insight block for one pair.

    Args:
        subject: Subject profile
        counterpart: Counterpart profile
        collaboration: Collaboration sub-score (0-135)
        preferences: Subject's learned preferences

    Returns:
        Dictionary of insight fields
    """
    return {
        "styles": {
            "subject": subject.style.value if subject.style else None,
            "counterpart": counterpart.style.value if counterpart.style else None,
            "compatibility": round_half_up(collaboration / SCALE_MAX * 100),
        },
        "shared_talents": shared_talents(subject, counterpart),
        "complementary_talents": complementary_talents(subject, counterpart),
        "strong_competencies": strong_competencies(subject, counterpart),
        "style_hints": style_hints(counterpart, preferences),
        "preferences": preferences.to_dict(),
    }
