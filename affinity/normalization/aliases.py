"""
Alias tables for free-text enum inputs.

Contexts and closeness arrive as free text from several locales (mostly
Spanish and English, some Italian). The tables below feed a strict enum
parse and are kept apart from the scoring math so that adding a locale never
touches a formula.
"""

import logging
from typing import Optional, Dict, Any

from ..schema import RelationalContext, Closeness, CognitiveStyle

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = RelationalContext.EXECUTION
DEFAULT_CLOSENESS = Closeness.NEUTRAL

CONTEXT_ALIASES: Dict[str, RelationalContext] = {
    # innovation
    "innovation": RelationalContext.INNOVATION,
    "innovacion": RelationalContext.INNOVATION,
    "innovación": RelationalContext.INNOVATION,
    "creativity": RelationalContext.INNOVATION,
    "creatividad": RelationalContext.INNOVATION,
    # execution
    "execution": RelationalContext.EXECUTION,
    "ejecucion": RelationalContext.EXECUTION,
    "ejecución": RelationalContext.EXECUTION,
    "trabajo": RelationalContext.EXECUTION,
    "work": RelationalContext.EXECUTION,
    # leadership
    "leadership": RelationalContext.LEADERSHIP,
    "liderazgo": RelationalContext.LEADERSHIP,
    "equipo": RelationalContext.LEADERSHIP,
    "team": RelationalContext.LEADERSHIP,
    # conversation
    "conversation": RelationalContext.CONVERSATION,
    "conversacion": RelationalContext.CONVERSATION,
    "conversación": RelationalContext.CONVERSATION,
    "communication": RelationalContext.CONVERSATION,
    "comunicacion": RelationalContext.CONVERSATION,
    "comunicación": RelationalContext.CONVERSATION,
    # relationship
    "relationship": RelationalContext.RELATIONSHIP,
    "relationships": RelationalContext.RELATIONSHIP,
    "relaciones": RelationalContext.RELATIONSHIP,
    "relacion": RelationalContext.RELATIONSHIP,
    "relación": RelationalContext.RELATIONSHIP,
    # decision
    "decision": RelationalContext.DECISION,
    "decisión": RelationalContext.DECISION,
    "decisiones": RelationalContext.DECISION,
    "decision-making": RelationalContext.DECISION,
}

CLOSENESS_ALIASES: Dict[str, Closeness] = {
    "close": Closeness.CLOSE,
    "cercano": Closeness.CLOSE,
    "cercana": Closeness.CLOSE,
    "próximo": Closeness.CLOSE,
    "proximo": Closeness.CLOSE,
    "vicino": Closeness.CLOSE,
    "neutral": Closeness.NEUTRAL,
    "neutro": Closeness.NEUTRAL,
    "far": Closeness.FAR,
    "lejano": Closeness.FAR,
    "lejana": Closeness.FAR,
    "distante": Closeness.FAR,
    "lontano": Closeness.FAR,
}

CLOSENESS_MULTIPLIERS: Dict[Closeness, float] = {
    Closeness.CLOSE: 1.0,
    Closeness.NEUTRAL: 0.9,
    Closeness.FAR: 0.75,
}


_ENUM_TYPES = (RelationalContext, Closeness, CognitiveStyle)


def _clean(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, _ENUM_TYPES):
        return raw.value.lower()
    return str(raw).lower().strip()


def normalize_context(raw: Optional[str]) -> RelationalContext:
    """
    Map a free-text context to its canonical enum member.

    Args:
        raw: Context as typed by a user or stored by the product
            (e.g. "Liderazgo", "relaciones", "execution")

    Returns:
        Canonical RelationalContext; execution when unmapped or absent
    """
    key = _clean(raw)
    context = CONTEXT_ALIASES.get(key)
    if context is None:
        if key:
            logger.debug(f"Unknown context {raw!r}, defaulting to {DEFAULT_CONTEXT.value}")
        return DEFAULT_CONTEXT
    return context


def normalize_closeness(raw: Optional[str]) -> Closeness:
    """Map a free-text closeness indicator to close / neutral / far."""
    key = _clean(raw)
    closeness = CLOSENESS_ALIASES.get(key)
    if closeness is None:
        if key:
            logger.debug(f"Unknown closeness {raw!r}, defaulting to {DEFAULT_CLOSENESS.value}")
        return DEFAULT_CLOSENESS
    return closeness


def closeness_multiplier(raw: Optional[str]) -> float:
    """Composite multiplier for a closeness indicator (1.0 / 0.9 / 0.75)."""
    return CLOSENESS_MULTIPLIERS[normalize_closeness(raw)]


def parse_cognitive_style(raw: Optional[str]) -> Optional[CognitiveStyle]:
    """Case-insensitive style parse; None when absent or unrecognized."""
    key = _clean(raw)
    for style in CognitiveStyle:
        if style.value.lower() == key:
            return style
    if key:
        logger.debug(f"Unknown cognitive style {raw!r}")
    return None
