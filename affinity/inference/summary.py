"""
Natural-language summary collaborator.

The engine never generates text. Callers inject a Summarizer; when none is
available, unauthorized, or failing, a constant fallback string is used.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_TEXT = "Numeric affinity computed (AI summary not requested)."

SYSTEM_PROMPT = "You are an analyst of emotional affinity between two people."


@dataclass
class SummaryRequest:
    """Everything a summarizer may use; no raw profile data."""
    subject_name: str
    counterpart_name: str
    context: str
    heat: int
    level: str
    band: str


class Summarizer(Protocol):
    def summarize(self, request: SummaryRequest) -> str:
        ...


class StaticSummarizer:
    """Always returns the fallback text."""

    def __init__(self, text: str = DEFAULT_FALLBACK_TEXT):
        self.text = text

    def summarize(self, request: SummaryRequest) -> str:
        return self.text


def build_user_prompt(request: SummaryRequest) -> str:
    return (
        f"Analyze the relationship between {request.subject_name} and "
        f"{request.counterpart_name} in the context of {request.context}. "
        f"Affinity heat is {request.heat}/100 ({request.level}, {request.band}). "
        f"Give two or three concrete suggestions for working together."
    )


class PromptSummarizer:
    """
    Summarizer backed by any text-completion callable.

    Attributes:
        complete: Callable taking (system_prompt, user_prompt) and returning text
        fallback_text: Returned when the completion fails or comes back empty
    """

    def __init__(
        self,
        complete: Callable[[str, str], str],
        fallback_text: str = DEFAULT_FALLBACK_TEXT
    ):
        self.complete = complete
        self.fallback_text = fallback_text

    def summarize(self, request: SummaryRequest) -> str:
        try:
            text = self.complete(SYSTEM_PROMPT, build_user_prompt(request))
        except Exception as e:
            logger.error(f"Summary generation failed: {e}")
            return self.fallback_text
        text = (text or "").strip()
        if not text:
            logger.warning("Summary generation returned empty text, using fallback")
            return self.fallback_text
        return text


def summarize_or_fallback(
    summarizer: Optional[Summarizer],
    request: SummaryRequest,
    fallback_text: str = DEFAULT_FALLBACK_TEXT
) -> str:
    """Ask `summarizer` for text; fallback when there is none or it fails."""
    if summarizer is None:
        return fallback_text
    try:
        return summarizer.summarize(request) or fallback_text
    except Exception as e:
        logger.error(f"Summarizer raised: {e}")
        return fallback_text
