"""
Numeric primitives shared by every scorer.

All scores live on the 0-135 scale used by the emotional-intelligence
assessment. Missing values are represented as None and are excluded from
averages rather than being treated as zero.

Level bands (exclusive upper bounds):
    < 82   Challenge
    < 92   Emerging
    < 108  Functional
    < 118  Skilled
    else   Expert
"""

import math
from typing import Any, Iterable, Optional, List

import numpy as np

SCALE_MAX = 135.0

# Neutral value substituted when one side of a comparison has no data
NEUTRAL_SCORE = 67.5

LEVEL_BOUNDARIES = [
    (82.0, "Challenge"),
    (92.0, "Emerging"),
    (108.0, "Functional"),
    (118.0, "Skilled"),
]
TOP_LEVEL = "Expert"

HOT_THRESHOLD = 108.0
WARM_THRESHOLD = 92.0


def safe_number(value: Any) -> Optional[float]:
    """
    Coerce a raw value into a finite float.

    Args:
        value: Anything the assessment store may hand over (number, numeric
            string, None, empty string, ...)

    Returns:
        The numeric value, or None when the input is missing or not a
        finite number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp x to the closed interval [lo, hi]."""
    return max(lo, min(hi, x))


def _present(values: Iterable[Any]) -> List[float]:
    return [v for v in (safe_number(x) for x in values) if v is not None]


def mean(values: Iterable[Any]) -> Optional[float]:
    """Mean of the non-null subset, or None if nothing is present."""
    present = _present(values)
    if not present:
        return None
    return float(np.mean(present))


def stddev(values: Iterable[Any]) -> Optional[float]:
    """Population standard deviation of the non-null subset, or None."""
    present = _present(values)
    if not present:
        return None
    return float(np.std(present))


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(x + 0.5))


def rescale_135_to_100(x: float) -> int:
    """Rescale a 0-135 score to an integer 0-100 heat value."""
    return int(clamp(round_half_up(x / SCALE_MAX * 100), 0, 100))


def classify_level(score: float) -> str:
    """Qualitative level for a 0-135 score."""
    for upper, label in LEVEL_BOUNDARIES:
        if score < upper:
            return label
    return TOP_LEVEL


def classify_band(score: float) -> str:
    """Coarse hot/warm/cold band for a 0-135 score."""
    if score >= HOT_THRESHOLD:
        return "hot"
    if score >= WARM_THRESHOLD:
        return "warm"
    return "cold"
