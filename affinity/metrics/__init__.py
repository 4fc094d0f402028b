"""Numeric helpers: coercion, clamping, averages and 0-135 classification."""

from .primitives import (
    SCALE_MAX,
    NEUTRAL_SCORE,
    safe_number,
    clamp,
    mean,
    stddev,
    round_half_up,
    rescale_135_to_100,
    classify_level,
    classify_band,
)

__all__ = [
    "SCALE_MAX",
    "NEUTRAL_SCORE",
    "safe_number",
    "clamp",
    "mean",
    "stddev",
    "round_half_up",
    "rescale_135_to_100",
    "classify_level",
    "classify_band",
]
