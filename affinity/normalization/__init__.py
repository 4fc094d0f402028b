"""Normalization of free-text context, closeness and style inputs."""

from .aliases import (
    CONTEXT_ALIASES,
    CLOSENESS_ALIASES,
    CLOSENESS_MULTIPLIERS,
    normalize_context,
    normalize_closeness,
    closeness_multiplier,
    parse_cognitive_style,
)

__all__ = [
    "CONTEXT_ALIASES",
    "CLOSENESS_ALIASES",
    "CLOSENESS_MULTIPLIERS",
    "normalize_context",
    "normalize_closeness",
    "closeness_multiplier",
    "parse_cognitive_style",
]
