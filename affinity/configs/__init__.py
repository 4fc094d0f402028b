"""Configuration: YAML runtime settings and static per-context weight tables."""

from .loader import load_config, validate_config, get_config_value
from .context_weights import (
    BonusRule,
    DispersionRule,
    ContextProfile,
    CONTEXT_PROFILES,
    SHARED_STRENGTH_THRESHOLD,
    get_context_profile,
    apply_overrides,
    resolve_context_profiles,
)

__all__ = [
    "load_config",
    "validate_config",
    "get_config_value",
    "BonusRule",
    "DispersionRule",
    "ContextProfile",
    "CONTEXT_PROFILES",
    "SHARED_STRENGTH_THRESHOLD",
    "get_context_profile",
    "apply_overrides",
    "resolve_context_profiles",
]
