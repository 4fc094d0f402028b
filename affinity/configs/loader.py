"""
Configuration loading and validation.

This module handles loading of the YAML runtime configuration and
validates the sections the engine reads.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

from .context_weights import check_override_section

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = ["global", "learning", "summary", "contexts"]

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If the file is empty
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in config:
        if section not in KNOWN_SECTIONS:
            issues.append(f"Unknown section: {section}")

    log_level = get_config_value(config, "global.log_level", "INFO")
    if str(log_level).upper() not in VALID_LOG_LEVELS:
        issues.append(f"Invalid global.log_level: {log_level}")

    history_limit = get_config_value(config, "learning.history_limit", 50)
    if not isinstance(history_limit, int) or isinstance(history_limit, bool) or history_limit < 1:
        issues.append(f"learning.history_limit must be a positive integer, got {history_limit}")

    fallback = get_config_value(config, "summary.fallback_text")
    if fallback is not None and not isinstance(fallback, str):
        issues.append("summary.fallback_text must be a string")

    contexts = config.get("contexts")
    if contexts is not None:
        if not isinstance(contexts, dict):
            issues.append("contexts must be a mapping of context name to overrides")
        else:
            issues.extend(check_override_section(contexts))

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "learning.history_limit")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
