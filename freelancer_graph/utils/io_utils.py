"""Settings loading with defaults."""

import functools
from typing import Any

import yaml

from freelancer_graph.utils.logging_utils import get_logger
from freelancer_graph.utils.schema_utils import DEFAULT_INPUT_COLUMNS

logger = get_logger(__name__)


def default_settings() -> dict[str, Any]:
    """Return a fresh copy of the built-in settings."""
    return {
        "clustering": {"threshold": 0.7},
        "ingest": {
            "columns": dict(DEFAULT_INPUT_COLUMNS),
            "delimiter": ",",
        },
        "regression": {
            "job_category_codes": {
                "Web Development": 1.0,
                "Mobile Development": 2.0,
                "Design": 3.0,
                "Writing": 4.0,
                "Data Science": 5.0,
            },
            "experience_level_codes": {
                "Entry Level": 1.0,
                "Beginner": 1.0,
                "Intermediate": 2.0,
                "Expert": 3.0,
            },
        },
        "charts": {
            "output_path": "cluster_experience_rates.png",
            "experience_levels": ["Beginner", "Intermediate", "Expert"],
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file": None,
        },
    }


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge ``update`` into ``base`` recursively, in place."""
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=4)
def load_settings(path: str) -> dict[str, Any]:
    """Load settings from YAML file with defaults.

    This function is cached to prevent repeated file I/O and parsing.
    Use reload_settings() to force a fresh load. Callers must treat the
    returned dictionary as read-only.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    logger.debug(f"Loading settings from {path}")

    defaults = default_settings()
    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}. Using defaults.")
        return defaults
    except yaml.YAMLError as e:
        logger.error(f"Error loading settings from {path}: {e}. Using defaults.")
        return defaults

    if not isinstance(user_config, dict):
        logger.error(f"Settings file {path} must contain a mapping. Using defaults.")
        return defaults

    return deep_merge(defaults, user_config)


def reload_settings(path: str) -> dict[str, Any]:
    """Force reload settings from file (clears cache).

    Args:
        path: Path to settings YAML file

    Returns:
        Freshly loaded settings

    """
    load_settings.cache_clear()
    return load_settings(path)
