"""
Configuration loader for vc_autocommit.

The tool reads an optional JSON file named ``config.json`` from the
``~/.autocommit/`` directory in the user's home directory. It tunes the
commit pacing and the retry budget; every key is optional and falls back
to the built-in default.

If the file exists but is malformed, has keys of the wrong type, or
describes an empty delay window, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_FILENAME = "config.json"

DEFAULT_CONFIG: Dict[str, int] = {
    "max_retries": 3,
    "min_delay_ms": 5000,
    "max_delay_ms": 30000,
}


class ConfigError(Exception):
    """Raised when the configuration file is invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the directory holding the user-level configuration."""
    return Path.home() / ".autocommit"


def load_config() -> Dict[str, Any]:
    """Load the configuration and merge it over :data:`DEFAULT_CONFIG`.

    Returns:
        A dictionary with the keys:
        - max_retries (int): consecutive failures tolerated per commit
        - min_delay_ms (int): inclusive lower bound of the commit delay
        - max_delay_ms (int): exclusive upper bound of the commit delay

    Raises:
        ConfigError: If the file is unreadable, not a JSON object, or invalid.
    """
    config_path = _get_config_directory() / CONFIG_FILENAME
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return config

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    for key, value in data.items():
        if key not in DEFAULT_CONFIG:
            logger.debug("Ignoring unknown configuration key: %s", key)
            continue
        # bool is a subclass of int
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"'{key}' must be an integer")
        if value < 0:
            raise ConfigError(f"'{key}' must not be negative")
        config[key] = value

    if config["max_delay_ms"] <= config["min_delay_ms"]:
        raise ConfigError("'max_delay_ms' must be greater than 'min_delay_ms'")

    logger.debug("Loaded configuration from %s: %s", config_path, config)
    return config
