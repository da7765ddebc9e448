from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the per-user
data directory, with default fallback when the file is missing or corrupt.
"""

import json
import logging
import os
from typing import Any, Dict

from treescaffold.domain.constants import STDIN_SOURCE
from treescaffold.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

# Per-run values (input_source, output_dir, dry_run) are never persisted
PREFERENCE_KEYS = (
    "verbose",
    "encoding",
    "log_level",
    "log_file",
)


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the scaffold pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "input_source": STDIN_SOURCE,
        "output_dir": os.getcwd(),
        "encoding": "utf-8",

        # Behavior
        "verbose": False,
        "dry_run": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted preferences merged onto the defaults.

    Only preference keys are read; per-run keys and unknown keys in the
    file are ignored. A missing, unreadable or malformed file yields
    the defaults.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in PREFERENCE_KEYS:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the preference keys of the provided configuration to disk.

    Args:
        config: The configuration dictionary to save.
    """
    config_file = get_config_file()
    payload: Dict[str, Any] = {"version": CURRENT_CONFIG_VERSION}
    payload.update({k: config[k] for k in PREFERENCE_KEYS if k in config})
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
