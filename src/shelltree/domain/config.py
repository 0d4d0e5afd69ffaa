from __future__ import annotations

"""
Configuration Domain Management.

Holds the default runtime parameters of the disk-usage analysis and loads
optional JSON overrides from disk. The configuration is a plain dictionary
so CLI overrides and file sources can be merged without a schema layer.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_INPUT_PATH = "input.txt"
DEFAULT_SMALL_DIR_THRESHOLD = 100_000
DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_DESIRED_FREE_SPACE = 30_000_000

CONFIG_KEYS = (
    "input_path",
    "small_dir_threshold",
    "disk_capacity",
    "desired_free_space",
    "render_tree",
    "session_cookie",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Source
        "input_path": DEFAULT_INPUT_PATH,
        "session_cookie": "",

        # Queries
        "small_dir_threshold": DEFAULT_SMALL_DIR_THRESHOLD,
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "desired_free_space": DEFAULT_DESIRED_FREE_SPACE,

        # Presentation
        "render_tree": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load a configuration file and merge it over the defaults.

    Unknown keys are dropped. A missing, unreadable or non-object file
    falls back to the defaults with a warning.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    if not os.path.exists(path):
        logger.warning(f"Config file not found at {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config file '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not hold a JSON object. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    ignored = sorted(set(data) - set(CONFIG_KEYS))
    if ignored:
        logger.debug(f"Ignoring unknown config keys: {', '.join(ignored)}")

    return config
