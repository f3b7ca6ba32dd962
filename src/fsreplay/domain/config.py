from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent JSON configuration holding the disk figures used
by the aggregate queries. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fsreplay.domain.constants import (
    CURRENT_CONFIG_VERSION,
    SMALL_DIRECTORY_LIMIT,
    TOTAL_DISK_SPACE,
    UPDATE_SPACE,
)
from fsreplay.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


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
        "total_disk_space": TOTAL_DISK_SPACE,
        "update_space": UPDATE_SPACE,
        "small_directory_limit": SMALL_DIRECTORY_LIMIT,
    }


def get_config_path() -> str:
    """Resolve the location of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Args:
        path: Explicit file to read. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update({k: v for k, v in data.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist a configuration to disk, creating the parent directory on demand.

    Args:
        config: The configuration dictionary to save.
        path: Explicit destination. Defaults to the user data directory.

    Returns:
        bool: True if the file was written.
    """
    config_path = os.path.abspath(path or get_config_path())
    payload = {"version": CURRENT_CONFIG_VERSION}
    payload.update(config)
    try:
        os.makedirs(os.path.dirname(config_path), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=4)
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
        return False

    logger.info(f"Config saved to {config_path}")
    return True
