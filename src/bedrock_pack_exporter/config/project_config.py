# bedrock_pack_exporter/config/project_config.py
"""
Loads a project's persisted ``config.json``.

The file names the project and points at its packs::

    {
        "name": "my-map",
        "packs": {
            "behaviorPack": "./packs/BP",
            "resourcePack": "./packs/RP",
            "worldTemplate": "./world"
        }
    }

It is read once per export and never written by the exporter.
"""

import os
import json
import logging

from bedrock_pack_exporter.config.const import PROJECT_CONFIG_RELPATH
from bedrock_pack_exporter.core.models import ProjectConfig
from bedrock_pack_exporter.error import ConfigurationError

logger = logging.getLogger(__name__)

_NO_CONFIG_MESSAGE = "No valid config.json file detected."


def get_project_config_path(working_dir: str) -> str:
    """Returns where config.json is expected for a given working directory."""
    return os.path.normpath(os.path.join(working_dir, PROJECT_CONFIG_RELPATH))


def load_project_config(config_path: str) -> ProjectConfig:
    """
    Reads and parses a project config file.

    Args:
        config_path: Full path to config.json.

    Returns:
        ProjectConfig: The parsed config.

    Raises:
        ConfigurationError: (code ``no_config``) if the file is missing,
            unreadable, not valid JSON, or its root is not an object.
    """
    logger.debug(f"Loading project config from '{config_path}'.")

    if not os.path.isfile(config_path):
        logger.warning(f"Project config not found at '{config_path}'.")
        raise ConfigurationError(ConfigurationError.NO_CONFIG, _NO_CONFIG_MESSAGE)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (ValueError, OSError) as e:
        logger.warning(f"Could not read project config '{config_path}': {e}")
        raise ConfigurationError(
            ConfigurationError.NO_CONFIG, _NO_CONFIG_MESSAGE
        ) from e

    if not isinstance(data, dict):
        logger.warning(f"Project config '{config_path}' is not a JSON object.")
        raise ConfigurationError(ConfigurationError.NO_CONFIG, _NO_CONFIG_MESSAGE)

    return ProjectConfig.from_dict(data)
