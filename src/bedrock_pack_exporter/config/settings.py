# bedrock_pack_exporter/config/settings.py
"""Manages application-wide settings for the exporter.

These are settings of the tool itself (where logs go, how verbose they are,
how hard to compress), not the per-project ``config.json`` that describes
which packs to export. The latter lives in
:mod:`bedrock_pack_exporter.config.project_config`.

Settings are stored as nested JSON in the per-user configuration directory
(located with ``appdirs``) and accessed with dot-notation, e.g.
``settings.get("logging.file_level")``.
"""

import os
import json
import logging
import collections.abc
from typing import Any, Dict

from appdirs import user_config_dir, user_log_dir

from bedrock_pack_exporter.error import ConfigurationError
from bedrock_pack_exporter.config.const import (
    package_name,
    app_author,
    env_name,
    MAX_COMPRESSION_LEVEL,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "bedrock_pack_exporter.json"


def deep_merge(source: Dict, destination: Dict) -> Dict:
    """
    Recursively merges the `source` dictionary into the `destination` dictionary.

    Nested dictionaries are merged, while other values in `source` overwrite
    those in `destination`.

    Args:
        source: The dictionary with new or updated values.
        destination: The dictionary to be updated.

    Returns:
        The merged dictionary (`destination`).
    """
    for key, value in source.items():
        if isinstance(value, collections.abc.Mapping):
            node = destination.setdefault(key, {})
            deep_merge(value, node)
        else:
            destination[key] = value
    return destination


class Settings:
    """Loads and exposes the exporter's own settings.

    Defaults are always present; a user file, when it exists, is deep-merged
    over them. Unlike the project config, a broken settings file is not fatal:
    it is reported and the defaults are used.
    """

    def __init__(self):
        logger.debug("Initializing Settings")
        self._config_dir_path = self._determine_app_config_dir()
        self.config_path = os.path.join(self._config_dir_path, CONFIG_FILE_NAME)
        self._settings: Dict[str, Any] = {}
        self.load()

    def _determine_app_config_dir(self) -> str:
        """Determines the application's configuration directory.

        The `BEDROCK_PACK_EXPORTER_CONFIG_DIR` environment variable wins if set;
        otherwise the platform's per-user config directory is used.
        """
        env_var_name = f"{env_name}_CONFIG_DIR"
        config_dir = os.environ.get(env_var_name)
        if not config_dir:
            config_dir = user_config_dir(package_name, app_author)
        return config_dir

    @property
    def default_config(self) -> dict:
        """The default settings, with a nested structure."""
        return {
            "paths": {
                "logs": user_log_dir(package_name, app_author),
            },
            "retention": {
                "logs": 3,
            },
            "logging": {
                "file_level": logging.INFO,
                "cli_level": logging.WARN,
            },
            "export": {
                "compression_level": MAX_COMPRESSION_LEVEL,
            },
        }

    def load(self):
        """Loads settings from the JSON file, merged over the defaults."""
        self._settings = self.default_config

        if not os.path.exists(self.config_path):
            logger.debug(
                f"Settings file not found at {self.config_path}. Using default settings."
            )
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                raise ValueError("settings root is not a JSON object")
            deep_merge(user_config, self._settings)
        except (ValueError, OSError) as e:
            logger.warning(
                f"Could not load settings file at {self.config_path}: {e}. "
                "Using default settings."
            )

    def _write_config(self):
        """Writes the current settings to the JSON file.

        Raises:
            ConfigurationError: If writing the settings fails.
        """
        try:
            os.makedirs(self._config_dir_path, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=4, sort_keys=True)
        except (OSError, TypeError) as e:
            raise ConfigurationError(
                ConfigurationError.INVALID_SETTINGS,
                f"Failed to write settings: {e}",
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a setting value using dot-notation for nested access.

        Args:
            key: The dot-separated configuration key.
            default: The value to return if the key is not found.
        """
        d = self._settings
        try:
            for k in key.split("."):
                d = d[k]
            return d
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Sets a value using dot-notation and saves the change.

        Nothing is written if the value is unchanged.
        """
        if self.get(key) == value:
            return

        keys = key.split(".")
        d = self._settings
        for k in keys[:-1]:
            d = d.setdefault(k, {})

        d[keys[-1]] = value
        logger.info(f"Setting '{key}' updated to '{value}'. Saving configuration.")
        self._write_config()

    @property
    def config_dir(self) -> str:
        """The absolute path to the application's configuration directory."""
        return self._config_dir_path
