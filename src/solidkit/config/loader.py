"""Configuration loading from defaults, files and environment variables."""
import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from solidkit._package import ENV_PREFIX
from solidkit.config.utils.env_expansion import expand_config_env_vars
from solidkit.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config/solidkit.json"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "file_path": "logs/solidkit.log",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigurationLoader:
    """Loads raw configuration data from its sources."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self._defaults = defaults if defaults is not None else DEFAULT_CONFIG

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON file merged over the defaults.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        data = copy.deepcopy(self._defaults)
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                file_data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file '{config_file}': {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file '{config_file}': {e}") from e

        if not isinstance(file_data, dict):
            raise ConfigurationError(f"Configuration file '{config_file}' must contain a JSON object")

        logger.debug(f"Loaded configuration from {config_file}")
        return _merge(data, file_data)

    def load_configuration(self) -> Dict[str, Any]:
        """Load configuration from the default location, or the defaults alone."""
        if os.path.isfile(DEFAULT_CONFIG_FILE):
            return self.load_from_file(DEFAULT_CONFIG_FILE)
        logger.debug("No configuration file found, using defaults")
        return copy.deepcopy(self._defaults)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides and expand variable references."""
        for env_var, (section, key) in ENV_OVERRIDES.items():
            if env_var in os.environ:
                config_data.setdefault(section, {})[key] = os.environ[env_var]
                logger.debug(f"Applied environment override {env_var} -> {section}.{key}")
        return expand_config_env_vars(config_data)
