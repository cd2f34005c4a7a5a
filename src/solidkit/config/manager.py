"""Configuration management for the application."""
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from solidkit.config.loader import ConfigurationLoader
from solidkit.config.schemas.app_schema import AppConfig
from solidkit.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from, in order of
    precedence: environment variable overrides, the given configuration file
    (or the default location), and built-in defaults.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._loader = loader
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def raw_config(self) -> Dict[str, Any]:
        """Raw configuration dictionary."""
        if self._raw_config is None:
            if self._config_file:
                config_data = self.loader.load_from_file(self._config_file)
            else:
                config_data = self.loader.load_configuration()
            self._raw_config = self.loader.apply_environment_overrides(config_data)
        return self._raw_config

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            try:
                self._app_config = AppConfig.from_dict(self.raw_config)
            except PydanticValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
            logger.debug("Application configuration validated")
        return self._app_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.raw_config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        self._raw_config = None
        self._app_config = None
