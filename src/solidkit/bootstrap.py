"""Application bootstrap - builds a populated DI container from configuration."""

from __future__ import annotations

from typing import Dict, Optional

from solidkit.config.manager import ConfigurationManager
from solidkit.config.schemas.app_schema import AppConfig
from solidkit.domain.discount.strategies import (
    BlackFridayDiscount,
    DiscountStrategy,
    FixedDiscount,
    NoDiscount,
    PercentageDiscount,
    StudentDiscount,
)
from solidkit.infrastructure.di.container import DIContainer
from solidkit.infrastructure.logging.logger import get_logger, setup_logging
from solidkit.infrastructure.registry.logger_type_registry import LoggerTypeRegistry


def builtin_discounts() -> Dict[str, DiscountStrategy]:
    """Discount strategies registered in every container."""
    return {
        "none": NoDiscount(),
        "fixed": FixedDiscount(),
        "student": StudentDiscount(),
        "black_friday": BlackFridayDiscount(),
    }


def build_container(app_config: AppConfig,
                    logger_types: Optional[LoggerTypeRegistry] = None) -> DIContainer:
    """
    Build a container populated from configuration.

    Registers one logger per configured sink, the built-in discounts and any
    extra percentage discounts. Payment methods carry credentials and are left
    for the caller to register.
    """
    logger_types = logger_types or LoggerTypeRegistry()
    container = DIContainer()

    for sink in app_config.loggers:
        container.register_logger(sink.name, logger_types.create_logger(sink))

    for name, strategy in builtin_discounts().items():
        container.register_discount(name, strategy)
    for name, percent in app_config.discounts.items():
        container.register_discount(name, PercentageDiscount(percent=percent))

    return container


class Application:
    """Application context wiring configuration, logging and the container."""

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._config_manager = config_manager
        self._container: Optional[DIContainer] = None
        self._initialized = False

        # Only create logger immediately (lightweight)
        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        """Ensure config manager is created (lazy initialization)."""
        if self._config_manager is None:
            self._config_manager = ConfigurationManager(self.config_path)
        return self._config_manager

    @property
    def container(self) -> DIContainer:
        """Populated DI container, initializing the application on first use."""
        if not self._initialized:
            self.initialize()
        return self._container

    def initialize(self, log_level: Optional[str] = None) -> bool:
        """
        Initialize the application.

        Args:
            log_level: Overrides the configured diagnostic log level

        Raises:
            ConfigurationError: If the configuration cannot be loaded or is invalid
        """
        if self._initialized:
            return True

        app_config = self.config_manager.app_config
        logging_config = app_config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": log_level.upper()})
        setup_logging(logging_config)

        self._container = build_container(app_config)
        self._initialized = True

        self.logger.info(
            f"Application initialized with loggers {self._container.loggers.get_registered_names()} "
            f"and discounts {self._container.discounts.get_registered_names()}"
        )
        return True
