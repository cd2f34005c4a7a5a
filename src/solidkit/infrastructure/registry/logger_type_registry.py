"""Logger Type Registry - Registry pattern for logger factories.

Maps a logger type ('console', 'file', ...) to the factory that builds it
from a ``LoggerSinkConfig``. Supporting a new kind of sink means registering
one more factory; nothing that reads the configuration changes.
"""
from typing import Callable, Dict, List, Optional

from solidkit.config.schemas.sink_schema import LoggerSinkConfig
from solidkit.domain.base.ports.logging_port import Logger
from solidkit.infrastructure.adapters.console_logger import ConsoleLogger
from solidkit.infrastructure.adapters.file_logger import FileLogger
from solidkit.infrastructure.exceptions import InfrastructureError
from solidkit.infrastructure.logging.logger import get_logger

LoggerFactory = Callable[[LoggerSinkConfig], Logger]


class UnsupportedLoggerTypeError(InfrastructureError):
    """Exception raised when an unsupported logger type is requested."""

    def __init__(self, logger_type: str, available_types: List[str]):
        super().__init__(
            f"Logger type '{logger_type}' is not registered. "
            f"Available types: {available_types}"
        )
        self.logger_type = logger_type
        self.available_types = available_types


def create_console_logger(config: LoggerSinkConfig) -> Logger:
    return ConsoleLogger()


def create_file_logger(config: LoggerSinkConfig) -> Logger:
    return FileLogger(config.path, prefix=config.prefix)


class LoggerTypeRegistry:
    """Registry for logger factories keyed by logger type."""

    def __init__(self, register_defaults: bool = True):
        """
        Initialize logger type registry.

        Args:
            register_defaults: Register the built-in 'console' and 'file' types
        """
        self._factories: Dict[str, LoggerFactory] = {}
        self.logger = get_logger(__name__)

        if register_defaults:
            self.register_type("console", create_console_logger)
            self.register_type("file", create_file_logger)

    def register_type(self, logger_type: str, factory: LoggerFactory) -> None:
        """Register a logger factory, replacing any previous one for the type."""
        self._factories[logger_type] = factory
        self.logger.debug(f"Registered logger type: {logger_type}")

    def create_logger(self, config: LoggerSinkConfig) -> Logger:
        """
        Create a logger for the given sink configuration.

        Raises:
            UnsupportedLoggerTypeError: If the sink's type is not registered
        """
        factory: Optional[LoggerFactory] = self._factories.get(config.type)
        if factory is None:
            raise UnsupportedLoggerTypeError(config.type, self.get_registered_types())

        logger = factory(config)
        self.logger.debug(f"Created {config.type} logger '{config.name}'")
        return logger

    def is_type_registered(self, logger_type: str) -> bool:
        """Check if a logger type is registered."""
        return logger_type in self._factories

    def get_registered_types(self) -> List[str]:
        """Get sorted list of registered logger types."""
        return sorted(self._factories)
