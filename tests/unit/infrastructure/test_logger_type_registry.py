"""Tests for the logger type registry."""

from unittest.mock import Mock

import pytest

from solidkit.config.schemas import LoggerSinkConfig
from solidkit.infrastructure.adapters import ConsoleLogger, FileLogger
from solidkit.infrastructure.registry import LoggerTypeRegistry, UnsupportedLoggerTypeError


class TestLoggerTypeRegistry:
    """Test creation of loggers from sink configuration."""

    def test_default_types_registered(self):
        registry = LoggerTypeRegistry()

        assert registry.get_registered_types() == ["console", "file"]
        assert registry.is_type_registered("console")

    def test_creates_console_logger(self):
        logger = LoggerTypeRegistry().create_logger(LoggerSinkConfig(name="c", type="console"))

        assert isinstance(logger, ConsoleLogger)

    def test_creates_file_logger_from_config(self, tmp_path):
        config = LoggerSinkConfig(name="f", type="file", path=str(tmp_path / "out.log"), prefix="X: ")

        logger = LoggerTypeRegistry().create_logger(config)

        assert isinstance(logger, FileLogger)
        assert logger.file_name == str(tmp_path / "out.log")
        assert logger.prefix == "X: "

    def test_unknown_type_raises(self):
        registry = LoggerTypeRegistry()

        with pytest.raises(UnsupportedLoggerTypeError, match="Logger type 'database' is not registered") as exc_info:
            registry.create_logger(LoggerSinkConfig(name="db", type="database"))

        assert exc_info.value.available_types == ["console", "file"]

    def test_new_type_can_be_registered(self):
        created = Mock()
        factory = Mock(return_value=created)
        registry = LoggerTypeRegistry()
        registry.register_type("database", factory)
        config = LoggerSinkConfig(name="db", type="database")

        assert registry.create_logger(config) is created
        factory.assert_called_once_with(config)

    def test_empty_registry_without_defaults(self):
        registry = LoggerTypeRegistry(register_defaults=False)

        assert registry.get_registered_types() == []
        with pytest.raises(UnsupportedLoggerTypeError):
            registry.create_logger(LoggerSinkConfig(name="c", type="console"))
