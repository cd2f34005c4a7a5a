"""Tests for application bootstrap."""

import json
import logging

import pytest

from solidkit.bootstrap import Application, build_container, builtin_discounts
from solidkit.config import AppConfig
from solidkit.domain.base.exceptions import ConfigurationError
from solidkit.infrastructure.adapters import ConsoleLogger, FileLogger
from solidkit.infrastructure.registry import UnsupportedLoggerTypeError


class TestBuildContainer:
    """Test container assembly from configuration."""

    def test_default_config_registers_demo_loggers(self):
        container = build_container(AppConfig())

        assert isinstance(container.get_logger("consoleLogger"), ConsoleLogger)
        file_logger = container.get_logger("fileLogger")
        assert isinstance(file_logger, FileLogger)
        assert file_logger.file_name == "app_errors_container.log"

    def test_builtin_discounts_registered(self):
        container = build_container(AppConfig())

        assert container.discounts.get_registered_names() == sorted(builtin_discounts())
        assert container.get_discount_calculator("black_friday").calculate_discount(1500.00) == 1050.00
        assert container.get_discount_calculator("none").calculate_discount(1500.00) == 1500.00

    def test_configured_discounts_extend_and_override(self):
        container = build_container(AppConfig(discounts={"vip": 20, "fixed": 5}))

        assert container.get_discount_calculator("vip").calculate_discount(1500.00) == 1200.00
        assert container.get_discount_calculator("fixed").calculate_discount(1500.00) == 1425.00

    def test_payment_methods_left_to_caller(self):
        assert build_container(AppConfig()).payment_methods.get_registered_names() == []

    def test_unknown_logger_type_fails_assembly(self):
        with pytest.raises(UnsupportedLoggerTypeError):
            build_container(AppConfig(loggers=[{"name": "db", "type": "database"}]))


class TestApplication:
    """Test the application context."""

    def test_container_initializes_lazily(self, tmp_path):
        config_file = tmp_path / "app.json"
        config_file.write_text(
            json.dumps({"loggers": [{"name": "consoleLogger", "type": "console"}]}), encoding="utf-8"
        )
        app = Application(str(config_file))

        container = app.container

        assert container is app.container
        assert container.loggers.get_registered_names() == ["consoleLogger"]

    def test_log_level_override(self, tmp_path):
        config_file = tmp_path / "app.json"
        config_file.write_text(json.dumps({"logging": {"level": "ERROR"}}), encoding="utf-8")

        Application(str(config_file)).initialize(log_level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_missing_config_file(self, tmp_path):
        app = Application(str(tmp_path / "missing.json"))

        with pytest.raises(ConfigurationError):
            app.initialize()
