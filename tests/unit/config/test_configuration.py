"""Tests for configuration schemas, loading and management."""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from solidkit.config import AppConfig, LoggerSinkConfig, LoggingConfig
from solidkit.config.loader import ConfigurationLoader
from solidkit.config.manager import ConfigurationManager
from solidkit.domain.base.exceptions import ConfigurationError


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestSchemas:
    """Test configuration schema validation."""

    def test_app_config_defaults(self):
        config = AppConfig()

        assert config.logging.level == "WARNING"
        assert [sink.name for sink in config.loggers] == ["consoleLogger", "fileLogger"]
        assert config.loggers[1].path == "app_errors_container.log"
        assert config.discounts == {}
        assert config.currency == "TL"

    def test_log_level_is_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Log level must be one of"):
            LoggingConfig(level="LOUD")

    def test_invalid_destination(self):
        with pytest.raises(ValidationError, match="Log destination must be one of"):
            LoggingConfig(destination="syslog")

    def test_file_sink_requires_path(self):
        with pytest.raises(ValidationError, match="requires a path"):
            LoggerSinkConfig(name="fileLogger", type="file")

    def test_sink_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            LoggerSinkConfig(name="c", type="console", colour="red")

    def test_discount_percent_out_of_range(self):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            AppConfig(discounts={"too_much": 150})

    def test_unknown_top_level_key_is_rejected(self):
        with pytest.raises(ValidationError, match="loger"):
            AppConfig.from_dict({"loger": {"level": "DEBUG"}})

    def test_duplicate_logger_names(self):
        with pytest.raises(ValidationError, match="Duplicate logger names"):
            AppConfig(loggers=[{"name": "a"}, {"name": "a", "type": "console"}])


class TestConfigurationLoader:
    """Test raw configuration loading."""

    def test_file_values_merge_over_defaults(self, tmp_path):
        config_file = write_config(tmp_path / "app.json", {"logging": {"level": "DEBUG"}})

        data = ConfigurationLoader().load_from_file(config_file)

        assert data["logging"]["level"] == "DEBUG"
        assert data["logging"]["destination"] == "stdout"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
            ConfigurationLoader().load_from_file(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigurationLoader().load_from_file(str(bad))

    def test_non_object_json(self, tmp_path):
        config_file = write_config(tmp_path / "list.json", [1, 2])

        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            ConfigurationLoader().load_from_file(config_file)

    def test_defaults_are_not_mutated(self, tmp_path):
        loader = ConfigurationLoader(defaults={"logging": {"level": "INFO"}})
        loader.load_from_file(write_config(tmp_path / "a.json", {"logging": {"level": "ERROR"}}))

        data = loader.load_from_file(write_config(tmp_path / "b.json", {}))

        assert data["logging"]["level"] == "INFO"

    def test_environment_overrides(self):
        env = {"SOLIDKIT_LOG_LEVEL": "ERROR", "SOLIDKIT_LOG_FILE": "$HOME_DIR/app.log", "HOME_DIR": "/tmp/x"}
        with patch.dict(os.environ, env):
            data = ConfigurationLoader().apply_environment_overrides({"logging": {"level": "INFO"}})

        assert data["logging"]["level"] == "ERROR"
        assert data["logging"]["file_path"] == "/tmp/x/app.log"


class TestConfigurationManager:
    """Test the configuration manager."""

    def test_loads_typed_config_from_file(self, tmp_path):
        config_file = write_config(
            tmp_path / "app.json",
            {"discounts": {"vip": 20}, "loggers": [{"name": "only", "type": "console"}]},
        )

        manager = ConfigurationManager(config_file)

        assert manager.app_config.discounts == {"vip": 20}
        assert [sink.name for sink in manager.app_config.loggers] == ["only"]
        assert manager.get("discounts.vip") == 20
        assert manager.get("logging.missing", "fallback") == "fallback"

    def test_app_config_is_cached(self, tmp_path):
        manager = ConfigurationManager(write_config(tmp_path / "app.json", {}))

        assert manager.app_config is manager.app_config

    def test_reload_reads_file_again(self, tmp_path):
        path = tmp_path / "app.json"
        manager = ConfigurationManager(write_config(path, {"currency": "TL"}))
        assert manager.app_config.currency == "TL"

        write_config(path, {"currency": "EUR"})
        manager.reload()

        assert manager.app_config.currency == "EUR"

    def test_invalid_config_raises_configuration_error(self, tmp_path):
        manager = ConfigurationManager(write_config(tmp_path / "app.json", {"logging": {"level": "LOUD"}}))

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            manager.app_config
