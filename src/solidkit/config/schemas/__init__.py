"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig
from .sink_schema import LoggerSinkConfig

__all__ = ["AppConfig", "LoggingConfig", "LoggerSinkConfig"]
