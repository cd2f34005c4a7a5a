"""Configuration package.

Only the schemas are exported here; the loader and manager are imported from
their own modules so that logging setup can depend on the schemas alone.
"""

from .schemas import AppConfig, LoggerSinkConfig, LoggingConfig

__all__ = ["AppConfig", "LoggingConfig", "LoggerSinkConfig"]
