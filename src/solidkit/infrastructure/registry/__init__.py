"""Infrastructure registry patterns."""

from .base_registry import BaseRegistry
from .logger_type_registry import LoggerTypeRegistry, UnsupportedLoggerTypeError

__all__ = [
    'BaseRegistry',
    'LoggerTypeRegistry',
    'UnsupportedLoggerTypeError'
]
