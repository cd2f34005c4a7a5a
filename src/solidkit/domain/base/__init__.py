"""Domain base package - shared exceptions and ports."""

from .exceptions import ConfigurationError, DomainException

__all__ = ["DomainException", "ConfigurationError"]
