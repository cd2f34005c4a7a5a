# src/solidkit/domain/base/exceptions.py


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    pass
