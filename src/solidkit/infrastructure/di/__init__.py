"""Dependency Injection package."""
from .container import DIContainer
from solidkit.infrastructure.exceptions import DependencyResolutionError, UnregisteredDependencyError

__all__ = [
    'DIContainer',
    'DependencyResolutionError',
    'UnregisteredDependencyError'
]
