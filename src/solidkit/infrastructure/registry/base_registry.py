"""Base Registry - name-keyed registry for capability variants.

A registry decouples choosing a variant from constructing the consumer that
uses it: assembly code registers variants under names, and consumers are
later built from whatever variant is currently bound to a name.
"""
from typing import Callable, Dict, Generic, List, TypeVar

from solidkit.infrastructure.exceptions import UnregisteredDependencyError
from solidkit.infrastructure.logging.logger import get_logger

T = TypeVar('T')
C = TypeVar('C')


class BaseRegistry(Generic[T]):
    """
    Registry mapping names to variants of one capability.

    Names are unique; registering an existing name replaces its variant.
    Looking up a name that was never registered is the only failure.
    """

    def __init__(self, kind: str = "Dependency"):
        """
        Initialize registry.

        Args:
            kind: Human readable capability name used in messages (e.g. 'Logger')
        """
        self.kind = kind
        self._registrations: Dict[str, T] = {}
        self.logger = get_logger(__name__)

    def register(self, name: str, variant: T) -> None:
        """
        Register a variant under a name, replacing any previous registration.

        Args:
            name: Registration name
            variant: Variant instance to bind to the name
        """
        if name in self._registrations:
            self.logger.debug(f"Replacing {self.kind} registration: {name}")
        self._registrations[name] = variant
        self.logger.debug(f"Registered {self.kind}: {name}")

    def resolve(self, name: str) -> T:
        """
        Get the variant registered under a name.

        Args:
            name: Registration name

        Returns:
            The exact instance passed to the most recent register call

        Raises:
            UnregisteredDependencyError: If nothing is registered under the name
        """
        try:
            return self._registrations[name]
        except KeyError:
            raise UnregisteredDependencyError(name, self.kind) from None

    def build_consumer(self, name: str, consumer_factory: Callable[[T], C]) -> C:
        """
        Build a consumer bound to the variant registered under a name.

        Raises:
            UnregisteredDependencyError: If nothing is registered under the name
        """
        return consumer_factory(self.resolve(name))

    def is_registered(self, name: str) -> bool:
        """Check if a name is registered."""
        return name in self._registrations

    def get_registered_names(self) -> List[str]:
        """Get sorted list of registered names."""
        return sorted(self._registrations)

    def clear_registrations(self) -> None:
        """Clear all registrations."""
        self._registrations.clear()
        self.logger.debug(f"Cleared all {self.kind} registrations")

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind='{self.kind}', names={self.get_registered_names()})"
