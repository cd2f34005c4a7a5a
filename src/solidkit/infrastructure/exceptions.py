class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    pass


class DependencyResolutionError(InfrastructureError):
    """Base exception for failures to resolve a dependency."""
    pass


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a dependency is looked up under a name that was never registered."""
    def __init__(self, name: str, kind: str = "Dependency"):
        super().__init__(f"{kind} not found: {name}")
        self.name = name
        self.kind = kind
