"""Infrastructure layer - adapters, registries, logging and dependency injection."""
