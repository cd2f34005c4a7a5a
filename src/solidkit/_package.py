"""Package metadata and naming constants."""

PACKAGE_NAME = "solidkit"
__version__ = "1.0.0"  # Version for imports
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Pluggable strategy registry and IoC container demonstrating SOLID design principles"

ENV_PREFIX = "SOLIDKIT_"
