"""Domain ports for infrastructure concerns."""

from .logging_port import Logger

__all__ = [
    "Logger",
]
