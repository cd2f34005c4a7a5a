"""Logging port - the capability every logger adapter satisfies."""
from abc import ABC, abstractmethod


class Logger(ABC):
    """
    Port for writing a single log message.

    High level services depend on this abstraction; console, file or any
    future sink is plugged in from the outside.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Write a message to the underlying sink."""
