"""Logger adapters implementing the domain Logger port."""

from .console_logger import ConsoleLogger
from .file_logger import DEFAULT_FILE_PREFIX, FileLogger

__all__ = ["ConsoleLogger", "FileLogger", "DEFAULT_FILE_PREFIX"]
