"""File logger adapter.

Appends one line per message to a text file. The file is opened in
append-create mode for a single write and closed again before ``log``
returns, so no handle outlives the call.

Writing is best effort: when the file cannot be opened or written the
failure is reported through this module's logger and ``log`` returns
normally. Characters that cannot be encoded are written as backslash
escapes.

Lines carry the prefix and a timestamp only; the caller's file and line
belong to diagnostic records (see ``DetailedFormatter``), not to the
log file a consumer writes to.
"""
import sys
from datetime import datetime
from typing import Callable, Optional, TextIO

from solidkit.domain.base.ports.logging_port import Logger
from solidkit.infrastructure.logging.logger import get_logger

DEFAULT_FILE_PREFIX = "FILE: "
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

logger = get_logger(__name__)


class FileLogger(Logger):
    """Appends log messages to a file."""

    def __init__(self,
                 file_name: str,
                 prefix: str = DEFAULT_FILE_PREFIX,
                 stream: Optional[TextIO] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Initialize file logger.

        Args:
            file_name: Path of the file to append to; created on first write
            prefix: Tag written at the start of every line
            stream: Console stream for write confirmations (default: stdout)
            clock: Source of line timestamps
        """
        self._file_name = file_name
        self._prefix = prefix
        self._stream = stream
        self._clock = clock

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def prefix(self) -> str:
        return self._prefix

    def format_line(self, message: str) -> str:
        """Build the line written for a message."""
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return f"{self._prefix}{timestamp} {message}\n"

    def log(self, message: str) -> None:
        try:
            with open(self._file_name, "a", encoding="utf-8", errors="backslashreplace") as log_file:
                log_file.write(self.format_line(message))
        except (OSError, ValueError) as e:
            logger.error(f"Error writing log to file '{self._file_name}': {e}")
            return

        stream = self._stream if self._stream is not None else sys.stdout
        print(f"Logged to file: {message}", file=stream)

    def __repr__(self) -> str:
        return f"FileLogger(file_name='{self._file_name}')"
