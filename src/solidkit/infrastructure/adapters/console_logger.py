"""Console logger adapter."""
import sys
from typing import Optional, TextIO

from solidkit.domain.base.ports.logging_port import Logger


class ConsoleLogger(Logger):
    """Writes log messages to a console stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout is looked up per call
        return self._stream if self._stream is not None else sys.stdout

    def log(self, message: str) -> None:
        print(f"Console log: {message}", file=self.stream)
