"""Error handler service."""
from solidkit.domain.base.ports.logging_port import Logger


class ErrorHandler:
    """
    Reports errors through a Logger.

    The handler depends on the Logger port rather than on a console or file
    logger, so any sink can be injected without touching this class.
    """

    def __init__(self, logger: Logger):
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger

    def handle_error(self, error: BaseException) -> None:
        """Log an error."""
        self._logger.log(f"An error occurred: {error}")
