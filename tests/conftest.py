import io
import logging
from logging.handlers import RotatingFileHandler

import pytest

from solidkit.infrastructure.di.container import DIContainer

SETUP_LOGGING_HANDLERS = (logging.StreamHandler, logging.NullHandler, RotatingFileHandler)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in SETUP_LOGGING_HANDLERS:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def container():
    return DIContainer()
