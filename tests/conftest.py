import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    # The CLI points the package logger at the stderr stream current at configure time
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("playbill")
    package_logger.handlers[:] = [logging.NullHandler()]
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
