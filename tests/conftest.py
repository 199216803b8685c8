import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_mdblog_logger():
    """Drop handlers installed by CLI runs so they never outlive the runner's streams."""
    yield
    logger = logging.getLogger("mdblog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
