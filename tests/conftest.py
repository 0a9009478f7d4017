"""Pytest configuration and fixtures for argv tests."""

import logging

import pytest

from argv.constants import LOGGER_NAME


@pytest.fixture
def argv_logger():
    """Yield the argv logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
