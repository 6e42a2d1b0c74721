"""Shared fixtures for raycaster tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_raycaster_logger():
    """Remove handlers added by setup_logging so tests stay isolated."""
    yield
    logger = logging.getLogger("raycaster")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
