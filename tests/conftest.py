"""Shared fixtures for plane-geom tests."""

import logging
import pytest

from plane_geom import log


@pytest.fixture
def clean_root():
    """Root logger with handlers, level and the setup guard restored afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    log._LOGGER_CONFIGURED = False
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    log._LOGGER_CONFIGURED = False
