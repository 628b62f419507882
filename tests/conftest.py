"""
Pytest configuration and fixtures
"""
import io

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks added during a test so they never outlive captured streams."""
    yield
    logger.remove()


@pytest.fixture
def stdout():
    return io.StringIO()
