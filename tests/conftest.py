# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from dynamic_value.infrastructure.config import reset_config


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and configuration"""
    root_logger = getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    reset_config()

    yield

    # Close anything the test installed and restore pytest's own handlers
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)

    reset_config()


@pytest.fixture
def people():
    """Two named records as parsed from a small CSV file"""
    # Local imports
    from dynamic_value import from_python

    return from_python(
        [
            {"name": "abc", "age": 123},
            {"name": "def", "age": 45.5},
        ]
    )
