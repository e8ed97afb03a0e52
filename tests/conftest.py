"""Pytest configuration and fixtures for all tests."""

import pytest

from aviation_calculator.core.logging_system import shutdown_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset the logging system after each test.

    Tests that call initialize_logging() must not leak handlers or
    module levels into the next test.
    """
    yield
    shutdown_logging()
