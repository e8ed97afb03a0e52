"""Shared infrastructure: errors, configuration loading and logging."""

from aviation_calculator.core.config import ConfigError, ConfigLoader
from aviation_calculator.core.errors import (
    AviationCalculationError,
    InvalidInputError,
    InvalidTableError,
    OutOfModelRangeError,
    OutOfTableRangeError,
    UnsolvableWindTriangleError,
)
from aviation_calculator.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)

__all__ = [
    "AviationCalculationError",
    "ConfigError",
    "ConfigLoader",
    "InvalidInputError",
    "InvalidTableError",
    "LoggingError",
    "OutOfModelRangeError",
    "OutOfTableRangeError",
    "UnsolvableWindTriangleError",
    "get_logger",
    "initialize_logging",
    "shutdown_logging",
]
