"""Aviation calculator: atmosphere, navigation and performance calculations.

A library of stateless functions for flight planning. Altitudes are in feet,
pressures in hPa, temperatures in °C, speeds in knots and angles in degrees.

The package does not configure logging on import. Host applications call
initialize_logging() or attach their own handlers to the "aviation_calculator"
logger.
"""

import logging

from aviation_calculator.core.errors import (
    AviationCalculationError,
    InvalidInputError,
    InvalidTableError,
    OutOfModelRangeError,
    OutOfTableRangeError,
    UnsolvableWindTriangleError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AviationCalculationError",
    "InvalidInputError",
    "InvalidTableError",
    "OutOfModelRangeError",
    "OutOfTableRangeError",
    "UnsolvableWindTriangleError",
    "__version__",
]
