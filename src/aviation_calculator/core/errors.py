"""Domain errors raised by the calculation functions.

Every error describes an input that lies outside the domain of a model,
a reference table or the wind-triangle geometry. Nothing here is transient:
the same arguments will always fail the same way, so callers should not
retry.

Typical usage example:
    from aviation_calculator.core.errors import OutOfModelRangeError

    try:
        temperature = icao_temperature(40000.0)
    except OutOfModelRangeError as e:
        print(f"No ISA temperature above {e.maximum:.0f} ft")
"""


class AviationCalculationError(Exception):
    """Base class for all calculation errors."""


class OutOfModelRangeError(AviationCalculationError):
    """Raised when an input lies outside the valid domain of a physical model.

    Attributes:
        quantity: Name of the offending input (e.g., "pressure altitude").
        value: The rejected value.
        minimum: Lowest accepted value.
        maximum: Highest accepted value.
        unit: Unit label used in the message.
    """

    def __init__(self, quantity: str, value: float, minimum: float, maximum: float, unit: str = "") -> None:
        self.quantity = quantity
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit

        suffix = f" {unit}" if unit else ""
        if value < minimum:
            message = f"The {quantity} {value:g}{suffix} is below the minimum of the model ({minimum:g}{suffix})"
        elif value > maximum:
            message = f"The {quantity} {value:g}{suffix} is above the maximum of the model ({maximum:g}{suffix})"
        else:
            message = (
                f"The {quantity} {value:g}{suffix} lies outside the valid range of the model "
                f"({minimum:g}{suffix} to {maximum:g}{suffix})"
            )
        super().__init__(message)


class OutOfTableRangeError(AviationCalculationError):
    """Raised when a lookup falls outside the bounds of a reference table.

    Extrapolation beyond published data is never performed.

    Attributes:
        axis: Name of the table axis that was exceeded.
        value: The rejected lookup value.
        minimum: First tabulated value of the axis.
        maximum: Last tabulated value of the axis.
    """

    def __init__(self, axis: str, value: float, minimum: float, maximum: float) -> None:
        self.axis = axis
        self.value = value
        self.minimum = minimum
        self.maximum = maximum

        if value < minimum:
            message = f"{axis.capitalize()} {value:g} is below the minimum available data ({minimum:g})"
        else:
            message = f"{axis.capitalize()} {value:g} is above the maximum available data ({maximum:g})"
        super().__init__(message)


class UnsolvableWindTriangleError(AviationCalculationError):
    """Raised when the wind triangle has no real solution.

    Typically the wind component across the course is stronger than the
    true airspeed, so no heading keeps the aircraft on course.
    """


class InvalidInputError(AviationCalculationError, ValueError):
    """Raised for inputs that are not finite or have an impossible sign."""


class InvalidTableError(AviationCalculationError, ValueError):
    """Raised when reference table data is malformed."""
