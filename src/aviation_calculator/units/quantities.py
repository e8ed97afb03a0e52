"""Typed physical quantities.

Each quantity wraps one float in a canonical unit and can only be built
through a constructor that names the unit of the incoming number. Passing
meters where feet are expected becomes a visible `Altitude.from_meters(...)`
call instead of a silent miscalculation.

Canonical units:
    Altitude: feet
    Pressure: hectopascals
    Temperature: degrees Celsius
    Speed: knots
    Angle: degrees

Typical usage example:
    from aviation_calculator.units.quantities import Altitude, Pressure

    elevation = Altitude.from_meters(113.7)
    qnh = Pressure.qnh(996.0)
    result = pressure_altitude(qnh.hpa, elevation.feet)
"""

import math
from dataclasses import dataclass

from aviation_calculator.core.errors import InvalidInputError
from aviation_calculator.units.conversions import (
    celsius_to_kelvin,
    feet_to_meters,
    hpa_to_inhg,
    inhg_to_hpa,
    kelvin_to_celsius,
    kilometers_per_hour_to_knots,
    knots_to_kilometers_per_hour,
    knots_to_meters_per_second,
    meters_per_second_to_knots,
    meters_to_feet,
    normalize_degrees,
    to_degrees,
    to_radians,
)

QNH_MINIMUM_HPA = 800.0
QNH_MAXIMUM_HPA = 1100.0


def require_finite(name: str, value: float) -> float:
    """Reject NaN and infinite inputs.

    Args:
        name: Name used in the error message.
        value: Number to check.

    Returns:
        The value as float.

    Raises:
        InvalidInputError: If value is not a finite number.
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from e

    if not math.isfinite(number):
        raise InvalidInputError(f"{name} must be finite, got {number}")
    return number


@dataclass(frozen=True)
class Altitude:
    """Altitude or elevation in feet. May be negative."""

    feet: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "feet", require_finite("Altitude", self.feet))

    @classmethod
    def from_feet(cls, feet: float) -> "Altitude":
        return cls(feet)

    @classmethod
    def from_meters(cls, meters: float) -> "Altitude":
        return cls(meters_to_feet(require_finite("Altitude", meters)))

    @property
    def meters(self) -> float:
        return feet_to_meters(self.feet)


@dataclass(frozen=True)
class Pressure:
    """Static pressure in hectopascals. Strictly positive.

    Examples:
        >>> qnh = Pressure.qnh(1021.0)
        >>> setting = qnh.inhg  # about 30.15 inHg
    """

    hpa: float

    def __post_init__(self) -> None:
        hpa = require_finite("Pressure", self.hpa)
        if hpa <= 0.0:
            raise InvalidInputError(f"Pressure must be positive, got {hpa:g} hPa")
        object.__setattr__(self, "hpa", hpa)

    @classmethod
    def from_hpa(cls, hpa: float) -> "Pressure":
        return cls(hpa)

    @classmethod
    def from_inhg(cls, inhg: float) -> "Pressure":
        return cls(inhg_to_hpa(require_finite("Pressure", inhg)))

    @classmethod
    def qnh(cls, hpa: float) -> "Pressure":
        """Build an altimeter setting, checking the plausible QNH range.

        Args:
            hpa: QNH in hectopascals.

        Returns:
            Validated pressure.

        Raises:
            InvalidInputError: If the value lies outside 800-1100 hPa.
        """
        pressure = cls(hpa)
        if not QNH_MINIMUM_HPA <= pressure.hpa <= QNH_MAXIMUM_HPA:
            raise InvalidInputError(
                f"QNH {pressure.hpa:g} hPa is outside the plausible range "
                f"({QNH_MINIMUM_HPA:g}-{QNH_MAXIMUM_HPA:g} hPa)"
            )
        return pressure

    @property
    def inhg(self) -> float:
        return hpa_to_inhg(self.hpa)


@dataclass(frozen=True)
class Temperature:
    """Air temperature in degrees Celsius. Must be above absolute zero."""

    celsius: float

    def __post_init__(self) -> None:
        celsius = require_finite("Temperature", self.celsius)
        if celsius_to_kelvin(celsius) <= 0.0:
            raise InvalidInputError(f"Temperature {celsius:g} °C is below absolute zero")
        object.__setattr__(self, "celsius", celsius)

    @classmethod
    def from_celsius(cls, celsius: float) -> "Temperature":
        return cls(celsius)

    @classmethod
    def from_kelvin(cls, kelvin: float) -> "Temperature":
        return cls(kelvin_to_celsius(require_finite("Temperature", kelvin)))

    @property
    def kelvin(self) -> float:
        return celsius_to_kelvin(self.celsius)


@dataclass(frozen=True)
class Speed:
    """Speed in knots. Never negative."""

    knots: float

    def __post_init__(self) -> None:
        knots = require_finite("Speed", self.knots)
        if knots < 0.0:
            raise InvalidInputError(f"Speed must not be negative, got {knots:g} kt")
        object.__setattr__(self, "knots", knots)

    @classmethod
    def from_knots(cls, knots: float) -> "Speed":
        return cls(knots)

    @classmethod
    def from_meters_per_second(cls, meters_per_second: float) -> "Speed":
        return cls(meters_per_second_to_knots(require_finite("Speed", meters_per_second)))

    @classmethod
    def from_kilometers_per_hour(cls, kilometers_per_hour: float) -> "Speed":
        return cls(kilometers_per_hour_to_knots(require_finite("Speed", kilometers_per_hour)))

    @property
    def meters_per_second(self) -> float:
        return knots_to_meters_per_second(self.knots)

    @property
    def kilometers_per_hour(self) -> float:
        return knots_to_kilometers_per_hour(self.knots)


@dataclass(frozen=True)
class Angle:
    """Direction in degrees, wrapped into [0, 360)."""

    degrees: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", normalize_degrees(require_finite("Angle", self.degrees)))

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees)

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(to_degrees(require_finite("Angle", radians)))

    @property
    def radians(self) -> float:
        return to_radians(self.degrees)

    def __add__(self, other: "Angle | float") -> "Angle":
        offset = other.degrees if isinstance(other, Angle) else other
        return Angle(self.degrees + offset)

    def __sub__(self, other: "Angle | float") -> "Angle":
        offset = other.degrees if isinstance(other, Angle) else other
        return Angle(self.degrees - offset)
