"""Unit conversions and typed physical quantities.

Typical usage:
    from aviation_calculator.units import Altitude, feet_to_meters

    elevation = Altitude.from_meters(113.7)
    meters = feet_to_meters(elevation.feet)
"""

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
    meters_to_nautical_miles,
    nautical_miles_to_meters,
    normalize_degrees,
    round_to,
    to_degrees,
    to_radians,
)
from aviation_calculator.units.quantities import (
    Altitude,
    Angle,
    Pressure,
    Speed,
    Temperature,
    require_finite,
)

__all__ = [
    "Altitude",
    "Angle",
    "Pressure",
    "Speed",
    "Temperature",
    "celsius_to_kelvin",
    "feet_to_meters",
    "hpa_to_inhg",
    "inhg_to_hpa",
    "kelvin_to_celsius",
    "kilometers_per_hour_to_knots",
    "knots_to_kilometers_per_hour",
    "knots_to_meters_per_second",
    "meters_per_second_to_knots",
    "meters_to_feet",
    "meters_to_nautical_miles",
    "nautical_miles_to_meters",
    "normalize_degrees",
    "require_finite",
    "round_to",
    "to_degrees",
    "to_radians",
]
