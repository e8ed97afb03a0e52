"""Unit conversion helpers.

Plain conversion functions between the units used in flight planning.
The calculation modules work in feet, hectopascals, knots and degrees;
anything else is converted at the call site with these helpers.

Typical usage example:
    from aviation_calculator.units.conversions import feet_to_meters, to_radians

    elevation_m = feet_to_meters(364.0)
    angle_rad = to_radians(90.0)
"""

import math

FEET_TO_METERS = 0.3048
HPA_PER_INHG = 33.8639
METERS_PER_NAUTICAL_MILE = 1852.0
SECONDS_PER_HOUR = 3600.0
KNOTS_TO_METERS_PER_SECOND = METERS_PER_NAUTICAL_MILE / SECONDS_PER_HOUR
KNOTS_TO_KILOMETERS_PER_HOUR = METERS_PER_NAUTICAL_MILE / 1000.0
KELVIN_OFFSET = 273.15


def meters_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters / FEET_TO_METERS


def feet_to_meters(feet: float) -> float:
    """Convert feet to meters."""
    return feet * FEET_TO_METERS


def hpa_to_inhg(hpa: float) -> float:
    """Convert hectopascals to inches of mercury."""
    return hpa / HPA_PER_INHG


def inhg_to_hpa(inhg: float) -> float:
    """Convert inches of mercury to hectopascals."""
    return inhg * HPA_PER_INHG


def nautical_miles_to_meters(nautical_miles: float) -> float:
    """Convert nautical miles to meters."""
    return nautical_miles * METERS_PER_NAUTICAL_MILE


def meters_to_nautical_miles(meters: float) -> float:
    """Convert meters to nautical miles."""
    return meters / METERS_PER_NAUTICAL_MILE


def knots_to_meters_per_second(knots: float) -> float:
    """Convert knots to meters per second."""
    return knots * KNOTS_TO_METERS_PER_SECOND


def meters_per_second_to_knots(meters_per_second: float) -> float:
    """Convert meters per second to knots."""
    return meters_per_second / KNOTS_TO_METERS_PER_SECOND


def knots_to_kilometers_per_hour(knots: float) -> float:
    """Convert knots to kilometers per hour."""
    return knots * KNOTS_TO_KILOMETERS_PER_HOUR


def kilometers_per_hour_to_knots(kilometers_per_hour: float) -> float:
    """Convert kilometers per hour to knots."""
    return kilometers_per_hour / KNOTS_TO_KILOMETERS_PER_HOUR


def celsius_to_kelvin(celsius: float) -> float:
    """Convert degrees Celsius to Kelvin."""
    return celsius + KELVIN_OFFSET


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to degrees Celsius."""
    return kelvin - KELVIN_OFFSET


def to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return math.pi / 180.0 * degrees


def to_degrees(radians: float) -> float:
    """Convert an angle from radians to degrees."""
    return 180.0 / math.pi * radians


def normalize_degrees(degrees: float) -> float:
    """Wrap an angle into the range [0, 360).

    Args:
        degrees: Any angle in degrees, negative values included.

    Returns:
        Equivalent angle between 0 (inclusive) and 360 (exclusive).

    Examples:
        >>> normalize_degrees(370.0)
        10.0
        >>> normalize_degrees(-45.0)
        315.0
    """
    normalized = degrees % 360.0
    # -1e-17 % 360.0 rounds up to exactly 360.0
    return 0.0 if normalized == 360.0 else normalized


def round_to(value: float, precision: int) -> float:
    """Round half away from zero to the given number of decimals.

    Unlike the builtin round(), ties do not go to the even neighbour,
    which matches how figures in flight manuals are rounded.

    Args:
        value: Number to round.
        precision: Number of decimal places (>= 0).

    Returns:
        Rounded value.

    Examples:
        >>> round_to(55.5555, 2)
        55.56
        >>> round_to(0.125, 2)
        0.13
    """
    base = 10.0**precision
    return math.copysign(math.floor(abs(value) * base + 0.5), value) / base
