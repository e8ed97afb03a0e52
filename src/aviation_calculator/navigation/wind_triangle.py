"""Wind triangle solutions for flight planning.

Given the desired course, the true airspeed and the wind, this module
computes the wind correction angle (WCA), the heading to fly and the
resulting ground speed.

All angles are degrees at the public boundary and are converted to radians
right before the trigonometry. Speeds may be in any unit as long as true
airspeed and wind speed share it; the ground speed comes back in that unit.

Typical usage example:
    from aviation_calculator.navigation import WindVector, solve_wind_triangle

    solution = solve_wind_triangle(course=90.0, true_airspeed=100.0, wind=WindVector(180.0, 20.0))
    print(f"Heading {solution.heading:03.0f}, GS {solution.ground_speed:.0f} kt")
"""

import math
from dataclasses import dataclass
from enum import Enum

from aviation_calculator.core.errors import InvalidInputError, UnsolvableWindTriangleError
from aviation_calculator.core.logging_system import get_logger
from aviation_calculator.units.conversions import normalize_degrees, to_degrees, to_radians
from aviation_calculator.units.quantities import require_finite

logger = get_logger(__name__)


class WindSide(Enum):
    """Side of the course the wind is blowing from."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class WindVector:
    """Wind as reported in a forecast: the direction it blows from and its speed.

    Attributes:
        direction: Direction the wind comes from in degrees, wrapped to [0, 360).
        speed: Wind speed, same unit as the airspeed it is combined with.

    Examples:
        >>> wind = WindVector(direction=450.0, speed=12.0)
        >>> wind.direction
        90.0
    """

    direction: float
    speed: float

    def __post_init__(self) -> None:
        direction = normalize_degrees(require_finite("Wind direction", self.direction))
        speed = require_finite("Wind speed", self.speed)
        if speed < 0.0:
            raise InvalidInputError(f"Wind speed must not be negative, got {speed:g}")
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "speed", speed)

    @property
    def is_calm(self) -> bool:
        return self.speed == 0.0


@dataclass(frozen=True)
class WindTriangleSolution:
    """Solved wind triangle.

    Attributes:
        heading: Heading to fly in degrees [0, 360).
        wind_correction_angle: Signed WCA in degrees, positive into a wind from the right.
        ground_speed: Speed over the ground along the course.
        wind_side: Side the wind comes from.
    """

    heading: float
    wind_correction_angle: float
    ground_speed: float
    wind_side: WindSide


def _check_speeds(true_airspeed: float, wind_speed: float) -> tuple[float, float]:
    true_airspeed = require_finite("True airspeed", true_airspeed)
    wind_speed = require_finite("Wind speed", wind_speed)

    if wind_speed < 0.0:
        raise InvalidInputError(f"Wind speed must not be negative, got {wind_speed:g}")
    if true_airspeed <= 0.0:
        raise UnsolvableWindTriangleError(
            f"True airspeed must be positive to hold a course, got {true_airspeed:g}"
        )
    return true_airspeed, wind_speed


def wind_correction_angle(true_airspeed: float, wind_speed: float, wind_angle: float) -> float:
    """Calculate the wind correction angle (WCA).

    WCA = asin(wind_speed * sin(wind_angle) / true_airspeed)

    Args:
        true_airspeed: True airspeed (TAS), any unit.
        wind_speed: Wind speed in the same unit as true_airspeed.
        wind_angle: Wind direction relative to the course in degrees
            (wind direction minus course). Any value; it is wrapped.

    Returns:
        WCA in degrees between -90 and 90. Positive means the wind comes
        from the right and the heading must be turned right of the course.

    Raises:
        UnsolvableWindTriangleError: If the crosswind component exceeds
            the true airspeed, or the true airspeed is not positive.
        InvalidInputError: If an input is not finite or the wind speed is negative.

    Examples:
        >>> round(wind_correction_angle(100.0, 20.0, 90.0), 2)
        11.54
        >>> round(wind_correction_angle(100.0, 20.0, 270.0), 2)
        -11.54
    """
    true_airspeed, wind_speed = _check_speeds(true_airspeed, wind_speed)
    wind_angle = normalize_degrees(require_finite("Wind angle", wind_angle))

    # Exact head- and tailwinds: sin(pi) is not exactly zero in floating point
    if wind_speed == 0.0 or wind_angle in (0.0, 180.0):
        return 0.0

    crosswind_ratio = wind_speed * math.sin(to_radians(wind_angle)) / true_airspeed
    if abs(crosswind_ratio) > 1.0:
        raise UnsolvableWindTriangleError(
            f"Crosswind component {wind_speed * math.sin(to_radians(wind_angle)):.1f} exceeds "
            f"true airspeed {true_airspeed:g}; the course cannot be held"
        )

    return to_degrees(math.asin(crosswind_ratio))


def ground_speed(
    true_airspeed: float,
    wind_speed: float,
    wind_angle: float,
    wind_correction_angle: float,
) -> float:
    """Calculate the ground speed along the course.

    GS = TAS * cos(WCA) - wind_speed * cos(wind_angle)

    Args:
        true_airspeed: True airspeed (TAS), any unit.
        wind_speed: Wind speed in the same unit as true_airspeed.
        wind_angle: Wind direction relative to the course in degrees.
        wind_correction_angle: WCA in degrees, from wind_correction_angle().

    Returns:
        Ground speed in the unit of true_airspeed. Zero or a negative value
        means the aircraft makes no progress along the course.

    Raises:
        UnsolvableWindTriangleError: If the true airspeed is not positive.
        InvalidInputError: If an input is not finite or the wind speed is negative.

    Examples:
        >>> ground_speed(100.0, 30.0, 0.0, 0.0)
        70.0
    """
    true_airspeed, wind_speed = _check_speeds(true_airspeed, wind_speed)
    wind_angle = require_finite("Wind angle", wind_angle)
    wind_correction_angle = require_finite("Wind correction angle", wind_correction_angle)

    if wind_speed == 0.0:
        return true_airspeed

    return true_airspeed * math.cos(to_radians(wind_correction_angle)) - wind_speed * math.cos(
        to_radians(wind_angle)
    )


def resultant_heading(course: float, wind_correction_angle: float, wind_side: WindSide) -> float:
    """Apply a wind correction angle to a course.

    The magnitude of the WCA is added for a wind from the right and
    subtracted for a wind from the left, wrapping at 0/360 degrees.

    Args:
        course: Desired course in degrees.
        wind_correction_angle: WCA in degrees (the sign is ignored).
        wind_side: Side of the course the wind comes from.

    Returns:
        Heading in degrees [0, 360).

    Examples:
        >>> resultant_heading(359.0, 2.0, WindSide.RIGHT)
        1.0
        >>> resultant_heading(1.0, 2.0, WindSide.LEFT)
        359.0
    """
    course = require_finite("Course", course)
    correction = abs(require_finite("Wind correction angle", wind_correction_angle))

    if wind_side is WindSide.RIGHT:
        return normalize_degrees(course + correction)
    return normalize_degrees(course - correction)


def wind_side(course: float, wind_direction: float) -> WindSide:
    """Determine the side of the course the wind comes from.

    Pure head- and tailwinds are reported as RIGHT; their correction
    angle is zero, so the side has no effect on the heading.

    Args:
        course: Desired course in degrees.
        wind_direction: Direction the wind comes from in degrees.

    Returns:
        WindSide.LEFT or WindSide.RIGHT.
    """
    relative = normalize_degrees(require_finite("Wind direction", wind_direction) - require_finite("Course", course))
    return WindSide.LEFT if relative > 180.0 else WindSide.RIGHT


def solve_wind_triangle(course: float, true_airspeed: float, wind: WindVector) -> WindTriangleSolution:
    """Solve the wind triangle for a course.

    Args:
        course: Desired course in degrees.
        true_airspeed: True airspeed (TAS).
        wind: Wind in the same speed unit as true_airspeed.

    Returns:
        WindTriangleSolution with heading, WCA and ground speed.

    Raises:
        UnsolvableWindTriangleError: If no heading holds the course.

    Examples:
        >>> solution = solve_wind_triangle(0.0, 100.0, WindVector(90.0, 20.0))
        >>> round(solution.heading, 2)
        11.54
    """
    course = normalize_degrees(require_finite("Course", course))
    wind_angle = wind.direction - course

    correction = wind_correction_angle(true_airspeed, wind.speed, wind_angle)
    side = wind_side(course, wind.direction)
    solution = WindTriangleSolution(
        heading=resultant_heading(course, correction, side),
        wind_correction_angle=correction,
        ground_speed=ground_speed(true_airspeed, wind.speed, wind_angle, correction),
        wind_side=side,
    )

    logger.debug(
        "Course %.0f, TAS %.0f, wind %03.0f/%.0f: heading %.1f, WCA %+.1f, GS %.1f",
        course,
        true_airspeed,
        wind.direction,
        wind.speed,
        solution.heading,
        solution.wind_correction_angle,
        solution.ground_speed,
    )
    return solution


def heading(course: float, true_airspeed: float, wind_direction: float, wind_speed: float) -> float:
    """Calculate the heading to fly for a course.

    Args:
        course: Desired course in degrees.
        true_airspeed: True airspeed (TAS).
        wind_direction: Direction the wind comes from in degrees.
        wind_speed: Wind speed in the same unit as true_airspeed.

    Returns:
        Heading in degrees [0, 360).

    Raises:
        UnsolvableWindTriangleError: If the crosswind exceeds the airspeed.
    """
    correction = wind_correction_angle(true_airspeed, wind_speed, wind_direction - course)
    return normalize_degrees(course + correction)


def ground_speed_on_course(course: float, true_airspeed: float, wind_direction: float, wind_speed: float) -> float:
    """Calculate the ground speed for a course and an absolute wind direction.

    Args:
        course: Desired course in degrees.
        true_airspeed: True airspeed (TAS).
        wind_direction: Direction the wind comes from in degrees.
        wind_speed: Wind speed in the same unit as true_airspeed.

    Returns:
        Ground speed in the unit of true_airspeed.

    Raises:
        UnsolvableWindTriangleError: If no heading holds the course.
    """
    wind_angle = wind_direction - course
    correction = wind_correction_angle(true_airspeed, wind_speed, wind_angle)
    return ground_speed(true_airspeed, wind_speed, wind_angle, correction)
