"""Navigation solver for the wind triangle.

Typical usage:
    from aviation_calculator.navigation import WindVector, solve_wind_triangle

    solution = solve_wind_triangle(course=320.0, true_airspeed=100.0, wind=WindVector(90.0, 23.0))
    heading = solution.heading
"""

from aviation_calculator.navigation.wind_triangle import (
    WindSide,
    WindTriangleSolution,
    WindVector,
    ground_speed,
    ground_speed_on_course,
    heading,
    resultant_heading,
    solve_wind_triangle,
    wind_correction_angle,
    wind_side,
)

__all__ = [
    "WindSide",
    "WindTriangleSolution",
    "WindVector",
    "ground_speed",
    "ground_speed_on_course",
    "heading",
    "resultant_heading",
    "solve_wind_triangle",
    "wind_correction_angle",
    "wind_side",
]
