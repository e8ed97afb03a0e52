"""Aircraft performance calculations.

This module provides:
- Linear and bilinear interpolation over published performance tables
- FK9 Mk VI takeoff distances (takeoff run and distance to 50 ft)
"""

from aviation_calculator.performance.fk9 import (
    Engine,
    GrassSurface,
    SurfaceCondition,
    TakeoffDistances,
    takeoff_distance,
)
from aviation_calculator.performance.interpolation import (
    PerformanceGrid,
    PerformanceTable,
    interpolate,
    interpolate_2d,
)

__all__ = [
    "Engine",
    "GrassSurface",
    "PerformanceGrid",
    "PerformanceTable",
    "SurfaceCondition",
    "TakeoffDistances",
    "interpolate",
    "interpolate_2d",
    "takeoff_distance",
]
