"""Linear interpolation over published performance tables.

Flight manuals publish performance figures at a handful of reference points.
This module looks up values between those points by linear interpolation
along one axis (PerformanceTable) or bilinear interpolation along two axes
(PerformanceGrid, e.g. density altitude x weight).

Lookups outside the published range raise OutOfTableRangeError; the tables
are never extrapolated. Table arrays are read-only once built, so a table can
be shared freely as module-level constant data.

Typical usage example:
    from aviation_calculator.performance.interpolation import PerformanceTable, interpolate

    takeoff_run = PerformanceTable(axis=[472.5, 525.0, 600.0], values=[100.0, 128.0, 153.0], name="mass")
    distance = interpolate(takeoff_run, 550.0)
"""

from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

from aviation_calculator.core.errors import InvalidTableError, OutOfTableRangeError
from aviation_calculator.core.logging_system import get_logger
from aviation_calculator.units.quantities import require_finite

logger = get_logger(__name__)


def _frozen_array(values: npt.ArrayLike, label: str) -> npt.NDArray[np.float64]:
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidTableError(f"{label} must contain only numbers: {e}") from e

    if not np.all(np.isfinite(array)):
        raise InvalidTableError(f"{label} contains non-finite values")

    array.flags.writeable = False
    return array


def _check_axis(axis: npt.NDArray[np.float64], label: str) -> None:
    if axis.ndim != 1 or axis.size < 2:
        raise InvalidTableError(f"{label} axis needs at least two reference points")

    if not np.all(np.diff(axis) > 0.0):
        raise InvalidTableError(f"{label} axis must be strictly increasing")


@dataclass(frozen=True, eq=False)
class PerformanceTable:
    """One-dimensional reference table.

    Attributes:
        axis: Strictly increasing independent variable (e.g., mass in kg).
        values: Published figure for each axis point.
        name: Axis name used in error messages.

    Examples:
        >>> table = PerformanceTable([0.0, 1000.0, 2000.0], [250.0, 275.0, 310.0], name="density altitude")
        >>> interpolate(table, 1500.0)
        292.5
    """

    axis: npt.NDArray[np.float64]
    values: npt.NDArray[np.float64]
    name: str = field(default="x")

    def __post_init__(self) -> None:
        axis = _frozen_array(self.axis, f"{self.name} axis")
        values = _frozen_array(self.values, f"{self.name} values")

        _check_axis(axis, self.name)
        if values.shape != axis.shape:
            raise InvalidTableError(
                f"{self.name} table has {axis.size} axis points but {values.size} values"
            )

        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "values", values)

    @property
    def minimum(self) -> float:
        return float(self.axis[0])

    @property
    def maximum(self) -> float:
        return float(self.axis[-1])


@dataclass(frozen=True, eq=False)
class PerformanceGrid:
    """Two-dimensional reference table.

    values[i][j] is the figure published for row_axis[i] and column_axis[j].

    Attributes:
        row_axis: Strictly increasing first variable (e.g., density altitude in ft).
        column_axis: Strictly increasing second variable (e.g., weight in kg).
        values: Matrix of published figures, one row per row_axis point.
        row_name: Row axis name used in error messages.
        column_name: Column axis name used in error messages.
    """

    row_axis: npt.NDArray[np.float64]
    column_axis: npt.NDArray[np.float64]
    values: npt.NDArray[np.float64]
    row_name: str = field(default="row")
    column_name: str = field(default="column")

    def __post_init__(self) -> None:
        row_axis = _frozen_array(self.row_axis, f"{self.row_name} axis")
        column_axis = _frozen_array(self.column_axis, f"{self.column_name} axis")
        values = _frozen_array(self.values, "grid values")

        _check_axis(row_axis, self.row_name)
        _check_axis(column_axis, self.column_name)
        if values.shape != (row_axis.size, column_axis.size):
            raise InvalidTableError(
                f"Grid values have shape {values.shape}, expected ({row_axis.size}, {column_axis.size})"
            )

        object.__setattr__(self, "row_axis", row_axis)
        object.__setattr__(self, "column_axis", column_axis)
        object.__setattr__(self, "values", values)

    def row(self, index: int) -> PerformanceTable:
        """Get one row of the grid as a table along the column axis."""
        return PerformanceTable(self.column_axis, self.values[index], name=self.column_name)


def _bracket(axis: npt.NDArray[np.float64], x: float, name: str) -> tuple[int, int, float]:
    """Find the reference points around x.

    Returns:
        Tuple of (lower index, upper index, fraction of the way from lower
        to upper). Both indices are equal on an exact match.
    """
    x = require_finite(name.capitalize(), x)
    minimum, maximum = float(axis[0]), float(axis[-1])
    if x < minimum or x > maximum:
        raise OutOfTableRangeError(name, x, minimum, maximum)

    upper = int(np.searchsorted(axis, x, side="left"))
    if axis[upper] == x:
        return upper, upper, 0.0

    lower = upper - 1
    return lower, upper, float((x - axis[lower]) / (axis[upper] - axis[lower]))


def _lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


def interpolate(table: PerformanceTable, x: float) -> float:
    """Look up a value in a one-dimensional table.

    Args:
        table: Reference table.
        x: Lookup value on the table axis.

    Returns:
        The tabulated value on an exact match, otherwise the linear
        interpolation between the two neighbouring reference points.

    Raises:
        OutOfTableRangeError: If x lies below the first or above the last
            reference point.
    """
    lower, upper, fraction = _bracket(table.axis, x, table.name)
    if lower == upper:
        return float(table.values[lower])

    return _lerp(float(table.values[lower]), float(table.values[upper]), fraction)


def interpolate_2d(grid: PerformanceGrid, row: float, column: float) -> float:
    """Look up a value in a two-dimensional table by bilinear interpolation.

    Interpolates along the column axis in the two bracketing rows, then
    between those rows. Each axis is range-checked on its own.

    Args:
        grid: Reference grid.
        row: Lookup value on the row axis.
        column: Lookup value on the column axis.

    Returns:
        Interpolated value.

    Raises:
        OutOfTableRangeError: If either lookup value lies outside its axis.
    """
    lower_row, upper_row, row_fraction = _bracket(grid.row_axis, row, grid.row_name)
    # Validate the column axis before touching any row
    _bracket(grid.column_axis, column, grid.column_name)

    lower_value = interpolate(grid.row(lower_row), column)
    if lower_row == upper_row:
        return lower_value

    upper_value = interpolate(grid.row(upper_row), column)
    result = _lerp(lower_value, upper_value, row_fraction)

    logger.debug(
        "Grid lookup %s=%.1f, %s=%.1f: %.2f", grid.row_name, row, grid.column_name, column, result
    )
    return result
