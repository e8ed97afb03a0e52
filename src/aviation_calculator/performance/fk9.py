"""Takeoff performance for the FK9 Mk VI.

Calculations are based on the approved flight manual as well as the
FSM 3/75 "Einflüsse auf die Länge der Startstrecke". Reference distances are
interpolated by mass from the manual tables, the manual's 20 % safety margin
is removed, and corrections for pressure altitude, temperature, slope, grass
and surface condition are applied.

The tables and correction factors are loaded once from the packaged
fk9.yaml and are read-only afterwards.

Typical usage example:
    from aviation_calculator.performance.fk9 import Engine, GrassSurface, takeoff_distance

    distances = takeoff_distance(
        Engine.ROTAX_912_ULS,
        mass=525.0,
        pressure_altitude=364.0,
        temperature=21.0,
        grass_surface=GrassSurface(wet=True),
    )
    print(f"Takeoff run {distances.takeoff_run_m:.0f} m")
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from aviation_calculator.atmosphere.isa import temperature_deviation
from aviation_calculator.core.config import ConfigLoader
from aviation_calculator.core.errors import OutOfModelRangeError
from aviation_calculator.core.logging_system import get_logger
from aviation_calculator.performance.interpolation import PerformanceTable, interpolate
from aviation_calculator.units.conversions import round_to
from aviation_calculator.units.quantities import require_finite

logger = get_logger(__name__)


class Engine(Enum):
    """Engine variants with published takeoff tables."""

    ROTAX_912_UL = "rotax_912_ul"
    ROTAX_912_ULS = "rotax_912_uls"


class SurfaceCondition(Enum):
    """General runway surface condition."""

    INCONSPICUOUS = "inconspicuous"
    SLUSH = "slush"
    SNOW = "snow"
    POWDER_SNOW = "powder_snow"


@dataclass(frozen=True)
class GrassSurface:
    """Condition of a grass runway.

    Attributes:
        wet: Wet grass
        soft_ground: Soft or waterlogged ground
        damaged_turf: Damaged turf
        high_grass: Grass higher than usual
    """

    wet: bool = False
    soft_ground: bool = False
    damaged_turf: bool = False
    high_grass: bool = False


@dataclass(frozen=True)
class TakeoffDistances:
    """Takeoff distances in meters.

    Attributes:
        takeoff_run_m: Ground roll until liftoff
        to_50_feet_m: Distance until 50 ft above the runway
    """

    takeoff_run_m: float
    to_50_feet_m: float


@dataclass(frozen=True, eq=False)
class TakeoffTables:
    """Flight manual tables for one engine, keyed by mass in kg."""

    takeoff_run: PerformanceTable
    to_50_feet: PerformanceTable

    @property
    def minimum_mass(self) -> float:
        return self.takeoff_run.minimum

    @property
    def maximum_mass(self) -> float:
        return self.takeoff_run.maximum


def _load_takeoff_tables(data: ConfigLoader) -> MappingProxyType:
    tables = {}
    for engine in Engine:
        section = data.get_section(f"engines.{engine.value}")
        tables[engine] = TakeoffTables(
            takeoff_run=PerformanceTable(section["mass_kg"], section["takeoff_run_m"], name="mass"),
            to_50_feet=PerformanceTable(section["mass_kg"], section["to_50_feet_m"], name="mass"),
        )
    return MappingProxyType(tables)


def _load_altitude_bands(data: ConfigLoader) -> tuple[tuple[float | None, float], ...]:
    return tuple(
        (band["above_ft"], float(band["per_1000_ft"]))
        for band in data.get("corrections.pressure_altitude", [])
    )


_DATA = ConfigLoader.load_resource("fk9.yaml")

TAKEOFF_TABLES = _load_takeoff_tables(_DATA)
FLIGHT_MANUAL_MARGIN = float(_DATA.get("flight_manual_margin", 1.0))

MIN_TEMPERATURE_C = float(_DATA.get("limits.min_temperature_c"))
MAX_TEMPERATURE_C = float(_DATA.get("limits.max_temperature_c"))
MAX_SLOPE_PERCENT = float(_DATA.get("limits.max_slope_percent"))

_ALTITUDE_BANDS = _load_altitude_bands(_DATA)
_TEMPERATURE_PER_DEGREE = float(_DATA.get("corrections.temperature_per_degree"))
_SLOPE_PER_PERCENT = float(_DATA.get("corrections.slope_per_percent"))
_GRASS_FACTORS = MappingProxyType(
    {key: float(value) for key, value in _DATA.get_section("corrections.grass").items()}
)
_SURFACE_FACTORS = MappingProxyType(
    {
        condition: float(_DATA.get(f"corrections.surface_condition.{condition.value}"))
        for condition in SurfaceCondition
    }
)


def takeoff_distance(
    engine: Engine,
    mass: float,
    pressure_altitude: float,
    temperature: float,
    slope: float = 0.0,
    grass_surface: GrassSurface | None = None,
    surface_condition: SurfaceCondition = SurfaceCondition.INCONSPICUOUS,
) -> TakeoffDistances:
    """Calculate takeoff run and distance to 50 ft for the FK9 Mk VI.

    Args:
        engine: Installed engine.
        mass: Takeoff mass in kg.
        pressure_altitude: Pressure altitude of the runway in ft.
        temperature: Outside air temperature on the runway in °C.
        slope: Runway slope in percent, positive uphill.
        grass_surface: Grass runway condition, None for a paved runway.
        surface_condition: General condition of the runway.

    Returns:
        TakeoffDistances rounded to centimeters.

    Raises:
        OutOfModelRangeError: If temperature, slope or pressure altitude
            lie outside the range where the corrections make sense.
        OutOfTableRangeError: If the mass lies outside the flight manual table.

    Examples:
        >>> takeoff_distance(Engine.ROTAX_912_ULS, 472.5, 0.0, 15.0, grass_surface=GrassSurface())
        TakeoffDistances(takeoff_run_m=100.0, to_50_feet_m=225.0)
    """
    mass = require_finite("Mass", mass)
    temperature = require_finite("Temperature", temperature)
    slope = require_finite("Slope", slope)

    if not MIN_TEMPERATURE_C <= temperature <= MAX_TEMPERATURE_C:
        raise OutOfModelRangeError("temperature", temperature, MIN_TEMPERATURE_C, MAX_TEMPERATURE_C, unit="°C")

    if not -MAX_SLOPE_PERCENT <= slope <= MAX_SLOPE_PERCENT:
        raise OutOfModelRangeError("slope", slope, -MAX_SLOPE_PERCENT, MAX_SLOPE_PERCENT, unit="%")

    # A steep downhill slope would otherwise shrink the distance to zero or below
    if 1.0 + _SLOPE_PER_PERCENT * slope <= 0.0:
        raise OutOfModelRangeError("slope", slope, -1.0 / _SLOPE_PER_PERCENT, MAX_SLOPE_PERCENT, unit="%")

    tables = TAKEOFF_TABLES[engine]
    takeoff_run = interpolate(tables.takeoff_run, mass) / FLIGHT_MANUAL_MARGIN
    to_50_feet = interpolate(tables.to_50_feet, mass) / FLIGHT_MANUAL_MARGIN

    distances = TakeoffDistances(
        takeoff_run_m=apply_corrections(
            takeoff_run, pressure_altitude, temperature, slope, grass_surface, surface_condition
        ),
        to_50_feet_m=apply_corrections(
            to_50_feet, pressure_altitude, temperature, slope, grass_surface, surface_condition
        ),
    )

    logger.debug(
        "FK9 %s takeoff at %.1f kg, PA %.0f ft, OAT %.1f °C: run %.2f m, 50 ft %.2f m",
        engine.value,
        mass,
        pressure_altitude,
        temperature,
        distances.takeoff_run_m,
        distances.to_50_feet_m,
    )
    return distances


def apply_corrections(
    distance: float,
    pressure_altitude: float,
    temperature: float,
    slope: float,
    grass_surface: GrassSurface | None,
    surface_condition: SurfaceCondition,
) -> float:
    """Apply all FSM 3/75 corrections to a reference distance.

    Args:
        distance: Reference distance without safety margin in meters.
        pressure_altitude: Pressure altitude in ft.
        temperature: Outside air temperature in °C.
        slope: Runway slope in percent.
        grass_surface: Grass runway condition or None.
        surface_condition: General condition of the runway.

    Returns:
        Corrected distance in meters, rounded to 2 decimals.

    Raises:
        OutOfModelRangeError: If the pressure altitude lies outside the
            standard atmosphere model.
    """
    distance = apply_pressure_altitude_correction(distance, pressure_altitude)
    distance = apply_temperature_correction(distance, temperature_deviation_for_correction(pressure_altitude, temperature))
    distance *= 1.0 + _SLOPE_PER_PERCENT * slope

    if grass_surface is not None:
        distance = apply_grass_surface_correction(distance, grass_surface)

    return round_to(distance * _SURFACE_FACTORS[surface_condition], 2)


def apply_pressure_altitude_correction(distance: float, pressure_altitude: float) -> float:
    """Lengthen a distance for pressure altitude.

    Negative pressure altitudes never shorten the distance.
    """
    multiplier = 0.0
    for above_ft, per_1000_ft in _ALTITUDE_BANDS:
        if above_ft is None or pressure_altitude > above_ft:
            multiplier = per_1000_ft
            break

    return distance * max(1.0 + multiplier * (pressure_altitude / 1000.0), 1.0)


def temperature_deviation_for_correction(pressure_altitude: float, temperature: float) -> float:
    """ISA deviation used for the temperature correction.

    Temperatures below 0 °C are counted as 0 °C, so frost never shortens
    the takeoff below the freezing-point figure.
    """
    return temperature_deviation(pressure_altitude, max(temperature, 0.0))


def apply_temperature_correction(distance: float, deviation: float) -> float:
    return distance * (1.0 + _TEMPERATURE_PER_DEGREE * deviation)


def apply_grass_surface_correction(distance: float, grass_surface: GrassSurface) -> float:
    distance *= _GRASS_FACTORS["base"]

    if grass_surface.wet:
        distance *= _GRASS_FACTORS["wet"]

    if grass_surface.soft_ground:
        distance *= _GRASS_FACTORS["soft_ground"]

    if grass_surface.damaged_turf:
        distance *= _GRASS_FACTORS["damaged_turf"]

    if grass_surface.high_grass:
        distance *= _GRASS_FACTORS["high_grass"]

    return distance
