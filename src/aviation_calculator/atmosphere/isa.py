"""ICAO standard atmosphere (ISA) for the troposphere.

This module computes pressure altitude from QNH and the ISA temperature,
pressure and density for a given pressure altitude. Altitudes are in feet,
temperatures in degrees Celsius and pressures in hectopascals; the formulas
themselves work in SI units, so every altitude is converted to meters on the
way in.

The linear lapse-rate model is only valid in the troposphere. Altitudes above
the tropopause (11 000 m, about 36 089 ft) or below the -1000 m floor of the
ICAO tables raise OutOfModelRangeError. Both boundaries are inclusive.

Reference values follow the German Weather Service (DWD) standard atmosphere
sheet: https://www.dwd.de/DE/service/lexikon/begriffe/S/Standardatmosphaere_pdf.pdf
"""

from aviation_calculator.core.errors import InvalidInputError, OutOfModelRangeError
from aviation_calculator.core.logging_system import get_logger
from aviation_calculator.units.conversions import (
    celsius_to_kelvin,
    feet_to_meters,
    meters_to_feet,
)
from aviation_calculator.units.quantities import require_finite

logger = get_logger(__name__)

ISA_TEMPERATURE_K = 288.15
ISA_TEMPERATURE_C = 15.0
ISA_PRESSURE_HPA = 1013.25
TROPOSPHERIC_LAPSE_RATE = 0.0065  # K/m, about 1.98 °C per 1000 ft
SPECIFIC_GAS_CONSTANT = 287.058  # J/(kg·K)
GRAVITATIONAL_ACCELERATION = 9.81  # m/s²

MINIMUM_PRESSURE_ALTITUDE_FT = meters_to_feet(-1_000.0)
TROPOPAUSE_ALTITUDE_FT = meters_to_feet(11_000.0)

# Rule of thumb used by flight manuals for density altitude
DENSITY_ALTITUDE_FT_PER_DEGREE = 118.8

_BAROMETRIC_EXPONENT = GRAVITATIONAL_ACCELERATION / (SPECIFIC_GAS_CONSTANT * TROPOSPHERIC_LAPSE_RATE)


def _check_model_range(pressure_altitude_ft: float) -> float:
    pressure_altitude_ft = require_finite("Pressure altitude", pressure_altitude_ft)
    if not MINIMUM_PRESSURE_ALTITUDE_FT <= pressure_altitude_ft <= TROPOPAUSE_ALTITUDE_FT:
        raise OutOfModelRangeError(
            "pressure altitude",
            pressure_altitude_ft,
            MINIMUM_PRESSURE_ALTITUDE_FT,
            TROPOPAUSE_ALTITUDE_FT,
            unit="ft",
        )
    return pressure_altitude_ft


def pressure_altitude(qnh: float, elevation: float) -> float:
    """Calculate pressure altitude from QNH and field elevation.

    Adds the barometric height difference between QNH and the standard
    pressure of 1013.25 hPa to the elevation. Near standard pressure this
    is roughly 27 ft per hPa: a QNH below 1013.25 hPa raises the pressure
    altitude, a higher QNH lowers it.

    Args:
        qnh: Altimeter setting in hPa. The plausible range is not checked
            here; use Pressure.qnh() to validate user input.
        elevation: Field elevation in feet.

    Returns:
        Pressure altitude in feet.

    Raises:
        InvalidInputError: If qnh is not a positive finite number.

    Examples:
        >>> pressure_altitude(1013.25, 364.0)
        364.0
        >>> round(pressure_altitude(996.0, 364.0), 1)
        838.2
    """
    qnh = require_finite("QNH", qnh)
    elevation = require_finite("Elevation", elevation)
    if qnh <= 0.0:
        raise InvalidInputError(f"QNH must be positive, got {qnh:g} hPa")

    height_m = (
        ISA_TEMPERATURE_K
        / TROPOSPHERIC_LAPSE_RATE
        * (1.0 - (qnh / ISA_PRESSURE_HPA) ** (1.0 / _BAROMETRIC_EXPONENT))
    )
    result = elevation + meters_to_feet(height_m)

    logger.debug("Pressure altitude for QNH %.2f hPa at %.1f ft: %.2f ft", qnh, elevation, result)
    return result


def icao_temperature(pressure_altitude: float) -> float:
    """Get the ISA temperature for a pressure altitude.

    Args:
        pressure_altitude: Pressure altitude in feet.

    Returns:
        Standard temperature in °C.

    Raises:
        OutOfModelRangeError: If the altitude is above the tropopause or
            below the -1000 m floor of the model.

    Examples:
        >>> icao_temperature(0.0)
        15.0
    """
    pressure_altitude = _check_model_range(pressure_altitude)
    return ISA_TEMPERATURE_C - TROPOSPHERIC_LAPSE_RATE * feet_to_meters(pressure_altitude)


def pressure_altitude_for_temperature(temperature: float) -> float:
    """Get the pressure altitude at which the ISA has the given temperature.

    Inverse of icao_temperature() using the same lapse-rate formula.

    Args:
        temperature: ISA temperature in °C.

    Returns:
        Pressure altitude in feet.

    Raises:
        OutOfModelRangeError: If no tropospheric altitude has this
            standard temperature.
    """
    temperature = require_finite("Temperature", temperature)
    altitude_ft = meters_to_feet((ISA_TEMPERATURE_C - temperature) / TROPOSPHERIC_LAPSE_RATE)

    if not MINIMUM_PRESSURE_ALTITUDE_FT <= altitude_ft <= TROPOPAUSE_ALTITUDE_FT:
        raise OutOfModelRangeError(
            "ISA temperature",
            temperature,
            icao_temperature(TROPOPAUSE_ALTITUDE_FT),
            icao_temperature(MINIMUM_PRESSURE_ALTITUDE_FT),
            unit="°C",
        )
    return altitude_ft


def icao_pressure(pressure_altitude: float) -> float:
    """Get the ISA static pressure for a pressure altitude.

    Uses the tropospheric barometric formula p = p0 * (T / T0) ^ (g / (R * L)).

    Args:
        pressure_altitude: Pressure altitude in feet.

    Returns:
        Standard pressure in hPa.

    Raises:
        OutOfModelRangeError: Propagated from icao_temperature().
    """
    temperature_k = celsius_to_kelvin(icao_temperature(pressure_altitude))
    return ISA_PRESSURE_HPA * (temperature_k / ISA_TEMPERATURE_K) ** _BAROMETRIC_EXPONENT


def icao_density(pressure_altitude: float) -> float:
    """Get the ISA air density for a pressure altitude.

    Args:
        pressure_altitude: Pressure altitude in feet.

    Returns:
        Standard density in kg/m³ (about 1.225 at sea level).

    Raises:
        OutOfModelRangeError: Propagated from icao_temperature().
    """
    temperature_k = celsius_to_kelvin(icao_temperature(pressure_altitude))
    pressure_pa = icao_pressure(pressure_altitude) * 100.0
    return pressure_pa / (SPECIFIC_GAS_CONSTANT * temperature_k)


def temperature_deviation(pressure_altitude: float, temperature: float) -> float:
    """Calculate the deviation of the outside air temperature from ISA.

    Args:
        pressure_altitude: Pressure altitude in feet.
        temperature: Outside air temperature in °C.

    Returns:
        Deviation in °C, positive when warmer than standard.

    Raises:
        OutOfModelRangeError: Propagated from icao_temperature().

    Examples:
        >>> temperature_deviation(0.0, 16.0)
        1.0
    """
    temperature = require_finite("Temperature", temperature)
    return temperature - icao_temperature(pressure_altitude)


def density_altitude(pressure_altitude: float, temperature: float) -> float:
    """Approximate density altitude.

    Pressure altitude corrected by 118.8 ft for every °C of deviation
    from the ISA temperature.

    Args:
        pressure_altitude: Pressure altitude in feet.
        temperature: Outside air temperature in °C.

    Returns:
        Density altitude in feet.

    Raises:
        OutOfModelRangeError: Propagated from icao_temperature().
    """
    deviation = temperature_deviation(pressure_altitude, temperature)
    result = pressure_altitude + DENSITY_ALTITUDE_FT_PER_DEGREE * deviation

    logger.debug(
        "Density altitude at PA %.1f ft, OAT %.1f °C (ISA %+.1f): %.1f ft",
        pressure_altitude,
        temperature,
        deviation,
        result,
    )
    return result
