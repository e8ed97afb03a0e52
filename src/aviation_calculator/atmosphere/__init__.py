"""Atmosphere model based on the ICAO standard atmosphere.

Typical usage:
    from aviation_calculator.atmosphere import icao_temperature, pressure_altitude

    altitude = pressure_altitude(qnh=996.0, elevation=364.0)
    standard_temperature = icao_temperature(altitude)
"""

from aviation_calculator.atmosphere.isa import (
    ISA_PRESSURE_HPA,
    ISA_TEMPERATURE_C,
    MINIMUM_PRESSURE_ALTITUDE_FT,
    TROPOPAUSE_ALTITUDE_FT,
    density_altitude,
    icao_density,
    icao_pressure,
    icao_temperature,
    pressure_altitude,
    pressure_altitude_for_temperature,
    temperature_deviation,
)

__all__ = [
    "ISA_PRESSURE_HPA",
    "ISA_TEMPERATURE_C",
    "MINIMUM_PRESSURE_ALTITUDE_FT",
    "TROPOPAUSE_ALTITUDE_FT",
    "density_altitude",
    "icao_density",
    "icao_pressure",
    "icao_temperature",
    "pressure_altitude",
    "pressure_altitude_for_temperature",
    "temperature_deviation",
]
