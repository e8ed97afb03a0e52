"""Integration tests for departure planning.

Tests the atmosphere model, the wind triangle and the FK9 performance
tables working together on a realistic departure.
"""

import pytest

from aviation_calculator.atmosphere import density_altitude, icao_temperature, pressure_altitude
from aviation_calculator.core.errors import AviationCalculationError, OutOfModelRangeError
from aviation_calculator.navigation import WindVector, solve_wind_triangle
from aviation_calculator.performance import Engine, GrassSurface, takeoff_distance
from aviation_calculator.units import Altitude, Pressure, Speed, Temperature


class TestDeparturePlanning:
    """Test planning a departure from field data."""

    def test_frankfurt_departure(self) -> None:
        """Test takeoff distance from QNH, elevation and OAT."""
        elevation = Altitude.from_feet(364.0)
        qnh = Pressure.qnh(1013.25)
        oat = Temperature.from_celsius(21.0)

        altitude = pressure_altitude(qnh.hpa, elevation.feet)
        distances = takeoff_distance(Engine.ROTAX_912_ULS, 520.0, altitude, oat.celsius)

        assert altitude == 364.0
        assert distances.takeoff_run_m == pytest.approx(115.52, abs=0.02)
        assert distances.to_50_feet_m == pytest.approx(286.61, abs=0.02)

    def test_low_pressure_lengthens_takeoff(self) -> None:
        """Test a low QNH increases pressure altitude and the takeoff run."""
        elevation = Altitude.from_meters(113.7)
        standard = pressure_altitude(1013.25, elevation.feet)
        low = pressure_altitude(Pressure.qnh(996.0).hpa, elevation.feet)

        grass = GrassSurface(wet=True)
        standard_run = takeoff_distance(Engine.ROTAX_912_ULS, 525.0, standard, 15.0, grass_surface=grass)
        low_run = takeoff_distance(Engine.ROTAX_912_ULS, 525.0, low, 15.0, grass_surface=grass)

        assert Altitude(low).meters == pytest.approx(258.25, abs=0.01)
        assert low_run.takeoff_run_m > standard_run.takeoff_run_m

    def test_density_altitude_of_hot_day(self) -> None:
        """Test density altitude is above pressure altitude when warmer than ISA."""
        altitude = pressure_altitude(1005.0, 1200.0)
        oat = icao_temperature(altitude) + 20.0

        assert density_altitude(altitude, oat) == pytest.approx(altitude + 2376.0)

    def test_high_field_out_of_model(self) -> None:
        """Test a pressure altitude above the tropopause cannot be planned."""
        with pytest.raises(OutOfModelRangeError):
            takeoff_distance(Engine.ROTAX_912_ULS, 525.0, 37000.0, 15.0)


class TestCrossCountryLeg:
    """Test the wind triangle with typed speeds."""

    def test_leg_with_metric_wind(self) -> None:
        """Test a leg planned with a wind forecast in km/h."""
        true_airspeed = Speed.from_knots(100.0)
        wind_speed = Speed.from_kilometers_per_hour(23.0 * 1.852)

        solution = solve_wind_triangle(320.0, true_airspeed.knots, WindVector(90.0, wind_speed.knots))

        assert solution.heading == pytest.approx(330.1479291050075, abs=1e-6)
        assert solution.ground_speed < true_airspeed.knots + wind_speed.knots

    def test_all_domain_errors_share_a_base(self) -> None:
        """Test callers can catch every calculation error at once."""
        with pytest.raises(AviationCalculationError):
            solve_wind_triangle(0.0, 60.0, WindVector(90.0, 80.0))

        with pytest.raises(AviationCalculationError):
            takeoff_distance(Engine.ROTAX_912_UL, 600.0, 0.0, 15.0)
