"""Tests for FK9 Mk VI takeoff performance."""

import pytest

from aviation_calculator.core.errors import OutOfModelRangeError, OutOfTableRangeError
from aviation_calculator.performance.fk9 import (
    FLIGHT_MANUAL_MARGIN,
    TAKEOFF_TABLES,
    Engine,
    GrassSurface,
    SurfaceCondition,
    TakeoffDistances,
    apply_corrections,
    apply_pressure_altitude_correction,
    apply_temperature_correction,
    takeoff_distance,
    temperature_deviation_for_correction,
)

GRASS = GrassSurface()
WET_GRASS = GrassSurface(wet=True)


def uls(mass: float, **kwargs) -> TakeoffDistances:
    """Takeoff distances for the 912 ULS on dry grass at MSL and ISA, unless overridden."""
    arguments = {
        "pressure_altitude": 0.0,
        "temperature": 15.0,
        "grass_surface": GRASS,
    }
    arguments.update(kwargs)
    return takeoff_distance(Engine.ROTAX_912_ULS, mass, **arguments)


class TestTakeoffTables:
    """Test the packaged flight manual data."""

    def test_tables_for_every_engine(self) -> None:
        """Test each engine has takeoff tables."""
        assert set(TAKEOFF_TABLES) == set(Engine)

    def test_mass_ranges(self) -> None:
        """Test the mass range published for each engine."""
        assert TAKEOFF_TABLES[Engine.ROTAX_912_UL].minimum_mass == 472.5
        assert TAKEOFF_TABLES[Engine.ROTAX_912_UL].maximum_mass == 540.0
        assert TAKEOFF_TABLES[Engine.ROTAX_912_ULS].minimum_mass == 472.5
        assert TAKEOFF_TABLES[Engine.ROTAX_912_ULS].maximum_mass == 600.0

    def test_tables_are_read_only(self) -> None:
        """Test the shared tables cannot be replaced."""
        with pytest.raises(TypeError):
            TAKEOFF_TABLES[Engine.ROTAX_912_UL] = TAKEOFF_TABLES[Engine.ROTAX_912_ULS]  # type: ignore[index]

    def test_flight_manual_margin(self) -> None:
        """Test the manual figures carry a 20 % margin."""
        assert FLIGHT_MANUAL_MARGIN == 1.2


class TestTakeoffDistanceReference:
    """Test takeoff distances at the flight manual reference conditions."""

    def test_lightest_mass(self) -> None:
        """Test grass at MSL and ISA reproduces the manual figures."""
        assert uls(472.5) == TakeoffDistances(takeoff_run_m=100.0, to_50_feet_m=225.0)

    def test_ul_engine(self) -> None:
        """Test the 912 UL table is used for the UL engine."""
        distances = takeoff_distance(Engine.ROTAX_912_UL, 472.5, 0.0, 15.0, grass_surface=GRASS)
        assert distances == TakeoffDistances(takeoff_run_m=106.0, to_50_feet_m=265.0)

    def test_tabulated_mass(self) -> None:
        """Test a tabulated mass returns the stored figures."""
        assert uls(525.0) == TakeoffDistances(takeoff_run_m=128.0, to_50_feet_m=320.0)

    def test_heaviest_mass(self) -> None:
        """Test the upper end of the table is inclusive."""
        assert uls(600.0) == TakeoffDistances(takeoff_run_m=153.0, to_50_feet_m=375.0)

    def test_interpolated_mass(self) -> None:
        """Test interpolation between 540 kg and 570 kg."""
        assert uls(550.0) == TakeoffDistances(takeoff_run_m=137.67, to_50_feet_m=342.67)

    def test_paved_runway_is_shorter(self) -> None:
        """Test the grass base factor is skipped without a grass surface."""
        distances = uls(472.5, grass_surface=None)

        assert distances.takeoff_run_m == pytest.approx(83.33)
        assert distances.to_50_feet_m == pytest.approx(187.5)


class TestTakeoffDistanceCorrections:
    """Test the individual corrections through the public entry point."""

    def test_cold_day(self) -> None:
        """Test 1 % shorter per °C below ISA."""
        assert uls(525.0, temperature=3.0) == TakeoffDistances(takeoff_run_m=112.64, to_50_feet_m=281.6)

    def test_frost_counts_as_freezing(self) -> None:
        """Test temperatures below 0 °C are treated as 0 °C."""
        assert uls(600.0, temperature=-90.0) == TakeoffDistances(takeoff_run_m=130.05, to_50_feet_m=318.75)
        assert uls(600.0, temperature=-90.0) == uls(600.0, temperature=0.0)

    def test_hot_day(self) -> None:
        """Test the hottest temperature of the model."""
        assert uls(600.0, temperature=70.0) == TakeoffDistances(takeoff_run_m=237.15, to_50_feet_m=581.25)

    def test_downhill_slope(self) -> None:
        """Test 10 % shorter per % downhill."""
        assert uls(525.0, slope=-2.2) == TakeoffDistances(takeoff_run_m=99.84, to_50_feet_m=249.6)

    def test_uphill_slope(self) -> None:
        """Test 10 % longer per % uphill."""
        assert uls(525.0, slope=2.0) == TakeoffDistances(takeoff_run_m=153.6, to_50_feet_m=384.0)

    def test_pressure_altitude(self) -> None:
        """Test the altitude correction combined with the ISA temperature deviation."""
        distances = uls(472.5, pressure_altitude=3000.0)

        assert distances.takeoff_run_m == pytest.approx(147.26, abs=0.02)
        assert distances.to_50_feet_m == pytest.approx(331.33, abs=0.02)

    def test_minimum_pressure_altitude(self) -> None:
        """Test the lowest altitude of the model only applies the temperature correction."""
        distances = uls(600.0, pressure_altitude=-3280.8)

        assert distances.takeoff_run_m == pytest.approx(143.05, abs=0.02)
        assert distances.to_50_feet_m == pytest.approx(350.63, abs=0.02)

    def test_wet_grass(self) -> None:
        """Test wet grass adds 10 %."""
        assert uls(600.0, grass_surface=WET_GRASS) == TakeoffDistances(takeoff_run_m=168.3, to_50_feet_m=412.5)

    def test_wet_grass_on_soft_ground(self) -> None:
        """Test grass factors multiply."""
        distances = uls(600.0, grass_surface=GrassSurface(wet=True, soft_ground=True))

        assert distances.takeoff_run_m == pytest.approx(252.45)
        assert distances.to_50_feet_m == pytest.approx(618.75)

    @pytest.mark.parametrize(
        "condition,expected",
        [
            (SurfaceCondition.INCONSPICUOUS, TakeoffDistances(takeoff_run_m=100.0, to_50_feet_m=225.0)),
            (SurfaceCondition.SLUSH, TakeoffDistances(takeoff_run_m=130.0, to_50_feet_m=292.5)),
            (SurfaceCondition.SNOW, TakeoffDistances(takeoff_run_m=150.0, to_50_feet_m=337.5)),
            (SurfaceCondition.POWDER_SNOW, TakeoffDistances(takeoff_run_m=125.0, to_50_feet_m=281.25)),
        ],
    )
    def test_surface_condition(self, condition: SurfaceCondition, expected: TakeoffDistances) -> None:
        """Test the surface condition factors."""
        assert uls(472.5, surface_condition=condition) == expected

    def test_everything_combined(self) -> None:
        """Test all corrections together."""
        distances = uls(
            600.0,
            pressure_altitude=2000.5,
            temperature=-2.0,
            slope=3.0,
            grass_surface=GrassSurface(wet=True, soft_ground=True, damaged_turf=True),
        )

        assert distances.takeoff_run_m == pytest.approx(485.6, abs=0.1)
        assert distances.to_50_feet_m == pytest.approx(1190.2, abs=0.1)

    def test_high_grass(self) -> None:
        """Test high grass adds 20 % on top of the other grass factors."""
        short = uls(540.0, grass_surface=GrassSurface(damaged_turf=True))
        long = uls(540.0, grass_surface=GrassSurface(damaged_turf=True, high_grass=True))

        assert long.takeoff_run_m == pytest.approx(short.takeoff_run_m * 1.2, abs=0.02)

    def test_results_are_rounded(self) -> None:
        """Test distances are rounded to centimeters."""
        distances = uls(550.0, pressure_altitude=1234.5, temperature=17.3, slope=0.7)

        assert distances.takeoff_run_m == round(distances.takeoff_run_m, 2)
        assert distances.to_50_feet_m == round(distances.to_50_feet_m, 2)


class TestTakeoffDistanceFrankfurt:
    """Test a realistic departure."""

    def test_frankfurt_paved(self) -> None:
        """Test 520 kg from a paved runway at 364 ft and 21 °C."""
        distances = takeoff_distance(Engine.ROTAX_912_ULS, 520.0, pressure_altitude=364.0, temperature=21.0)

        assert distances.takeoff_run_m == pytest.approx(115.52, abs=0.02)
        assert distances.to_50_feet_m == pytest.approx(286.61, abs=0.02)


class TestTakeoffDistanceErrors:
    """Test inputs outside the data and the model."""

    def test_mass_below_table_raises(self) -> None:
        """Test no extrapolation below the lightest mass."""
        with pytest.raises(OutOfTableRangeError, match="Mass 472 is below the minimum available data \\(472.5\\)"):
            uls(472.0)

    def test_mass_above_table_raises(self) -> None:
        """Test no extrapolation above the heaviest mass."""
        with pytest.raises(OutOfTableRangeError, match="above the maximum available data \\(600\\)"):
            uls(600.1)

    def test_ul_mass_above_table_raises(self) -> None:
        """Test the UL table ends at 540 kg."""
        with pytest.raises(OutOfTableRangeError):
            takeoff_distance(Engine.ROTAX_912_UL, 570.0, 0.0, 15.0)

    @pytest.mark.parametrize("temperature", [-90.1, 70.1])
    def test_temperature_out_of_model_raises(self, temperature: float) -> None:
        """Test temperatures outside -90..70 °C are rejected."""
        with pytest.raises(OutOfModelRangeError, match="temperature"):
            uls(525.0, temperature=temperature)

    @pytest.mark.parametrize("slope", [-25.1, 25.1])
    def test_slope_out_of_model_raises(self, slope: float) -> None:
        """Test slopes steeper than 25 % are rejected."""
        with pytest.raises(OutOfModelRangeError, match="slope"):
            uls(525.0, slope=slope)

    def test_slope_that_cancels_the_distance_raises(self) -> None:
        """Test a downhill slope may not shrink the distance to nothing."""
        with pytest.raises(OutOfModelRangeError, match="below the minimum of the model \\(-10 %\\)"):
            uls(525.0, slope=-12.0)

    def test_slope_at_the_cancelling_limit_raises(self) -> None:
        """Test a slope exactly at the exclusive limit is not reported as below it."""
        with pytest.raises(OutOfModelRangeError, match="outside the valid range of the model \\(-10 % to 25 %\\)"):
            uls(525.0, slope=-10.0)

    @pytest.mark.parametrize("pressure_altitude", [-5000.0, 40000.0])
    def test_pressure_altitude_out_of_model_raises(self, pressure_altitude: float) -> None:
        """Test the ISA deviation is unavailable outside the troposphere."""
        with pytest.raises(OutOfModelRangeError, match="pressure altitude"):
            uls(525.0, pressure_altitude=pressure_altitude)


class TestCorrectionHelpers:
    """Test the correction steps against FSM 3/75 examples."""

    @pytest.mark.parametrize(
        "distance,pressure_altitude,temperature,grass_surface,condition,expected",
        [
            (316.0, 600.0, -3.0, None, SurfaceCondition.SNOW, 433.05),
            (465.0, 2000.0, 1.0, WET_GRASS, SurfaceCondition.SLUSH, 904.49),
            (465.0, 1150.0, 35.0, None, SurfaceCondition.INCONSPICUOUS, 653.60),
            (465.0, 600.0, 28.0, WET_GRASS, SurfaceCondition.SLUSH, 965.83),
        ],
    )
    def test_apply_corrections(
        self,
        distance: float,
        pressure_altitude: float,
        temperature: float,
        grass_surface: GrassSurface | None,
        condition: SurfaceCondition,
        expected: float,
    ) -> None:
        """Test the full correction chain."""
        result = apply_corrections(distance, pressure_altitude, temperature, 0.0, grass_surface, condition)
        assert result == pytest.approx(expected, abs=0.05)

    @pytest.mark.parametrize(
        "pressure_altitude,expected",
        [
            (-1000.0, 465.0),
            (0.0, 465.0),
            (600.0, 492.9),
            (1000.0, 511.5),
            (2000.0, 585.9),
            (3000.0, 646.35),
            (4000.0, 799.8),
        ],
    )
    def test_pressure_altitude_bands(self, pressure_altitude: float, expected: float) -> None:
        """Test 10 %, 13 % and 18 % per 1000 ft, never below the sea level figure."""
        assert apply_pressure_altitude_correction(465.0, pressure_altitude) == pytest.approx(expected)

    @pytest.mark.parametrize("deviation,expected", [(-10.0, 108.0), (0.0, 120.0), (10.0, 132.0)])
    def test_temperature_correction(self, deviation: float, expected: float) -> None:
        """Test 1 % per °C of ISA deviation."""
        assert apply_temperature_correction(120.0, deviation) == pytest.approx(expected)

    def test_frost_deviation(self) -> None:
        """Test the deviation uses 0 °C for temperatures below freezing."""
        assert temperature_deviation_for_correction(600.0, -3.0) == temperature_deviation_for_correction(600.0, 0.0)
        assert temperature_deviation_for_correction(0.0, 20.0) == pytest.approx(5.0)
