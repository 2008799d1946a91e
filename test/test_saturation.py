"""
Unit tests for SaturationTable

Tests boundary clamping, interpolation between table points, monotonicity,
strict mode and table integrity checks.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging

import numpy as np
import pytest

from app_coso4.core.errors import TableIntegrityError, TableRangeError
from app_coso4.core.saturation import SaturationTable, get_saturation_table
from app_coso4.core.tables import STEAM_TABLE


@pytest.fixture
def table():
    """Fixture providing the default (clamping) saturation table."""
    return SaturationTable()


@pytest.fixture
def strict_table():
    """Fixture providing a strict saturation table."""
    return SaturationTable(strict=True)


class TestSaturationTableData:
    """Test the embedded steam data."""

    def test_table_size(self, table):
        """The embedded table holds 176 points."""
        assert len(table) == 176
        assert len(STEAM_TABLE) == 176

    def test_table_range(self, table):
        """Table covers 0.001-3.7797 MPa and 6.69-247 °C."""
        assert table.pressure_range == (0.001, 3.7797)
        assert table.temperature_range == (6.69, 247.0)

    def test_shared_instance(self):
        """get_saturation_table() returns the same non-strict instance."""
        assert get_saturation_table() is get_saturation_table()
        assert not get_saturation_table().strict


class TestTemperatureToPressure:
    """Test temperature -> pressure lookups."""

    def test_clamp_below_minimum(self, table):
        """Below 6.69 °C the first pressure is returned exactly."""
        assert table.temperature_to_pressure(5.0) == 0.001

    def test_clamp_above_maximum(self, table):
        """Above 247 °C the last pressure is returned exactly."""
        assert table.temperature_to_pressure(300.0) == 3.7797

    def test_first_point_exact(self, table):
        """The first table temperature maps to the first pressure."""
        assert table.temperature_to_pressure(6.69) == 0.001

    def test_interior_table_point(self, table):
        """An interior table temperature gives its tabulated pressure."""
        assert table.temperature_to_pressure(100.0) == pytest.approx(0.1013, abs=1e-12)
        assert table.temperature_to_pressure(120.0) == pytest.approx(0.1985, abs=1e-12)

    def test_midpoint_interpolation(self, table):
        """Halfway between 43.41 °C and 45.45 °C gives the mean pressure."""
        assert table.temperature_to_pressure(44.43) == pytest.approx(0.0095, rel=1e-9)

    def test_linear_ratio(self, table):
        """Interpolation uses the normalized position in the bracket."""
        t = 44.51650324
        expected = 0.009 + (t - 43.41) / (45.45 - 43.41) * (0.01 - 0.009)
        assert table.temperature_to_pressure(t) == pytest.approx(expected, rel=1e-12)

    def test_monotonic(self, table):
        """Pressure never decreases as temperature increases."""
        temps = np.linspace(0.0, 260.0, 2601)
        pressures = [table.temperature_to_pressure(t) for t in temps]
        assert all(b >= a for a, b in zip(pressures, pressures[1:]))

    def test_clamp_is_logged(self, table, caplog):
        """Clamping emits a warning."""
        with caplog.at_level(logging.WARNING, logger="app_coso4.core.saturation"):
            table.temperature_to_pressure(1.0)
        assert "clamped" in caplog.text

    def test_nan_rejected(self, table):
        """NaN input raises ValueError."""
        with pytest.raises(ValueError, match="NaN"):
            table.temperature_to_pressure(float("nan"))


class TestPressureToTemperature:
    """Test pressure -> temperature lookups."""

    def test_clamp_below_minimum(self, table):
        assert table.pressure_to_temperature(0.0005) == 6.69

    def test_clamp_above_maximum(self, table):
        assert table.pressure_to_temperature(10.0) == 247.0

    def test_atmospheric(self, table):
        """0.1013 MPa is 100 °C in the table."""
        assert table.pressure_to_temperature(0.1013) == pytest.approx(100.0, abs=1e-9)

    @pytest.mark.parametrize("temp", [10.5, 44.52, 60.3, 99.0, 150.5, 230.7])
    def test_round_trip(self, table, temp):
        """pressure_to_temperature inverts temperature_to_pressure between points."""
        pressure = table.temperature_to_pressure(temp)
        assert table.pressure_to_temperature(pressure) == pytest.approx(temp, rel=1e-9)


class TestStrictMode:
    """Test strict mode rejection of out-of-range inputs."""

    def test_temperature_below_range(self, strict_table):
        with pytest.raises(TableRangeError) as excinfo:
            strict_table.temperature_to_pressure(5.0)
        assert excinfo.value.value == 5.0
        assert excinfo.value.low == 6.69
        assert excinfo.value.high == 247.0
        assert excinfo.value.quantity == "temperature"

    def test_pressure_above_range(self, strict_table):
        with pytest.raises(TableRangeError, match="pressure"):
            strict_table.pressure_to_temperature(5.0)

    def test_in_range_unchanged(self, strict_table, table):
        """Strict mode gives the same values inside the table."""
        assert strict_table.temperature_to_pressure(80.0) == table.temperature_to_pressure(80.0)

    def test_range_error_is_value_error(self, strict_table):
        with pytest.raises(ValueError):
            strict_table.temperature_to_pressure(-20.0)


class TestTableIntegrity:
    """Test validation of malformed tables."""

    def test_empty_table(self):
        with pytest.raises(TableIntegrityError):
            SaturationTable(points=[])

    def test_single_point(self):
        with pytest.raises(TableIntegrityError):
            SaturationTable(points=[(0.1, 100.0)])

    def test_not_increasing(self):
        with pytest.raises(TableIntegrityError, match="not strictly increasing"):
            SaturationTable(points=[(0.1, 100.0), (0.05, 110.0)])

    def test_custom_table(self):
        """A small valid table interpolates linearly."""
        custom = SaturationTable(points=[(1.0, 10.0), (3.0, 20.0)])
        assert custom.temperature_to_pressure(15.0) == pytest.approx(2.0)
        assert custom.pressure_to_temperature(2.0) == pytest.approx(15.0)
