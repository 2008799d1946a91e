"""
Unit tests for DensityTable

Tests direct and interpolated density lookups, nearest-curve selection,
the density -> concentration inversion and out-of-range handling.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import pytest

from app_coso4.core.density import DensityTable, get_density_table
from app_coso4.core.errors import TableIntegrityError, TableRangeError


@pytest.fixture
def table():
    """Fixture providing the default (clamping) density table."""
    return DensityTable()


@pytest.fixture
def strict_table():
    """Fixture providing a strict density table."""
    return DensityTable(strict=True)


class TestNearestCurve:
    """Test reference curve selection."""

    def test_reference_temperatures(self, table):
        assert list(table.reference_temperatures) == [20, 40, 50, 55, 60, 80, 100]

    def test_exact_key(self, table):
        assert table.nearest_reference_temperature(55.0) == 55.0

    def test_closest_key(self, table):
        assert table.nearest_reference_temperature(57.6) == 60.0
        assert table.nearest_reference_temperature(-10.0) == 20.0
        assert table.nearest_reference_temperature(150.0) == 100.0

    @pytest.mark.parametrize("temp, expected", [
        (30.0, 20.0),
        (45.0, 40.0),
        (52.5, 50.0),
        (70.0, 60.0),
        (90.0, 80.0),
    ])
    def test_ties_go_to_lower_temperature(self, table, temp, expected):
        """Equidistant keys resolve to the lower temperature."""
        assert table.nearest_reference_temperature(temp) == expected


class TestDensityAtReferenceTemperature:
    """Test lookups along a single curve."""

    def test_table_point_exact(self, table):
        """A tabulated concentration returns the tabulated density exactly."""
        assert table.density_at_reference_temperature(20, 52) == 1.599

    def test_midpoint(self, table):
        """49 % is halfway between the 48 % and 50 % entries."""
        assert table.density_at_reference_temperature(20, 49) == pytest.approx(1.5545)

    def test_interpolation(self, table):
        """49.5 % sits three quarters of the way from 48 % to 50 %."""
        expected = 1.540 + 0.75 * (1.569 - 1.540)
        assert table.density_at_reference_temperature(20, 49.5) == pytest.approx(expected)

    def test_uses_nearest_curve(self, table):
        """A temperature without its own curve reads the nearest one."""
        assert table.density_at_reference_temperature(30, 52) == 1.599
        assert table.density_at_reference_temperature(58, 53) == 1.557

    def test_clamp_above_curve(self, table):
        assert table.density_at_reference_temperature(20, 60) == 1.599

    def test_clamp_below_curve(self, table):
        assert table.density_at_reference_temperature(80, -5) == 0.992

    def test_strict_above_curve(self, strict_table):
        with pytest.raises(TableRangeError, match="concentration"):
            strict_table.density_at_reference_temperature(55, 52)


class TestDensityFromTemperatureAndConcentration:
    """Test two-stage (temperature x concentration) interpolation."""

    def test_exact_key_skips_temperature_interpolation(self, table):
        assert table.density_from_temperature_and_concentration(60, 52) == 1.542

    def test_concentration_interpolation(self, table):
        expected = 1.0 + 20 / 32 * (1.268 - 1.0)
        assert table.density_from_temperature_and_concentration(60, 20) == pytest.approx(expected)

    def test_between_curves(self, table):
        """70 °C is the mean of the 60 °C and 80 °C curves."""
        assert table.density_from_temperature_and_concentration(70, 50) == pytest.approx(
            (1.512 + 1.433) / 2
        )

    def test_between_close_curves(self, table):
        assert table.density_from_temperature_and_concentration(57.5, 50) == pytest.approx(
            (1.515 + 1.512) / 2
        )

    def test_clamp_below_reference_set(self, table):
        assert table.density_from_temperature_and_concentration(10, 52) == 1.599

    def test_clamp_above_reference_set(self, table):
        assert table.density_from_temperature_and_concentration(120, 52) == 1.418

    def test_strict_temperature_out_of_range(self, strict_table):
        with pytest.raises(TableRangeError, match="temperature"):
            strict_table.density_from_temperature_and_concentration(120, 50)

    def test_density_falls_with_temperature(self, table):
        """Along 20-40-60-80-100 °C the 50 % density decreases."""
        densities = [
            table.density_from_temperature_and_concentration(t, 50)
            for t in (20, 40, 60, 80, 100)
        ]
        assert all(b < a for a, b in zip(densities, densities[1:]))


class TestConcentrationFromDensity:
    """Test the density -> concentration inversion."""

    def test_table_point_exact(self, table):
        assert table.concentration_from_temperature_and_density(20, 1.599) == 52.0

    def test_interpolation(self, table):
        assert table.concentration_from_temperature_and_density(20, 1.5545) == pytest.approx(49.0)

    def test_inverts_density_lookup(self, table):
        density = table.density_at_reference_temperature(60, 20)
        assert table.concentration_from_temperature_and_density(60, density) == pytest.approx(20.0)

    def test_below_curve_defaults_to_zero(self, table, caplog):
        """Density below every entry cannot be inverted: 0 % with a warning."""
        assert table.concentration_from_temperature_and_density(80, 0.95) == 0.0
        assert "Density inversion" in caplog.text

    def test_above_curve_clamps(self, table):
        assert table.concentration_from_temperature_and_density(20, 1.7) == 52.0

    def test_strict_below_curve(self, strict_table):
        with pytest.raises(TableRangeError, match="density"):
            strict_table.concentration_from_temperature_and_density(80, 0.95)


class TestDensityTableIntegrity:
    """Test validation of malformed curves."""

    def test_no_curves(self):
        with pytest.raises(TableIntegrityError):
            DensityTable(curves={})

    def test_empty_curve(self):
        with pytest.raises(TableIntegrityError):
            DensityTable(curves={20: []})

    def test_non_monotonic_curve(self):
        with pytest.raises(TableIntegrityError):
            DensityTable(curves={20: [(0, 1.0), (10, 0.9)]})

    def test_integer_keys(self):
        custom = DensityTable(curves={20: [(0, 1.0), (10, 1.1)]})
        assert custom.density_at_reference_temperature(20, 5) == pytest.approx(1.05)

    def test_shared_instance(self):
        assert get_density_table() is get_density_table()
