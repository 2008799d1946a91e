"""
Unit tests for PropsService

Tests the CoolProp singleton used for the IAPWS saturation cross-check.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import pytest

from app_coso4.core.props_service import PropsService, get_props_service


@pytest.fixture
def props():
    """Fixture providing PropsService singleton."""
    return get_props_service()


class TestPropsService:
    """Test saturation properties of water."""

    def test_singleton(self, props):
        assert props is PropsService()
        assert props is get_props_service()
        assert props.fluid == "Water"

    def test_psat_at_boiling_point(self, props):
        """Water boils at 100 °C under about 101.42 kPa."""
        assert props.psat_kPa(100.0) == pytest.approx(101.42, rel=1e-3)

    def test_tsat_at_atmosphere(self, props):
        assert props.tsat_C(101.325) == pytest.approx(99.97, abs=0.05)

    def test_si_round_trip(self, props):
        P = props.Psat_T(318.15)
        assert props.Tsat_P(P) == pytest.approx(318.15, abs=1e-6)

    def test_plant_table_agrees_near_setpoint(self, props):
        """The plant steam table stays within 5 % of IAPWS at 45 °C."""
        assert props.psat_kPa(45.45) == pytest.approx(10.0, rel=0.05)

    def test_invalid_temperature(self, props):
        """CoolProp failures are wrapped in ValueError."""
        with pytest.raises(ValueError, match="CoolProp error"):
            props.Psat_T(-10.0)
