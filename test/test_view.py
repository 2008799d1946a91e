"""
Unit tests for the evaporator console view

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import pytest

from app_coso4.modules.evaporator import (
    EvaporatorController,
    EvaporatorInputs,
    EvaporatorView,
)


@pytest.fixture
def nominal():
    """Fixture providing nominal inputs and result."""
    inputs = EvaporatorInputs(F0=5000.0, w0=20.0, TS=120.0, T1_out=100.0,
                              T2_out=80.0, level3=0.5)
    result = EvaporatorController().model.solve(inputs)
    return inputs, result


class TestEvaporatorView:
    """Test the shift sheet."""

    def test_report_sections(self, nominal):
        inputs, result = nominal
        report = EvaporatorView.format_report(result, inputs)
        assert "Load split      33.33 : 33.33 : 33.33" in report
        assert f"Absolute pressure setpoint  {result.Pset:.3f} kPa" in report
        assert "steam 120.0 °C" in report
        assert "Static head (level 0.50 m)" in report
        assert "WARNINGS" not in report

    def test_per_effect_rows(self, nominal):
        _, result = nominal
        report = EvaporatorView.format_report(result)
        for name in ("Feed", "Effect 1", "Effect 2", "Outlet"):
            assert name in report
        assert "Static head correction" in report
        assert f"{result.W3:.2f}" in report

    def test_warnings_listed(self):
        result = EvaporatorController().solve(
            F0=5000, w0=20, TS=100, T1_out=100, T2_out=80, level3=0.5
        )
        report = EvaporatorView.format_report(result)
        assert "WARNINGS: allocation_floored" in report

    def test_display_result(self, nominal, capsys):
        inputs, result = nominal
        EvaporatorView.display_result(result, inputs)
        out = capsys.readouterr().out
        assert "SHIFT SETPOINTS" in out

    def test_display_summary(self, nominal, capsys):
        _, result = nominal
        EvaporatorView.display_summary(result)
        out = capsys.readouterr().out
        assert out.startswith(f"Evaporator: Pset={result.Pset:.3f} kPa")
        assert "WARNINGS" not in out
