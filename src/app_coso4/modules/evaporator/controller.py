"""
Evaporator Controller - Orchestration layer

Builds validated inputs, resolves the feed concentration from a density
reading when needed and runs the evaporator model.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging
from typing import Optional

from app_coso4.core.density import DensityTable
from app_coso4.core.saturation import SaturationTable
from app_coso4.modules.evaporator.model import (
    EvaporatorInputs,
    EvaporatorModel,
    EvaporatorResult,
    ProcessTargets,
)


class EvaporatorController:
    """
    Controller for the triple-effect evaporator calculation.

    Orchestrates model execution without direct UI dependencies.
    """

    def __init__(self, strict: bool = False):
        """
        Initialize controller with evaporator model.

        Args:
            strict: Reject out-of-table lookups instead of clamping them
        """
        self.logger = logging.getLogger(__name__)
        self.strict = strict
        if strict:
            self.model = EvaporatorModel(
                saturation=SaturationTable(strict=True),
                density=DensityTable(strict=True),
            )
        else:
            self.model = EvaporatorModel()

    def resolve_feed_concentration(self, feed_temp: float, feed_density: float) -> float:
        """
        Feed concentration from a temperature and density reading.

        Args:
            feed_temp: Feed temperature [°C]
            feed_density: Feed density [g/cm³]

        Returns:
            Feed concentration [%]
        """
        w0 = self.model.density.concentration_from_temperature_and_density(
            feed_temp, feed_density
        )
        self.logger.info(
            f"Feed at {feed_temp:.1f} °C, {feed_density:.3f} g/cm³ "
            f"-> {w0:.2f} %"
        )
        return w0

    def solve(
        self,
        F0: float,
        w0: float,
        TS: float,
        T1_out: float,
        T2_out: float,
        level3: float,
        targets: Optional[ProcessTargets] = None,
    ) -> EvaporatorResult:
        """
        Solve the evaporator balance from a known feed concentration.

        Args:
            F0: Feed flow [kg/h]
            w0: Feed concentration [%]
            TS: Heating steam temperature [°C]
            T1_out: First effect outlet temperature [°C]
            T2_out: Second effect outlet temperature [°C]
            level3: Final effect liquid level [m]
            targets: Optional final effect specification

        Returns:
            EvaporatorResult with per-effect values and diagnostics
        """
        inputs = EvaporatorInputs(
            F0=F0, w0=w0, TS=TS, T1_out=T1_out, T2_out=T2_out, level3=level3
        )
        return self.model.solve(inputs, targets)

    def solve_from_density(
        self,
        F0: float,
        feed_temp: float,
        feed_density: float,
        TS: float,
        T1_out: float,
        T2_out: float,
        level3: float,
        targets: Optional[ProcessTargets] = None,
    ) -> EvaporatorResult:
        """
        Solve the evaporator balance from a feed temperature/density reading.

        Args:
            F0: Feed flow [kg/h]
            feed_temp: Feed temperature [°C]
            feed_density: Feed density [g/cm³]
            TS: Heating steam temperature [°C]
            T1_out: First effect outlet temperature [°C]
            T2_out: Second effect outlet temperature [°C]
            level3: Final effect liquid level [m]
            targets: Optional final effect specification

        Returns:
            EvaporatorResult with per-effect values and diagnostics
        """
        w0 = self.resolve_feed_concentration(feed_temp, feed_density)
        return self.solve(F0, w0, TS, T1_out, T2_out, level3, targets)
