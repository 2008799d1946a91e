"""
Evaporator Model - Triple-effect mass balance and vacuum setpoint

Single forward pass over the three effects:
    1. outlet flow from the target concentration (solute balance)
    2. total evaporation split in proportion to the measured temperature
       differentials across the effects
    3. flow and concentration propagated effect by effect
    4. boiling-point rise per effect
    5. densities at the 60 °C reference temperature
    6. final-effect saturation temperature and absolute pressure setpoint

Two modelling simplifications are kept on purpose: the third-effect BPR uses
the target concentration rather than the propagated one, and all densities
are read at 60 °C whatever the actual effect temperature.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

from dataclasses import dataclass, field
import logging
import math
from typing import Optional

from app_coso4.core.bpr import boiling_point_rise
from app_coso4.core.constants import (
    ATMOSPHERE_KPA,
    ATMOSPHERE_MMHG,
    DENSITY_REFERENCE_TEMP,
    DIFFERENTIAL_FLOOR,
    MMHG_PER_KPA,
    REFERENCE_MISMATCH_TOLERANCE,
    STATIC_HEAD_FACTOR,
    TARGET_FINAL_CONCENTRATION,
    TARGET_FINAL_TEMP,
)
from app_coso4.core.density import DensityTable, get_density_table
from app_coso4.core.props_service import PropsService, get_props_service
from app_coso4.core.saturation import SaturationTable, get_saturation_table


@dataclass(frozen=True)
class ProcessTargets:
    """
    Final effect specification.

    Attributes:
        T3: Outlet liquid temperature [°C]
        w3: Outlet mass concentration [%]
    """
    T3: float = TARGET_FINAL_TEMP
    w3: float = TARGET_FINAL_CONCENTRATION


@dataclass(frozen=True)
class EvaporatorInputs:
    """
    Operating data for one setpoint calculation.

    Attributes:
        F0: Feed flow [kg/h]
        w0: Feed concentration [%]
        TS: Heating steam temperature, first effect [°C]
        T1_out: First effect liquid outlet temperature [°C]
        T2_out: Second effect liquid outlet temperature [°C]
        level3: Final effect liquid level [m]
    """
    F0: float
    w0: float
    TS: float
    T1_out: float
    T2_out: float
    level3: float

    def validate(self) -> None:
        """
        Reject non-physical inputs.

        Raises:
            ValueError: If any value is NaN, the flow is not positive, the
                concentration is outside (0, 100) or the level is negative
        """
        for name in ("F0", "w0", "TS", "T1_out", "T2_out", "level3"):
            if math.isnan(getattr(self, name)):
                raise ValueError(f"{name} must be a number, got NaN")
        if self.F0 <= 0:
            raise ValueError(f"Feed flow must be positive, got F0={self.F0:.2f} kg/h")
        if not (0.0 < self.w0 < 100.0):
            raise ValueError(
                f"Feed concentration must be in (0, 100) %, got w0={self.w0:.2f} %"
            )
        if self.level3 < 0:
            raise ValueError(
                f"Liquid level must be non-negative, got level3={self.level3:.3f} m"
            )


@dataclass(frozen=True)
class EvaporatorResult:
    """
    Result of the triple-effect balance.

    Index 0 is the feed, 1-3 the effect outlets. F3/W3 are the values
    propagated through the effects; F3_target is the solute-balance outlet
    flow used to size the total evaporation.

    Attributes:
        F0, F1, F2, F3: Liquid flows [kg/h]
        W0, W1, W2, W3: Concentrations [%]
        V1, V2, V3: Evaporation per effect [kg/h]
        BPR1, BPR2, BPR3: Boiling-point rise [°C]
        Density0..Density3: Densities at 60 °C [g/cm³]
        R1, R2, R3: Load allocation ratios [-], summing to 1
        Pset: Final effect absolute pressure setpoint [kPa]
        T3: Final effect saturation temperature target [°C]
        F3_target: Outlet flow from the solute balance [kg/h]
        static_head: Static head correction [°C]
        Pset_reference: IAPWS saturation pressure at T3 [kPa], NaN if unavailable
        flags: Diagnostic flags dictionary
    """
    F0: float
    F1: float
    F2: float
    F3: float
    W0: float
    W1: float
    W2: float
    W3: float
    V1: float
    V2: float
    V3: float
    BPR1: float
    BPR2: float
    BPR3: float
    Density0: float
    Density1: float
    Density2: float
    Density3: float
    R1: float
    R2: float
    R3: float
    Pset: float
    T3: float
    F3_target: float
    static_head: float
    Pset_reference: float
    flags: dict = field(default_factory=dict)

    @property
    def V_total(self) -> float:
        """Total evaporation [kg/h]."""
        return self.V1 + self.V2 + self.V3

    @property
    def vacuum_mmHg(self) -> float:
        """Vacuum gauge reading [mmHg]."""
        return ATMOSPHERE_MMHG - self.Pset * MMHG_PER_KPA / 1000

    @property
    def vacuum_kPa_gauge(self) -> float:
        """Vacuum as gauge pressure below atmosphere [kPa]."""
        return ATMOSPHERE_KPA - self.Pset / 1000


class EvaporatorModel:
    """
    Mass balance and setpoint model of the triple-effect evaporator.

    Holds only read-only tables; solve() keeps no state between calls.
    """

    def __init__(
        self,
        saturation: Optional[SaturationTable] = None,
        density: Optional[DensityTable] = None,
        props: Optional[PropsService] = None,
    ):
        """Initialize evaporator model with its property sources."""
        self.logger = logging.getLogger(__name__)
        self.saturation = saturation or get_saturation_table()
        self.density = density or get_density_table()
        self.props = props or get_props_service()

    def allocation_ratios(self, TS: float, T1_out: float, T2_out: float,
                          T3_target: float):
        """
        Split the evaporation load by temperature differential.

        Non-positive differentials are floored to DIFFERENTIAL_FLOOR.

        Returns:
            Tuple (R1, R2, R3, floored)
        """
        diffs = [TS - T1_out, T1_out - T2_out, T2_out - T3_target]
        floored = False
        for k, diff in enumerate(diffs):
            if diff <= 0:
                self.logger.warning(
                    f"Effect {k + 1} temperature differential {diff:.2f} K "
                    f"is not positive, floored to {DIFFERENTIAL_FLOOR:.1f} K"
                )
                diffs[k] = DIFFERENTIAL_FLOOR
                floored = True

        total = diffs[0] + diffs[1] + diffs[2]
        return diffs[0] / total, diffs[1] / total, diffs[2] / total, floored

    def solve(
        self,
        inputs: EvaporatorInputs,
        targets: Optional[ProcessTargets] = None,
    ) -> EvaporatorResult:
        """
        Solve the triple-effect balance and the vacuum setpoint.

        Args:
            inputs: Operating data
            targets: Final effect specification (defaults to the plant targets)

        Returns:
            EvaporatorResult with per-effect values and diagnostic flags

        Raises:
            ValueError: If inputs are not physical
            TableRangeError: If the tables are strict and a lookup is out of range
        """
        if targets is None:
            targets = ProcessTargets()
        inputs.validate()

        flags = {
            "allocation_floored": False,
            "feed_above_target": False,
            "setpoint_out_of_table": False,
            "reference_mismatch": False,
        }

        F0, w0 = inputs.F0, inputs.w0

        # Solute balance on the whole train
        F3_target = F0 * w0 / targets.w3
        V_total = F0 - F3_target
        if V_total <= 0:
            self.logger.warning(
                f"Feed concentration {w0:.2f} % is not below target "
                f"{targets.w3:.2f} %, no evaporation required"
            )
            flags["feed_above_target"] = True

        R1, R2, R3, floored = self.allocation_ratios(
            inputs.TS, inputs.T1_out, inputs.T2_out, targets.T3
        )
        flags["allocation_floored"] = floored

        V1 = V_total * R1
        V2 = V_total * R2
        V3 = V_total * R3

        # Effect by effect
        F1 = F0 - V1
        w1 = w0 * F0 / F1
        F2 = F1 - V2
        w2 = w1 * F1 / F2
        F3 = F2 - V3
        w3 = w2 * F2 / F3

        bpr1 = boiling_point_rise(w1)
        bpr2 = boiling_point_rise(w2)
        bpr3 = boiling_point_rise(targets.w3)

        density_at = self.density.density_from_temperature_and_concentration
        density0 = density_at(DENSITY_REFERENCE_TEMP, w0)
        density1 = density_at(DENSITY_REFERENCE_TEMP, w1)
        density2 = density_at(DENSITY_REFERENCE_TEMP, w2)
        density3 = density_at(DENSITY_REFERENCE_TEMP, w3)

        # Vapour-space saturation temperature of the final effect
        static_head = inputs.level3 * STATIC_HEAD_FACTOR
        T3 = targets.T3 - bpr3 - static_head

        if not self.saturation.contains_temperature(T3):
            flags["setpoint_out_of_table"] = True
        Pset = self.saturation.temperature_to_pressure(T3) * 1000

        Pset_reference = self._reference_pressure(T3)
        if math.isnan(Pset_reference):
            flags["reference_mismatch"] = True
        elif abs(Pset - Pset_reference) / Pset_reference > REFERENCE_MISMATCH_TOLERANCE:
            self.logger.warning(
                f"Table setpoint {Pset:.3f} kPa deviates from IAPWS "
                f"{Pset_reference:.3f} kPa at {T3:.2f} °C"
            )
            flags["reference_mismatch"] = True

        self.logger.debug(
            f"Evaporator solved: F0={F0:.1f} kg/h, w0={w0:.2f} %, "
            f"R=({R1:.3f}, {R2:.3f}, {R3:.3f}), T3={T3:.2f} °C, "
            f"Pset={Pset:.3f} kPa"
        )

        return EvaporatorResult(
            F0=F0, F1=F1, F2=F2, F3=F3,
            W0=w0, W1=w1, W2=w2, W3=w3,
            V1=V1, V2=V2, V3=V3,
            BPR1=bpr1, BPR2=bpr2, BPR3=bpr3,
            Density0=density0, Density1=density1,
            Density2=density2, Density3=density3,
            R1=R1, R2=R2, R3=R3,
            Pset=Pset,
            T3=T3,
            F3_target=F3_target,
            static_head=static_head,
            Pset_reference=Pset_reference,
            flags=flags,
        )

    def _reference_pressure(self, T3: float) -> float:
        """IAPWS saturation pressure at T3 [kPa], NaN outside CoolProp's range."""
        try:
            return self.props.psat_kPa(T3)
        except ValueError as e:
            self.logger.warning(f"No IAPWS reference at {T3:.2f} °C: {e}")
            return math.nan
