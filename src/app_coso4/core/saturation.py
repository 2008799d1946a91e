"""
SaturationTable - Steam saturation lookup over the embedded plant table

Bidirectional piecewise-linear interpolation between saturation temperature
and absolute pressure. Inputs outside the table are clamped to the boundary
entry, or rejected with TableRangeError when the table is strict.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging
import math
from typing import Sequence, Tuple

from app_coso4.core.errors import TableIntegrityError, TableRangeError
from app_coso4.core.interpolation import as_axis, lerp, scan_pair
from app_coso4.core.tables import STEAM_TABLE


class SaturationTable:
    """
    Steam saturation table with temperature <-> pressure lookups.

    Attributes:
        pressures: Absolute pressures [MPa], strictly increasing
        temperatures: Saturation temperatures [°C], strictly increasing
        strict: If True, out-of-range inputs raise TableRangeError
    """

    def __init__(self, points: Sequence[Tuple[float, float]] = STEAM_TABLE,
                 strict: bool = False):
        """
        Build the lookup arrays from (pressure [MPa], temperature [°C]) pairs.

        Raises:
            TableIntegrityError: If the table is empty or not co-monotonic
        """
        self.logger = logging.getLogger(__name__)
        self.strict = strict
        self.pressures = as_axis([p for p, _ in points], "pressure")
        self.temperatures = as_axis([t for _, t in points], "temperature")
        if self.pressures.size < 2:
            raise TableIntegrityError(
                "Saturation table needs at least two points"
            )

    def __len__(self) -> int:
        return int(self.pressures.size)

    @property
    def temperature_range(self) -> Tuple[float, float]:
        return float(self.temperatures[0]), float(self.temperatures[-1])

    @property
    def pressure_range(self) -> Tuple[float, float]:
        return float(self.pressures[0]), float(self.pressures[-1])

    def contains_temperature(self, temp: float) -> bool:
        low, high = self.temperature_range
        return low <= temp <= high

    def contains_pressure(self, pressure: float) -> bool:
        low, high = self.pressure_range
        return low <= pressure <= high

    def temperature_to_pressure(self, temp: float) -> float:
        """
        Saturation pressure at a given temperature.

        Args:
            temp: Saturation temperature [°C]

        Returns:
            Absolute pressure [MPa]

        Raises:
            TableRangeError: If strict and temp is outside the table
        """
        return self._lookup(temp, self.temperatures, self.pressures,
                            "temperature", "°C")

    def pressure_to_temperature(self, pressure: float) -> float:
        """
        Saturation temperature at a given pressure.

        Args:
            pressure: Absolute pressure [MPa]

        Returns:
            Saturation temperature [°C]

        Raises:
            TableRangeError: If strict and pressure is outside the table
        """
        return self._lookup(pressure, self.pressures, self.temperatures,
                            "pressure", "MPa")

    def _lookup(self, x, xs, ys, quantity: str, unit: str) -> float:
        if math.isnan(x):
            raise ValueError(f"Saturation lookup: {quantity} is NaN")
        if x < xs[0] or x > xs[-1]:
            if self.strict:
                raise TableRangeError(quantity, x, float(xs[0]),
                                      float(xs[-1]), unit)
            clamped = float(ys[0]) if x < xs[0] else float(ys[-1])
            self.logger.warning(
                f"Saturation lookup: {quantity}={x:.4g} {unit} outside "
                f"[{xs[0]:.4g}, {xs[-1]:.4g}], clamped to {clamped:.4g}"
            )
            return clamped

        i = scan_pair(xs, x)
        return float(lerp(x, xs[i], xs[i + 1], ys[i], ys[i + 1]))


_default_table = None


def get_saturation_table() -> SaturationTable:
    """
    Shared non-strict table built from the embedded steam data.

    Returns:
        SaturationTable instance
    """
    global _default_table
    if _default_table is None:
        _default_table = SaturationTable()
    return _default_table
