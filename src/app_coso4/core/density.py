"""
DensityTable - CoSO4·7H2O solution density lookup

Each reference temperature carries one empirical concentration/density
curve. Lookups interpolate along the curve and, for arbitrary temperatures,
between the two bracketing curves.

Out-of-range handling (non-strict):
    - concentration outside a curve: boundary density of that curve
    - temperature outside the reference set: boundary curve
    - density below a curve: 0 % (no inversion possible)
    - density above a curve: last tabulated concentration
Every one of these raises TableRangeError when the table is strict.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging
import math
from typing import Dict, Sequence, Tuple
import numpy as np

from app_coso4.core.errors import TableIntegrityError, TableRangeError
from app_coso4.core.interpolation import as_axis, last_le_first_ge, lerp
from app_coso4.core.tables import DENSITY_TABLE

# Returned when a density lies below every entry of the selected curve
NO_INVERSION_CONCENTRATION = 0.0


class DensityTable:
    """
    Temperature-indexed concentration/density curves.

    Attributes:
        reference_temperatures: Sorted curve temperatures [°C]
        strict: If True, out-of-range inputs raise TableRangeError
    """

    def __init__(self,
                 curves: Dict[float, Sequence[Tuple[float, float]]] = DENSITY_TABLE,
                 strict: bool = False):
        """
        Build per-curve arrays.

        Raises:
            TableIntegrityError: If there are no curves or a curve is not
                strictly increasing in both fraction and density
        """
        self.logger = logging.getLogger(__name__)
        self.strict = strict
        if not curves:
            raise TableIntegrityError("Density table has no curves")

        keys = sorted(curves)
        self.reference_temperatures = as_axis(keys, "reference temperature")
        self._curves = {}
        for key in keys:
            points = curves[key]
            fractions = as_axis([c for c, _ in points], f"fraction@{key:g}")
            densities = as_axis([d for _, d in points], f"density@{key:g}")
            self._curves[float(key)] = (fractions, densities)

    def curve(self, temp: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        (fractions [%], densities [g/cm³]) of the curve nearest to temp.
        """
        return self._curves[self.nearest_reference_temperature(temp)]

    def nearest_reference_temperature(self, temp: float) -> float:
        """
        Reference temperature of the curve used for a given temperature.

        An exact match wins; otherwise the closest key, with ties going to
        the lower temperature.

        Args:
            temp: Temperature [°C]

        Returns:
            Curve key [°C]
        """
        if math.isnan(temp):
            raise ValueError("Density lookup: temperature is NaN")
        keys = self.reference_temperatures
        idx = int(np.argmin(np.abs(keys - temp)))
        return float(keys[idx])

    def density_at_reference_temperature(self, temp: float, conc: float) -> float:
        """
        Density on the curve nearest to temp.

        Args:
            temp: Temperature [°C]
            conc: Mass concentration [%]

        Returns:
            Density [g/cm³]

        Raises:
            TableRangeError: If strict and conc is outside the curve
        """
        if math.isnan(conc):
            raise ValueError("Density lookup: concentration is NaN")
        key = self.nearest_reference_temperature(temp)
        fractions, densities = self._curves[key]
        lower, upper = last_le_first_ge(fractions, conc)

        if lower == -1 or upper == -1:
            if self.strict:
                raise TableRangeError(
                    f"concentration@{key:g}°C", conc,
                    float(fractions[0]), float(fractions[-1]), "%"
                )
            boundary = float(densities[0]) if lower == -1 else float(densities[-1])
            self.logger.warning(
                f"Density lookup: concentration={conc:.4g} % outside "
                f"{key:g} °C curve, clamped to {boundary:.4g} g/cm³"
            )
            return boundary

        if lower == upper:
            return float(densities[lower])

        return float(lerp(conc, fractions[lower], fractions[upper],
                          densities[lower], densities[upper]))

    def density_from_temperature_and_concentration(self, temp: float,
                                                   conc: float) -> float:
        """
        Density at an arbitrary temperature.

        Interpolates linearly between the densities of the two curves whose
        reference temperatures bracket temp.

        Args:
            temp: Temperature [°C]
            conc: Mass concentration [%]

        Returns:
            Density [g/cm³]

        Raises:
            TableRangeError: If strict and temp or conc is out of range
        """
        if math.isnan(temp):
            raise ValueError("Density lookup: temperature is NaN")
        keys = self.reference_temperatures
        lower, upper = last_le_first_ge(keys, temp)

        if lower == -1 or upper == -1:
            if self.strict:
                raise TableRangeError("temperature", temp, float(keys[0]),
                                      float(keys[-1]), "°C")
            boundary = float(keys[0]) if lower == -1 else float(keys[-1])
            self.logger.warning(
                f"Density lookup: temperature={temp:.4g} °C outside "
                f"[{keys[0]:g}, {keys[-1]:g}], using {boundary:g} °C curve"
            )
            return self.density_at_reference_temperature(boundary, conc)

        if lower == upper:
            return self.density_at_reference_temperature(temp, conc)

        t_low, t_high = float(keys[lower]), float(keys[upper])
        density_low = self.density_at_reference_temperature(t_low, conc)
        density_high = self.density_at_reference_temperature(t_high, conc)
        return float(lerp(temp, t_low, t_high, density_low, density_high))

    def concentration_from_temperature_and_density(self, temp: float,
                                                   density: float) -> float:
        """
        Invert the curve nearest to temp: density -> concentration.

        Args:
            temp: Temperature [°C]
            density: Measured density [g/cm³]

        Returns:
            Mass concentration [%]

        Raises:
            TableRangeError: If strict and density is outside the curve
        """
        if math.isnan(density):
            raise ValueError("Density lookup: density is NaN")
        key = self.nearest_reference_temperature(temp)
        fractions, densities = self._curves[key]
        lower, upper = last_le_first_ge(densities, density)

        if lower == -1 or upper == -1:
            if self.strict:
                raise TableRangeError(
                    f"density@{key:g}°C", density,
                    float(densities[0]), float(densities[-1]), "g/cm³"
                )
            if lower == -1:
                result = NO_INVERSION_CONCENTRATION
            else:
                result = float(fractions[-1])
            self.logger.warning(
                f"Density inversion: density={density:.4g} g/cm³ outside "
                f"{key:g} °C curve, returning {result:.4g} %"
            )
            return result

        if lower == upper:
            return float(fractions[lower])

        return float(lerp(density, densities[lower], densities[upper],
                          fractions[lower], fractions[upper]))


_default_table = None


def get_density_table() -> DensityTable:
    """
    Shared non-strict table built from the embedded density data.

    Returns:
        DensityTable instance
    """
    global _default_table
    if _default_table is None:
        _default_table = DensityTable()
    return _default_table
