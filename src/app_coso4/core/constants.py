"""
Process constants for the cobalt sulfate triple-effect evaporation train.

These are fixed process specifications. Code that needs alternative targets
passes a ProcessTargets instance to the evaporator model instead of touching
these values.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

# Final effect specification
TARGET_FINAL_TEMP = 60.0             # Outlet liquid temperature [°C]
TARGET_FINAL_CONCENTRATION = 52.30   # Outlet CoSO4·7H2O mass fraction [%]

# Static head correction of the final effect [°C per m of liquid level]
STATIC_HEAD_FACTOR = 0.35

# All stream densities are evaluated at this temperature [°C]
DENSITY_REFERENCE_TEMP = 60.0

# Floor applied to non-positive temperature differentials [K]
DIFFERENTIAL_FLOOR = 1.0

# Relative deviation between table setpoint and IAPWS reference [-]
REFERENCE_MISMATCH_TOLERANCE = 0.05

# Unit conversions
KELVIN_OFFSET = 273.15
ATMOSPHERE_KPA = 101.325
ATMOSPHERE_MMHG = 760.0
MMHG_PER_KPA = 7.5006
