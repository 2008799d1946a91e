"""
app_coso4 - CoSO4 triple-effect evaporation setpoint calculator

Computes per-effect loads, concentrations, densities, boiling-point rises
and the final-effect vacuum setpoint of a three-effect cobalt sulfate
evaporation train from empirical steam and density tables.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

__version__ = "0.1.0"

from app_coso4.core.props_service import PropsService, get_props_service
from app_coso4.core.saturation import SaturationTable
from app_coso4.core.density import DensityTable

__all__ = [
    "PropsService",
    "get_props_service",
    "SaturationTable",
    "DensityTable",
]
