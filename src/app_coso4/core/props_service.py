"""
PropsService - Singleton wrapper for CoolProp

Provides IAPWS water saturation properties used to cross-check the
empirical steam table that drives the vacuum setpoint.
Implements singleton pattern to ensure single instance across application.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging
from typing import Optional
from CoolProp.CoolProp import PropsSI

from app_coso4.core.constants import KELVIN_OFFSET


class PropsService:
    """
    Singleton service for water saturation properties via CoolProp.

    All reference property calls go through this service to ensure:
    - Consistent error handling
    - Centralized logging
    """

    _instance: Optional['PropsService'] = None
    _initialized: bool = False

    def __new__(cls) -> 'PropsService':
        """Ensure only one instance exists (Singleton pattern)."""
        if cls._instance is None:
            cls._instance = super(PropsService, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logger only once."""
        if not PropsService._initialized:
            self.logger = logging.getLogger(__name__)
            self.fluid = "Water"
            PropsService._initialized = True

    def _safe_call(self, output: str, input1_name: str, input1_val: float,
                   input2_name: str, input2_val: float) -> float:
        """
        Safe wrapper for CoolProp PropsSI calls with error handling.

        Args:
            output: Output property name (e.g., 'P', 'T')
            input1_name: First input property name
            input1_val: First input value
            input2_name: Second input property name
            input2_val: Second input value

        Returns:
            Calculated property value

        Raises:
            ValueError: If CoolProp calculation fails or inputs are invalid
        """
        try:
            return PropsSI(output, input1_name, input1_val,
                           input2_name, input2_val, self.fluid)
        except Exception as e:
            error_msg = (
                f"CoolProp error: {output} | "
                f"{input1_name}={input1_val:.4e}, {input2_name}={input2_val:.4e} | "
                f"Error: {str(e)}"
            )
            self.logger.error(error_msg)
            raise ValueError(error_msg) from e

    # ========== Saturation properties (SI) ==========

    def Psat_T(self, T: float) -> float:
        """
        Saturation pressure at given temperature.

        Args:
            T: Temperature [K]

        Returns:
            Saturation pressure [Pa]
        """
        return self._safe_call('P', 'T', T, 'Q', 0)

    def Tsat_P(self, P: float) -> float:
        """
        Saturation temperature at given pressure.

        Args:
            P: Pressure [Pa]

        Returns:
            Saturation temperature [K]
        """
        return self._safe_call('T', 'P', P, 'Q', 0)

    # ========== Plant units ==========

    def psat_kPa(self, T_celsius: float) -> float:
        """
        Saturation pressure in plant units.

        Args:
            T_celsius: Temperature [°C]

        Returns:
            Absolute saturation pressure [kPa]
        """
        return self.Psat_T(T_celsius + KELVIN_OFFSET) / 1e3

    def tsat_C(self, P_kPa: float) -> float:
        """
        Saturation temperature in plant units.

        Args:
            P_kPa: Absolute pressure [kPa]

        Returns:
            Saturation temperature [°C]
        """
        return self.Tsat_P(P_kPa * 1e3) - KELVIN_OFFSET


# Global singleton instance accessor
def get_props_service() -> PropsService:
    """
    Get the global PropsService singleton instance.

    Returns:
        PropsService singleton instance
    """
    return PropsService()
