"""
Evaporator Module - Triple-effect CoSO4 evaporation train

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Mass balance, load allocation and vacuum setpoint
- controller.py: Input validation, feed resolution and orchestration
- view.py: Console shift sheet and Tkinter GUI with Matplotlib

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

from app_coso4.modules.evaporator.model import (
    EvaporatorInputs,
    EvaporatorModel,
    EvaporatorResult,
    ProcessTargets,
)
from app_coso4.modules.evaporator.controller import EvaporatorController
from app_coso4.modules.evaporator.view import EvaporatorView

__all__ = [
    "EvaporatorInputs",
    "EvaporatorModel",
    "EvaporatorResult",
    "ProcessTargets",
    "EvaporatorController",
    "EvaporatorView",
]
