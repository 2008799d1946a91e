"""Modules package - Process units of the evaporation train"""

from app_coso4.modules.evaporator import (
    EvaporatorController,
    EvaporatorModel,
    EvaporatorResult,
    EvaporatorView,
)

__all__ = [
    "EvaporatorModel",
    "EvaporatorController",
    "EvaporatorView",
    "EvaporatorResult",
]
