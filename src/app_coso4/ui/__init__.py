"""
UI Package - Operator interfaces for the evaporation setpoint calculator

- app.py: Tkinter main window (imports Tkinter, needs a display)
- console.py: interactive console prompt and shift sheet

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""
