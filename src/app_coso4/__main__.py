"""
Entry point for the CoSO4 evaporation setpoint calculator

Allows running the application with: python -m app_coso4

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

from app_coso4.ui.app import main

if __name__ == "__main__":
    main()
