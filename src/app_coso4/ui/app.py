"""
Main Application Window - CoSO4 evaporation setpoint calculator

Provides the main window with buttons to access the calculation windows.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging
import tkinter as tk
from tkinter import ttk

from app_coso4.core.tables import TABLE_VERSION


class MainWindow:
    """
    Main application window for the evaporation setpoint calculator.

    Provides access to the calculation windows through buttons.
    """

    def __init__(self):
        """Initialize the main application window."""
        self.root = tk.Tk()
        self.root.title("CoSO4 Triple-Effect Evaporation")
        self.root.geometry("600x360")

        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface components."""
        header = ttk.Label(
            self.root,
            text="CoSO4·7H2O Triple-Effect Evaporation",
            font=("Arial", 16, "bold"),
        )
        header.pack(pady=20)

        desc = ttk.Label(
            self.root,
            text="Load split and final-effect vacuum setpoint for a 60 °C / 52.30 % outlet",
            font=("Arial", 10),
        )
        desc.pack(pady=10)

        ttk.Separator(self.root, orient="horizontal").pack(fill="x", pady=20)

        modules_frame = ttk.LabelFrame(
            self.root,
            text="Calculations",
            padding=20,
        )
        modules_frame.pack(padx=20, pady=10, fill="both", expand=True)

        self._create_module_buttons(modules_frame)

        footer = ttk.Label(
            self.root,
            text=f"Property tables v{TABLE_VERSION}",
            font=("Arial", 8),
            foreground="gray",
        )
        footer.pack(side="bottom", pady=10)

    def _create_module_buttons(self, parent):
        """
        Create buttons for each calculation window.

        Args:
            parent: Parent frame widget
        """
        btn_evaporator = ttk.Button(
            parent,
            text="♨️ Triple-effect setpoints",
            command=self._open_evaporator,
            width=25,
            padding=10,
        )
        btn_evaporator.grid(row=0, column=0, padx=10, pady=5, sticky="ew")

        parent.columnconfigure(0, weight=1)

    def _open_evaporator(self):
        """Open the evaporator calculation window."""
        # Import here to avoid circular dependencies and allow headless testing
        from app_coso4.modules.evaporator.view import EvaporatorTkView

        EvaporatorTkView.open_window(self.root)

    def run(self):
        """Start the application main loop."""
        self.root.mainloop()


def main():
    """Entry point for the UI application."""
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = MainWindow()
    app.run()


if __name__ == "__main__":
    main()
