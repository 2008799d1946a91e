"""
Evaporator View - Display and reporting functionality

Handles all output formatting for evaporator results.
Includes both the console shift sheet and a Tkinter GUI with Matplotlib charts.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

from typing import List, Optional
from app_coso4.modules.evaporator.model import EvaporatorInputs, EvaporatorResult


class EvaporatorView:
    """
    View component for the evaporator shift sheet.

    Responsible for formatting and displaying evaporator results.
    No computation should occur here - only presentation.
    """

    @staticmethod
    def format_report(result: EvaporatorResult,
                      inputs: Optional[EvaporatorInputs] = None) -> str:
        """
        Build the operator shift sheet.

        Args:
            result: Calculation results to format
            inputs: Operating data, adds the steam temperature and level lines

        Returns:
            Multi-line report
        """
        lines: List[str] = []
        lines.append("=" * 62)
        lines.append("  CoSO4 TRIPLE-EFFECT EVAPORATION - SHIFT SETPOINTS")
        lines.append("  (load split from measured liquid temperatures)")
        lines.append("=" * 62)
        lines.append("")

        feed = f"Feed            {result.F0:.0f} kg/h, concentration {result.W0:.2f} %"
        if inputs is not None:
            feed += f", steam {inputs.TS:.1f} °C"
        lines.append(feed)
        lines.append(
            f"Evaporation     {result.V_total:.0f} kg/h -> outlet "
            f"{result.F3:.0f} kg/h"
        )
        lines.append("")

        lines.append(
            f"Load split      {result.R1 * 100:.2f} : {result.R2 * 100:.2f} : "
            f"{result.R3 * 100:.2f}"
        )
        lines.append(f"Effect 1        {result.V1:.0f} kg/h")
        lines.append(f"Effect 2        {result.V2:.0f} kg/h")
        lines.append(f"Effect 3        {result.V3:.0f} kg/h")
        lines.append("")

        lines.append("Per-effect overview")
        lines.append("-" * 62)
        lines.append(
            f"{'Stream':<10}{'Flow kg/h':>12}{'Conc %':>10}"
            f"{'Density g/cm3':>16}{'BPR °C':>12}"
        )
        lines.append("-" * 62)
        lines.append(
            f"{'Feed':<10}{result.F0:>12.0f}{result.W0:>10.2f}"
            f"{result.Density0:>16.3f}{'-':>12}"
        )
        rows = (
            ("Effect 1", result.F1, result.W1, result.Density1, result.BPR1),
            ("Effect 2", result.F2, result.W2, result.Density2, result.BPR2),
            ("Outlet", result.F3, result.W3, result.Density3, result.BPR3),
        )
        for name, flow, conc, rho, bpr in rows:
            lines.append(
                f"{name:<10}{flow:>12.0f}{conc:>10.2f}{rho:>16.3f}{bpr:>12.2f}"
            )
        lines.append("-" * 62)
        lines.append("")

        lines.append("Final effect vacuum setpoint (send to DCS)")
        lines.append("-" * 62)
        lines.append(f"Target temperature          {result.T3:.2f} °C")
        lines.append(f"Outlet concentration        {result.W3:.2f} %")
        lines.append(f"Boiling-point rise          {result.BPR3:.2f} °C")
        if inputs is not None:
            lines.append(
                f"Static head (level {inputs.level3:.2f} m)  "
                f"{result.static_head:.2f} °C"
            )
        else:
            lines.append(f"Static head correction      {result.static_head:.2f} °C")
        lines.append("")
        lines.append(f"Absolute pressure setpoint  {result.Pset:.3f} kPa")
        lines.append(f"Vacuum gauge                {result.vacuum_mmHg:.0f} mmHg")
        lines.append(f"Vacuum (gauge)              {result.vacuum_kPa_gauge:.1f} kPa")
        lines.append(f"IAPWS reference             {result.Pset_reference:.3f} kPa")
        lines.append("-" * 62)

        active_flags = [k for k, v in result.flags.items() if v]
        if active_flags:
            lines.append(f"WARNINGS: {', '.join(active_flags)}")

        return "\n".join(lines)

    @staticmethod
    def display_result(result: EvaporatorResult,
                       inputs: Optional[EvaporatorInputs] = None) -> None:
        """
        Display evaporator calculation results.

        Args:
            result: Calculation results to display
            inputs: Operating data, if available
        """
        print(EvaporatorView.format_report(result, inputs))

    @staticmethod
    def display_summary(result: EvaporatorResult) -> None:
        """
        Display compact summary of results.

        Args:
            result: Calculation results to summarize
        """
        print(f"Evaporator: Pset={result.Pset:.3f} kPa, "
              f"T3={result.T3:.2f}°C, W3={result.W3:.2f}%", end="")

        # Show warnings if any
        active_flags = [k for k, v in result.flags.items() if v]
        if active_flags:
            print(f" [WARNINGS: {', '.join(active_flags)}]")
        else:
            print()


class EvaporatorTkView:
    """
    Tkinter-based GUI view for the evaporator calculation.

    Provides input fields, feed mode selection, a calculate button, the
    shift sheet and charts of the load split and the vacuum setpoint.
    """

    @staticmethod
    def _saturation_curve():
        """
        Saturation curves for the setpoint chart.

        Returns:
            Tuple of (T_table [°C], P_table [kPa], P_iapws [kPa])
        """
        import numpy as np
        from app_coso4.core.props_service import get_props_service
        from app_coso4.core.saturation import get_saturation_table

        table = get_saturation_table()
        props = get_props_service()

        T_table = table.temperatures
        P_table = table.pressures * 1000
        P_iapws = np.array([props.psat_kPa(T) for T in T_table])
        return T_table, P_table, P_iapws

    @staticmethod
    def open_window(parent):
        """
        Open evaporator calculation window.

        Args:
            parent: Parent Tkinter window
        """
        # Import Tkinter and Matplotlib here to avoid issues in headless environments
        import tkinter as tk
        from tkinter import ttk, messagebox
        import matplotlib
        matplotlib.use('TkAgg')
        from matplotlib.figure import Figure
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

        from app_coso4.modules.evaporator import EvaporatorController

        window = tk.Toplevel(parent)
        window.title("Triple-effect evaporator - Setpoints")
        window.geometry("1200x780")

        controller = EvaporatorController()

        # Variables
        var_F0 = tk.StringVar(value="5000")
        var_mode = tk.IntVar(value=1)
        var_w0 = tk.StringVar(value="20")
        var_feed_T = tk.StringVar(value="60")
        var_feed_rho = tk.StringVar(value="1.168")
        var_TS = tk.StringVar(value="120")
        var_T1 = tk.StringVar(value="100")
        var_T2 = tk.StringVar(value="80")
        var_level3 = tk.StringVar(value="0.5")

        # ========== LEFT PANEL: Inputs ==========
        left_frame = ttk.Frame(window, padding=10)
        left_frame.grid(row=0, column=0, sticky="nsew", padx=5, pady=5)

        ttk.Label(
            left_frame,
            text="Operating data",
            font=("Arial", 12, "bold"),
        ).grid(row=0, column=0, columnspan=2, pady=10)

        ttk.Label(left_frame, text="Feed flow F0 [kg/h]:").grid(row=1, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_F0, width=20).grid(row=1, column=1, pady=2)

        ttk.Label(left_frame, text="Feed concentration:", font=("Arial", 10, "bold")).grid(
            row=2, column=0, columnspan=2, pady=5, sticky="w"
        )
        ttk.Radiobutton(left_frame, text="[1] Concentration %", variable=var_mode, value=1).grid(
            row=3, column=0, columnspan=2, sticky="w"
        )
        ttk.Radiobutton(left_frame, text="[2] Temperature + density", variable=var_mode, value=2).grid(
            row=4, column=0, columnspan=2, sticky="w"
        )

        ttk.Label(left_frame, text="Concentration w0 [%]:").grid(row=5, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_w0, width=20).grid(row=5, column=1, pady=2)

        ttk.Label(left_frame, text="Feed temperature [°C]:").grid(row=6, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_feed_T, width=20).grid(row=6, column=1, pady=2)

        ttk.Label(left_frame, text="Feed density [g/cm³]:").grid(row=7, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_feed_rho, width=20).grid(row=7, column=1, pady=2)

        ttk.Separator(left_frame, orient="horizontal").grid(
            row=8, column=0, columnspan=2, sticky="ew", pady=10
        )

        ttk.Label(left_frame, text="Steam temperature TS [°C]:").grid(row=9, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_TS, width=20).grid(row=9, column=1, pady=2)

        ttk.Label(left_frame, text="Effect 1 outlet T1 [°C]:").grid(row=10, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_T1, width=20).grid(row=10, column=1, pady=2)

        ttk.Label(left_frame, text="Effect 2 outlet T2 [°C]:").grid(row=11, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_T2, width=20).grid(row=11, column=1, pady=2)

        ttk.Label(left_frame, text="Effect 3 level [m]:").grid(row=12, column=0, sticky="w", pady=2)
        ttk.Entry(left_frame, textvariable=var_level3, width=20).grid(row=12, column=1, pady=2)

        def calculate():
            try:
                F0 = float(var_F0.get())
                TS = float(var_TS.get())
                T1 = float(var_T1.get())
                T2 = float(var_T2.get())
                level3 = float(var_level3.get())

                if var_mode.get() == 1:
                    w0 = float(var_w0.get())
                else:
                    w0 = controller.resolve_feed_concentration(
                        float(var_feed_T.get()), float(var_feed_rho.get())
                    )
                    var_w0.set(f"{w0:.2f}")

                result = controller.solve(F0, w0, TS, T1, T2, level3)
                inputs = EvaporatorInputs(
                    F0=F0, w0=w0, TS=TS, T1_out=T1, T2_out=T2, level3=level3
                )

                results_text.delete("1.0", "end")
                results_text.insert("1.0", EvaporatorView.format_report(result, inputs))
                plot_charts(result)

            except ValueError as e:
                messagebox.showerror("Error", f"Invalid value:\n{str(e)}")

        ttk.Button(
            left_frame,
            text="▶ Calculate",
            command=calculate,
            width=20,
        ).grid(row=13, column=0, columnspan=2, pady=20)

        # ========== RIGHT PANEL: Results ==========
        right_frame = ttk.Frame(window, padding=10)
        right_frame.grid(row=0, column=1, sticky="nsew", padx=5, pady=5)

        ttk.Label(
            right_frame,
            text="Shift sheet",
            font=("Arial", 12, "bold"),
        ).grid(row=0, column=0, pady=10, sticky="w")

        results_text = tk.Text(right_frame, width=66, height=22, wrap="none",
                               font=("Courier", 9))
        results_text.grid(row=1, column=0, sticky="nsew", pady=5)

        scrollbar = ttk.Scrollbar(right_frame, orient="vertical", command=results_text.yview)
        scrollbar.grid(row=1, column=1, sticky="ns")
        results_text.config(yscrollcommand=scrollbar.set)

        # ========== BOTTOM PANEL: Plots ==========
        plot_frame = ttk.LabelFrame(window, text="Load split and vacuum setpoint", padding=10)
        plot_frame.grid(row=1, column=0, columnspan=2, sticky="nsew", padx=5, pady=5)

        fig = Figure(figsize=(14, 4.5), dpi=100)
        ax_load = fig.add_subplot(121)
        ax_sat = fig.add_subplot(122)
        ax_conc = ax_load.twinx()

        canvas = FigureCanvasTkAgg(fig, master=plot_frame)
        canvas.get_tk_widget().pack(fill="both", expand=True)

        def plot_charts(result: EvaporatorResult):
            """Plot evaporation per effect and the setpoint on the saturation curve."""
            ax_load.clear()
            ax_sat.clear()

            # ========== LOAD SPLIT ==========
            effects = ["Effect 1", "Effect 2", "Effect 3"]
            loads = [result.V1, result.V2, result.V3]
            bars = ax_load.bar(effects, loads, color=["tab:red", "tab:orange", "tab:blue"])
            for bar, ratio in zip(bars, (result.R1, result.R2, result.R3)):
                ax_load.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                             f"{ratio * 100:.1f} %", ha="center", va="bottom", fontsize=9)
            ax_load.set_ylabel("Evaporation [kg/h]", fontsize=11, fontweight="bold")
            ax_load.set_title("Evaporation load per effect", fontsize=12, fontweight="bold")
            ax_load.grid(True, axis="y", alpha=0.3, linestyle=":")

            ax_conc.clear()
            ax_conc.plot(effects, [result.W1, result.W2, result.W3], "ko-", label="Concentration")
            ax_conc.set_ylabel("Concentration [%]")

            # ========== SATURATION CURVE ==========
            T_table, P_table, P_iapws = EvaporatorTkView._saturation_curve()
            ax_sat.plot(T_table, P_table, "b-", linewidth=2, label="Plant steam table")
            ax_sat.plot(T_table, P_iapws, "gray", linewidth=1, linestyle="--", label="IAPWS (CoolProp)")
            ax_sat.plot(result.T3, result.Pset, "rs", markersize=10, label="Setpoint")
            ax_sat.annotate(f"{result.Pset:.2f} kPa\n{result.T3:.2f} °C",
                            xy=(result.T3, result.Pset),
                            xytext=(result.T3 + 15, result.Pset * 2.5),
                            fontsize=9, arrowprops=dict(arrowstyle="->", color="red"))
            ax_sat.set_xlabel("Saturation temperature [°C]", fontsize=11, fontweight="bold")
            ax_sat.set_ylabel("Absolute pressure [kPa]", fontsize=11, fontweight="bold")
            ax_sat.set_title("Final effect vacuum setpoint", fontsize=12, fontweight="bold")
            ax_sat.set_yscale("log")
            ax_sat.set_xlim(0, 120)
            ax_sat.set_ylim(0.5, 300)
            ax_sat.grid(True, alpha=0.3, which="both", linestyle=":")
            ax_sat.legend(loc="best", fontsize=9, framealpha=0.9)

            fig.tight_layout()
            canvas.draw()

        # Configure grid weights
        window.columnconfigure(0, weight=1)
        window.columnconfigure(1, weight=2)
        window.rowconfigure(0, weight=1)
        window.rowconfigure(1, weight=1)

        left_frame.columnconfigure(1, weight=1)
        right_frame.columnconfigure(0, weight=1)
        right_frame.rowconfigure(1, weight=1)
