"""
Console interface - Interactive shift calculation

Prompts the operator for the operating data, runs the evaporator
controller and prints the shift sheet.

Launch with: app-coso4-console

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

import logging
from typing import Callable

from app_coso4.core.constants import TARGET_FINAL_TEMP
from app_coso4.modules.evaporator import (
    EvaporatorController,
    EvaporatorInputs,
    EvaporatorView,
)

InputFn = Callable[[str], str]


def read_float(prompt: str, input_fn: InputFn = input) -> float:
    """
    Ask until the operator enters a number.

    Args:
        prompt: Text shown before the cursor
        input_fn: Line reader, input() by default

    Returns:
        Parsed value
    """
    while True:
        text = input_fn(prompt).strip()
        if not text:
            print("   ^ value required, please re-enter")
            continue
        try:
            return float(text)
        except ValueError:
            print("   ^ invalid input, please enter a number")


def collect_inputs(controller: EvaporatorController,
                   input_fn: InputFn = input) -> EvaporatorInputs:
    """
    Prompt for the six operating values.

    The feed concentration is either typed directly (mode 1) or derived
    from a feed temperature and density reading (any other choice).

    Args:
        controller: Used to resolve the feed concentration from density
        input_fn: Line reader

    Returns:
        Validated operating data
    """
    F0 = read_float("1. Feed flow (kg/h)              -> ", input_fn)

    print("\n2. Feed concentration input:")
    print("   [1] concentration %")
    print("   [2] temperature + density")
    choice = read_float("   choose 1 or 2 -> ", input_fn)

    if choice == 1:
        w0 = read_float("   feed concentration (%)        -> ", input_fn)
    else:
        feed_temp = read_float("   feed temperature (°C)         -> ", input_fn)
        feed_density = read_float("   feed density (g/cm³)          -> ", input_fn)
        w0 = controller.resolve_feed_concentration(feed_temp, feed_density)
        print(f"   -> concentration from density table ≈ {w0:.2f} %")

    TS = read_float("\n3. Effect 1 heating steam (°C)   -> ", input_fn)
    T1_out = read_float("4. Effect 1 liquid outlet (°C)   -> ", input_fn)
    T2_out = read_float("5. Effect 2 liquid outlet (°C)   -> ", input_fn)
    level3 = read_float("\n6. Effect 3 liquid level (m)     -> ", input_fn)

    inputs = EvaporatorInputs(
        F0=F0, w0=w0, TS=TS, T1_out=T1_out, T2_out=T2_out, level3=level3
    )
    inputs.validate()
    return inputs


def run(input_fn: InputFn = input, strict: bool = False) -> int:
    """
    One interactive calculation.

    Returns:
        Process exit code (0 on success, 1 on invalid data)
    """
    controller = EvaporatorController(strict=strict)
    print("=" * 62)
    print("      CoSO4 triple-effect evaporation shift calculator")
    print("=" * 62 + "\n")

    try:
        inputs = collect_inputs(controller, input_fn)
        result = controller.model.solve(inputs)
    except ValueError as e:
        print(f"\nCalculation rejected: {e}")
        return 1

    print()
    EvaporatorView.display_result(result, inputs)
    print(
        f"\nSet the final effect to {result.Pset:.3f} kPa (abs) "
        f"to hold {TARGET_FINAL_TEMP:.1f} °C."
    )
    return 0


def main():
    """Console entry point."""
    logging.basicConfig(level=logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    raise SystemExit(run())


if __name__ == "__main__":
    main()
