"""
Shared piecewise-linear helpers for the empirical property tables.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

from typing import Sequence, Tuple
import numpy as np

from app_coso4.core.errors import TableIntegrityError


def as_axis(values: Sequence[float], name: str) -> np.ndarray:
    """
    Convert a table column to a float array and check it can be bracketed.

    Args:
        values: Column values in table order
        name: Column name used in error messages

    Returns:
        1-D float64 array

    Raises:
        TableIntegrityError: If the column is empty or not strictly increasing
    """
    axis = np.asarray(values, dtype=float)
    if axis.ndim != 1 or axis.size == 0:
        raise TableIntegrityError(f"Table column '{name}' is empty")
    if axis.size > 1 and not np.all(np.diff(axis) > 0):
        raise TableIntegrityError(
            f"Table column '{name}' is not strictly increasing"
        )
    return axis


def scan_pair(axis: np.ndarray, x: float) -> int:
    """
    Index i of the first consecutive pair with axis[i] <= x <= axis[i+1].

    Equivalent to a forward linear scan: a value equal to an interior point
    lands on the pair ending at that point. x must lie within the axis.
    """
    return max(int(np.searchsorted(axis, x, side="left")) - 1, 0)


def last_le_first_ge(axis: np.ndarray, x: float) -> Tuple[int, int]:
    """
    Indices of the last entry <= x and the first entry >= x.

    Either index is -1 when no such entry exists.
    """
    lower = int(np.searchsorted(axis, x, side="right")) - 1
    upper = int(np.searchsorted(axis, x, side="left"))
    if upper == axis.size:
        upper = -1
    return lower, upper


def lerp(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    """Linear interpolation y0 + (x - x0)/(x1 - x0) * (y1 - y0)."""
    ratio = (x - x0) / (x1 - x0)
    return y0 + ratio * (y1 - y0)
