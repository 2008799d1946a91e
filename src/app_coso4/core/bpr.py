"""Boiling-point rise correlation for CoSO4·7H2O solutions."""


def boiling_point_rise(w: float) -> float:
    """
    Boiling-point elevation of the solution above pure water.

    Empirical cubic fitted on the 45-53 % process range. No domain check:
    the polynomial goes negative for dilute solutions and that value is
    returned unchanged.

    Args:
        w: Mass concentration [%]

    Returns:
        Boiling-point rise [°C]
    """
    return 0.00028 * w * w * w - 0.021 * w * w + 0.78 * w - 8.1
