"""
Price projection from an annual growth rate.
Pure functions - no bounds checking, callers own input sanity.
"""

import numpy as np
from typing import Dict, Sequence


DEFAULT_HORIZONS = (1, 6, 12)


def project_price(current_price: float, annual_growth_rate: float, months: float) -> float:
    """
    Compound a price forward at an annual growth rate.

    Formula: P × (1 + rate / 100) ^ (months / 12)

    Args:
        current_price: Starting price
        annual_growth_rate: Annual growth as percentage (12.0 = 12%)
        months: Projection horizon in months

    Returns:
        Projected price (nan when the rate is below -100% and the
        horizon is fractional)
    """
    years = months / 12

    with np.errstate(invalid='ignore'):
        growth = np.power(1 + annual_growth_rate / 100, years)

    return float(current_price * growth)


def project_horizons(
    current_price: float,
    annual_growth_rate: float,
    horizons: Sequence[int] = DEFAULT_HORIZONS
) -> Dict[int, float]:
    """
    Project a price over several month horizons.

    Returns:
        Dictionary mapping months ahead to projected price
    """
    return {
        months: project_price(current_price, annual_growth_rate, months)
        for months in horizons
    }
