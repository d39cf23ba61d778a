"""
FD (fixed deposit) calculator with quarterly compounding.
"""

import numpy as np
from dataclasses import dataclass

from planning.sip import whole_units


COMPOUNDING_PERIODS_PER_YEAR = 4


@dataclass(frozen=True)
class FDResult:
    """FD maturity (whole currency units) and total return percentage."""
    principal: int
    maturity_amount: int
    interest_earned: int
    effective_return: float


def fd_maturity(principal: float, annual_rate: float, years: float) -> float:
    """
    Maturity value under quarterly compounding.

    Formula: P × (1 + rate / 400) ^ (4 × years)

    Rates below -400% with a fractional number of quarters give nan and
    overflowing terms give inf; neither raises.
    """
    n = COMPOUNDING_PERIODS_PER_YEAR

    with np.errstate(invalid='ignore', over='ignore'):
        growth = np.power(1 + annual_rate / (100 * n), n * years)

    return float(principal * growth)


def calculate_fd(principal: float, annual_rate: float, years: float) -> FDResult:
    """
    Calculate FD maturity and interest.

    Args:
        principal: Deposit amount
        annual_rate: Annual interest rate as percentage (7.0 = 7%)
        years: Deposit term in years

    Returns:
        FDResult; effective_return is total (not annualized) return in
        percent, rounded to 2 decimals
    """
    maturity_amount = fd_maturity(principal, annual_rate, years)

    if principal:
        effective_return = round((maturity_amount / principal - 1) * 100, 2)
    else:
        effective_return = 0.0

    return FDResult(
        principal=whole_units(principal),
        maturity_amount=whole_units(maturity_amount),
        interest_earned=whole_units(maturity_amount - principal),
        effective_return=effective_return
    )
