"""
SIP (systematic investment plan) calculator.
Future value of a fixed monthly contribution, plus a chart series.
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import List, Tuple, Union


MONTHLY_SAMPLE_LIMIT = 60
QUARTERLY_SAMPLE_STEP = 3


def whole_units(value: float) -> Union[int, float]:
    # inf and nan have no integer form; they pass through as floats
    return round(value) if math.isfinite(value) else float(value)


@dataclass(frozen=True)
class SIPPoint:
    """One chart sample: cumulative contribution and compounded value."""
    month: int
    year: float
    invested: int
    value: int


@dataclass(frozen=True)
class SIPResult:
    """SIP totals (rounded to whole currency units, inf/nan kept as floats) and chart series."""
    total_invested: int
    future_value: int
    wealth_gained: int
    return_multiple: float
    monthly_data: Tuple[SIPPoint, ...]


def sip_future_value(monthly_amount: float, annual_rate: float, months: int) -> float:
    """
    Future value of an annuity due (contribution at the start of each month).

    Formula: P × ((1 + r)^n - 1) / r × (1 + r), r = annual_rate / 1200

    With a 0% rate this degrades to P × n.
    """
    monthly_rate = annual_rate / 1200

    if monthly_rate == 0:
        return monthly_amount * months

    # Overflowing horizons give inf and negative fractional bases nan, never raise
    with np.errstate(invalid='ignore', over='ignore'):
        growth = np.power(1 + monthly_rate, months)

    return float(monthly_amount * ((growth - 1) / monthly_rate) * (1 + monthly_rate))


def sip_schedule(monthly_amount: float, annual_rate: float, months: int) -> List[SIPPoint]:
    """
    Build the month-by-month growth series for charting.

    Every month is sampled when the horizon is <= 60 months, otherwise every
    3rd month. The final month is always included.
    """
    monthly_rate = annual_rate / 1200
    step = 1 if months <= MONTHLY_SAMPLE_LIMIT else QUARTERLY_SAMPLE_STEP

    points = []
    running_invested = 0.0
    running_value = 0.0

    for month in range(1, months + 1):
        running_invested += monthly_amount
        running_value = (running_value + monthly_amount) * (1 + monthly_rate)

        if month % step == 0 or month == months:
            points.append(SIPPoint(
                month=month,
                year=round(month / 12, 1),
                invested=whole_units(running_invested),
                value=whole_units(running_value)
            ))

    return points


def calculate_sip(monthly_amount: float, annual_rate: float, years: float) -> SIPResult:
    """
    Calculate SIP maturity for a monthly contribution.

    Args:
        monthly_amount: Contribution per month
        annual_rate: Expected annual return as percentage (12.0 = 12%)
        years: Investment horizon in years (rounded to whole months)

    Returns:
        SIPResult with totals and chart series
    """
    months = int(round(years * 12))
    total_invested = monthly_amount * months
    future_value = sip_future_value(monthly_amount, annual_rate, months)

    if total_invested:
        return_multiple = round(future_value / total_invested, 2)
    else:
        return_multiple = 0.0

    return SIPResult(
        total_invested=whole_units(total_invested),
        future_value=whole_units(future_value),
        wealth_gained=whole_units(future_value - total_invested),
        return_multiple=return_multiple,
        monthly_data=tuple(sip_schedule(monthly_amount, annual_rate, months))
    )
