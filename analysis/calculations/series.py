"""
Series statistics for closing-price series.
Pure functions - moving averages, RSI momentum, annualized volatility, CAGR.

None of these raise on sparse input: short series degrade to fixed
sentinel values (0 for moving averages, 50 for RSI, 0 for volatility/CAGR).
"""

import math
import numpy as np
from typing import List, Sequence


TRADING_DAYS_PER_YEAR = 252
RSI_PERIOD = 14
RSI_NEUTRAL = 50.0
RSI_MAX = 100.0


def moving_average(closes: Sequence[float], window: int) -> List[float]:
    """
    Calculate simple moving average aligned to the input series.

    Positions without a full trailing window (index < window - 1) hold 0
    so the output always has the same length as the input.

    Args:
        closes: Closing prices in chronological order
        window: Number of trailing sessions to average (e.g. 50, 200)

    Returns:
        List of averages, same length as closes

    Example:
        closes = [1, 2, 3, 4] with window=2
        Returns: [0, 1.5, 2.5, 3.5]
    """
    if window < 1:
        return [0.0] * len(closes)

    prices = np.asarray(closes, dtype=float)

    sma = []
    for i in range(len(prices)):
        if i < window - 1:
            sma.append(0.0)
        else:
            sma.append(float(np.mean(prices[i - window + 1:i + 1])))

    return sma


def momentum_oscillator(closes: Sequence[float], period: int = RSI_PERIOD) -> float:
    """
    Calculate RSI over the most recent `period` price changes.

    Formula: RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    Gains and losses are simple averages over the window (no Wilder
    smoothing).

    Args:
        closes: Closing prices in chronological order
        period: Number of trailing changes to use (default 14)

    Returns:
        RSI in [0, 100]; 50 with fewer than period + 1 closes,
        100 when there were no losses in the window
    """
    if len(closes) < period + 1:
        return RSI_NEUTRAL

    changes = np.diff(np.asarray(closes, dtype=float))[-period:]

    gains = float(changes[changes > 0].sum())
    losses = float(-changes[changes <= 0].sum())

    avg_gain = gains / period
    avg_loss = losses / period

    if avg_loss == 0:
        return RSI_MAX

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def simple_returns(closes: Sequence[float]) -> np.ndarray:
    """
    Calculate period-over-period simple returns.

    Formula: r_t = (P_t - P_{t-1}) / P_{t-1}

    Args:
        closes: Closing prices in chronological order

    Returns:
        Numpy array of returns (length = len(closes) - 1, empty if < 2 closes)
    """
    if len(closes) < 2:
        return np.array([])

    prices = np.asarray(closes, dtype=float)
    return np.diff(prices) / prices[:-1]


def annualized_volatility(
    closes: Sequence[float],
    annualize: int = TRADING_DAYS_PER_YEAR
) -> float:
    """
    Calculate annualized volatility of simple daily returns.

    Formula: σ = pstdev(returns) × √annualize × 100

    Uses population variance (ddof=0) over all returns in the series.

    Args:
        closes: Closing prices in chronological order
        annualize: Annualization factor (252 for daily sessions)

    Returns:
        Annualized volatility as percentage (25.0 = 25%), 0 with < 2 closes
    """
    if len(closes) < 2:
        return 0.0

    returns = simple_returns(closes)
    daily_vol = np.std(returns, ddof=0)

    return float(daily_vol * math.sqrt(annualize) * 100)


def growth_rate(start_value: float, end_value: float, years: float) -> float:
    """
    Calculate compound annual growth rate between two values.

    Formula: CAGR = ((end / start) ^ (1 / years) - 1) × 100

    Args:
        start_value: Value at start of period
        end_value: Value at end of period
        years: Length of period in years

    Returns:
        CAGR as percentage (12.0 = 12%), 0 when start <= 0 or years <= 0
    """
    if start_value <= 0 or years <= 0:
        return 0.0

    # Negative ratios have no real root; numpy yields nan instead of raising
    with np.errstate(invalid='ignore'):
        growth = np.power(end_value / start_value, 1 / years)

    return float((growth - 1) * 100)


cagr = growth_rate
