"""
Holding analysis - composes series statistics, signal, and projections per
position, then portfolio health across positions.
Pure functions; inputs are closes and aggregated positions, not raw provider data.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence

from analysis.calculations.series import (
    moving_average,
    momentum_oscillator,
    annualized_volatility,
    growth_rate,
)
from analysis.calculations.signals import SignalResult, classify_signal
from analysis.calculations.projection import project_horizons
from analysis.calculations.health import (
    HoldingSnapshot,
    PortfolioHealthReport,
    portfolio_health,
)


SHORT_WINDOW = 50
LONG_WINDOW = 200
# CAGR window assumes the series spans one year
CAGR_YEARS = 1


@dataclass(frozen=True)
class HoldingAnalysis:
    """Per-position analysis: valuation, indicators, signal and projections."""
    ticker: str
    name: str
    quantity: float
    invested: float
    current_price: float
    current_value: float
    pnl: float
    pnl_percent: float
    sma50: float
    sma200: float
    rsi: float
    volatility: float
    cagr: float
    signal: SignalResult
    projections: Dict[int, float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _last(values: Sequence[float], offset: int = 1) -> float:
    # Missing positions read as 0, same as an unfilled moving-average slot
    return values[-offset] if len(values) >= offset else 0.0


def analyze_holding(
    ticker: str,
    closes: Sequence[float],
    quantity: float,
    invested: float,
    live_price: Optional[float] = None,
    name: Optional[str] = None
) -> HoldingAnalysis:
    """
    Analyze one position from its closing-price history.

    Args:
        ticker: Stock ticker symbol
        closes: Closing prices in chronological order (typically one year)
        quantity: Net quantity held
        invested: Net amount invested
        live_price: Latest quote price; falls back to the last close
        name: Display name (defaults to ticker)

    Returns:
        HoldingAnalysis for the position
    """
    sma50 = moving_average(closes, SHORT_WINDOW)
    sma200 = moving_average(closes, LONG_WINDOW)
    rsi = momentum_oscillator(closes)
    volatility = annualized_volatility(closes)

    current_price = live_price or _last(closes)

    signal = classify_signal(
        sma50_current=_last(sma50),
        sma200_current=_last(sma200),
        sma50_prev=_last(sma50, 2),
        sma200_prev=_last(sma200, 2),
        rsi=rsi,
        price=current_price
    )

    cagr = growth_rate(closes[0], closes[-1], CAGR_YEARS) if closes else 0.0

    current_value = quantity * current_price
    pnl = current_value - invested
    pnl_percent = pnl / invested * 100 if invested > 0 else 0.0

    return HoldingAnalysis(
        ticker=ticker,
        name=name or ticker,
        quantity=quantity,
        invested=invested,
        current_price=current_price,
        current_value=current_value,
        pnl=pnl,
        pnl_percent=pnl_percent,
        sma50=_last(sma50),
        sma200=_last(sma200),
        rsi=rsi,
        volatility=volatility,
        cagr=cagr,
        signal=signal,
        projections=project_horizons(current_price, cagr)
    )


def analyze_portfolio(analyses: List[HoldingAnalysis]) -> PortfolioHealthReport:
    """
    Score portfolio health from per-position analyses.

    Each position contributes its current value and computed volatility.
    """
    snapshots = [
        HoldingSnapshot(
            ticker=a.ticker,
            current_value=a.current_value,
            volatility=a.volatility
        )
        for a in analyses
    ]
    return portfolio_health(snapshots)
