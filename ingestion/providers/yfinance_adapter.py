"""
yfinance adapter - fetch historical prices and live quotes from Yahoo Finance.
Network IO allowed here, but minimal business logic.
"""

import logging
import yfinance as yf
import pandas as pd
from datetime import date, timedelta
from typing import Dict, Any, List, Optional, Tuple


logger = logging.getLogger(__name__)

# Look-back days per history period
PERIOD_DAYS = {
    '1m': 30,
    '3m': 90,
    '6m': 180,
    '1y': 365,
    '2y': 730,
    '5y': 1825,
}
DEFAULT_PERIOD_DAYS = 365


class YFinanceError(Exception):
    """Raised when yfinance operations fail."""
    pass


def history_window(period: str, today: Optional[date] = None) -> Tuple[date, str]:
    """
    Map a history period to a start date and bar interval.

    Unknown periods fall back to one year. Five-year history uses weekly
    bars, everything else daily.

    Args:
        period: Period key ('1m', '3m', '6m', '1y', '2y', '5y')
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start date, yfinance interval string)
    """
    if today is None:
        today = date.today()

    days = PERIOD_DAYS.get(period, DEFAULT_PERIOD_DAYS)
    interval = '1wk' if period == '5y' else '1d'

    return today - timedelta(days=days), interval


def fetch_history(ticker: str, period: str = '1y') -> List[Dict[str, Any]]:
    """
    Fetch historical OHLCV bars for a ticker.
    Returns raw data in provider format - no normalization.

    Args:
        ticker: Stock ticker symbol (e.g., 'AAPL', 'RELIANCE.NS')
        period: History period key (see PERIOD_DAYS)

    Returns:
        List of raw price dictionaries in yfinance format

    Raises:
        YFinanceError: If fetch fails or ticker is invalid
    """
    _validate_ticker(ticker)
    start, interval = history_window(period)

    try:
        data = yf.download(
            ticker,
            start=start.isoformat(),
            interval=interval,
            progress=False,
            auto_adjust=False
        )
    except Exception as e:
        raise YFinanceError(f"Failed to fetch history for {ticker}: {e}") from e

    if data is None or data.empty:
        logger.warning("No history returned for %s (%s)", ticker, period)
        return []

    # Single-ticker downloads may still carry (field, ticker) columns
    if isinstance(data.columns, pd.MultiIndex):
        data.columns = data.columns.get_level_values(0)

    rows = []
    for date_idx, row in data.iterrows():
        row_dict = {'Date': date_idx.strftime('%Y-%m-%d')}

        for field in ['Open', 'High', 'Low', 'Close', 'Volume']:
            if field in data.columns and pd.notna(row[field]):
                row_dict[field] = float(row[field]) if field != 'Volume' else int(row[field])

        rows.append(row_dict)

    logger.debug("Fetched %d bars for %s (%s, %s)", len(rows), ticker, period, interval)
    return rows


def fetch_quote(ticker: str) -> Dict[str, Any]:
    """
    Fetch a live quote for a ticker.

    Args:
        ticker: Stock ticker symbol

    Returns:
        Dictionary with ticker, price, change, changePercent, name, currency

    Raises:
        YFinanceError: If fetch fails or no price is available
    """
    _validate_ticker(ticker)

    try:
        info = yf.Ticker(ticker).info or {}
    except Exception as e:
        raise YFinanceError(f"Failed to fetch quote for {ticker}: {e}") from e

    price = info.get('regularMarketPrice') or info.get('currentPrice')
    if price is None:
        raise YFinanceError(f"No price available for {ticker}")

    previous_close = info.get('regularMarketPreviousClose') or info.get('previousClose')
    if previous_close:
        change = price - previous_close
        change_percent = change / previous_close * 100
    else:
        change = 0.0
        change_percent = 0.0

    return {
        'ticker': ticker,
        'price': float(price),
        'change': float(change),
        'changePercent': float(change_percent),
        'name': info.get('longName') or info.get('shortName') or ticker,
        'currency': info.get('currency') or 'INR',
    }


def _validate_ticker(ticker: str) -> None:
    """
    Basic ticker validation.

    Args:
        ticker: Stock ticker symbol

    Raises:
        YFinanceError: If ticker is invalid
    """
    if not ticker or not isinstance(ticker, str):
        raise YFinanceError("Ticker must be non-empty string")

    if len(ticker) > 15:
        raise YFinanceError("Ticker too long (max 15 characters)")

    # Alphanumeric plus exchange suffix and index characters
    allowed_chars = set('ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.-^=')
    if not set(ticker.upper()).issubset(allowed_chars):
        raise YFinanceError(f"Ticker contains invalid characters: {ticker}")
