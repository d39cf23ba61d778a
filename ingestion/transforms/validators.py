"""
Core validators for ledger transactions and price points.
Pure functions - no IO, network, or side effects.
"""

import math
from datetime import date
from typing import Dict, Any


class ValidationError(ValueError):
    """Raised when data validation fails."""
    pass


def validate_transaction_row(row: Dict[str, Any]) -> None:
    """
    Validate a ledger transaction row.

    Args:
        row: Dictionary with ticker, quantity, average_price, is_buy

    Raises:
        ValidationError: If validation fails
    """
    required_keys = {'ticker', 'quantity', 'average_price', 'is_buy'}

    missing = required_keys - set(row.keys())
    if missing:
        raise ValidationError(f"Missing required keys: {sorted(missing)}")

    ticker = row['ticker']
    if not isinstance(ticker, str) or not ticker.strip():
        raise ValidationError(f"ticker must be non-empty string, got {ticker!r}")

    for field in ['quantity', 'average_price']:
        value = row[field]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"{field} must be numeric, got {type(value)}")

        if not math.isfinite(value):
            raise ValidationError(f"{field} must be finite, got {value}")

        if value <= 0:
            raise ValidationError(f"{field} must be positive, got {value}")

    if not isinstance(row['is_buy'], bool):
        raise ValidationError(f"is_buy must be boolean, got {type(row['is_buy'])}")


def validate_price_point(point: Dict[str, Any]) -> None:
    """
    Validate a normalized price point.

    Only close is consumed by the analysis engine; open/high/low/volume
    are checked for type and sign only.

    Args:
        point: Dictionary with date, open, high, low, close, volume

    Raises:
        ValidationError: If validation fails
    """
    required_keys = {'date', 'open', 'high', 'low', 'close', 'volume'}

    missing = required_keys - set(point.keys())
    if missing:
        raise ValidationError(f"Missing required keys: {sorted(missing)}")

    try:
        date.fromisoformat(point['date'])
    except (TypeError, ValueError) as e:
        raise ValidationError(f"date must be ISO-8601 string, got {point['date']!r}") from e

    for field in ['open', 'high', 'low', 'close']:
        value = point[field]
        if not isinstance(value, (int, float)):
            raise ValidationError(f"{field} must be numeric, got {type(value)}")

        if not math.isfinite(value):
            raise ValidationError(f"{field} must be finite, got {value}")

        if value < 0:
            raise ValidationError(f"{field} must be non-negative, got {value}")

    if point['close'] <= 0:
        raise ValidationError(f"close must be positive, got {point['close']}")

    volume = point['volume']
    if not isinstance(volume, int):
        raise ValidationError(f"volume must be integer, got {type(volume)}")

    if volume < 0:
        raise ValidationError(f"volume must be non-negative, got {volume}")
