"""
Normalizers for transforming provider data to canonical price points.
Pure functions - no IO, network, or side effects.
"""

import math
from datetime import date, datetime
from typing import Dict, Any, List, Optional


def _to_float(value: Any) -> float:
    # Missing or NaN provider fields become 0 (display-only fields)
    if value is None:
        return 0.0
    value = float(value)
    return value if math.isfinite(value) else 0.0


def _close_value(raw: Dict[str, Any]) -> Optional[float]:
    close = raw.get('Close')
    if close is None:
        return None
    close = float(close)
    return close if math.isfinite(close) else None


def _iso_date(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    # Strings may carry a time component ("2024-01-15T00:00:00")
    return str(value)[:10]


def normalize_price_points(raw_rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Transform provider-native price rows to price points.

    Minimal normalization:
    - Rows without a close are dropped
    - Date values to ISO "YYYY-MM-DD" strings
    - Field name mapping (provider uses capitalized names)
    - Missing open/high/low/volume default to 0
    - Deduplication by date (keep last to handle corrections)
    - Ascending date order

    Args:
        raw_rows: List of provider-specific price dictionaries

    Returns:
        List of {date, open, high, low, close, volume} dictionaries
    """
    if not raw_rows:
        return []

    by_date = {}

    for raw in raw_rows:
        close = _close_value(raw)
        if close is None:
            continue

        point_date = _iso_date(raw.get('Date', ''))

        by_date[point_date] = {
            'date': point_date,
            'open': _to_float(raw.get('Open')),
            'high': _to_float(raw.get('High')),
            'low': _to_float(raw.get('Low')),
            'close': close,
            'volume': int(_to_float(raw.get('Volume'))),
        }

    return [by_date[d] for d in sorted(by_date)]


def closes_from_points(points: List[Dict[str, Any]]) -> List[float]:
    """Extract the closing-price series from price points."""
    return [point['close'] for point in points]
