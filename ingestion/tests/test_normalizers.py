"""
Tests for normalizer functions - transform provider rows to price points.
"""

import pytest
from datetime import date, datetime

from ingestion.transforms.normalizers import normalize_price_points, closes_from_points


def _raw(day, close, **extra):
    row = {'Date': day, 'Open': close - 1, 'High': close + 1, 'Low': close - 2,
           'Close': close, 'Volume': 1000}
    row.update(extra)
    return row


class TestNormalizePricePoints:
    """Tests for normalize_price_points."""

    def test_field_mapping(self):
        result = normalize_price_points([_raw('2024-01-15', 185.92)])

        assert result == [{
            'date': '2024-01-15', 'open': 184.92, 'high': 186.92,
            'low': 183.92, 'close': 185.92, 'volume': 1000
        }]

    def test_sorted_ascending(self):
        rows = [_raw('2024-01-17', 3.0), _raw('2024-01-15', 1.0), _raw('2024-01-16', 2.0)]

        result = normalize_price_points(rows)

        assert [p['date'] for p in result] == ['2024-01-15', '2024-01-16', '2024-01-17']
        assert closes_from_points(result) == [1.0, 2.0, 3.0]

    def test_duplicate_dates_keep_last(self):
        """Later rows for the same date are provider corrections."""
        rows = [_raw('2024-01-15', 100.0), _raw('2024-01-15', 101.5)]

        result = normalize_price_points(rows)

        assert len(result) == 1
        assert result[0]['close'] == 101.5

    def test_rows_without_close_dropped(self):
        rows = [
            _raw('2024-01-15', 100.0),
            {'Date': '2024-01-16', 'Open': 1.0},
            _raw('2024-01-17', float('nan')),
        ]

        result = normalize_price_points(rows)

        assert [p['date'] for p in result] == ['2024-01-15']

    def test_missing_fields_default_to_zero(self):
        result = normalize_price_points([{'Date': '2024-01-15', 'Close': 50.0, 'Volume': float('nan')}])

        assert result[0]['open'] == 0.0
        assert result[0]['high'] == 0.0
        assert result[0]['low'] == 0.0
        assert result[0]['volume'] == 0

    @pytest.mark.parametrize('raw_date', [
        '2024-01-15',
        '2024-01-15T00:00:00',
        date(2024, 1, 15),
        datetime(2024, 1, 15, 9, 30),
    ])
    def test_dates_to_iso(self, raw_date):
        result = normalize_price_points([_raw(raw_date, 10.0)])

        assert result[0]['date'] == '2024-01-15'

    def test_volume_is_int(self):
        result = normalize_price_points([_raw('2024-01-15', 10.0, Volume=1234.0)])

        assert result[0]['volume'] == 1234
        assert isinstance(result[0]['volume'], int)

    def test_empty_input(self):
        assert normalize_price_points([]) == []
        assert closes_from_points([]) == []
