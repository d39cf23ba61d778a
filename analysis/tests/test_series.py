"""
Tests for series statistics.
Synthetic series where means, RSI and volatility are easy to verify by hand.
"""

import pytest
import math
import numpy as np

from analysis.calculations.series import (
    moving_average,
    momentum_oscillator,
    simple_returns,
    annualized_volatility,
    growth_rate,
    cagr,
)


class TestMovingAverage:
    """Tests for simple moving average."""

    def test_moving_average_basic(self):
        """Test 2-period average with hand-computed values."""
        result = moving_average([1.0, 2.0, 3.0, 4.0], 2)

        assert result == [0.0, 1.5, 2.5, 3.5]

    def test_moving_average_shorter_than_window(self):
        """Every position is the 0 placeholder when history is too short."""
        closes = [101.0, 102.5, 99.8]

        result = moving_average(closes, 50)

        assert len(result) == len(closes)
        assert all(v == 0 for v in result)

    def test_moving_average_empty(self):
        """Test with empty series."""
        assert moving_average([], 50) == []

    def test_moving_average_50_day(self):
        """50-day window over 1..250: entry i is the mean of (i-48)..(i+1)."""
        closes = [float(v) for v in range(1, 251)]

        result = moving_average(closes, 50)

        assert len(result) == 250
        assert result[48] == 0
        # Mean of 1..50
        assert result[49] == pytest.approx(25.5)
        for i in range(49, 250):
            assert result[i] == pytest.approx(np.mean(closes[i - 49:i + 1]))

    def test_moving_average_200_day(self):
        """200-day window over 1..250."""
        closes = [float(v) for v in range(1, 251)]

        result = moving_average(closes, 200)

        assert result[198] == 0
        assert result[199] == pytest.approx(100.5)  # mean of 1..200
        assert result[249] == pytest.approx(150.5)  # mean of 51..250

    def test_moving_average_window_of_one(self):
        """Window of 1 reproduces the series."""
        closes = [10.0, 12.0, 11.0]

        assert moving_average(closes, 1) == closes

    def test_moving_average_invalid_window(self):
        """Non-positive windows degrade to placeholders instead of failing."""
        assert moving_average([1.0, 2.0], 0) == [0.0, 0.0]

    def test_moving_average_returns_floats(self):
        """Output entries are plain Python floats."""
        result = moving_average([1, 2, 3], 2)

        assert all(type(v) is float for v in result)


class TestMomentumOscillator:
    """Tests for RSI calculation."""

    def test_rsi_insufficient_data(self):
        """Fewer than period + 1 closes returns neutral 50."""
        closes = [float(v) for v in range(14)]  # 14 closes, need 15

        assert momentum_oscillator(closes) == 50.0

    def test_rsi_monotonic_increase(self):
        """No losses in the window returns 100."""
        closes = [100.0 + i for i in range(30)]

        assert momentum_oscillator(closes) == 100.0

    def test_rsi_monotonic_decrease(self):
        """No gains in the window returns 0."""
        closes = [200.0 - i for i in range(30)]

        assert momentum_oscillator(closes) == pytest.approx(0.0)

    def test_rsi_known_value(self):
        """7 gains of +2 and 7 losses of -1: RS = 2, RSI = 66.67."""
        closes = [500.0, 1.0]  # Outside the trailing window
        price = 100.0
        closes.append(price)
        for i in range(14):
            price += 2.0 if i % 2 == 0 else -1.0
            closes.append(price)

        result = momentum_oscillator(closes)

        assert result == pytest.approx(100 - 100 / 3)

    def test_rsi_flat_series(self):
        """Flat series has zero average loss and reads as 100."""
        assert momentum_oscillator([50.0] * 20) == 100.0

    def test_rsi_custom_period(self):
        """Shorter period only looks at its own window."""
        closes = [10.0, 9.0, 8.0, 9.0, 10.0, 11.0]

        # Last 3 changes are all gains
        assert momentum_oscillator(closes, period=3) == 100.0
        # Last 5 changes: -1, -1, +1, +1, +1 -> RS = 1.5
        assert momentum_oscillator(closes, period=5) == pytest.approx(60.0)

    def test_rsi_bounded(self):
        """RSI stays within [0, 100] on a noisy series."""
        rng = np.random.default_rng(42)
        closes = list(100 + np.cumsum(rng.normal(0, 2, 300)))

        for end in range(15, 300, 7):
            value = momentum_oscillator(closes[:end])
            assert 0 <= value <= 100


class TestVolatility:
    """Tests for annualized volatility."""

    def test_simple_returns(self):
        """Test simple returns with known values."""
        returns = simple_returns([100.0, 110.0, 99.0])

        assert len(returns) == 2
        assert returns[0] == pytest.approx(0.10)
        assert returns[1] == pytest.approx(-0.10)

    def test_simple_returns_insufficient_data(self):
        """Single price has no returns."""
        assert len(simple_returns([100.0])) == 0

    def test_volatility_insufficient_data(self):
        """Fewer than 2 closes returns 0."""
        assert annualized_volatility([]) == 0.0
        assert annualized_volatility([100.0]) == 0.0

    def test_volatility_constant_prices(self):
        """Constant prices have zero volatility."""
        assert annualized_volatility([100.0] * 30) == pytest.approx(0.0)

    def test_volatility_known_value(self):
        """Returns +10%, -10%: population std 0.10, annualized × √252 as percent."""
        result = annualized_volatility([100.0, 110.0, 99.0])

        assert result == pytest.approx(0.10 * math.sqrt(252) * 100)

    def test_volatility_uses_population_variance(self):
        """Population (ddof=0) not sample standard deviation."""
        closes = [100.0, 102.0, 101.0, 105.0, 103.0]
        returns = np.diff(closes) / np.array(closes[:-1])
        expected = np.std(returns, ddof=0) * math.sqrt(252) * 100

        assert annualized_volatility(closes) == pytest.approx(expected)

    def test_volatility_custom_annualization(self):
        """Weekly bars use a 52-period factor."""
        result = annualized_volatility([100.0, 110.0, 99.0], annualize=52)

        assert result == pytest.approx(0.10 * math.sqrt(52) * 100)


class TestGrowthRate:
    """Tests for CAGR."""

    def test_cagr_no_change(self):
        assert growth_rate(100, 100, 1) == 0

    def test_cagr_doubling(self):
        assert growth_rate(100, 200, 1) == pytest.approx(100.0)

    def test_cagr_multi_year(self):
        """100 -> 121 over 2 years is 10% per year."""
        assert growth_rate(100, 121, 2) == pytest.approx(10.0)

    def test_cagr_loss(self):
        assert growth_rate(100, 50, 1) == pytest.approx(-50.0)

    def test_cagr_zero_years(self):
        """Zero or negative horizon returns 0."""
        assert growth_rate(100, 250, 0) == 0
        assert growth_rate(40, 10, 0) == 0
        assert growth_rate(100, 250, -1) == 0

    def test_cagr_non_positive_start(self):
        """Zero or negative start value returns 0."""
        assert growth_rate(0, 100, 1) == 0
        assert growth_rate(-10, 100, 1) == 0

    def test_cagr_negative_end_is_nan(self):
        """Negative end value has no real root and yields nan without raising."""
        assert math.isnan(growth_rate(100, -50, 2))

    def test_cagr_alias(self):
        assert cagr is growth_rate
