"""
Tests for price projection.
"""

import pytest
import math

from analysis.calculations.projection import project_price, project_horizons
from analysis.calculations.series import growth_rate


class TestProjectPrice:
    """Tests for project_price."""

    def test_one_year(self):
        assert project_price(100.0, 10.0, 12) == pytest.approx(110.0)

    def test_two_years_compounds(self):
        assert project_price(100.0, 10.0, 24) == pytest.approx(121.0)

    def test_fractional_year(self):
        """Six months at 21% compounds to √1.21 = 1.1."""
        assert project_price(100.0, 21.0, 6) == pytest.approx(110.0)

    def test_zero_months(self):
        assert project_price(250.0, 35.0, 0) == pytest.approx(250.0)

    def test_zero_growth(self):
        assert project_price(250.0, 0.0, 12) == pytest.approx(250.0)

    def test_negative_growth(self):
        assert project_price(100.0, -50.0, 12) == pytest.approx(50.0)

    def test_extreme_rate_does_not_raise(self):
        """Rates below -100% with a fractional horizon yield nan."""
        assert math.isnan(project_price(100.0, -150.0, 6))

    def test_round_trip_with_cagr(self):
        """CAGR over a 1-year start/end pair projects start back to end."""
        start, end = 80.0, 100.0
        rate = growth_rate(start, end, 1)

        assert project_price(start, rate, 12) == pytest.approx(end)


class TestProjectHorizons:
    """Tests for multi-horizon projection."""

    def test_default_horizons(self):
        result = project_horizons(100.0, 12.0)

        assert list(result.keys()) == [1, 6, 12]
        assert result[12] == pytest.approx(112.0)
        assert result[1] < result[6] < result[12]

    def test_custom_horizons(self):
        result = project_horizons(100.0, 10.0, horizons=[24])

        assert result == pytest.approx({24: 121.0})
