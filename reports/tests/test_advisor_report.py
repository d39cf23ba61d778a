"""
Tests for advisor Markdown rendering.
Result dicts are built from real analyses so the shape matches run_advisor.
"""

import json
import pytest
from dataclasses import asdict

from analysis.calculations.health import START_INVESTING
from analysis.holding_analysis import analyze_holding, analyze_portfolio
from reports.advisor_report import render_advisor_report, DISCLAIMER


@pytest.fixture
def advisor_result():
    closes = [100.0 + i for i in range(250)]
    analyses = [
        analyze_holding('TCS', closes, quantity=10, invested=2000.0, name='Tata Consultancy'),
        analyze_holding('INFY', closes[:30], quantity=4, invested=400.0),
    ]
    return {
        'status': 'completed',
        'as_of': '2024-06-30T10:00:00',
        'period': '1y',
        'holdings': [a.to_dict() for a in analyses],
        'health': asdict(analyze_portfolio(analyses)),
        'errors': [],
        'output_path': None,
    }


class TestRenderAdvisorReport:
    """Tests for render_advisor_report."""

    def test_header(self, advisor_result):
        report = render_advisor_report(advisor_result)

        assert report.startswith("# Portfolio Advisor Report")
        assert "**Generated:** 2024-06-30T10:00:00" in report
        assert "**History Window:** 1y" in report

    def test_holdings_table(self, advisor_result):
        report = render_advisor_report(advisor_result)

        assert "| Ticker | Qty | Price | Value | P&L | Signal |" in report
        assert "| TCS | 10 | ₹349.00 | ₹3,490 | ₹1,490 (+74.5%) | HOLD (15) |" in report

    def test_holding_section(self, advisor_result):
        report = render_advisor_report(advisor_result)

        assert "### TCS: Tata Consultancy" in report
        assert "**Reason:** Bullish trend (50-MA above 200-MA)" in report
        assert "- 50-day average: ₹324.50" in report
        assert "- RSI (14): 100" in report
        assert "### INFY: INFY" in report

    def test_projection_rows_in_horizon_order(self, advisor_result):
        report = render_advisor_report(advisor_result)

        one_month = report.index("| 1 Month |")
        six_months = report.index("| 6 Months |")
        one_year = report.index("| 1 Year |")
        assert one_month < six_months < one_year

    def test_renders_after_json_round_trip(self, advisor_result):
        """Persisted results have string projection keys and plain-string enums."""
        reloaded = json.loads(json.dumps(advisor_result))

        assert render_advisor_report(reloaded) == render_advisor_report(advisor_result)

    def test_health_section(self, advisor_result):
        report = render_advisor_report(advisor_result)

        assert "## Portfolio Health" in report
        assert "**Diversification Score:**" in report
        assert "### Suggestions" in report
        assert "**Volatility:** Low" in report

    def test_no_holdings(self):
        report = render_advisor_report({
            'as_of': '2024-06-30T10:00:00', 'period': '1y', 'holdings': [],
            'health': asdict(analyze_portfolio([])), 'errors': []
        })

        assert "*No active holdings to analyze.*" in report
        assert "**Grade:** D" in report
        assert f"- {START_INVESTING}" in report

    def test_errors_section(self, advisor_result):
        advisor_result['errors'] = [
            {'ticker': 'WIPRO', 'error': 'No historical data for WIPRO'},
            {'ticker': None, 'error': 'Failed to write result'},
        ]

        report = render_advisor_report(advisor_result)

        assert "## Data Issues" in report
        assert "- WIPRO: No historical data for WIPRO" in report
        assert "- output: Failed to write result" in report

    def test_ends_with_disclaimer(self, advisor_result):
        assert render_advisor_report(advisor_result).endswith(DISCLAIMER)
