"""
Orchestrated advisor job - transaction ledger to portfolio advice JSON.
Loads the ledger, fetches quotes and history, calls pure analysis functions,
persists the result.
"""

import logging
import os
from dataclasses import dataclass, field, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple

from dotenv import load_dotenv

from analysis.holding_analysis import HoldingAnalysis, analyze_holding, analyze_portfolio
from ingestion.providers.yfinance_adapter import (
    fetch_history,
    fetch_quote,
    YFinanceError,
    PERIOD_DAYS,
)
from ingestion.transforms.ledger import (
    load_transactions_csv,
    aggregate_holdings,
    active_tickers,
    LedgerError,
)
from ingestion.transforms.normalizers import normalize_price_points, closes_from_points
from ingestion.transforms.validators import validate_price_point, ValidationError
from reports.atomic_writer import write_json_atomic, AtomicWriteError


# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class AdvisorJobError(Exception):
    """Raised when advisor job configuration is invalid."""
    pass


@dataclass
class AdvisorConfig:
    """Configuration for an advisor run."""
    ledger_path: Path
    period: str = field(default_factory=lambda: os.getenv('ADVISOR_HISTORY_PERIOD', '1y'))
    output_dir: Optional[Path] = field(
        default_factory=lambda: Path(os.getenv('ADVISOR_OUTPUT_DIR', './data/processed/advisor'))
    )

    def __post_init__(self):
        """Validate and normalize paths."""
        self.ledger_path = Path(self.ledger_path)

        if self.period not in PERIOD_DAYS:
            valid = ', '.join(PERIOD_DAYS)
            raise AdvisorJobError(f"Unknown history period {self.period!r} (expected one of: {valid})")

        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)


def _clean_points(ticker: str, points: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    valid = []
    for point in points:
        try:
            validate_price_point(point)
        except ValidationError as e:
            logger.warning("Dropping %s bar %s: %s", ticker, point.get('date'), e)
            continue
        valid.append(point)
    return valid


def _analyze_ticker(
    ticker: str,
    position: Dict[str, float],
    period: str
) -> Tuple[HoldingAnalysis, Dict[str, Any]]:
    """Fetch market data for one ticker and analyze it."""
    # A failed live quote falls back to the last close
    try:
        quote = fetch_quote(ticker)
    except YFinanceError as e:
        logger.warning("Quote unavailable for %s: %s", ticker, e)
        quote = None

    raw_rows = fetch_history(ticker, period)
    points = _clean_points(ticker, normalize_price_points(raw_rows))

    if not points:
        raise YFinanceError(f"No historical data for {ticker}")

    analysis = analyze_holding(
        ticker=ticker,
        closes=closes_from_points(points),
        quantity=position['quantity'],
        invested=position['invested'],
        live_price=quote['price'] if quote else None,
        name=quote['name'] if quote else None
    )

    extras = {
        'currency': quote['currency'] if quote else None,
        'chart': [{'date': p['date'], 'price': p['close']} for p in points],
    }
    return analysis, extras


def run_advisor(config: AdvisorConfig) -> Dict[str, Any]:
    """
    Run the complete advisor pipeline.

    Pipeline stages:
    1. Load and aggregate the transaction ledger
    2. Fetch quote and history for each active ticker
    3. Analyze each holding (signal, CAGR, projections)
    4. Score portfolio health
    5. Persist result JSON (when output_dir is set)

    Per-ticker fetch failures are collected in 'errors' and do not fail the run.

    Args:
        config: Advisor configuration

    Returns:
        Dictionary with run status, holdings analyses, health report, errors
    """
    start_time = datetime.now()

    try:
        transactions = load_transactions_csv(config.ledger_path)
    except LedgerError as e:
        logger.error("Advisor run failed: %s", e)
        return {
            'status': 'failed',
            'error_message': str(e),
            'holdings': [],
            'health': None,
            'errors': [],
            'output_path': None,
            'duration_seconds': (datetime.now() - start_time).total_seconds()
        }

    positions = aggregate_holdings(transactions)
    tickers = active_tickers(positions)
    logger.info("Analyzing %d active holdings (%s)", len(tickers), config.period)

    analyses = []
    holdings = []
    errors = []
    for ticker in tickers:
        try:
            analysis, extras = _analyze_ticker(ticker, positions[ticker], config.period)
            analyses.append(analysis)
            holdings.append({**analysis.to_dict(), **extras})
        except YFinanceError as e:
            logger.warning("Skipping %s: %s", ticker, e)
            errors.append({'ticker': ticker, 'error': str(e)})

    health = analyze_portfolio(analyses)

    result = {
        'status': 'completed',
        'as_of': start_time.isoformat(timespec='seconds'),
        'period': config.period,
        'holdings': holdings,
        'health': asdict(health),
        'errors': errors,
        'output_path': None,
    }

    if config.output_dir is not None:
        output_path = config.output_dir / f"advisor_{start_time:%Y%m%d_%H%M%S}.json"
        try:
            write_json_atomic(result, output_path)
            result['output_path'] = str(output_path)
        except AtomicWriteError as e:
            logger.error("Could not persist advisor result: %s", e)
            errors.append({'ticker': None, 'error': str(e)})

    result['duration_seconds'] = (datetime.now() - start_time).total_seconds()
    return result
