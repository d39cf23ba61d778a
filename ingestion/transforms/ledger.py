"""
Transaction ledger aggregation.
Turns an append-only buy/sell ledger into per-ticker net holdings.
"""

import logging
import pandas as pd
from pathlib import Path
from typing import Dict, Any, List, Iterable, Union

from ingestion.transforms.validators import validate_transaction_row


logger = logging.getLogger(__name__)

LEDGER_COLUMNS = ['ticker', 'quantity', 'average_price', 'is_buy']

_TRUE_VALUES = {'true', '1', 'yes', 'y', 'buy', 'b'}
_FALSE_VALUES = {'false', '0', 'no', 'n', 'sell', 's'}


class LedgerError(Exception):
    """Raised when the transaction ledger cannot be loaded."""
    pass


def aggregate_holdings(transactions: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, float]]:
    """
    Aggregate transactions into net quantity and net invested per ticker.

    Buys add quantity × average_price to invested, sells subtract it.
    Tickers appear in order of first transaction.

    Args:
        transactions: Ledger rows with ticker, quantity, average_price, is_buy

    Returns:
        Dictionary mapping ticker to {'quantity': float, 'invested': float}
    """
    holdings: Dict[str, Dict[str, float]] = {}

    for tx in transactions:
        ticker = tx['ticker']
        quantity = float(tx['quantity'])
        amount = quantity * float(tx['average_price'])

        if ticker not in holdings:
            holdings[ticker] = {'quantity': 0.0, 'invested': 0.0}

        if tx['is_buy']:
            holdings[ticker]['quantity'] += quantity
            holdings[ticker]['invested'] += amount
        else:
            holdings[ticker]['quantity'] -= quantity
            holdings[ticker]['invested'] -= amount

    return holdings


def active_tickers(holdings: Dict[str, Dict[str, float]]) -> List[str]:
    """Tickers with a positive net quantity, in ledger order."""
    return [ticker for ticker, position in holdings.items() if position['quantity'] > 0]


def _parse_is_buy(value: Any) -> bool:
    if isinstance(value, bool):
        return value

    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False

    raise ValueError(f"unrecognized is_buy value: {value!r}")


def load_transactions_csv(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Load and validate a transaction ledger CSV.

    Required columns: ticker, quantity, average_price, is_buy.
    Optional columns (e.g. created_at) are passed through.
    Tickers are upper-cased.

    Args:
        path: Path to CSV file

    Returns:
        List of validated transaction dictionaries

    Raises:
        LedgerError: If the file is missing, malformed, or a row is invalid
    """
    path = Path(path)
    if not path.exists():
        raise LedgerError(f"Ledger not found: {path}")

    try:
        df = pd.read_csv(path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise LedgerError(f"Failed to read ledger {path}: {e}") from e

    missing = [col for col in LEDGER_COLUMNS if col not in df.columns]
    if missing:
        raise LedgerError(f"Ledger {path} missing columns: {missing}")

    transactions = []
    for line_no, record in enumerate(df.to_dict('records'), start=2):
        row = dict(record)
        row['ticker'] = str(row['ticker']).strip().upper() if pd.notna(row['ticker']) else ''
        try:
            row['is_buy'] = _parse_is_buy(row['is_buy'])
            row['quantity'] = float(row['quantity'])
            row['average_price'] = float(row['average_price'])
            validate_transaction_row(row)
        except (ValueError, TypeError) as e:
            raise LedgerError(f"Invalid transaction on line {line_no}: {e}") from e

        transactions.append(row)

    logger.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions
