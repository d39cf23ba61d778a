"""
Data Ingestion Module

Handles fetching and shaping inputs for the analysis engine:
- yfinance for OHLCV history and live quotes
- Transaction ledger aggregation into holdings
"""

__version__ = "0.0.1"
