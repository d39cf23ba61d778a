"""
Analysis Engine Module

Pure calculations over price series and holdings:
- Moving averages, RSI momentum, annualized volatility, CAGR
- Buy/Hold/Sell signal classification
- Price projection
- Portfolio health scoring
"""

__version__ = "0.0.1"
