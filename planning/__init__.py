"""
Planning Calculators Module

Deterministic financial-planning models:
- SIP (monthly recurring investment) future value
- FD (fixed deposit) maturity under quarterly compounding
- Risk-profile asset allocation suggestions
"""

__version__ = "0.0.1"
