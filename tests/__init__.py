"""
Test Suite for Portfolio Advisor

Includes:
- Unit tests for series statistics, signals, projection, health scoring
- Unit tests for planning calculators
- Mocked-provider tests for ingestion and the advisor job
"""
