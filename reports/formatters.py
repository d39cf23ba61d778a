"""
Display formatters for advisor output.
Deterministic string formatting for percentages, currency, and prices.
"""

from typing import Optional


class FormatterError(Exception):
    """Raised when formatter input validation fails."""
    pass


def _check_numeric(value, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatterError(f"{label} value must be numeric, got {type(value)}")


def format_percentage(value: Optional[float], decimal_places: int = 1) -> str:
    """
    Format a percentage value.

    Engine outputs are already in percent (12.5 = 12.5%), so no scaling.

    Args:
        value: Percentage value
        decimal_places: Number of decimal places (default: 1)

    Returns:
        Formatted percentage string (e.g., "12.5%")
    """
    if value is None:
        return "Not available"

    _check_numeric(value, "Percentage")

    return f"{value:.{decimal_places}f}%"


def format_signed_percentage(value: Optional[float], decimal_places: int = 1) -> str:
    """Format a percentage with an explicit sign (e.g., "+4.2%", "-1.0%")."""
    if value is None:
        return "Not available"

    _check_numeric(value, "Percentage")

    return f"{value:+.{decimal_places}f}%"


def format_currency(
    value: Optional[float],
    symbol: str = "₹",
    force_scale: Optional[str] = None
) -> str:
    """
    Format currency with appropriate scale.

    Scales: Cr (1e7) and L (1e5) for the Indian numbering system,
    otherwise grouped with commas.

    Args:
        value: Amount
        symbol: Currency symbol prefix
        force_scale: Force specific scale ('Cr', 'L', None)

    Returns:
        Formatted currency string (e.g., "₹1.2Cr", "₹4.5L", "₹12,345")
    """
    if value is None:
        return "Not available"

    _check_numeric(value, "Currency")

    if value == 0:
        return f"{symbol}0"

    abs_value = abs(value)
    sign = "-" if value < 0 else ""

    if force_scale == 'Cr':
        return f"{sign}{symbol}{abs_value/1e7:.2f}Cr"
    elif force_scale == 'L':
        return f"{sign}{symbol}{abs_value/1e5:.2f}L"

    if abs_value >= 1e7:
        return f"{sign}{symbol}{abs_value/1e7:.2f}Cr"
    elif abs_value >= 1e5:
        return f"{sign}{symbol}{abs_value/1e5:.2f}L"
    elif abs_value >= 1e3:
        return f"{sign}{symbol}{abs_value:,.0f}"
    else:
        return f"{sign}{symbol}{abs_value:.2f}"


def format_price(value: Optional[float], symbol: str = "₹") -> str:
    """Format a per-share price with two decimals and no scaling."""
    if value is None:
        return "Not available"

    _check_numeric(value, "Price")

    return f"{symbol}{value:,.2f}"
