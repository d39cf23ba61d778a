"""
Advisor report rendering - advisor result dict to Markdown.
Pure string building; no IO.
"""

from typing import Dict, Any, List

from reports.formatters import (
    format_currency,
    format_percentage,
    format_price,
    format_signed_percentage,
)


PROJECTION_LABELS = {1: '1 Month', 6: '6 Months', 12: '1 Year'}

DISCLAIMER = (
    "*Signals and projections are derived from historical prices only. "
    "Not investment advice.*"
)


def render_advisor_report(result: Dict[str, Any]) -> str:
    """
    Build the complete Markdown report for an advisor run.

    Args:
        result: Dictionary returned by run_advisor

    Returns:
        Markdown report content
    """
    sections = [f"# Portfolio Advisor Report\n\n**Generated:** {result.get('as_of', 'Unknown')}\n"
                f"**History Window:** {result.get('period', 'Unknown')}\n\n---"]

    holdings = result.get('holdings', [])
    if holdings:
        sections.append(_build_holdings_table(holdings))
        sections.extend(_build_holding_section(h) for h in holdings)
    else:
        sections.append("## Holdings\n\n*No active holdings to analyze.*\n\n---")

    if result.get('health'):
        sections.append(_build_health_section(result['health']))

    if result.get('errors'):
        sections.append(_build_errors_section(result['errors']))

    sections.append(DISCLAIMER)

    return '\n\n'.join(sections)


def _build_holdings_table(holdings: List[Dict[str, Any]]) -> str:
    """Build overview table of all holdings."""
    table = """## Holdings

| Ticker | Qty | Price | Value | P&L | Signal |
|--------|-----|-------|-------|-----|--------|"""

    for h in holdings:
        signal = h['signal']
        table += (
            f"\n| {h['ticker']} | {h['quantity']:g} | {format_price(h['current_price'])} "
            f"| {format_currency(h['current_value'])} "
            f"| {format_currency(h['pnl'])} ({format_signed_percentage(h['pnl_percent'])}) "
            f"| {_signal_value(signal['signal'])} ({signal['strength']}) |"
        )

    return table + "\n\n---"


def _build_holding_section(h: Dict[str, Any]) -> str:
    """Build the detail section for one holding."""
    signal = h['signal']
    lines = [
        f"### {h['ticker']}: {h['name']}",
        "",
        f"**Signal:** {_signal_value(signal['signal'])} (strength {signal['strength']}/100)",
        f"**Reason:** {signal['reason']}",
        "",
        f"- 50-day average: {format_price(h['sma50'])}",
        f"- 200-day average: {format_price(h['sma200'])}",
        f"- RSI (14): {h['rsi']:.0f}",
        f"- Annualized volatility: {format_percentage(h['volatility'])}",
        f"- 1-year CAGR: {format_signed_percentage(h['cagr'])}",
        "",
        "| Horizon | Projected Price |",
        "|---------|-----------------|",
    ]

    for months, price in sorted(h['projections'].items(), key=lambda item: int(item[0])):
        label = PROJECTION_LABELS.get(int(months), f"{months} Months")
        lines.append(f"| {label} | {format_price(price)} |")

    return '\n'.join(lines)


def _build_health_section(health: Dict[str, Any]) -> str:
    """Build portfolio health section."""
    suggestions = '\n'.join(f"- {s}" for s in health['suggestions'])

    return f"""---

## Portfolio Health

**Grade:** {_signal_value(health['grade'])}
**Diversification Score:** {health['diversification_score']}/100
**Concentration Risk:** {health['concentration_risk']}
**Volatility:** {_signal_value(health['volatility_rating'])}

### Suggestions

{suggestions}

---"""


def _build_errors_section(errors: List[Dict[str, Any]]) -> str:
    """List tickers that could not be analyzed."""
    lines = ["## Data Issues", ""]
    for err in errors:
        lines.append(f"- {err.get('ticker') or 'output'}: {err['error']}")
    return '\n'.join(lines)


def _signal_value(value: Any) -> str:
    # Enum members and their plain-string values render the same
    return getattr(value, 'value', value)
