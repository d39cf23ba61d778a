"""
Portfolio health scoring.
Pure functions for Herfindahl-based diversification, concentration buckets,
volatility rating and a letter grade with advisory suggestions.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple


# Typical equity volatility (%) assumed when a holding's is unknown
DEFAULT_VOLATILITY = 20.0

HIGH_CONCENTRATION = 0.5
MEDIUM_CONCENTRATION = 0.3
MIN_HOLDINGS = 3
MAX_HOLDINGS = 15
LOW_VOLATILITY = 15
HIGH_VOLATILITY = 30

NO_HOLDINGS = 'No holdings'
START_INVESTING = 'Start building your portfolio by adding some investments.'
WELL_BALANCED = 'Your portfolio looks well-balanced! Keep monitoring and rebalancing periodically.'


class Grade(str, Enum):
    """Portfolio health letter grade."""
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'


class VolatilityRating(str, Enum):
    """Average holding volatility bucket."""
    LOW = 'Low'
    MEDIUM = 'Medium'
    HIGH = 'High'


@dataclass(frozen=True)
class HoldingSnapshot:
    """Current value of one position and its annualized volatility (%) if known."""
    ticker: str
    current_value: float
    volatility: Optional[float] = None


@dataclass(frozen=True)
class PortfolioHealthReport:
    """Diversification and risk assessment of a set of holdings."""
    grade: Grade
    diversification_score: int
    concentration_risk: str
    volatility_rating: VolatilityRating
    suggestions: Tuple[str, ...]


def herfindahl_index(weights: Sequence[float]) -> float:
    """
    Calculate Herfindahl-Hirschman Index from portfolio weights.

    HHI = Σ(weight_i²); 1/n for an equal split, 1 for a single position.
    """
    return sum(w * w for w in weights)


def diversification_score(weights: Sequence[float]) -> int:
    """
    Normalize HHI to a 0-100 diversification score.

    Formula: 100 × (1 - (HHI - 1/n) / (1 - 1/n))

    A single holding always scores 0.
    """
    n = len(weights)
    if n <= 1:
        return 0

    hhi = herfindahl_index(weights)
    min_hhi = 1 / n

    return int(round((1 - (hhi - min_hhi) / (1 - min_hhi)) * 100))


def rate_volatility(avg_volatility: float) -> VolatilityRating:
    """Bucket average volatility: < 15 Low, > 30 High, else Medium."""
    if avg_volatility < LOW_VOLATILITY:
        return VolatilityRating.LOW
    elif avg_volatility > HIGH_VOLATILITY:
        return VolatilityRating.HIGH
    else:
        return VolatilityRating.MEDIUM


def grade_from_components(
    diversification: int,
    max_weight: float,
    holding_count: int,
    volatility_rating: VolatilityRating
) -> Grade:
    """
    Derive the letter grade from a composite score.

    Composite = diversification
                - 30 if max weight > 50% else 15 if > 30% else 0
                + 20 if 3 <= holdings <= 15
                + 15 / 5 / -10 for Low / Medium / High volatility

    Thresholds: >= 70 A, >= 45 B, >= 20 C, else D.

    Args:
        diversification: Diversification score (0-100)
        max_weight: Largest single-holding weight as decimal
        holding_count: Number of holdings
        volatility_rating: Volatility bucket

    Returns:
        Letter grade
    """
    score = diversification

    if max_weight > HIGH_CONCENTRATION:
        score -= 30
    elif max_weight > MEDIUM_CONCENTRATION:
        score -= 15

    if MIN_HOLDINGS <= holding_count <= MAX_HOLDINGS:
        score += 20

    if volatility_rating == VolatilityRating.LOW:
        score += 15
    elif volatility_rating == VolatilityRating.MEDIUM:
        score += 5
    else:
        score -= 10

    if score >= 70:
        return Grade.A
    elif score >= 45:
        return Grade.B
    elif score >= 20:
        return Grade.C
    else:
        return Grade.D


def _effective_volatility(holding: HoldingSnapshot) -> float:
    # Zero and non-finite readings count as unknown, same as missing
    volatility = holding.volatility
    if not volatility or not math.isfinite(volatility):
        return DEFAULT_VOLATILITY
    return volatility


def portfolio_health(holdings: Sequence[HoldingSnapshot]) -> PortfolioHealthReport:
    """
    Score portfolio health from current values and volatilities.

    Args:
        holdings: Holding snapshots (value in any single currency)

    Returns:
        PortfolioHealthReport; a fixed grade-D "No holdings" report when
        the total value is 0
    """
    total_value = sum(h.current_value for h in holdings)

    if total_value == 0:
        return PortfolioHealthReport(
            grade=Grade.D,
            diversification_score=0,
            concentration_risk=NO_HOLDINGS,
            volatility_rating=VolatilityRating.LOW,
            suggestions=(START_INVESTING,)
        )

    suggestions: List[str] = []

    weights = [h.current_value / total_value for h in holdings]
    diversification = diversification_score(weights)

    # Concentration
    max_weight = max(weights)
    if max_weight > HIGH_CONCENTRATION:
        concentration_risk = 'High (more than 50% in one stock)'
        top_ticker = holdings[weights.index(max_weight)].ticker
        suggestions.append(
            f"Consider reducing your {top_ticker} position, it's "
            f"{max_weight * 100:.0f}% of your portfolio."
        )
    elif max_weight > MEDIUM_CONCENTRATION:
        concentration_risk = 'Medium (over 30% in one stock)'
        suggestions.append('Your largest holding is sizable. Consider rebalancing if it grows further.')
    else:
        concentration_risk = 'Low'

    # Holding count
    if len(holdings) < MIN_HOLDINGS:
        suggestions.append('Consider adding more stocks for better diversification (aim for 5-10 holdings).')
    elif len(holdings) > MAX_HOLDINGS:
        suggestions.append('You have many holdings. Consider consolidating into your highest-conviction picks.')

    # Volatility
    avg_volatility = sum(_effective_volatility(h) for h in holdings) / len(holdings)
    volatility_rating = rate_volatility(avg_volatility)
    if volatility_rating == VolatilityRating.HIGH:
        suggestions.append('Your portfolio has high volatility. Consider adding some stable, low-beta stocks.')

    if not suggestions:
        suggestions.append(WELL_BALANCED)

    grade = grade_from_components(diversification, max_weight, len(holdings), volatility_rating)

    return PortfolioHealthReport(
        grade=grade,
        diversification_score=diversification,
        concentration_risk=concentration_risk,
        volatility_rating=volatility_rating,
        suggestions=tuple(suggestions)
    )
