"""
Asset allocation suggestions by risk profile.
Static table - equity/debt/gold/liquid split summing to 100.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class PlanningError(ValueError):
    """Raised when a planning input cannot be resolved."""
    pass


class RiskProfile(str, Enum):
    """Investor risk tolerance tag."""
    CONSERVATIVE = 'conservative'
    BALANCED = 'balanced'
    AGGRESSIVE = 'aggressive'


@dataclass(frozen=True)
class AllocationSuggestion:
    """Percentage split across asset buckets with guidance text."""
    equity: int
    debt: int
    gold: int
    liquid: int
    label: str
    description: str
    suggestions: Tuple[str, ...]

    @property
    def total(self) -> int:
        return self.equity + self.debt + self.gold + self.liquid


ALLOCATIONS: Dict[RiskProfile, AllocationSuggestion] = {
    RiskProfile.CONSERVATIVE: AllocationSuggestion(
        equity=30, debt=50, gold=10, liquid=10,
        label='Conservative',
        description='Capital preservation focused. Ideal for near-term goals (1-3 years) or low risk tolerance.',
        suggestions=(
            'Prefer large-cap index funds (Nifty 50, Sensex)',
            'Consider PPF and NPS for tax-efficient debt allocation',
            'Gold via Sovereign Gold Bonds (SGB) for zero making charges',
            'Keep 6 months expenses in liquid fund / savings account',
        ),
    ),
    RiskProfile.BALANCED: AllocationSuggestion(
        equity=60, debt=25, gold=10, liquid=5,
        label='Balanced',
        description='Growth with stability. Ideal for medium-term goals (3-7 years).',
        suggestions=(
            'Mix of Nifty 50 index + Nifty Next 50 for core equity',
            'Add 1-2 quality mid-cap stocks for alpha generation',
            'Debt mutual funds or corporate bonds for stable returns',
            'SIP into ELSS funds for Section 80C tax benefits',
        ),
    ),
    RiskProfile.AGGRESSIVE: AllocationSuggestion(
        equity=80, debt=10, gold=5, liquid=5,
        label='Aggressive',
        description='Maximum growth potential. Ideal for long-term goals (7+ years) with high risk tolerance.',
        suggestions=(
            'Core: Nifty 50 index fund (40%), direct stock picks (40%)',
            'Explore quality mid-cap and small-cap opportunities',
            'Consider international diversification (US S&P 500 index)',
            'Keep minimal debt allocation for rebalancing opportunities',
        ),
    ),
}


def allocation_suggestion(risk_profile: Union[str, RiskProfile]) -> AllocationSuggestion:
    """
    Look up the allocation for a risk profile.

    Args:
        risk_profile: 'conservative', 'balanced' or 'aggressive' (case-insensitive)

    Returns:
        AllocationSuggestion for the profile

    Raises:
        PlanningError: If the profile is unknown
    """
    if isinstance(risk_profile, RiskProfile):
        return ALLOCATIONS[risk_profile]

    try:
        profile = RiskProfile(str(risk_profile).strip().lower())
    except ValueError as e:
        valid = ', '.join(p.value for p in RiskProfile)
        raise PlanningError(f"Unknown risk profile: {risk_profile} (expected one of: {valid})") from e

    return ALLOCATIONS[profile]
