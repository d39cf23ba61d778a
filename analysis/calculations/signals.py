"""
Buy/Hold/Sell signal classification from moving averages and RSI.
Additive single-pass scoring over an ordered rule table.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple


BUY_THRESHOLD = 25
SELL_THRESHOLD = -25
MAX_STRENGTH = 100
RSI_OVERSOLD = 30
RSI_OVERBOUGHT = 70
NO_SIGNAL_REASON = 'No strong signals detected'


class Signal(str, Enum):
    """Discrete trade recommendation."""
    BUY = 'BUY'
    SELL = 'SELL'
    HOLD = 'HOLD'


@dataclass(frozen=True)
class SignalInputs:
    """Indicator snapshot a signal is classified from."""
    sma50_current: float
    sma200_current: float
    sma50_prev: float
    sma200_prev: float
    rsi: float
    price: float


@dataclass(frozen=True)
class SignalResult:
    """Classified signal with strength (0-100) and the explanation that fired first."""
    signal: Signal
    strength: int
    reason: str


# (condition, score delta, explanation)
Rule = Tuple[Callable[[SignalInputs], bool], int, Callable[[SignalInputs], str]]


def _golden_cross(s: SignalInputs) -> bool:
    return s.sma50_prev <= s.sma200_prev and s.sma50_current > s.sma200_current


def _death_cross(s: SignalInputs) -> bool:
    return s.sma50_prev >= s.sma200_prev and s.sma50_current < s.sma200_current


def _rsi_neutral(s: SignalInputs) -> bool:
    return not s.rsi < RSI_OVERSOLD and not s.rsi > RSI_OVERBOUGHT


# Evaluation order matters: the first rule that fires supplies the reason.
# Price-above-50 and price-below-200 are evaluated independently.
SIGNAL_RULES: List[Rule] = [
    (_golden_cross, 40,
     lambda s: 'Golden Cross detected (50-MA crossed above 200-MA)'),
    (_death_cross, -40,
     lambda s: 'Death Cross detected (50-MA crossed below 200-MA)'),
    (lambda s: s.sma50_current > s.sma200_current, 20,
     lambda s: 'Bullish trend (50-MA above 200-MA)'),
    (lambda s: s.sma50_current < s.sma200_current, -20,
     lambda s: 'Bearish trend (50-MA below 200-MA)'),
    (lambda s: s.price > s.sma50_current and s.sma50_current > 0, 10,
     lambda s: 'Price trading above 50-day average'),
    (lambda s: s.price < s.sma200_current and s.sma200_current > 0, -10,
     lambda s: 'Price trading below 200-day average'),
    (lambda s: s.rsi < RSI_OVERSOLD, 15,
     lambda s: f'Oversold (RSI: {s.rsi:.0f})'),
    (lambda s: s.rsi > RSI_OVERBOUGHT, -15,
     lambda s: f'Overbought (RSI: {s.rsi:.0f})'),
    (_rsi_neutral, 0,
     lambda s: f'RSI neutral at {s.rsi:.0f}'),
]


def score_signal(inputs: SignalInputs) -> Tuple[int, List[str]]:
    """
    Evaluate every rule in order.

    Args:
        inputs: Indicator snapshot

    Returns:
        Tuple of (total score, explanations of fired rules in rule order)
    """
    score = 0
    reasons = []

    for condition, delta, explain in SIGNAL_RULES:
        if condition(inputs):
            score += delta
            text = explain(inputs)
            if text:
                reasons.append(text)

    return score, reasons


def classify_score(score: int) -> Signal:
    """Map an additive score to BUY (>= 25), SELL (<= -25) or HOLD."""
    if score >= BUY_THRESHOLD:
        return Signal.BUY
    elif score <= SELL_THRESHOLD:
        return Signal.SELL
    else:
        return Signal.HOLD


def classify_signal(
    sma50_current: float,
    sma200_current: float,
    sma50_prev: float,
    sma200_prev: float,
    rsi: float,
    price: float
) -> SignalResult:
    """
    Classify a trade signal from moving-average and momentum readings.

    Scoring:
    - Golden/Death cross: ±40
    - 50-MA above/below 200-MA: ±20
    - Price above 50-MA: +10, price below 200-MA: -10
    - RSI < 30: +15, RSI > 70: -15

    Args:
        sma50_current: Latest 50-session moving average
        sma200_current: Latest 200-session moving average
        sma50_prev: Previous 50-session moving average
        sma200_prev: Previous 200-session moving average
        rsi: Momentum oscillator value (0-100)
        price: Current price

    Returns:
        SignalResult with strength = min(|score|, 100) and the first
        explanation produced (not the most significant one)
    """
    inputs = SignalInputs(
        sma50_current=sma50_current,
        sma200_current=sma200_current,
        sma50_prev=sma50_prev,
        sma200_prev=sma200_prev,
        rsi=rsi,
        price=price
    )

    score, reasons = score_signal(inputs)

    return SignalResult(
        signal=classify_score(score),
        strength=min(abs(score), MAX_STRENGTH),
        reason=reasons[0] if reasons else NO_SIGNAL_REASON
    )
