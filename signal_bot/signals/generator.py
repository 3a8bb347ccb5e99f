"""
Signal generation decision rule.

A signal needs a clear pattern and a momentum above the trigger; the trend
then picks the direction. Confidence is drawn from an injected random
source so tests can seed it.
"""

import random
from datetime import datetime
from typing import Callable, Optional

from ..analysis.market import MarketAnalysis, Trend
from ..config.defaults import SignalParams
from ..logging.config import get_signal_logger, log_signal_decision
from ..utils.time import now_utc
from .models import Signal, SignalType

logger = get_signal_logger(__name__)


def generate_signal(
    price: float,
    analysis: MarketAnalysis,
    rng: Optional[random.Random] = None,
    params: Optional[SignalParams] = None,
    clock: Callable[[], datetime] = now_utc,
) -> Optional[Signal]:
    """
    Decide whether the latest price and analysis warrant a signal.

    Args:
        price: Latest price, carried into the signal
        analysis: Analysis of the current window
        rng: Random source for the confidence draw
        params: Signal parameters, defaults when None
        clock: Source of the signal timestamp

    Returns:
        BUY/SELL signal, or None when the conditions are not met
    """
    params = params or SignalParams()
    rng = rng or random.Random()

    if not analysis.clear_pattern:
        log_signal_decision(
            logger, False, analysis.trend.value, analysis.momentum,
            "no clear pattern"
        )
        return None

    strong = analysis.momentum > params.momentum_trigger_pct

    if analysis.trend is Trend.BULLISH and strong:
        signal_type = SignalType.BUY
        reason = f"Strong bullish momentum ({analysis.momentum}%)"
    elif analysis.trend is Trend.BEARISH and strong:
        signal_type = SignalType.SELL
        reason = f"Strong bearish momentum ({analysis.momentum}%)"
    else:
        log_signal_decision(
            logger, False, analysis.trend.value, analysis.momentum,
            "momentum below trigger"
        )
        return None

    signal = Signal(
        type=signal_type,
        price=price,
        timestamp=clock(),
        confidence=rng.randint(params.confidence_min, params.confidence_max),
        reason=reason,
    )

    log_signal_decision(
        logger, True, analysis.trend.value, analysis.momentum, reason,
        context={"type": signal.type.value, "price": price, "confidence": signal.confidence}
    )
    return signal


class SignalGenerator:
    """Signal generator with its own random source and parameters."""

    def __init__(
        self,
        params: Optional[SignalParams] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self.params = params or SignalParams()
        self.rng = rng or random.Random()
        self.clock = clock

    def generate(self, price: float, analysis: MarketAnalysis) -> Optional[Signal]:
        return generate_signal(price, analysis, self.rng, self.params, self.clock)
