"""Trend, volatility and momentum heuristics over the price series window."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from ..config.defaults import AnalysisParams
from ..data.models import PriceSeries


class Trend(str, Enum):
    """Direction of the recent window relative to the one before it."""
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    INSUFFICIENT = "Insufficient data"


@dataclass(frozen=True)
class MarketAnalysis:
    """Snapshot of the rolling statistics for one tick."""
    trend: Trend
    volatility: float = 0.0     # Percent, rounded to 2 decimals
    momentum: float = 0.0       # Percent, rounded to 2 decimals
    clear_pattern: bool = False

    @classmethod
    def insufficient(cls) -> "MarketAnalysis":
        """Neutral "no opinion yet" analysis."""
        return cls(trend=Trend.INSUFFICIENT)

    @property
    def has_opinion(self) -> bool:
        return self.trend is not Trend.INSUFFICIENT


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def calculate_volatility_pct(prices: Sequence[float]) -> float:
    """
    Relative price range of a window

    volatility% = (max - min) / mean * 100

    Args:
        prices: Window prices

    Returns:
        Unrounded percentage, 0.0 for an empty or zero-mean window
    """
    avg = _mean(prices)
    if not avg:
        return 0.0
    return (max(prices) - min(prices)) / avg * 100


def calculate_momentum_pct(recent_avg: float, older_avg: Optional[float]) -> float:
    """
    Relative change between two successive window averages

    momentum% = |recent_avg - older_avg| / older_avg * 100

    Args:
        recent_avg: Mean of the recent window
        older_avg: Mean of the preceding window, None if it is empty

    Returns:
        Unrounded percentage; 0.0 when older_avg is missing or zero
    """
    if not older_avg:
        return 0.0
    return abs(recent_avg - older_avg) / older_avg * 100


def analyze_market(series: PriceSeries, params: Optional[AnalysisParams] = None) -> MarketAnalysis:
    """
    Compute the market analysis for the current series window.

    The recent window is the last ``recent_window`` samples and the older
    window the ``recent_window`` samples before it. When fewer older samples
    exist the older average is taken over whatever is there; with none at
    all the momentum is 0 and the trend falls to Bearish.

    Equal averages classify as Bearish: the comparison is a strict ``>``.

    Args:
        series: Price series to analyse (not modified)
        params: Analysis parameters, defaults when None

    Returns:
        Fresh MarketAnalysis snapshot
    """
    params = params or AnalysisParams()

    if len(series) < params.min_samples:
        return MarketAnalysis.insufficient()

    prices = series.prices()
    size = params.recent_window
    recent = prices[-size:]
    older = prices[-2 * size:-size]

    recent_avg = _mean(recent)
    older_avg = _mean(older)

    if older_avg is not None and recent_avg > older_avg:
        trend = Trend.BULLISH
    else:
        trend = Trend.BEARISH

    volatility = calculate_volatility_pct(recent)
    momentum = calculate_momentum_pct(recent_avg, older_avg)

    clear_pattern = (
        volatility > params.volatility_threshold_pct
        and momentum > params.momentum_threshold_pct
    )

    return MarketAnalysis(
        trend=trend,
        volatility=round(volatility, 2),
        momentum=round(momentum, 2),
        clear_pattern=clear_pattern,
    )


class MarketAnalyzer:
    """Analyzer bound to a fixed set of analysis parameters"""

    def __init__(self, params: Optional[AnalysisParams] = None):
        self.params = params or AnalysisParams()

    def analyze(self, series: PriceSeries) -> MarketAnalysis:
        """Analyse ``series``; a pure function of its samples."""
        return analyze_market(series, self.params)
