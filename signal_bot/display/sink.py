"""Snapshot pushed to the display on every tick, and the sinks that take it."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..analysis.market import MarketAnalysis
from ..config.defaults import SeriesParams
from ..data.models import PriceSeries, Sample
from ..logging.config import get_display_logger
from ..signals.models import Signal
from ..utils.time import format_signal_time, time_elapsed_seconds


@dataclass(frozen=True)
class StreamSnapshot:
    """Everything a display needs to redraw after a tick."""
    series: PriceSeries
    analysis: Optional[MarketAnalysis]
    signal: Optional[Signal]
    last_signal_time: Optional[datetime]
    active: bool
    tick_count: int = 0
    as_of: Optional[datetime] = None

    @property
    def status(self) -> str:
        return "Live" if self.active else "Offline"

    def chart_window(self, n: Optional[int] = None) -> tuple[Sample, ...]:
        """Newest samples for charting, ``chart_points`` by default."""
        if n is None:
            n = SeriesParams().chart_points
        return self.series.window(n)


class DisplaySink(ABC):
    """Receives a snapshot after every analysis pass."""

    @abstractmethod
    def update(self, snapshot: StreamSnapshot) -> None:
        pass


class LogDisplaySink(DisplaySink):
    """Writes each snapshot as a structured log line."""

    def __init__(self, chart_points: Optional[int] = None):
        self.chart_points = chart_points or SeriesParams().chart_points
        self.logger = get_display_logger(__name__)

    def update(self, snapshot: StreamSnapshot) -> None:
        analysis = snapshot.analysis
        signal = snapshot.signal
        chart = snapshot.chart_window(self.chart_points)

        fields = {
            "status": snapshot.status,
            "tick": snapshot.tick_count,
            "last_price": snapshot.series.last_price,
            "chart": [s.price for s in chart],
        }
        if analysis is not None:
            fields.update(
                trend=analysis.trend.value,
                volatility=analysis.volatility,
                momentum=analysis.momentum,
                pattern="Clear" if analysis.clear_pattern else "Unclear",
            )
        if signal is not None:
            fields.update(
                signal=signal.type.value,
                signal_price=signal.price,
                confidence=signal.confidence,
                signal_time=format_signal_time(signal.timestamp),
            )
        # Measured against the snapshot's own clock, not the wall clock
        if snapshot.last_signal_time is not None and snapshot.as_of is not None:
            fields["seconds_since_signal"] = round(
                time_elapsed_seconds(snapshot.last_signal_time, snapshot.as_of), 1
            )

        if signal is None:
            self.logger.info("Waiting for clear market pattern", **fields)
        else:
            self.logger.info("Market update", **fields)
