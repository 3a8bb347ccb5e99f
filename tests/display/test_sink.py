"""Tests for the display snapshot and sinks."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from signal_bot.analysis.market import analyze_market
from signal_bot.display.sink import LogDisplaySink, StreamSnapshot
from signal_bot.signals.models import Signal, SignalType


def make_snapshot(series, signal=None, active=True, last_signal_time=None, as_of=None):
    return StreamSnapshot(
        series=series,
        analysis=analyze_market(series),
        signal=signal,
        last_signal_time=last_signal_time,
        active=active,
        tick_count=6,
        as_of=as_of,
    )


class TestStreamSnapshot:
    """Snapshot helpers."""

    def test_status(self, flat_series):
        assert make_snapshot(flat_series).status == "Live"
        assert make_snapshot(flat_series, active=False).status == "Offline"

    def test_chart_window_defaults_to_twenty(self, series_factory):
        series = series_factory([100.0 + i for i in range(35)])
        chart = make_snapshot(series).chart_window()

        assert len(chart) == 20
        assert chart[-1].price == 134.0

    def test_chart_window_custom(self, flat_series):
        assert len(make_snapshot(flat_series).chart_window(5)) == 5


class TestLogDisplaySink:
    """Structured log rendering."""

    def test_logs_waiting_without_signal(self, flat_series):
        sink = LogDisplaySink()
        with patch.object(sink, "logger") as logger:
            sink.update(make_snapshot(flat_series))

        message, = logger.info.call_args[0]
        fields = logger.info.call_args[1]
        assert message == "Waiting for clear market pattern"
        assert fields["status"] == "Live"
        assert fields["pattern"] == "Unclear"
        assert len(fields["chart"]) == 20

    def test_logs_signal_fields(self, rising_series):
        signal = Signal(
            type=SignalType.BUY,
            price=105.0,
            timestamp=datetime(2024, 1, 1, 9, 5, 7, tzinfo=timezone.utc),
            confidence=91,
            reason="Strong bullish momentum (2.6%)",
        )
        sink = LogDisplaySink(chart_points=5)
        with patch.object(sink, "logger") as logger:
            sink.update(make_snapshot(
                rising_series, signal=signal,
                last_signal_time=signal.timestamp,
                as_of=signal.timestamp + timedelta(seconds=12.5),
            ))

        fields = logger.info.call_args[1]
        assert logger.info.call_args[0][0] == "Market update"
        assert fields["signal"] == "BUY"
        assert fields["signal_time"] == "09:05:07"
        assert fields["trend"] == "Bullish"
        assert len(fields["chart"]) == 5
        assert fields["seconds_since_signal"] == 12.5

    def test_elapsed_time_follows_snapshot_clock(self, flat_series):
        # Naive datetimes from an injected clock must not meet the UTC wall clock
        signal_time = datetime(2024, 1, 1, 12, 0, 30)
        sink = LogDisplaySink()
        with patch.object(sink, "logger") as logger:
            sink.update(make_snapshot(flat_series, last_signal_time=signal_time,
                                      as_of=datetime(2024, 1, 1, 12, 1, 0)))

        assert logger.info.call_args[1]["seconds_since_signal"] == 30.0

    def test_elapsed_time_omitted_without_clock_reading(self, flat_series):
        sink = LogDisplaySink()
        with patch.object(sink, "logger") as logger:
            sink.update(make_snapshot(flat_series,
                                      last_signal_time=datetime(2024, 1, 1, 12, 0, 30)))

        assert "seconds_since_signal" not in logger.info.call_args[1]
