"""
Time helpers shared by the feed, the scheduler and the notification sinks.

All instants are timezone-aware UTC datetimes; labels are derived from them
only for display.
"""

from datetime import datetime, timezone
from typing import Optional

DEFAULT_LABEL_FORMAT = "%H:%M:%S"


def now_utc() -> datetime:
    """Current wall-clock time as a UTC datetime."""
    return datetime.now(timezone.utc)


def format_time_label(ts: datetime, fmt: str = DEFAULT_LABEL_FORMAT) -> str:
    """
    Format the time label carried by a price sample.

    Args:
        ts: Instant the sample refers to
        fmt: strftime format

    Returns:
        Label such as ``"14:03:25"``
    """
    return ts.strftime(fmt)


def format_signal_time(ts: Optional[datetime]) -> str:
    """Two-digit hour, minute and second of a signal, or empty when unset."""
    if ts is None:
        return ""
    return ts.strftime("%H:%M:%S")


def format_market_time(ts: datetime) -> str:
    """
    Format an instant for signal emission and logging.

    Args:
        ts: Instant to format

    Returns:
        ISO8601 formatted string
    """
    return ts.isoformat()


def time_elapsed_seconds(start_time: datetime, end_time: Optional[datetime] = None) -> float:
    """Elapsed seconds between two instants, ``end_time`` defaulting to now."""
    if end_time is None:
        end_time = now_utc()

    return (end_time - start_time).total_seconds()
