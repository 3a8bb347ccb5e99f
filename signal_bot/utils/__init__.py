"""Utility functions for the signal engine."""

from .time import (
    format_market_time,
    format_signal_time,
    format_time_label,
    now_utc,
)

__all__ = [
    "format_market_time",
    "format_signal_time",
    "format_time_label",
    "now_utc",
]
