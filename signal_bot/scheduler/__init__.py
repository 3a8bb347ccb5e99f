"""
Periodic tick scheduling.
"""
from .stream import SchedulerState, StreamScheduler

__all__ = ["SchedulerState", "StreamScheduler"]
