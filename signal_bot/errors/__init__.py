"""
Error classification for the signal engine.

Insufficient history and degenerate averages are not errors: they surface
as neutral analysis values. The exceptions here mark contract violations
that must fail fast.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    SchedulerError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "SchedulerError",
]
