"""
Data quality error classifications for price samples.

Raised when a caller hands the series a sample that can never be valid,
e.g. a NaN price injected by a misbehaving feed.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class MalformedDataError(DataQualityError):
    """Sample exists but its fields are of the wrong type or out of domain."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
