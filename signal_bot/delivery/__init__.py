"""
Notification delivery for generated signals.
"""
from .base import (
    BaseSignalDelivery,
    DeliveryPermanentError,
    DeliveryResult,
    DeliveryStatus,
    Notification,
)
from .file_delivery import FileSignalDelivery
from .notifier import SignalNotifier, format_notification
from .stdout_delivery import StdoutSignalDelivery

__all__ = [
    "BaseSignalDelivery",
    "DeliveryPermanentError",
    "DeliveryResult",
    "DeliveryStatus",
    "FileSignalDelivery",
    "Notification",
    "SignalNotifier",
    "StdoutSignalDelivery",
    "format_notification",
]
