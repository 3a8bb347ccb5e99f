"""
Notification sink for newly generated signals.

The scheduler hands every new signal to ``notify``; everything after that
(permission flag, filtering, retries, failures) is owned here and never
reported back to the scheduler.
"""

from typing import Any, Optional

from ..config.notification import (
    DeliveryMethod,
    NotificationConfig,
    get_default_notification_config,
)
from ..logging.config import get_delivery_logger
from ..signals.models import Signal
from .base import BaseSignalDelivery, DeliveryResult, Notification
from .file_delivery import FileSignalDelivery
from .stdout_delivery import StdoutSignalDelivery

logger = get_delivery_logger(__name__)


def format_notification(signal: Signal) -> Notification:
    """Signal payload with the alert title and body shown to the user."""
    payload = signal.to_dict()
    payload["title"] = f"Signal Alert: {signal.type.value}"
    payload["body"] = f"{signal.type.value} at ${signal.price} ({signal.confidence}% confidence)"
    return payload


class SignalNotifier:
    """Fans new signals out to the configured delivery destinations."""

    def __init__(self, config: Optional[NotificationConfig] = None):
        self.logger = logger
        self.config = config or get_default_notification_config()
        self.delivery_handlers: dict[str, BaseSignalDelivery] = {}
        self.sent_count = 0

        self._init_delivery_handlers()

    def _init_delivery_handlers(self) -> None:
        """Initialize delivery handlers based on configuration."""
        for destination in self.config.destinations:
            if not destination.enabled:
                continue

            if destination.method == DeliveryMethod.FILE_OUTPUT:
                handler = FileSignalDelivery(destination.name, destination.config)
            elif destination.method == DeliveryMethod.STDOUT:
                handler = StdoutSignalDelivery(destination.name, destination.config)
            else:
                self.logger.warning("Unsupported delivery method", method=str(destination.method))
                continue

            self.delivery_handlers[destination.name] = handler
            self.logger.info("Initialized delivery handler", delivery_name=destination.name)

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def notify(self, signal: Signal) -> dict[str, DeliveryResult]:
        """
        Deliver ``signal`` to every destination whose filters accept it.

        Returns:
            Delivery result keyed by destination name (empty when disabled)
        """
        if not self.config.enabled or not self.delivery_handlers:
            self.logger.debug("Notifications disabled, signal not delivered",
                              signal_type=signal.type.value)
            return {}

        payload = format_notification(signal)
        outcomes: dict[str, DeliveryResult] = {}

        for name in self._filter_destinations(signal):
            result = self.delivery_handlers[name].deliver_with_retry(
                payload,
                max_retries=self.config.failure_retry_attempts,
                retry_delay=self.config.failure_retry_delay_seconds
            )
            outcomes[name] = result

            if result.ok:
                self.logger.debug(
                    "Signal delivered",
                    destination=name,
                    attempts=result.attempts,
                    elapsed_ms=result.elapsed_ms
                )
            else:
                self.logger.error(
                    "Signal delivery failed",
                    destination=name,
                    status=result.status.value,
                    error=result.message
                )

        self.sent_count += 1
        return outcomes

    def _filter_destinations(self, signal: Signal) -> list[str]:
        """Names of destinations whose filters accept ``signal``."""
        accepted = []

        for destination in self.config.destinations:
            if destination.name not in self.delivery_handlers:
                continue

            if (destination.signal_types_filter
                    and signal.type.value not in destination.signal_types_filter):
                continue

            if (destination.min_confidence is not None
                    and signal.confidence < destination.min_confidence):
                continue

            accepted.append(destination.name)

        return accepted

    def get_stats(self) -> dict[str, Any]:
        """Per-destination delivery statistics."""
        return {
            "sent_count": self.sent_count,
            "destinations": [h.get_stats() for h in self.delivery_handlers.values()],
        }

    def health_check(self) -> dict[str, bool]:
        return {name: h.health_check() for name, h in self.delivery_handlers.items()}
