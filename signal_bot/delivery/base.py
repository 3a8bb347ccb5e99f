"""Delivery of one notification payload to one destination, with retries."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..logging.config import get_delivery_logger

# Payload built by ``format_notification``: Signal.to_dict() plus title and body
Notification = dict[str, Any]


class DeliveryStatus(Enum):
    """Outcome of delivering one notification."""
    SUCCESS = "success"
    FAILED = "failed"
    DEAD_LETTER = "dead_letter"


@dataclass
class DeliveryResult:
    """Result of delivering one notification to one destination."""
    status: DeliveryStatus
    message: Optional[str] = None
    attempts: int = 1
    elapsed_ms: Optional[int] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status == DeliveryStatus.SUCCESS


class DeliveryPermanentError(Exception):
    """The destination can never accept the notification; it is not retried."""


class BaseSignalDelivery(ABC):
    """
    One notification destination.

    Subclasses implement ``deliver`` for a single payload. A FAILED result or
    any exception other than DeliveryPermanentError counts as transient and is
    retried by ``deliver_with_retry``.
    """

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = get_delivery_logger(__name__).bind(destination=name)
        self.delivered = 0
        self.failed = 0

    @abstractmethod
    def deliver(self, notification: Notification) -> DeliveryResult:
        """Make one attempt at delivering ``notification``."""

    @abstractmethod
    def health_check(self) -> bool:
        """Whether the destination can currently accept notifications."""

    def deliver_with_retry(
        self,
        notification: Notification,
        max_retries: int = 2,
        retry_delay: float = 0.0
    ) -> DeliveryResult:
        """
        Deliver ``notification``, retrying transient failures.

        Args:
            notification: Payload from ``format_notification``
            max_retries: Attempts allowed after the first one
            retry_delay: Seconds to wait between attempts

        Returns:
            SUCCESS, FAILED on a permanent error, or DEAD_LETTER once the
            retries are used up
        """
        last = None

        for attempt in range(1, max_retries + 2):
            started = time.monotonic()
            try:
                result = self.deliver(notification)
            except DeliveryPermanentError as e:
                self.failed += 1
                self.logger.error("Permanent delivery error", attempt=attempt, error=str(e))
                return DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=f"Permanent error: {e}",
                    attempts=attempt,
                    error=e
                )
            except Exception as e:
                result = DeliveryResult(status=DeliveryStatus.FAILED, message=str(e), error=e)

            if result.ok:
                result.attempts = attempt
                result.elapsed_ms = int((time.monotonic() - started) * 1000)
                self.delivered += 1
                return result

            last = result
            if attempt <= max_retries:
                self.logger.warning(
                    "Delivery attempt failed, retrying",
                    attempt=attempt,
                    retry_delay=retry_delay,
                    error=result.message
                )
                if retry_delay > 0:
                    time.sleep(retry_delay)

        self.failed += 1
        return DeliveryResult(
            status=DeliveryStatus.DEAD_LETTER,
            message=f"Max retries exceeded: {last.message}",
            attempts=max_retries + 1,
            error=last.error
        )

    def get_stats(self) -> dict[str, Any]:
        total = self.delivered + self.failed
        return {
            "name": self.name,
            "delivered": self.delivered,
            "failed": self.failed,
            "success_rate": self.delivered / total if total else 0.0,
        }
