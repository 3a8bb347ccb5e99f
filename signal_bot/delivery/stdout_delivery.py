"""Standard output signal delivery mechanism."""

import json
import sys

from ..config.notification import StdoutNotifyConfig
from ..utils.time import format_market_time, now_utc
from .base import BaseSignalDelivery, DeliveryResult, DeliveryStatus, Notification


class StdoutSignalDelivery(BaseSignalDelivery):
    """Prints each notification as JSON or as a one-line alert."""

    def __init__(self, name: str, config: StdoutNotifyConfig):
        super().__init__(name, config)
        self.config: StdoutNotifyConfig = config

    def deliver(self, notification: Notification) -> DeliveryResult:
        try:
            print(self._render(notification), file=sys.stdout, flush=True)
        except (OSError, ValueError) as e:
            self.logger.error("Failed to print notification", error=str(e))
            return DeliveryResult(
                status=DeliveryStatus.FAILED,
                message=f"Stdout error: {e}",
                error=e
            )

        self.logger.info("Notification printed", signal_type=notification.get("type"))
        return DeliveryResult(status=DeliveryStatus.SUCCESS, message="Printed to stdout")

    def _render(self, notification: Notification) -> str:
        if self.config.format == "pretty":
            line = f"[{format_market_time(now_utc())}] {notification['title']}: {notification['body']}"
            if notification.get("reason"):
                line += f" - {notification['reason']}"
            return line

        if self.config.include_timestamp:
            notification = {**notification, "stdout_timestamp": format_market_time(now_utc())}
        return json.dumps(notification)

    def health_check(self) -> bool:
        try:
            return sys.stdout.writable()
        except (OSError, ValueError):
            return False
