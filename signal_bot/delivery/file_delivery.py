"""File-based signal delivery mechanism (JSON lines)."""

import fcntl
import json
from pathlib import Path

from ..config.notification import FileNotifyConfig
from .base import (
    BaseSignalDelivery,
    DeliveryPermanentError,
    DeliveryResult,
    DeliveryStatus,
    Notification,
)


class FileSignalDelivery(BaseSignalDelivery):
    """Appends one JSON object per notification to the configured file."""

    def __init__(self, name: str, config: FileNotifyConfig):
        super().__init__(name, config)
        self.config: FileNotifyConfig = config
        self.output_path = Path(config.output_path)

        if config.create_dirs:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def deliver(self, notification: Notification) -> DeliveryResult:
        try:
            with open(self.output_path, 'a') as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                json.dump(notification, f, default=str)
                f.write('\n')

        except IsADirectoryError as e:
            raise DeliveryPermanentError(f"{self.output_path} is a directory") from e

        except OSError as e:
            self.logger.warning(
                "Notification file error",
                output_path=str(self.output_path),
                error=str(e)
            )
            return DeliveryResult(
                status=DeliveryStatus.FAILED,
                message=f"File system error: {e}",
                error=e
            )

        self.logger.info(
            "Notification written to file",
            signal_type=notification.get("type"),
            output_path=str(self.output_path)
        )
        return DeliveryResult(status=DeliveryStatus.SUCCESS, message=f"Written to {self.output_path}")

    def health_check(self) -> bool:
        """Check that the output directory is writable."""
        try:
            check_file = self.output_path.parent / ".health_check_test"
            check_file.write_text("test")
            check_file.unlink()
            return True

        except OSError as e:
            self.logger.warning("Health check failed", error=str(e))
            return False
