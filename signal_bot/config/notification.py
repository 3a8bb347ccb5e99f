"""Configuration for signal notification delivery."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class DeliveryMethod(Enum):
    """Supported notification delivery methods."""
    FILE_OUTPUT = "file_output"
    STDOUT = "stdout"


@dataclass(frozen=True)
class FileNotifyConfig:
    """Configuration for file-based delivery (JSON lines)."""
    output_path: str
    create_dirs: bool = True


@dataclass(frozen=True)
class StdoutNotifyConfig:
    """Configuration for stdout delivery."""
    format: str = "json"  # json, pretty
    include_timestamp: bool = True


@dataclass(frozen=True)
class NotificationDestination:
    """Single notification destination."""
    name: str
    method: DeliveryMethod
    config: Any  # FileNotifyConfig | StdoutNotifyConfig
    enabled: bool = True

    # Filtering options
    signal_types_filter: Optional[list[str]] = None  # Only deliver BUY and/or SELL
    min_confidence: Optional[int] = None


@dataclass(frozen=True)
class NotificationConfig:
    """Complete notification configuration.

    ``enabled`` plays the role of the user's notification permission: when
    it is off the notifier accepts signals and drops them silently.
    """
    destinations: list[NotificationDestination]
    enabled: bool = True

    # Error handling
    failure_retry_attempts: int = 2
    failure_retry_delay_seconds: float = 0.0


def get_default_notification_config() -> NotificationConfig:
    """Get default notification configuration."""
    return NotificationConfig(
        destinations=[
            NotificationDestination(
                name="stdout",
                method=DeliveryMethod.STDOUT,
                config=StdoutNotifyConfig(
                    format="pretty",
                    include_timestamp=True
                ),
                enabled=True
            )
        ],
        enabled=True,
    )


def create_file_destination(
    name: str,
    output_path: str,
    enabled: bool = True,
    **kwargs
) -> NotificationDestination:
    """Create file delivery destination."""
    return NotificationDestination(
        name=name,
        method=DeliveryMethod.FILE_OUTPUT,
        config=FileNotifyConfig(output_path=output_path),
        enabled=enabled,
        **kwargs
    )


def create_stdout_destination(
    name: str = "stdout",
    format: str = "json",
    enabled: bool = True,
    **kwargs
) -> NotificationDestination:
    """Create stdout delivery destination."""
    return NotificationDestination(
        name=name,
        method=DeliveryMethod.STDOUT,
        config=StdoutNotifyConfig(format=format),
        enabled=enabled,
        **kwargs
    )
