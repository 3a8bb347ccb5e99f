"""Signal data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from ..utils.time import format_market_time


class SignalType(str, Enum):
    """Direction of a trading signal."""
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Signal:
    """Directional signal emitted when the market shows a clear pattern.

    ``confidence`` is an illustrative score drawn at random from the
    configured range, not an estimate derived from the analysis.
    """
    type: SignalType
    price: float
    timestamp: datetime
    confidence: int
    reason: str

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for delivery and logging."""
        return {
            "type": self.type.value,
            "price": self.price,
            "timestamp": format_market_time(self.timestamp),
            "confidence": self.confidence,
            "reason": self.reason,
        }
