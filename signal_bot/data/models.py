"""
Canonical data models for the streaming price feed.

Samples are immutable and the series is a persistent value: appending
returns a new series, so a window handed to the analyzer can never change
underneath it.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..config.defaults import SeriesParams
from ..errors import MalformedDataError


@dataclass(frozen=True)
class Sample:
    """Single price observation with its display time label."""
    time: str       # Time label, e.g. "14:03:25"
    price: float

    def __post_init__(self):
        if not isinstance(self.time, str):
            raise MalformedDataError(
                "Sample time label must be a string",
                field="time",
                value=self.time
            )
        if isinstance(self.price, bool) or not isinstance(self.price, (int, float)):
            raise MalformedDataError(
                "Sample price must be a number",
                field="price",
                value=self.price
            )
        if not math.isfinite(self.price) or self.price < 0:
            raise MalformedDataError(
                "Sample price must be finite and non-negative",
                field="price",
                value=self.price
            )


@dataclass(frozen=True)
class PriceSeries:
    """Bounded, time-ordered price buffer; oldest samples are evicted first."""

    samples: tuple[Sample, ...] = ()
    max_size: int = field(default_factory=lambda: SeriesParams().window_size)

    def __post_init__(self):
        if self.max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        if len(self.samples) > self.max_size:
            object.__setattr__(self, "samples", tuple(self.samples[-self.max_size:]))
        elif not isinstance(self.samples, tuple):
            object.__setattr__(self, "samples", tuple(self.samples))

    @classmethod
    def from_samples(cls, samples, max_size: Optional[int] = None) -> "PriceSeries":
        """Build a series from any iterable of samples, keeping the newest."""
        if max_size is None:
            return cls(samples=tuple(samples))
        return cls(samples=tuple(samples), max_size=max_size)

    def append(self, sample: Sample) -> "PriceSeries":
        """Return a new series with ``sample`` added and excess oldest samples dropped."""
        if not isinstance(sample, Sample):
            raise MalformedDataError(
                "Only Sample instances can be appended",
                field="sample",
                value=sample
            )
        return PriceSeries(samples=self.samples + (sample,), max_size=self.max_size)

    def window(self, n: int) -> tuple[Sample, ...]:
        """Most recent ``n`` samples (fewer if unavailable), oldest first."""
        if n <= 0:
            return ()
        return self.samples[-n:]

    def prices(self) -> list[float]:
        """Prices in chronological order."""
        return [s.price for s in self.samples]

    @property
    def latest(self) -> Optional[Sample]:
        """Newest sample, None if the series is empty."""
        return self.samples[-1] if self.samples else None

    @property
    def last_price(self) -> Optional[float]:
        """Newest price, None if the series is empty."""
        return self.samples[-1].price if self.samples else None

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]
