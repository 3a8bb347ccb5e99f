"""Pytest configuration and shared fixtures."""

import random
from datetime import datetime, timedelta, timezone
from typing import Callable, List

import pytest

from signal_bot.data.models import PriceSeries, Sample


def make_series(prices: List[float], max_size: int = 50) -> PriceSeries:
    """Series with one sample per price, labelled by position."""
    samples = [Sample(time=f"12:00:{i:02d}", price=p) for i, p in enumerate(prices)]
    return PriceSeries.from_samples(samples, max_size=max_size)


class FlatFeed:
    """Feed that never moves away from a fixed price."""

    def __init__(self, price: float = 100.0, seed_samples: int = 20):
        self.price = price
        self.seed_samples = seed_samples

    def seed_window(self, now: datetime, interval_seconds: float) -> PriceSeries:
        return make_series([self.price] * self.seed_samples)

    def next_price(self, last_price):
        return self.price


class StepClock:
    """Deterministic clock advancing a fixed step per call."""

    def __init__(self, start: datetime, step_seconds: float = 5.0):
        self.current = start
        self.step = timedelta(seconds=step_seconds)

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def rising_series() -> PriceSeries:
    """20 samples rising monotonically from 100.0 to 105.0."""
    return make_series([round(100.0 + i * 5.0 / 19, 2) for i in range(20)])


@pytest.fixture
def falling_series() -> PriceSeries:
    """20 samples falling monotonically from 105.0 to 100.0."""
    return make_series([round(105.0 - i * 5.0 / 19, 2) for i in range(20)])


@pytest.fixture
def flat_series() -> PriceSeries:
    """20 samples all at 100.0."""
    return make_series([100.0] * 20)


@pytest.fixture
def flat_feed() -> FlatFeed:
    return FlatFeed()


@pytest.fixture
def step_clock() -> Callable[[], datetime]:
    return StepClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def series_factory() -> Callable[..., PriceSeries]:
    """Build a series from a list of prices."""
    return make_series
