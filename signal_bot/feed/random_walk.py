"""Bounded random-walk price source used to drive the scheduler."""

import random
from datetime import datetime, timedelta
from typing import Optional

from ..config.defaults import FeedParams, SeriesParams
from ..data.models import PriceSeries, Sample
from ..utils.time import format_time_label


class RandomWalkFeed:
    """
    Synthetic feed anchored at a base price.

    The injected ``rng`` is the only randomness in the price path, so a
    seeded ``random.Random`` reproduces a run exactly.
    """

    def __init__(
        self,
        params: Optional[FeedParams] = None,
        rng: Optional[random.Random] = None,
        series_params: Optional[SeriesParams] = None,
    ):
        self.params = params or FeedParams()
        self.rng = rng or random.Random()
        self.series_params = series_params or SeriesParams()

    def seed_window(self, now: datetime, interval_seconds: float) -> PriceSeries:
        """
        Build the initial window that precedes live ticks.

        Args:
            now: Time of the newest seeded sample
            interval_seconds: Spacing between seeded samples

        Returns:
            Series of ``seed_samples`` samples scattered around the base price
        """
        count = self.params.seed_samples
        samples = []
        for i in range(count):
            ts = now - timedelta(seconds=(count - 1 - i) * interval_seconds)
            price = self.params.base_price + (self.rng.random() - 0.5) * self.params.seed_spread
            samples.append(Sample(
                time=format_time_label(ts, self.params.time_format),
                price=round(price, 2),
            ))
        return PriceSeries.from_samples(samples, max_size=self.series_params.window_size)

    def next_price(self, last_price: Optional[float]) -> float:
        """One random-walk step from ``last_price`` (the base price if None)."""
        if last_price is None:
            last_price = self.params.base_price
        change = (self.rng.random() - 0.5) * self.params.volatility_factor * last_price
        return round(last_price + change, 2)
