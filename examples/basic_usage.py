#!/usr/bin/env python3
"""
Basic Usage Example - Signal Bot

Runs the stream scheduler against the synthetic random-walk feed with a
short tick interval so a few signal-eligible ticks happen within a minute.
It shows how to:
- Load configuration with overrides
- Wire the display and notification collaborators
- Start and stop the scheduler

Run: python examples/basic_usage.py [seconds]
"""

import random
import sys
import time

from signal_bot.config.loader import ConfigLoader
from signal_bot.config.notification import (
    NotificationConfig,
    create_stdout_destination,
)
from signal_bot.delivery.notifier import SignalNotifier
from signal_bot.display.sink import LogDisplaySink
from signal_bot.logging import configure_logging
from signal_bot.scheduler import StreamScheduler
from signal_bot.utils.time import format_signal_time


def main() -> None:
    duration = float(sys.argv[1]) if len(sys.argv) > 1 else 30.0

    configure_logging(level="INFO")

    config = ConfigLoader.create().build_config({
        "scheduler": {"tick_interval_seconds": 0.5},
    })
    notifier = SignalNotifier(NotificationConfig(
        destinations=[create_stdout_destination(format="pretty")],
    ))

    unhealthy = [name for name, ok in notifier.health_check().items() if not ok]
    if unhealthy:
        print(f"⚠️  Destinations not writable: {', '.join(unhealthy)}")

    print("🚀 Starting signal bot")
    with StreamScheduler(
        config=config,
        rng=random.Random(7),
        display=LogDisplaySink(),
        notifier=notifier,
    ) as scheduler:
        scheduler.start()
        time.sleep(duration)
        scheduler.stop()

        snapshot = scheduler.snapshot()
        print("\n📊 Session summary")
        print(f"  Status:      {snapshot.status}")
        print(f"  Ticks:       {snapshot.tick_count}")
        print(f"  Last price:  {snapshot.series.last_price}")
        if snapshot.analysis is not None:
            print(f"  Trend:       {snapshot.analysis.trend.value}")
        if snapshot.signal is not None:
            print(f"  Signal:      {snapshot.signal.type.value} @ {snapshot.signal.price} "
                  f"({format_signal_time(snapshot.signal.timestamp)})")
        else:
            print("  Signal:      waiting for clear market pattern")
        print(f"  Notified:    {notifier.get_stats()['sent_count']}")


if __name__ == "__main__":
    main()
