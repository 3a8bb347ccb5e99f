"""
Stream scheduler: ties price arrival to analysis and signal emission.

Each tick appends one sample, re-analyses the window and publishes a
snapshot to the display. Only every Nth tick since ``start()`` consults the
signal generator; the ticks in between hold the current signal as it is.

Ticks run on one timer thread owned by the scheduler. Session state is
guarded by a single lock that is never held while a collaborator runs:
the display and the notifier are called after the lock is released.
Display updates are serialised by a second lock so a stopped stream never
shows a Live snapshot after its Offline one.
"""

import random
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional

from ..analysis.market import MarketAnalysis, MarketAnalyzer
from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceSeries, Sample
from ..display.sink import DisplaySink, StreamSnapshot
from ..errors import SchedulerError
from ..feed.random_walk import RandomWalkFeed
from ..logging.config import get_scheduler_logger, log_state_transition
from ..signals.generator import SignalGenerator
from ..signals.models import Signal
from ..utils.time import format_time_label, now_utc

logger = get_scheduler_logger(__name__)


class SchedulerState(str, Enum):
    """Scheduler lifecycle states."""
    IDLE = "idle"
    RUNNING = "running"


@dataclass
class _TickHandle:
    """The single timer owned by a running scheduler."""
    thread: threading.Thread
    stop_event: threading.Event


class StreamScheduler:
    """
    Owns the tick cadence and the mutable session state.

    Collaborators are injected: ``feed`` supplies prices (``seed_window`` and
    ``next_price``), ``display`` receives a StreamSnapshot after every
    analysis and ``notifier`` receives each newly generated signal.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        feed: Any = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = now_utc,
        display: Optional[DisplaySink] = None,
        notifier: Any = None,
    ) -> None:
        self.config = config or get_default_config()
        self.rng = rng or random.Random()
        self.clock = clock
        self.feed = feed or RandomWalkFeed(self.config.feed, self.rng, self.config.series)
        self.analyzer = MarketAnalyzer(self.config.analysis)
        self.generator = SignalGenerator(self.config.signal, self.rng, clock)
        self.display = display
        self.notifier = notifier
        self.logger = logger

        self._lock = threading.RLock()
        self._display_lock = threading.RLock()
        self._handle: Optional[_TickHandle] = None
        self._closed = False

        self._active = False
        self._series = PriceSeries(max_size=self.config.series.window_size)
        self._analysis: Optional[MarketAnalysis] = None
        self._current_signal: Optional[Signal] = None
        self._last_signal_time: Optional[datetime] = None
        self._tick_count = 0
        self._as_of: Optional[datetime] = None

    # Lifecycle

    def start(self) -> None:
        """Seed the series, publish the first analysis and begin ticking."""
        # Held across the first publish so no tick reaches the display before it
        with self._display_lock:
            with self._lock:
                if self._closed:
                    raise SchedulerError(
                        "Scheduler has been closed",
                        current_state="closed",
                        attempted_operation="start"
                    )
                if self._active:
                    self.logger.debug("Scheduler already running, start ignored")
                    return

                interval = self.config.scheduler.tick_interval_seconds
                self._active = True
                self._tick_count = 0
                self._as_of = self.clock()
                self._series = self.feed.seed_window(self._as_of, interval)
                self._analysis = self.analyzer.analyze(self._series)

                stop_event = threading.Event()
                thread = threading.Thread(
                    target=self._run,
                    args=(stop_event,),
                    name="signal-bot-ticker",
                    daemon=True,
                )
                self._handle = _TickHandle(thread=thread, stop_event=stop_event)

                log_state_transition(
                    self.logger, SchedulerState.IDLE.value, SchedulerState.RUNNING.value,
                    "start",
                    context={"interval_seconds": interval, "seed_samples": len(self._series)}
                )
                snapshot = self._snapshot_locked()
                thread.start()

            self._show(snapshot)

    def stop(self) -> None:
        """
        Halt ticking; series, analysis and signal are kept for display.

        Returns without waiting for a notification still in flight from the
        last tick. No further tick runs once this returns.
        """
        with self._lock:
            if not self._halt_locked(None, "stop"):
                return
            snapshot = self._snapshot_locked()

        self._show(snapshot)

    def close(self) -> None:
        """Stop for good and wait for the timer thread to finish."""
        with self._lock:
            handle = self._handle
        self.stop()
        with self._lock:
            self._closed = True

        if (handle is not None and handle.thread is not threading.current_thread()
                and handle.thread.is_alive()):
            handle.thread.join()

    def __enter__(self) -> "StreamScheduler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _halt_locked(self, stop_event: Optional[threading.Event], trigger: str) -> bool:
        """
        Move to Idle and cancel the timer.

        With ``stop_event`` set, only halts if that timer is still the
        current one. Returns False when there was nothing to halt.
        """
        handle = self._handle
        if not self._active or handle is None:
            return False
        if stop_event is not None and handle.stop_event is not stop_event:
            return False

        self._active = False
        self._handle = None
        handle.stop_event.set()
        self._as_of = self.clock()

        log_state_transition(
            self.logger, SchedulerState.RUNNING.value, SchedulerState.IDLE.value,
            trigger,
            context={"ticks": self._tick_count}
        )
        return True

    # Ticking

    def _run(self, stop_event: threading.Event) -> None:
        """Timer loop: one tick per interval until ``stop_event`` is set."""
        interval = self.config.scheduler.tick_interval_seconds
        while not stop_event.wait(interval):
            try:
                with self._lock:
                    # A stop() that raced with the wakeup owns the lock first
                    if self._handle is None or self._handle.stop_event is not stop_event:
                        return
                    snapshot, signal = self._advance_locked()

                self._show(snapshot, stop_event)
            except Exception:
                self.logger.exception("Tick failed, stopping scheduler",
                                      tick=self._tick_count)
                self._fail(stop_event)
                return

            self._notify(signal)

    def _fail(self, stop_event: threading.Event) -> None:
        """Halt after a failed tick and tell the display the stream is offline."""
        with self._lock:
            if not self._halt_locked(stop_event, "tick_failed"):
                return
            snapshot = self._snapshot_locked()

        try:
            self._show(snapshot)
        except Exception:
            self.logger.exception("Display rejected offline snapshot")

    def tick(self) -> Optional[StreamSnapshot]:
        """
        Run one tick synchronously.

        Display errors propagate to the caller; notification errors do not.

        Returns:
            The published snapshot, or None when the scheduler is idle
        """
        with self._lock:
            if not self._active:
                self.logger.debug("Tick ignored, scheduler idle")
                return None
            snapshot, signal = self._advance_locked()

        self._show(snapshot)
        self._notify(signal)
        return snapshot

    def _advance_locked(self) -> tuple[StreamSnapshot, Optional[Signal]]:
        """Apply one tick to the session state.

        Returns the snapshot to publish and the signal to notify, if any.
        """
        self._tick_count += 1
        now = self.clock()
        self._as_of = now

        price = self.feed.next_price(self._series.last_price)
        sample = Sample(
            time=format_time_label(now, self.config.feed.time_format),
            price=price,
        )
        self._series = self._series.append(sample)
        self._analysis = self.analyzer.analyze(self._series)

        new_signal = None
        if self._tick_count % self.config.scheduler.signal_every_n_ticks == 0:
            new_signal = self.generator.generate(price, self._analysis)
            self._current_signal = new_signal
            if new_signal is not None:
                self._last_signal_time = now

        self.logger.debug(
            "Tick processed",
            tick=self._tick_count,
            price=price,
            trend=self._analysis.trend.value,
            clear_pattern=self._analysis.clear_pattern,
        )
        return self._snapshot_locked(), new_signal

    def _show(self, snapshot: StreamSnapshot,
              stop_event: Optional[threading.Event] = None) -> None:
        """Push ``snapshot`` to the display unless its timer was cancelled."""
        if self.display is None:
            return
        with self._display_lock:
            if stop_event is not None and stop_event.is_set():
                return
            self.display.update(snapshot)

    def _notify(self, signal: Optional[Signal]) -> None:
        """Hand a new signal to the notifier; its failures stay there."""
        if signal is None or self.notifier is None:
            return
        try:
            self.notifier.notify(signal)
        except Exception:
            self.logger.exception(
                "Signal notification failed",
                signal_type=signal.type.value,
                price=signal.price
            )

    # State accessors

    def _snapshot_locked(self) -> StreamSnapshot:
        return StreamSnapshot(
            series=self._series,
            analysis=self._analysis,
            signal=self._current_signal,
            last_signal_time=self._last_signal_time,
            active=self._active,
            tick_count=self._tick_count,
            as_of=self._as_of,
        )

    def snapshot(self) -> StreamSnapshot:
        with self._lock:
            return self._snapshot_locked()

    @property
    def state(self) -> SchedulerState:
        return SchedulerState.RUNNING if self._active else SchedulerState.IDLE

    @property
    def active(self) -> bool:
        return self._active

    @property
    def series(self) -> PriceSeries:
        return self._series

    @property
    def analysis(self) -> Optional[MarketAnalysis]:
        return self._analysis

    @property
    def current_signal(self) -> Optional[Signal]:
        return self._current_signal

    @property
    def last_signal_time(self) -> Optional[datetime]:
        return self._last_signal_time

    @property
    def tick_count(self) -> int:
        return self._tick_count
