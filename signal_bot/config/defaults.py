"""Default configuration parameters for the signal engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesParams:
    """Price series buffer parameters."""
    window_size: int = 50                  # Max samples kept (FIFO eviction)
    chart_points: int = 20                 # Samples pushed for charting


@dataclass(frozen=True)
class AnalysisParams:
    """Rolling-window analysis parameters."""
    recent_window: int = 10                # Samples in the recent (and older) window
    min_samples: int = 10                  # Below this the analysis is Insufficient
    volatility_threshold_pct: float = 0.5  # Clear-pattern volatility gate
    momentum_threshold_pct: float = 0.3    # Clear-pattern momentum gate


@dataclass(frozen=True)
class SignalParams:
    """Signal generation parameters."""
    momentum_trigger_pct: float = 0.5      # Momentum needed for BUY/SELL
    confidence_min: int = 80               # Inclusive
    confidence_max: int = 99               # Inclusive


@dataclass(frozen=True)
class FeedParams:
    """Synthetic price feed parameters."""
    base_price: float = 100.0
    seed_samples: int = 20                 # Samples seeded on start
    seed_spread: float = 10.0              # Seed prices span base +/- spread/2
    volatility_factor: float = 0.01        # Random walk step scale
    time_format: str = "%H:%M:%S"          # Sample time label format


@dataclass(frozen=True)
class SchedulerParams:
    """Tick scheduling parameters."""
    tick_interval_seconds: float = 5.0
    signal_every_n_ticks: int = 6          # Signal refresh rate limit


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    series: SeriesParams
    analysis: AnalysisParams
    signal: SignalParams
    feed: FeedParams
    scheduler: SchedulerParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        series=SeriesParams(),
        analysis=AnalysisParams(),
        signal=SignalParams(),
        feed=FeedParams(),
        scheduler=SchedulerParams(),
    )
