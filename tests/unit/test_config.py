"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from signal_bot.config.defaults import get_default_config
from signal_bot.config.loader import ConfigLoader
from signal_bot.config.validation import ConfigValidator
from signal_bot.errors import ConfigurationError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path


def write_settings(config_dir: Path, text: str) -> None:
    (config_dir / "settings.yaml").write_text(text)


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()

        assert config.series.window_size == 50
        assert config.series.chart_points == 20
        assert config.analysis.recent_window == 10
        assert config.analysis.volatility_threshold_pct == 0.5
        assert config.analysis.momentum_threshold_pct == 0.3
        assert config.signal.momentum_trigger_pct == 0.5
        assert (config.signal.confidence_min, config.signal.confidence_max) == (80, 99)
        assert config.feed.base_price == 100.0
        assert config.feed.volatility_factor == 0.01
        assert config.scheduler.tick_interval_seconds == 5.0
        assert config.scheduler.signal_every_n_ticks == 6


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_shipped_settings_match_defaults(self) -> None:
        assert ConfigLoader.create().build_config() == get_default_config()

    def test_merge_defaults_only(self, config_dir) -> None:
        config = ConfigLoader.create(config_dir).merge_config()

        assert config["series"]["window_size"] == 50
        assert config["scheduler"]["signal_every_n_ticks"] == 6

    def test_settings_file_overrides_defaults(self, config_dir) -> None:
        write_settings(config_dir, "scheduler:\n  tick_interval_seconds: 1.5\n")

        config = ConfigLoader.create(config_dir).build_config()

        assert config.scheduler.tick_interval_seconds == 1.5
        assert config.scheduler.signal_every_n_ticks == 6

    def test_explicit_overrides_win(self, config_dir) -> None:
        write_settings(config_dir, "feed:\n  base_price: 50.0\n  seed_samples: 30\n")

        config = ConfigLoader.create(config_dir).build_config({"feed": {"base_price": 75.0}})

        assert config.feed.base_price == 75.0
        assert config.feed.seed_samples == 30

    def test_empty_settings_file(self, config_dir) -> None:
        write_settings(config_dir, "# nothing here\n")
        assert ConfigLoader.create(config_dir).load_settings() == {}

    def test_non_mapping_settings_file(self, config_dir) -> None:
        write_settings(config_dir, "- a\n- b\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(config_dir).load_settings()

    def test_invalid_values_fail_fast(self, config_dir) -> None:
        loader = ConfigLoader.create(config_dir)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.build_config({"series": {"window_size": 0}})

        assert any("window_size" in msg for msg in exc_info.value.errors)

    def test_unknown_parameter_rejected(self, config_dir) -> None:
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(config_dir).build_config({"analysis": {"rsi_period": 14}})


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        merged = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(merged) == []

    @pytest.mark.parametrize("params", [
        {"window_size": -1},
        {"chart_points": 2.5},
        {"window_size": True},
    ])
    def test_invalid_series_params(self, params) -> None:
        assert ConfigValidator.validate_series_params(params)

    def test_recent_window_larger_than_min_samples(self) -> None:
        errors = ConfigValidator.validate_analysis_params(
            {"recent_window": 12, "min_samples": 10}
        )
        assert [e.field for e in errors] == ["recent_window"]

    def test_negative_thresholds(self) -> None:
        errors = ConfigValidator.validate_analysis_params(
            {"volatility_threshold_pct": -0.1, "momentum_threshold_pct": "high"}
        )
        assert {e.field for e in errors} == {"volatility_threshold_pct", "momentum_threshold_pct"}

    def test_confidence_bounds(self) -> None:
        assert ConfigValidator.validate_signal_params({"confidence_max": 101})
        assert ConfigValidator.validate_signal_params({"confidence_min": 95, "confidence_max": 90})
        assert ConfigValidator.validate_signal_params({"confidence_min": 80, "confidence_max": 99}) == []

    def test_feed_params(self) -> None:
        assert ConfigValidator.validate_feed_params({"base_price": 0})
        assert ConfigValidator.validate_feed_params({"time_format": 5})
        assert ConfigValidator.validate_feed_params({"volatility_factor": 0.02}) == []

    def test_scheduler_params(self) -> None:
        assert ConfigValidator.validate_scheduler_params({"tick_interval_seconds": 0})
        assert ConfigValidator.validate_scheduler_params({"signal_every_n_ticks": 0})

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"series": 5})
        assert errors[0].field == "series"

    def test_min_samples_must_fit_window(self) -> None:
        errors = ConfigValidator.validate_config({
            "series": {"window_size": 8},
            "analysis": {"recent_window": 5, "min_samples": 10},
        })
        assert "min_samples" in [e.field for e in errors]
