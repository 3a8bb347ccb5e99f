"""Tests for rolling-window market analysis."""

import copy

import pytest

from signal_bot.analysis.market import (
    MarketAnalysis,
    MarketAnalyzer,
    Trend,
    analyze_market,
    calculate_momentum_pct,
    calculate_volatility_pct,
)
from signal_bot.config.defaults import AnalysisParams


class TestInsufficientData:
    """Fewer samples than the minimum give a neutral analysis."""

    @pytest.mark.parametrize("length", range(10))
    def test_short_series_is_insufficient(self, length, series_factory):
        analysis = analyze_market(series_factory([100.0 + i for i in range(length)]))

        assert analysis.trend is Trend.INSUFFICIENT
        assert analysis.clear_pattern is False
        assert analysis.volatility == 0
        assert analysis.momentum == 0
        assert analysis.has_opinion is False

    def test_insufficient_factory(self):
        assert MarketAnalysis.insufficient() == MarketAnalysis(trend=Trend.INSUFFICIENT)


class TestScenarios:
    """End-to-end analysis scenarios."""

    def test_rising_series_is_bullish_with_clear_pattern(self, rising_series):
        analysis = analyze_market(rising_series)

        assert analysis.trend is Trend.BULLISH
        assert analysis.momentum == pytest.approx(2.6, abs=0.02)
        assert analysis.volatility == pytest.approx(2.28, abs=0.02)
        assert analysis.clear_pattern is True

    def test_falling_series_is_bearish_with_clear_pattern(self, falling_series):
        analysis = analyze_market(falling_series)

        assert analysis.trend is Trend.BEARISH
        assert analysis.momentum > 0.5
        assert analysis.clear_pattern is True

    def test_flat_series(self, flat_series):
        analysis = analyze_market(flat_series)

        assert analysis.volatility == 0
        assert analysis.momentum == 0
        assert analysis.clear_pattern is False
        # Equal averages fall to Bearish under the strict comparison
        assert analysis.trend is Trend.BEARISH

    def test_equal_averages_tie_goes_bearish(self, series_factory):
        prices = [99.0, 101.0] * 10
        analysis = analyze_market(series_factory(prices))

        assert analysis.trend is Trend.BEARISH
        assert analysis.momentum == 0
        assert analysis.volatility == 2.0
        assert analysis.clear_pattern is False

    def test_values_rounded_to_two_decimals(self, rising_series):
        analysis = analyze_market(rising_series)
        assert analysis.volatility == round(analysis.volatility, 2)
        assert analysis.momentum == round(analysis.momentum, 2)

    def test_only_last_twenty_samples_matter(self, rising_series, series_factory):
        prefix = [500.0] * 15
        longer = series_factory(prefix + rising_series.prices())
        assert analyze_market(longer) == analyze_market(rising_series)


class TestEdgeCases:
    """Degenerate windows never crash."""

    def test_zero_older_average_gives_zero_momentum(self, series_factory):
        analysis = analyze_market(series_factory([0.0] * 10 + [1.0] * 10))

        assert analysis.momentum == 0
        assert analysis.trend is Trend.BULLISH
        assert analysis.clear_pattern is False

    def test_exactly_ten_samples_has_no_older_window(self, series_factory):
        analysis = analyze_market(series_factory([100.0 + i for i in range(10)]))

        assert analysis.trend is Trend.BEARISH
        assert analysis.momentum == 0
        assert analysis.volatility > 0
        assert analysis.clear_pattern is False

    def test_short_older_window_averages_what_exists(self, series_factory):
        # 5 older samples at 100, 10 recent at 102
        analysis = analyze_market(series_factory([100.0] * 5 + [102.0] * 10))

        assert analysis.trend is Trend.BULLISH
        assert analysis.momentum == 2.0
        assert analysis.volatility == 0

    def test_clear_pattern_needs_both_gates(self, series_factory):
        # Strong momentum but a perfectly flat recent window
        analysis = analyze_market(series_factory([100.0] * 10 + [105.0] * 10))
        assert analysis.momentum == 5.0
        assert analysis.volatility == 0
        assert analysis.clear_pattern is False

    def test_custom_thresholds(self, rising_series):
        strict = AnalysisParams(volatility_threshold_pct=5.0)
        assert analyze_market(rising_series, strict).clear_pattern is False


class TestPurity:
    """analyze is a pure function of its window."""

    def test_repeated_calls_on_cloned_input(self, rising_series):
        clone = copy.deepcopy(rising_series)

        first = analyze_market(rising_series)
        second = analyze_market(clone)
        third = analyze_market(rising_series)

        assert first == second == third
        assert rising_series == clone

    def test_analyzer_matches_function(self, falling_series):
        analyzer = MarketAnalyzer()
        assert analyzer.analyze(falling_series) == analyze_market(falling_series)


class TestHelpers:
    """Percentage helpers."""

    def test_volatility_pct(self):
        assert calculate_volatility_pct([99.0, 101.0]) == pytest.approx(2.0)
        assert calculate_volatility_pct([]) == 0.0
        assert calculate_volatility_pct([0.0, 0.0]) == 0.0

    def test_momentum_pct(self):
        assert calculate_momentum_pct(102.0, 100.0) == pytest.approx(2.0)
        assert calculate_momentum_pct(98.0, 100.0) == pytest.approx(2.0)
        assert calculate_momentum_pct(1.0, 0.0) == 0.0
        assert calculate_momentum_pct(1.0, None) == 0.0
