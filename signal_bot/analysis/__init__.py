"""
Rolling-window market analysis.
"""
from .market import MarketAnalysis, MarketAnalyzer, Trend, analyze_market

__all__ = ["MarketAnalysis", "MarketAnalyzer", "Trend", "analyze_market"]
