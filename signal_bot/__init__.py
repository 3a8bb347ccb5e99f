"""
Signal Bot - Streaming Price Signal Engine

Simulates a streaming price feed, derives rolling market statistics from it
and emits discrete BUY/SELL signals when the statistics show a clear pattern.
"""

__version__ = "0.1.0"
__author__ = "Signal Bot Team"
