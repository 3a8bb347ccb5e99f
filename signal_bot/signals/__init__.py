"""
Directional signal models and generation.
"""
from .generator import SignalGenerator, generate_signal
from .models import Signal, SignalType

__all__ = ["Signal", "SignalGenerator", "SignalType", "generate_signal"]
