"""
Logging configuration and utilities for the signal engine.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
