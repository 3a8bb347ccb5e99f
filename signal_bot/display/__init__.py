"""
Display collaborator interface.
"""
from .sink import DisplaySink, LogDisplaySink, StreamSnapshot

__all__ = ["DisplaySink", "LogDisplaySink", "StreamSnapshot"]
