"""
Synthetic price feed.
"""
from .random_walk import RandomWalkFeed

__all__ = ["RandomWalkFeed"]
