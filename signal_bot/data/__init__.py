"""
Price sample and series models.
"""
from .models import PriceSeries, Sample

__all__ = ["PriceSeries", "Sample"]
