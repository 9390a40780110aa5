"""Data providers supplying price series and intervals to the engine"""

from .base import IntervalProvider, PriceSeriesProvider
from .json_file import JsonIntervalProvider, JsonPriceSeriesProvider
from .memory import StaticIntervalProvider, StaticPriceSeriesProvider

__all__ = [
    "PriceSeriesProvider",
    "IntervalProvider",
    "StaticPriceSeriesProvider",
    "StaticIntervalProvider",
    "JsonPriceSeriesProvider",
    "JsonIntervalProvider",
]
