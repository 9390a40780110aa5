"""In-memory providers holding an already fetched snapshot."""

from collections.abc import Iterable, Mapping
from typing import Any, Union

from ..data.models import Interval, PricePoint
from ..data.parsers import parse_interval, parse_price_point
from .base import IntervalProvider, PriceSeriesProvider


class StaticPriceSeriesProvider(PriceSeriesProvider):
    """Serves a fixed price series."""

    def __init__(self, points: Iterable[Union[PricePoint, Mapping[str, Any]]],
                 name: str = "static"):
        super().__init__(name)
        self._series = tuple(
            point if isinstance(point, PricePoint) else parse_price_point(point)
            for point in points
        )

    def get_series(self) -> tuple[PricePoint, ...]:
        return self._series


class StaticIntervalProvider(IntervalProvider):
    """Serves a fixed interval list."""

    def __init__(self, intervals: Iterable[Union[Interval, Mapping[str, Any]]],
                 name: str = "static"):
        super().__init__(name)
        self._intervals = tuple(
            interval if isinstance(interval, Interval) else parse_interval(interval)
            for interval in intervals
        )

    def get_intervals(self) -> tuple[Interval, ...]:
        return self._intervals
