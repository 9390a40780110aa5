"""Base classes for price series and interval providers."""

from abc import ABC, abstractmethod

import structlog

from ..data.models import Interval, PricePoint


class PriceSeriesProvider(ABC):
    """Source of an ordered, de-duplicated price series for one symbol."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"provider.series.{name}")

    @abstractmethod
    def get_series(self) -> tuple[PricePoint, ...]:
        """
        Return the current price series snapshot.

        Returns:
            Price points in ascending date order

        Raises:
            MissingDataError: If no series is available
            MalformedDataError: If the stored series cannot be parsed
        """
        pass


class IntervalProvider(ABC):
    """Source of the labeled intervals to measure."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"provider.intervals.{name}")

    @abstractmethod
    def get_intervals(self) -> tuple[Interval, ...]:
        """
        Return the intervals in their listing order.

        Raises:
            MissingDataError: If no interval list is available
            MalformedDataError: If the stored intervals cannot be parsed
        """
        pass
