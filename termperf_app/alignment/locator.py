"""Nearest price point lookup with forward-biased tie-breaking"""

from bisect import bisect_left
from collections.abc import Sequence
from datetime import date
from operator import attrgetter
from typing import Optional

from ..data.models import PricePoint

_by_date = attrgetter("date")


def locate(series: Sequence[PricePoint], target_date: date) -> Optional[PricePoint]:
    """
    Find the price point that stands for a target calendar date.

    Preference order:
    1. The earliest point on or after the target (an exact match wins)
    2. Otherwise the latest point before the target
    3. None if the series is empty

    A boundary falling on a non-trading day therefore resolves to the next
    trading day, and a boundary past the end of the data resolves to the
    last recorded price.

    Args:
        series: Price points in strictly ascending date order
        target_date: Date to resolve

    Returns:
        Matching price point, or None when the series is empty
    """
    if not series:
        return None

    index = bisect_left(series, target_date, key=_by_date)
    if index < len(series):
        return series[index]

    return series[-1]
