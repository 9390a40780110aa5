"""Normalized performance curves and per-interval summaries"""

from bisect import bisect_left, bisect_right
from collections.abc import Iterator, Sequence
from operator import attrgetter
from typing import Optional

import structlog

from ..config.defaults import CurveParams
from ..data.models import (
    CurvePerformance,
    Interval,
    NormalizedPoint,
    PerformanceSummary,
    PricePoint,
)
from ..data.validators import validate_interval, validate_intervals, validate_series
from ..utils.time import days_between
from .locator import locate
from .ranking import rank_summaries

logger = structlog.get_logger(__name__)

_by_date = attrgetter("date")


def calculate_percent_change(base: float, value: float) -> float:
    """
    Percent change from base to value

    change = (value - base) / base * 100

    Args:
        base: Reference price
        value: Current price

    Returns:
        Percent change, 0.0 when base is zero or negative
    """
    if base <= 0:
        return 0.0

    return (value - base) / base * 100.0


def interval_bounds(series: Sequence[PricePoint], interval: Interval) -> tuple[int, int]:
    """
    Index range of the points inside an interval.

    Returns:
        (lo, hi) such that series[lo:hi] holds every point with
        start <= date <= end; lo == hi when the interval holds no point
    """
    lo = bisect_left(series, interval.start, key=_by_date)
    if interval.has_upper_bound:
        hi = bisect_right(series, interval.end, key=_by_date)
    else:
        hi = len(series)
    return lo, max(lo, hi)


class NormalizedCurve:
    """
    Lazy normalized view of a price series over one interval.

    Iterating recomputes every point from the series, so the curve can be
    iterated any number of times and always reflects its inputs.
    """

    def __init__(self, series: Sequence[PricePoint], interval: Interval):
        self.series = series
        self.interval = interval

    def __iter__(self) -> Iterator[NormalizedPoint]:
        lo, hi = interval_bounds(self.series, self.interval)
        if lo == hi:
            return

        start = self.interval.start
        base_price = self.series[lo].close

        for index in range(lo, hi):
            point = self.series[index]
            delta = point.close - base_price
            # Zero base yields 0% instead of a non-finite value
            percent = delta / base_price * 100.0 if base_price != 0 else 0.0
            yield NormalizedPoint(
                date=point.date,
                close=point.close,
                offset_days=days_between(start, point.date),
                delta_close=delta,
                percent_change=percent,
            )

    def __len__(self) -> int:
        lo, hi = interval_bounds(self.series, self.interval)
        return hi - lo

    def __bool__(self) -> bool:
        return len(self) > 0

    @property
    def label(self) -> str:
        return self.interval.label

    def __repr__(self) -> str:
        return f"NormalizedCurve(label={self.interval.label!r}, points={len(self)})"


def normalize(series: Sequence[PricePoint], interval: Interval) -> NormalizedCurve:
    """
    Normalize the prices of one interval against its first price.

    Only points with start <= date <= end are kept; ongoing intervals have
    no upper bound. An interval without any points yields an empty curve.

    Args:
        series: Price points in strictly ascending date order
        interval: Interval to normalize

    Returns:
        Restartable curve of NormalizedPoint in ascending date order

    Raises:
        UnorderedSeriesError: If the series is not strictly ascending
        InvalidIntervalError: If the interval bounds are inconsistent
    """
    validate_series(series)
    validate_interval(interval)
    return NormalizedCurve(series, interval)


def _resolve_end_target(series: Sequence[PricePoint], interval: Interval):
    if interval.is_ongoing:
        return series[-1].date if series else None
    return interval.end


def summarize_interval(series: Sequence[PricePoint], interval: Interval) -> PerformanceSummary:
    """
    Unranked start/end summary for a single interval.

    Boundaries without a price resolve to a close of 0.0, which marks the
    summary as not computable. An interval holding no price at all (a
    future term, a hole in the data) has no boundary prices either, even
    though the nearest-point lookup would fall back to a neighbouring date.
    """
    start_point: Optional[PricePoint] = None
    end_point: Optional[PricePoint] = None

    lo, hi = interval_bounds(series, interval)
    if lo < hi:
        start_point = locate(series, interval.start)
        end_target = _resolve_end_target(series, interval)
        if end_target is not None:
            end_point = locate(series, end_target)

    start_close = start_point.close if start_point is not None else 0.0
    end_close = end_point.close if end_point is not None else 0.0

    return PerformanceSummary(
        label=interval.label,
        term_start=interval.start,
        term_end=interval.end,
        start_close=start_close,
        end_close=end_close,
        percent_change=calculate_percent_change(start_close, end_close),
    )


def summarize(series: Sequence[PricePoint], intervals: Sequence[Interval]) -> list[PerformanceSummary]:
    """
    Summarize and rank every interval.

    Args:
        series: Price points in strictly ascending date order
        intervals: Intervals in their preferred tie-break order

    Returns:
        Ranked summaries, best percent change first. Intervals without a
        positive close at both boundaries are omitted.

    Raises:
        UnorderedSeriesError: If the series is not strictly ascending
        InvalidIntervalError: If any interval bounds are inconsistent
    """
    intervals = tuple(intervals)
    validate_series(series)
    validate_intervals(intervals)

    summaries = [summarize_interval(series, interval) for interval in intervals]
    ranked = rank_summaries(summaries)

    logger.info(
        "Summarized intervals",
        intervals=len(summaries),
        ranked=len(ranked),
        series_points=len(series),
    )
    return ranked


def curve_performance(curve: NormalizedCurve, round_digits: int = 2,
                      min_points: int = 2) -> CurvePerformance:
    """
    First-to-last change of a normalized curve

    Args:
        curve: Normalized curve to measure
        round_digits: Decimal places for price and percent change
        min_points: Points required before a change is reported

    Returns:
        CurvePerformance; zero change when the curve is too short
    """
    points = list(curve)

    if not points:
        return CurvePerformance(
            label=curve.label,
            start_close=0.0,
            end_close=0.0,
            price_change=0.0,
            percent_change=0.0,
            points=0,
        )

    start_close = points[0].close
    end_close = points[-1].close

    if len(points) < min_points:
        price_change = 0.0
        percent_change = 0.0
    else:
        price_change = round(end_close - start_close, round_digits)
        percent_change = round(calculate_percent_change(start_close, end_close), round_digits)

    return CurvePerformance(
        label=curve.label,
        start_close=start_close,
        end_close=end_close,
        price_change=price_change,
        percent_change=percent_change,
        points=len(points),
    )


class PerformanceAligner:
    """Aligner bound to curve parameters from configuration"""

    def __init__(self, params: Optional[CurveParams] = None):
        self.params = params or CurveParams()

    def normalize(self, series: Sequence[PricePoint], interval: Interval) -> NormalizedCurve:
        return normalize(series, interval)

    def summarize(self, series: Sequence[PricePoint],
                  intervals: Sequence[Interval]) -> list[PerformanceSummary]:
        return summarize(series, intervals)

    def curve_performance(self, curve: NormalizedCurve) -> CurvePerformance:
        return curve_performance(
            curve,
            round_digits=self.params.round_digits,
            min_points=self.params.min_points,
        )
