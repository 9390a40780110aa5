"""
Structural validation of price series and intervals.

Gaps in a series are normal (weekends, holidays) and are never rejected.
Only inputs that would make alignment meaningless are refused.
"""

from collections.abc import Iterable, Sequence

from ..errors import InvalidIntervalError, UnorderedSeriesError
from .models import Interval, PricePoint


def validate_series(series: Sequence[PricePoint]) -> None:
    """
    Check that series dates are strictly ascending.

    Raises:
        UnorderedSeriesError: On a duplicate or out-of-order date
    """
    for index in range(1, len(series)):
        previous = series[index - 1].date
        current = series[index].date
        if current <= previous:
            kind = "Duplicate" if current == previous else "Out-of-order"
            raise UnorderedSeriesError(
                f"{kind} price date {current} at index {index} (previous {previous})",
                index=index,
                previous_date=previous,
                current_date=current
            )


def validate_interval(interval: Interval) -> None:
    """
    Check interval bounds.

    Raises:
        InvalidIntervalError: If a closed interval lacks an end or ends before it starts
    """
    if interval.is_ongoing:
        return

    if interval.end is None:
        raise InvalidIntervalError(
            f"Interval {interval.label!r} is not ongoing but has no end",
            label=interval.label,
            start=interval.start
        )

    if interval.start > interval.end:
        raise InvalidIntervalError(
            f"Interval {interval.label!r} starts {interval.start} after it ends {interval.end}",
            label=interval.label,
            start=interval.start,
            end=interval.end
        )


def validate_intervals(intervals: Iterable[Interval]) -> None:
    """Validate every interval in order, failing on the first bad one."""
    for interval in intervals:
        validate_interval(interval)


def validate_unique_labels(intervals: Iterable[Interval]) -> None:
    """
    Check that labels can be used as keys.

    Raises:
        InvalidIntervalError: On the first repeated label
    """
    seen: set[str] = set()
    for interval in intervals:
        if interval.label in seen:
            raise InvalidIntervalError(
                f"Duplicate interval label {interval.label!r}",
                label=interval.label,
                start=interval.start,
                end=interval.end
            )
        seen.add(interval.label)
