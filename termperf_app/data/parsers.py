"""
Parsers converting raw provider records into canonical data models.

Records use the layout served by the original data endpoints:

    price:    {"date": "2021-01-20", "close": 3851.85}
    interval: {"name": "Joe Biden", "start": "2021-01-20",
               "end": "2025-01-20", "isCurrent": false}

Interval records also accept ``label`` for the name and ``is_ongoing`` or
``isOngoing`` for the ongoing flag.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from ..errors import MalformedDataError
from ..utils.time import parse_date
from .models import Interval, PricePoint

logger = structlog.get_logger(__name__)

_LABEL_KEYS = ("label", "name")
_ONGOING_KEYS = ("is_ongoing", "isOngoing", "isCurrent")


def parse_price_point(record: Mapping[str, Any]) -> PricePoint:
    """
    Parse a single price record.

    Raises:
        MalformedDataError: If the date or close is missing or invalid
    """
    if not isinstance(record, Mapping):
        raise MalformedDataError(
            f"Price record must be a mapping, got {type(record).__name__}",
            raw_data=repr(record),
            expected_format="{date, close}"
        )

    if isinstance(record.get("close"), bool):
        raise MalformedDataError(
            "Close must be a number, got a boolean",
            raw_data=repr(record),
            expected_format="{date, close}"
        )

    try:
        point_date = parse_date(record["date"])
        close = float(record["close"])
    except KeyError as e:
        raise MalformedDataError(
            f"Price record missing field: {e.args[0]}",
            raw_data=repr(record),
            expected_format="{date, close}"
        ) from e
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Invalid price record: {e}",
            raw_data=repr(record),
            expected_format="{date, close}"
        ) from e

    if not math.isfinite(close):
        raise MalformedDataError(
            f"Close must be finite, got {close}",
            raw_data=repr(record)
        )

    if close <= 0:
        raise MalformedDataError(
            f"Close must be positive, got {close}",
            raw_data=repr(record)
        )

    return PricePoint(date=point_date, close=close)


def parse_price_series(records: Iterable[Mapping[str, Any]]) -> tuple[PricePoint, ...]:
    """Parse price records, keeping their order."""
    series = tuple(parse_price_point(record) for record in records)
    logger.debug("Parsed price series", points=len(series))
    return series


def _first_present(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


def parse_interval(record: Mapping[str, Any]) -> Interval:
    """
    Parse a single interval record.

    An ongoing interval may omit ``end`` or leave it empty; a closed
    interval must provide it.

    Raises:
        MalformedDataError: If label, start or a required end is invalid
    """
    if not isinstance(record, Mapping):
        raise MalformedDataError(
            f"Interval record must be a mapping, got {type(record).__name__}",
            raw_data=repr(record),
            expected_format="{name, start, end, isCurrent}"
        )

    label = _first_present(record, _LABEL_KEYS)
    if not isinstance(label, str) or not label.strip():
        raise MalformedDataError(
            "Interval record missing label",
            raw_data=repr(record),
            expected_format="{name, start, end, isCurrent}"
        )

    ongoing = _first_present(record, _ONGOING_KEYS)
    if ongoing is None:
        ongoing = False
    if not isinstance(ongoing, bool):
        raise MalformedDataError(
            f"Ongoing flag must be a boolean for interval {label!r}",
            raw_data=repr(record)
        )

    try:
        start = parse_date(record["start"])
    except KeyError as e:
        raise MalformedDataError(
            f"Interval {label!r} missing start",
            raw_data=repr(record)
        ) from e
    except ValueError as e:
        raise MalformedDataError(
            f"Interval {label!r} has invalid start: {e}",
            raw_data=repr(record)
        ) from e

    raw_end = record.get("end")
    if raw_end in (None, ""):
        if not ongoing:
            raise MalformedDataError(
                f"Interval {label!r} missing end",
                raw_data=repr(record)
            )
        end = None
    else:
        try:
            end = parse_date(raw_end)
        except ValueError as e:
            raise MalformedDataError(
                f"Interval {label!r} has invalid end: {e}",
                raw_data=repr(record)
            ) from e

    return Interval(label=label, start=start, end=end, is_ongoing=ongoing)


def parse_intervals(records: Iterable[Mapping[str, Any]]) -> tuple[Interval, ...]:
    """Parse interval records, keeping their order."""
    intervals = tuple(parse_interval(record) for record in records)
    logger.debug("Parsed intervals", intervals=len(intervals))
    return intervals
