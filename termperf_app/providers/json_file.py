"""JSON file providers reading snapshots written by an external refresh job."""

import json
from pathlib import Path
from typing import Any, Union

from ..data.models import Interval, PricePoint
from ..data.parsers import parse_intervals, parse_price_series
from ..errors import MalformedDataError, MissingDataError
from .base import IntervalProvider, PriceSeriesProvider


def _read_json_array(path: Path, data_type: str) -> list[Any]:
    """Read a JSON array from path."""
    if not path.exists():
        raise MissingDataError(
            f"Data not found: {path}",
            data_type=data_type,
            context={"path": str(path)}
        )

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDataError(
            f"Failed to parse {data_type} JSON in {path}: {e}",
            expected_format="JSON array",
            context={"path": str(path)}
        ) from e

    if not isinstance(payload, list):
        raise MalformedDataError(
            f"Expected a JSON array in {path}, got {type(payload).__name__}",
            expected_format="JSON array",
            context={"path": str(path)}
        )

    return payload


class JsonPriceSeriesProvider(PriceSeriesProvider):
    """Reads ``[{"date": ..., "close": ...}, ...]`` from a file on every call."""

    def __init__(self, path: Union[str, Path], name: str = "json"):
        super().__init__(name)
        self.path = Path(path)

    def get_series(self) -> tuple[PricePoint, ...]:
        series = parse_price_series(_read_json_array(self.path, "price_series"))
        self.logger.debug("Loaded price series", path=str(self.path), points=len(series))
        return series


class JsonIntervalProvider(IntervalProvider):
    """Reads ``[{"name": ..., "start": ..., "end": ..., "isCurrent": ...}, ...]`` from a file."""

    def __init__(self, path: Union[str, Path], name: str = "json"):
        super().__init__(name)
        self.path = Path(path)

    def get_intervals(self) -> tuple[Interval, ...]:
        intervals = parse_intervals(_read_json_array(self.path, "intervals"))
        self.logger.debug("Loaded intervals", path=str(self.path), intervals=len(intervals))
        return intervals
