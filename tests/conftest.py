"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from typing import Any, Dict, List

from termperf_app.data.models import Interval, PricePoint


@pytest.fixture
def sample_series() -> tuple:
    """Short series with a gap on 2020-01-02."""
    return (
        PricePoint(date=date(2020, 1, 1), close=100.0),
        PricePoint(date=date(2020, 1, 3), close=110.0),
        PricePoint(date=date(2020, 6, 1), close=120.0),
    )


@pytest.fixture
def sample_interval() -> Interval:
    """Interval covering the whole sample series."""
    return Interval(label="A", start=date(2020, 1, 1), end=date(2020, 6, 1))


@pytest.fixture
def term_series() -> tuple:
    """Monthly closes over two years, used for multi-term rankings."""
    closes = [
        100.0, 104.0, 108.0, 103.0, 99.0, 95.0, 101.0, 107.0, 112.0, 118.0, 121.0, 125.0,
        130.0, 126.0, 119.0, 111.0, 105.0, 98.0, 102.0, 110.0, 117.0, 124.0, 133.0, 140.0,
    ]
    points = []
    for index, close in enumerate(closes):
        year = 2020 + index // 12
        month = index % 12 + 1
        points.append(PricePoint(date=date(year, month, 1), close=close))
    return tuple(points)


@pytest.fixture
def raw_price_records() -> List[Dict[str, Any]]:
    """Price records in the layout served by the data endpoints."""
    return [
        {"date": "2020-01-01", "close": 100.0},
        {"date": "2020-01-03", "close": 110.0},
        {"date": "2020-06-01", "close": 120.0},
    ]


@pytest.fixture
def raw_interval_records() -> List[Dict[str, Any]]:
    """Interval records in the layout served by the data endpoints."""
    return [
        {"name": "First Term", "start": "2020-01-01", "end": "2020-01-03", "isCurrent": False},
        {"name": "Second Term", "start": "2020-01-03", "end": "2020-06-01", "isCurrent": False},
        {"name": "Current Term", "start": "2020-06-01", "end": "", "isCurrent": True},
    ]
