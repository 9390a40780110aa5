"""
Canonical data models for price series alignment.

This module defines immutable data structures for prices, intervals and
everything derived from them. Derived values are recomputed from the
series on every call and never updated in place.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class PricePoint:
    """Single closing price on a calendar date."""
    date: date
    close: float


@dataclass(frozen=True)
class Interval:
    """Labeled date range (e.g. a presidential term)."""
    label: str
    start: date
    end: Optional[date]         # Sentinel for ongoing intervals, may be None
    is_ongoing: bool = False

    @property
    def has_upper_bound(self) -> bool:
        """True if prices after ``end`` fall outside the interval."""
        return not self.is_ongoing and self.end is not None


@dataclass(frozen=True)
class NormalizedPoint:
    """Price point re-expressed relative to an interval's start."""
    date: date
    close: float
    offset_days: int            # Calendar days since interval start
    delta_close: float          # close - base close
    percent_change: float       # delta_close / base close * 100


@dataclass(frozen=True)
class PerformanceSummary:
    """Aggregate performance of one interval."""
    label: str
    term_start: date
    term_end: Optional[date]
    start_close: float          # 0.0 if no start price was found
    end_close: float            # 0.0 if no end price was found
    percent_change: float
    rank: Optional[int] = None  # 1-based, set only after ranking

    @property
    def is_computable(self) -> bool:
        """True if both boundaries resolved to positive closes."""
        return self.start_close > 0 and self.end_close > 0


@dataclass(frozen=True)
class CurvePerformance:
    """Start-to-end change of a normalized curve, rounded for display."""
    label: str
    start_close: float
    end_close: float
    price_change: float
    percent_change: float
    points: int
