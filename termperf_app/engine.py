"""
Main term performance engine coordinator.

Pulls a fresh snapshot from the price series and interval providers on
every call and hands it to the alignment core. Nothing is cached between
calls, so results always reflect the providers' current data.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

import structlog

from .alignment.aligner import NormalizedCurve, PerformanceAligner
from .alignment.ranking import bottom_performers, top_performers
from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .data.models import CurvePerformance, Interval, PerformanceSummary, PricePoint
from .data.validators import validate_unique_labels
from .providers.base import IntervalProvider, PriceSeriesProvider
from .providers.json_file import JsonIntervalProvider, JsonPriceSeriesProvider

logger = structlog.get_logger(__name__)


class TermPerformanceEngine:
    """
    Coordinator for ranking intervals by price performance.

    Manages the pipeline:
    Providers → Snapshot → Alignment → Ranked summaries / curves
    """

    def __init__(
        self,
        series_provider: PriceSeriesProvider,
        interval_provider: IntervalProvider,
        config: Optional[DefaultConfig] = None,
    ) -> None:
        """Initialize the engine with its data providers."""
        self.logger = logger
        self.series_provider = series_provider
        self.interval_provider = interval_provider
        self.config = config or get_default_config()
        self.aligner = PerformanceAligner(self.config.curve)

        self.logger.info(
            "Term performance engine initialized",
            series_provider=series_provider.name,
            interval_provider=interval_provider.name,
        )

    @classmethod
    def from_json_files(
        cls,
        data_dir: Union[str, Path],
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict] = None,
    ) -> "TermPerformanceEngine":
        """
        Build an engine reading JSON snapshots from a data directory.

        File names come from the ``data`` configuration section.
        """
        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        config = loader.load_engine_config(overrides)
        data_dir = Path(data_dir)

        return cls(
            series_provider=JsonPriceSeriesProvider(data_dir / config.data.series_file),
            interval_provider=JsonIntervalProvider(data_dir / config.data.intervals_file),
            config=config,
        )

    def _snapshot(self) -> tuple[tuple[PricePoint, ...], tuple[Interval, ...]]:
        series = tuple(self.series_provider.get_series())
        intervals = tuple(self.interval_provider.get_intervals())
        self.logger.debug(
            "Fetched provider snapshot",
            series_points=len(series),
            intervals=len(intervals),
        )
        return series, intervals

    def summarize(self) -> list[PerformanceSummary]:
        """Ranked summaries for every computable interval, best first."""
        series, intervals = self._snapshot()
        return self.aligner.summarize(series, intervals)

    def top_performers(self, n: Optional[int] = None) -> list[PerformanceSummary]:
        """Best ``n`` intervals (configured ``ranking.top_n`` by default)."""
        if n is None:
            n = self.config.ranking.top_n
        return top_performers(self.summarize(), n)

    def bottom_performers(self, n: Optional[int] = None) -> list[PerformanceSummary]:
        """Worst ``n`` intervals, worst first (configured ``ranking.bottom_n`` by default)."""
        if n is None:
            n = self.config.ranking.bottom_n
        return bottom_performers(self.summarize(), n)

    def curves(self) -> dict[str, NormalizedCurve]:
        """
        Normalized curve for every interval, keyed by label.

        Raises:
            InvalidIntervalError: If two intervals share a label
        """
        series, intervals = self._snapshot()
        validate_unique_labels(intervals)

        return {interval.label: self.aligner.normalize(series, interval)
                for interval in intervals}

    def curve(self, label: str) -> NormalizedCurve:
        """
        Normalized curve for one interval.

        Raises:
            KeyError: If no interval carries the label
        """
        series, intervals = self._snapshot()
        for interval in intervals:
            if interval.label == label:
                return self.aligner.normalize(series, interval)

        raise KeyError(label)

    def compare(self, labels: Iterable[str]) -> dict[str, CurvePerformance]:
        """
        Curve performance for the given intervals, in the requested order.

        Raises:
            KeyError: If a label is unknown
        """
        curves = self.curves()
        result = {}
        for label in labels:
            if label not in curves:
                raise KeyError(label)
            result[label] = self.aligner.curve_performance(curves[label])
        return result

    def default_comparison(self) -> tuple[Optional[str], Optional[str]]:
        """
        Labels to compare when the caller has not chosen any.

        Returns the ongoing interval and the one listed before it. Without
        an ongoing interval the last listed interval is used alone.
        """
        intervals = self.interval_provider.get_intervals()
        if not intervals:
            return None, None

        for index, interval in enumerate(intervals):
            if interval.is_ongoing:
                previous = intervals[index - 1].label if index > 0 else None
                return interval.label, previous

        return intervals[-1].label, None
