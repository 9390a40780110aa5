"""Unit tests for the term performance engine coordinator."""

import json
import pytest
from datetime import date
from unittest.mock import Mock

from termperf_app.alignment.aligner import NormalizedCurve
from termperf_app.config.defaults import DefaultConfig, RankingParams, get_default_config
from termperf_app.engine import TermPerformanceEngine
from termperf_app.errors import InvalidIntervalError, MissingDataError
from termperf_app.data.models import Interval
from termperf_app.providers import StaticIntervalProvider, StaticPriceSeriesProvider
from termperf_app.providers.base import PriceSeriesProvider


@pytest.fixture
def intervals():
    return [
        Interval(label="Rally", start=date(2020, 6, 1), end=date(2021, 1, 1)),
        Interval(label="Slump", start=date(2021, 1, 1), end=date(2021, 6, 1)),
        Interval(label="Flat", start=date(2020, 1, 1), end=date(2020, 5, 1)),
        Interval(label="Now", start=date(2021, 6, 1), end=None, is_ongoing=True),
        Interval(label="Future", start=date(2030, 1, 1), end=date(2034, 1, 1)),
    ]


@pytest.fixture
def engine(term_series, intervals):
    return TermPerformanceEngine(
        StaticPriceSeriesProvider(term_series),
        StaticIntervalProvider(intervals),
    )


class TestSummaries:
    """Test ranked summaries through the engine."""

    def test_summarize(self, engine):
        ranked = engine.summarize()

        # Now: 98 -> 140, Rally: 95 -> 130
        assert [s.label for s in ranked] == ["Now", "Rally", "Flat", "Slump"]
        assert [s.rank for s in ranked] == [1, 2, 3, 4]

    def test_top_performers_default_count(self, engine):
        assert [s.label for s in engine.top_performers()] == ["Now", "Rally", "Flat"]

    def test_bottom_performers_worst_first(self, engine):
        assert [s.label for s in engine.bottom_performers(2)] == ["Slump", "Flat"]

    def test_configured_slice_size(self, term_series, intervals):
        base = get_default_config()
        config = DefaultConfig(
            ranking=RankingParams(top_n=1, bottom_n=1),
            curve=base.curve,
            logging=base.logging,
            data=base.data,
        )
        engine = TermPerformanceEngine(
            StaticPriceSeriesProvider(term_series),
            StaticIntervalProvider(intervals),
            config=config,
        )
        assert [s.label for s in engine.top_performers()] == ["Now"]
        assert [s.label for s in engine.bottom_performers()] == ["Slump"]

    def test_fetches_fresh_snapshot_each_call(self, term_series, intervals):
        series_provider = Mock(spec=PriceSeriesProvider)
        series_provider.name = "mock"
        series_provider.get_series.return_value = term_series
        engine = TermPerformanceEngine(series_provider, StaticIntervalProvider(intervals))

        engine.summarize()
        engine.summarize()

        assert series_provider.get_series.call_count == 2

    def test_provider_errors_propagate(self, intervals):
        series_provider = Mock(spec=PriceSeriesProvider)
        series_provider.name = "mock"
        series_provider.get_series.side_effect = MissingDataError("Data not found")
        engine = TermPerformanceEngine(series_provider, StaticIntervalProvider(intervals))

        with pytest.raises(MissingDataError):
            engine.summarize()


class TestCurves:
    """Test normalized curves through the engine."""

    def test_curves_keyed_by_label(self, engine, intervals):
        curves = engine.curves()

        assert list(curves) == [i.label for i in intervals]
        assert all(isinstance(c, NormalizedCurve) for c in curves.values())
        assert len(curves["Future"]) == 0
        assert len(curves["Now"]) == 7

    def test_single_curve(self, engine):
        points = list(engine.curve("Flat"))
        assert [p.close for p in points] == [100.0, 104.0, 108.0, 103.0, 99.0]
        assert points[0].percent_change == 0.0

    def test_unknown_curve(self, engine):
        with pytest.raises(KeyError):
            engine.curve("Missing")

    def test_duplicate_labels_rejected(self, term_series):
        engine = TermPerformanceEngine(
            StaticPriceSeriesProvider(term_series),
            StaticIntervalProvider([
                Interval(label="Twice", start=date(2020, 1, 1), end=date(2020, 6, 1)),
                Interval(label="Twice", start=date(2021, 1, 1), end=date(2021, 6, 1)),
            ]),
        )
        with pytest.raises(InvalidIntervalError):
            engine.curves()

    def test_compare(self, engine):
        result = engine.compare(["Slump", "Rally"])

        assert list(result) == ["Slump", "Rally"]
        assert result["Rally"].start_close == 95.0
        assert result["Rally"].end_close == 130.0
        assert result["Rally"].percent_change == 36.84
        assert result["Slump"].price_change == -32.0

    def test_compare_unknown_label(self, engine):
        with pytest.raises(KeyError):
            engine.compare(["Rally", "Missing"])


class TestDefaultComparison:
    """Test default interval selection for comparisons."""

    def test_ongoing_and_previous(self, engine):
        assert engine.default_comparison() == ("Now", "Flat")

    def test_first_interval_ongoing(self, term_series):
        engine = TermPerformanceEngine(
            StaticPriceSeriesProvider(term_series),
            StaticIntervalProvider([Interval(label="Now", start=date(2021, 1, 1), end=None, is_ongoing=True)]),
        )
        assert engine.default_comparison() == ("Now", None)

    def test_no_ongoing_uses_last(self, term_series, intervals):
        closed = [i for i in intervals if not i.is_ongoing]
        engine = TermPerformanceEngine(
            StaticPriceSeriesProvider(term_series),
            StaticIntervalProvider(closed),
        )
        assert engine.default_comparison() == ("Future", None)

    def test_no_intervals(self, term_series):
        engine = TermPerformanceEngine(
            StaticPriceSeriesProvider(term_series),
            StaticIntervalProvider([]),
        )
        assert engine.default_comparison() == (None, None)


class TestFromJsonFiles:
    """Test engine construction from JSON snapshots."""

    def test_from_json_files(self, tmp_path, raw_price_records, raw_interval_records):
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "sp500_data.json").write_text(json.dumps(raw_price_records))
        (data_dir / "presidents.json").write_text(json.dumps(raw_interval_records))

        engine = TermPerformanceEngine.from_json_files(data_dir, config_dir=tmp_path)
        ranked = engine.summarize()

        assert [s.label for s in ranked] == ["First Term", "Second Term", "Current Term"]
        assert ranked[2].percent_change == 0.0

    def test_configured_file_names(self, tmp_path, raw_price_records, raw_interval_records):
        (tmp_path / "prices.json").write_text(json.dumps(raw_price_records))
        (tmp_path / "terms.json").write_text(json.dumps(raw_interval_records))

        engine = TermPerformanceEngine.from_json_files(
            tmp_path,
            config_dir=tmp_path,
            overrides={"data": {"series_file": "prices.json", "intervals_file": "terms.json"}},
        )

        assert len(engine.summarize()) == 3
