#!/usr/bin/env python3
"""Print a ranking report from JSON price and interval snapshots."""

import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from termperf_app.config.loader import ConfigLoader
from termperf_app.engine import TermPerformanceEngine
from termperf_app.errors import DataQualityError, InputInvariantViolation
from termperf_app.logging.config import configure_logging
from termperf_app.utils.time import format_date


def format_change(percent_change: float) -> str:
    sign = "+" if percent_change >= 0 else ""
    return f"{sign}{percent_change:.2f}%"


def print_table(title: str, summaries) -> None:
    print(f"\n{title}")
    print(f"{'Rank':>4}  {'Label':<28} {'Term':<25} {'Start':>10} {'End':>10} {'Change':>9}")
    for s in summaries:
        term_end = format_date(s.term_end) if s.term_end else "present"
        term = f"{format_date(s.term_start)} to {term_end}"
        print(f"{s.rank:>4}  {s.label:<28} {term:<25} "
              f"{s.start_close:>10.2f} {s.end_close:>10.2f} {format_change(s.percent_change):>9}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--data-dir", type=Path, default=project_root / "data",
                        help="Directory holding the price and interval JSON files")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding settings.yaml")
    parser.add_argument("--compare", nargs="*", default=None,
                        help="Interval labels to compare (default: ongoing and previous)")
    args = parser.parse_args()

    loader = ConfigLoader.create(args.config_dir)
    try:
        config = loader.load_engine_config()
    except ValueError as e:
        print(f"❌ {e}")
        return 2

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    engine = TermPerformanceEngine.from_json_files(args.data_dir, config_dir=args.config_dir)

    try:
        ranked = engine.summarize()
        if not ranked:
            print("No interval could be ranked. Is the price series populated?")
            return 1

        print_table("Top Performers", engine.top_performers())
        print_table("Bottom Performers", engine.bottom_performers())
        print_table("All Intervals", ranked)

        labels = args.compare
        if not labels:
            labels = [label for label in engine.default_comparison() if label is not None]

        print("\nComparison")
        for label, perf in engine.compare(labels).items():
            print(f"  • {label}: {perf.start_close:.2f} → {perf.end_close:.2f} "
                  f"({perf.price_change:+.2f}, {format_change(perf.percent_change)}) "
                  f"over {perf.points} points")
    except (DataQualityError, InputInvariantViolation) as e:
        print(f"❌ {e}")
        return 1
    except KeyError as e:
        print(f"❌ Unknown interval label: {e.args[0]}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
