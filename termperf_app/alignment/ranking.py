"""Filtering and ranking of interval performance summaries"""

import dataclasses
from collections.abc import Iterable, Sequence

from ..data.models import PerformanceSummary
from ..logging.config import get_ranking_logger, log_interval_exclusion

logger = get_ranking_logger(__name__)


def _exclusion_reason(summary: PerformanceSummary) -> str:
    if summary.start_close == 0.0 and summary.end_close == 0.0:
        return "no price data within interval"
    if summary.start_close <= 0 and summary.end_close <= 0:
        return "non-positive closes at both boundaries"
    if summary.start_close <= 0:
        return "non-positive close at term start"
    return "non-positive close at term end"


def rank_summaries(summaries: Iterable[PerformanceSummary]) -> list[PerformanceSummary]:
    """
    Rank computable summaries by percent change, best first.

    Summaries without a positive close at both boundaries are dropped
    (future terms, missing data) rather than ranked as zero. The sort is
    stable, so equal changes keep their input order.

    Args:
        summaries: Unranked summaries in input interval order

    Returns:
        New summaries with 1-based ranks, ordered by rank
    """
    valid = []
    for summary in summaries:
        if summary.is_computable:
            valid.append(summary)
        else:
            log_interval_exclusion(
                logger,
                label=summary.label,
                reason=_exclusion_reason(summary),
                start_close=summary.start_close,
                end_close=summary.end_close,
            )

    ordered = sorted(valid, key=lambda s: s.percent_change, reverse=True)

    ranked = [dataclasses.replace(summary, rank=position + 1)
              for position, summary in enumerate(ordered)]

    logger.debug("Ranked intervals", ranked=len(ranked))
    return ranked


def top_performers(ranked: Sequence[PerformanceSummary], n: int) -> list[PerformanceSummary]:
    """Best ``n`` entries of a ranked sequence, best first."""
    if n <= 0:
        return []
    return list(ranked[:n])


def bottom_performers(ranked: Sequence[PerformanceSummary], n: int) -> list[PerformanceSummary]:
    """Worst ``n`` entries of a ranked sequence, worst first."""
    if n <= 0:
        return []
    return list(reversed(ranked[-n:]))
