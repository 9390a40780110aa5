"""Alignment of price series with date intervals"""

from .aligner import NormalizedCurve, PerformanceAligner, curve_performance, normalize, summarize
from .locator import locate
from .ranking import bottom_performers, rank_summaries, top_performers

__all__ = [
    "PerformanceAligner",
    "NormalizedCurve",
    "normalize",
    "summarize",
    "curve_performance",
    "locate",
    "rank_summaries",
    "top_performers",
    "bottom_performers",
]
