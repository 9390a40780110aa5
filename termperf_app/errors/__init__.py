"""
Error classification for price series alignment.

Data quality problems are recoverable and usually absorbed by omitting the
affected interval. Input invariant violations indicate malformed upstream
data and are raised immediately.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .input_violations import (
    InputInvariantViolation,
    InvalidIntervalError,
    UnorderedSeriesError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Input Invariant Violations
    "InputInvariantViolation",
    "InvalidIntervalError",
    "UnorderedSeriesError",
]
