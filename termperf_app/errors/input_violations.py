"""
Input invariant violations for structurally invalid series and intervals.

These represent caller or configuration errors. The engine refuses to
produce output from such inputs instead of ranking nonsense.
"""

from datetime import date
from typing import Optional, Dict, Any


class InputInvariantViolation(Exception):
    """Base class for structurally invalid inputs."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidIntervalError(InputInvariantViolation):
    """Interval bounds or labels are inconsistent."""

    def __init__(self, message: str, label: Optional[str] = None,
                 start: Optional[date] = None, end: Optional[date] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.label = label
        self.start = start
        self.end = end


class UnorderedSeriesError(InputInvariantViolation):
    """Price series dates are not strictly ascending."""

    def __init__(self, message: str, index: Optional[int] = None,
                 previous_date: Optional[date] = None,
                 current_date: Optional[date] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.previous_date = previous_date
        self.current_date = current_date
