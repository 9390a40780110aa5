"""
Data quality error classifications for price and interval data.

These exceptions describe problems with data handed over by providers.
They are recoverable: the caller can refresh or repair the source.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
