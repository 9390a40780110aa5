"""
Logging configuration and utilities for the term performance engine.
"""
from .config import configure_logging, get_logger, get_ranking_logger, log_interval_exclusion

__all__ = ["configure_logging", "get_logger", "get_ranking_logger", "log_interval_exclusion"]
