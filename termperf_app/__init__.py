"""
Term Performance - Price Series Alignment Engine

Aligns a chronological price series with named date intervals (terms),
derives normalized per-term performance curves and ranks every term by
its percent change from start to end.
"""

__version__ = "0.1.0"
__author__ = "Term Performance Team"
