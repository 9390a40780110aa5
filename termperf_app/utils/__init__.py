"""
Utility functions module.

Calendar date helpers shared by parsers and the alignment core.

Date Semantics:
- Price series and interval bounds are calendar dates, never timestamps
- Offsets are whole calendar days, not trading days
"""
