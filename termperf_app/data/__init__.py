"""
Price series and interval data module.

Defines the immutable value types, parses raw records into them and
checks the structural invariants the alignment core relies on.
"""
