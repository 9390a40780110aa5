"""
Configuration management module.

Handles loading and validation of engine parameters with precedence:
call overrides > settings file > defaults.
"""
