"""
Centralized logging configuration for the term performance engine.

Ranking decisions and provider activity go through structlog on top of
the stdlib ``logging`` module, so both share one output format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
) -> None:
    """
    Configure structlog for reports and engine runs.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (any case)
        format_json: Render one JSON object per line instead of console text
        include_timestamp: Add an ISO timestamp to each record
        include_caller: Add filename and line number to each record

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = level.upper()
    if level_name not in _LEVELS:
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=getattr(logging, level_name),
        stream=sys.stdout,
        format="%(message)s",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Colors only on a terminal; piped reports stay plain text
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Structlog logger for a module (pass ``__name__``)."""
    return structlog.get_logger(name)


def get_ranking_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with ranking context.

    Ranking decisions (which intervals were kept, which were dropped and
    why) are logged through this logger so they can be filtered as one
    audit trail.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for ranking decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="ranking",
        audit_trail=True
    )


def log_interval_exclusion(
    logger: FilteringBoundLogger,
    label: str,
    reason: str,
    start_close: float,
    end_close: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an interval dropped from the ranking with standardized format.

    Args:
        logger: Structlog logger instance
        label: Label of the excluded interval
        reason: Why the interval cannot be ranked
        start_close: Close resolved at the interval start (0 if absent)
        end_close: Close resolved at the interval end (0 if absent)
        context: Additional context data
    """
    bound_logger = logger.bind(
        label=label,
        reason=reason,
        start_close=start_close,
        end_close=end_close,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Interval excluded from ranking")
