"""
Centralized logging configuration for the signal engine.

All components log through structlog on top of the standard library
logging module so that output can be switched between a human-readable
console format and JSON lines without touching call sites.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound for signal decision auditing."""
    return get_logger(name).bind(
        subsystem="signals",
        audit_trail=True
    )


def get_scheduler_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound for scheduler lifecycle logging."""
    return get_logger(name).bind(
        subsystem="scheduler",
        audit_trail=True
    )


def get_delivery_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound for notification delivery."""
    return get_logger(name).bind(subsystem="delivery")


def get_display_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound for display output."""
    return get_logger(name).bind(subsystem="display")


def log_signal_decision(
    logger: FilteringBoundLogger,
    emitted: bool,
    trend: str,
    momentum: float,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a signal generation decision with standardized format.

    Args:
        logger: Structlog logger instance
        emitted: Whether a signal was produced
        trend: Trend of the analysis the decision was based on
        momentum: Momentum percentage of that analysis
        reason: Signal reason, or why no signal was produced
        context: Additional context data
    """
    bound_logger = logger.bind(
        decision="SIGNAL" if emitted else "NO_SIGNAL",
        trend=trend,
        momentum=momentum,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if emitted:
        bound_logger.info("Signal generated")
    else:
        bound_logger.debug("No signal")


def log_state_transition(
    logger: FilteringBoundLogger,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a scheduler state transition with standardized format.

    Args:
        logger: Structlog logger instance
        from_state: Current state
        to_state: Target state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("State transition")
