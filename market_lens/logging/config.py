"""
Centralized logging configuration for the market analysis pipeline.

All components log through structlog so that stage results and gate
decisions come out as structured key/value records, either rendered for
the console or as JSON lines.
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


def get_gate_logger(name: str) -> FilteringBoundLogger:
    """Logger for validation gate decisions, tagged with the gate subsystem."""
    return get_logger(name).bind(subsystem="validation_gate")


def get_pipeline_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for pipeline stage progress.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the pipeline subsystem context
    """
    return get_logger(name).bind(subsystem="pipeline")


def log_gate_decision(
    logger: FilteringBoundLogger,
    gate_name: str,
    passed: bool,
    symbol: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a gate decision with standardized format.

    Args:
        logger: Structlog logger instance
        gate_name: Name of the gate being evaluated
        passed: Whether the gate passed or failed
        symbol: Symbol or context label of the request
        reason: Detailed reason for the decision
        context: Additional context data
    """
    bound_logger = logger.bind(
        gate_name=gate_name,
        gate_result="PASS" if passed else "FAIL",
        symbol=symbol,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passed:
        bound_logger.info("Gate passed")
    else:
        bound_logger.warning("Gate failed")


def log_stage_completed(
    logger: FilteringBoundLogger,
    symbol: str,
    stage: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log completion of a pipeline stage.

    Args:
        logger: Structlog logger instance
        symbol: Symbol or context label of the request
        stage: Stage name
        context: Additional context data
    """
    bound_logger = logger.bind(symbol=symbol, stage=stage)

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Stage completed")
