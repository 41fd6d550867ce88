"""
Structured JSON logging configuration.

This module sets up library-wide JSON logging with:
- Consistent field names across all logs
- Movie context (operation, title, fragment, result count, document id)
- Timestamp, level, message, logger name

Logs are output to stdout in JSON format for easy parsing by
log aggregation systems.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Attributes every LogRecord carries; anything else arrived via ``extra``.
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
})

CONTEXT_FIELDS = ("operation", "title", "fragment", "count", "movie_id")


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs log records as single-line JSON objects with consistent fields:
    - timestamp: ISO 8601 format with microseconds (UTC)
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - message: Log message
    - logger: Logger name (module path)
    - operation: Repository/controller operation name (if available)
    - title: Movie title involved (if available)
    - fragment: Title fragment searched for (if available)
    - count: Number of documents returned (if available)
    - movie_id: Stored document id (if available)
    - exception: Exception details (if exception occurred)
    - extra: Any additional fields from log record

    Example output:
        {"timestamp": "2026-10-18T10:30:00.123456+00:00", "level": "INFO",
         "message": "Movie added", "logger": "movies_library.controllers",
         "operation": "add", "title": "Taxi"}
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON string.

        Args:
            record: LogRecord to format

        Returns:
            JSON string representation of log record
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True
) -> None:
    """
    Configure library logging.

    Sets up:
    - Root logger with specified level
    - JSON formatter (if json_format=True)
    - StreamHandler to stdout
    - Removes default handlers

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatter (True) or simple formatter (False)

    Example:
        from movies_library.core.config import settings
        setup_logging(level=settings.log_level, json_format=settings.log_json)

    Note:
        Host applications that configure logging themselves should not call
        this; the library only ever calls get_logger().
    """
    root_logger = logging.getLogger()

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with given name.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Movie added", extra={"operation": "add", "title": "Taxi"})
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    operation: Optional[str] = None,
    title: Optional[str] = None,
    fragment: Optional[str] = None,
    count: Optional[int] = None,
    movie_id: Optional[str] = None,
    **extra_fields: Any
) -> None:
    """
    Log message with structured movie context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        operation: Operation name (add, delete, update, search, ...)
        title: Movie title involved
        fragment: Title fragment searched for
        count: Number of documents involved
        movie_id: Stored document id
        **extra_fields: Additional fields to include

    Example:
        log_with_context(
            logger,
            "warning",
            "Movie not found",
            operation="delete",
            title="Taxi",
        )
    """
    extra: Dict[str, Any] = {}

    if operation is not None:
        extra["operation"] = operation
    if title is not None:
        extra["title"] = title
    if fragment is not None:
        extra["fragment"] = fragment
    if count is not None:
        extra["count"] = count
    if movie_id is not None:
        extra["movie_id"] = movie_id

    extra.update(extra_fields)

    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra)
