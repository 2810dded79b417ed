"""Logging configuration and utilities."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import colorlog
import structlog
from structlog.types import EventDict, Processor

from src.server import config

from .config import JSON_LOGS, LOG_LEVEL

# Color scheme for console output
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Timestamp comes from the stdlib formatter, level and logger name from structlog
CONSOLE_FORMAT = config.LOG_FORMAT_CONSOLE

# uvicorn loggers are left unconfigured by the server and propagate to root
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")


def add_service_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service context to log records."""
    record = event_dict.get("_record")
    if record:
        event_dict["filename"] = record.filename
        event_dict["funcName"] = record.funcName
        event_dict["lineno"] = record.lineno
    return event_dict


def build_formatter(json_logs: bool) -> logging.Formatter:
    """Return the stdlib formatter for the root handler."""
    if json_logs:
        # structlog already renders the whole line as JSON
        return logging.Formatter("%(message)s")
    return colorlog.ColoredFormatter(
        CONSOLE_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
        log_colors=LOG_COLORS,
        secondary_log_colors={"message": LOG_COLORS},
    )


def build_processors(json_logs: bool) -> list[Processor]:
    """Return the structlog processor chain for console or JSON output."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        add_service_info,
    ]

    if json_logs:
        return shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    return shared_processors + [
        structlog.dev.ConsoleRenderer(
            colors=True,
            level_styles={
                "critical": "\033[41m",
                "exception": "\033[41m",
                "error": "\033[31m",
                "warn": "\033[33m",
                "warning": "\033[33m",
                "info": "\033[32m",
                "debug": "\033[36m",
            },
        ),
    ]


def setup_logging(
    level: str | None = None,
    json_logs: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure logging with structlog and colorlog.

    Args:
        level: Root log level name. Defaults to ``LOG_LEVEL``.
        json_logs: Render JSON instead of colored console lines. Defaults to
            ``JSON_LOGS``.
        stream: Where the root handler writes. Defaults to ``sys.stdout``.
    """
    if level is None:
        level = LOG_LEVEL
    if json_logs is None:
        json_logs = JSON_LOGS

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(build_formatter(json_logs))
    root_logger.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    structlog.configure(
        processors=build_processors(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: The name of the logger. If None, the root logger is used.

    Returns:
        A configured logger instance.
    """
    return structlog.get_logger(name)


# Set up default logging when the module is imported
setup_logging()
