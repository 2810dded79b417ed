"""Utility functions and classes for the application."""

from .config import (
    ACCESS_LOG,
    ENVIRONMENT,
    IS_PRODUCTION,
    JSON_LOGS,
    LOG_LEVEL,
    env_flag,
    get_server_config,
    get_server_port,
)
from .logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "get_server_config",
    "get_server_port",
    "env_flag",
    "LOG_LEVEL",
    "JSON_LOGS",
    "ACCESS_LOG",
    "ENVIRONMENT",
    "IS_PRODUCTION",
]
