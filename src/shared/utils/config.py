"""Configuration management using environment variables."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from src.server import config

# Define project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

# Load environment variables from .env file
env_path = PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=env_path)


def env_flag(
    name: str, default: bool, environ: Mapping[str, str] | None = None
) -> bool:
    """Read a boolean variable; only ``true`` (any case) is true, blank means default."""
    if environ is None:
        environ = os.environ
    raw_value = (environ.get(name) or "").strip().lower()
    if not raw_value:
        return default
    return raw_value == "true"


# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
JSON_LOGS = env_flag("JSON_LOGS", False)
ACCESS_LOG = env_flag("ACCESS_LOG", True)

# Environment
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
IS_PRODUCTION = ENVIRONMENT == "production"


def get_server_port(environ: Mapping[str, str] | None = None) -> int:
    """Resolve the TCP port to bind.

    Args:
        environ: Mapping to read ``PORT`` from. Defaults to ``os.environ``.

    Returns:
        The port from ``PORT``, or ``config.SERVER_PORT`` when it is unset or
        blank.

    Raises:
        ValueError: If ``PORT`` is not an integer in the range 0-65535.
    """
    if environ is None:
        environ = os.environ
    raw_port = (environ.get("PORT") or "").strip()
    if not raw_port:
        return config.SERVER_PORT

    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT must be between 0 and 65535, got {port}")
    return port


def get_server_config(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Build the keyword arguments describing where the server binds."""
    if environ is None:
        environ = os.environ
    return {
        "host": (environ.get("HOST") or "").strip() or config.SERVER_HOST,
        "port": get_server_port(environ),
        "reload": env_flag("RELOAD", False, environ),
    }
