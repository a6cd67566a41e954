"""
restservice Configuration Settings

This module contains all configuration constants for the REST service.
Values default from environment variables so the service can be tuned
without touching the command line.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 8000


def parse_port(raw: str) -> int:
    """
    Convert a port string to an int.

    Raises:
        ValueError: If the value is not a number in 0-65535
    """
    if not raw.isdigit() or int(raw) > 65535:
        raise ValueError(f"invalid port {raw!r}")
    return int(raw)


def _env_port() -> int:
    try:
        return parse_port(os.environ.get("REST_PORT", ""))
    except ValueError:
        return DEFAULT_PORT


@dataclass
class Settings:
    """Server configuration settings."""

    # Network settings
    HOST: str = os.environ.get("REST_HOST", "0.0.0.0")
    PORT: int = _env_port()

    # Request limits
    MAX_BODY_SIZE: int = int(os.environ.get("REST_MAX_BODY_SIZE", str(1024 * 1024)))

    # Connection settings
    CONNECTION_TIMEOUT: int = 5  # Seconds an idle keep-alive connection stays open
    SHUTDOWN_TIMEOUT: int = 10  # Seconds in-flight requests get on shutdown

    # Logging settings
    DEBUG: bool = os.environ.get("REST_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("REST_LOG_LEVEL", "INFO")


def resolve_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Read the listening port from REST_PORT.

    An unset or empty variable falls back to DEFAULT_PORT and prints a
    warning, so operators notice they are running on the default.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The port number

    Raises:
        ValueError: If REST_PORT is set but is not a valid port
    """
    if environ is None:
        environ = os.environ

    raw = environ.get("REST_PORT", "")
    if not raw:
        print(f"Warn: REST_PORT not set. Using default port : {DEFAULT_PORT}")
        return DEFAULT_PORT
    return parse_port(raw)


# Global settings instance
settings = Settings()
