"""
Unified Logging Configuration

This module provides the logger tree used by the client library.
All modules should import and use the logger from this module instead of
using print() statements.

Usage:
    from core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Fetching latest rates")

Configuration:
    Importing the library only attaches a NullHandler to the "freecurrencyapi"
    logger; the host application owns handlers and levels. Scripts call
    setup_logging() explicitly.
    scripts/fetch_rates.py passes the LOG_LEVEL setting from .env to it.
"""

import logging
import sys
from typing import Optional


def setup_logging(
    log_level: str = "INFO",
    log_format: Optional[str] = None,
    include_timestamp: bool = True,
    include_module: bool = True
) -> logging.Logger:
    """
    Configure root logging to stdout and return the library logger.

    Intended for scripts and applications; the library never calls it.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string (uses default if None)
        include_timestamp: Include timestamp in log messages
        include_module: Include module name in log messages

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Client ready")
        2024-01-01 12:00:00 [INFO] freecurrencyapi: Client ready
    """
    if log_format is None:
        format_parts = []

        if include_timestamp:
            format_parts.append("%(asctime)s")

        format_parts.append("[%(levelname)s]")

        if include_module:
            format_parts.append("%(name)s")

        format_parts.append("%(message)s")

        log_format = " ".join(format_parts)

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True
    )

    logger = logging.getLogger("freecurrencyapi")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


# ============================================
# Library Logger
# ============================================

# Handlers belong to the host application; scripts call setup_logging()
logger = logging.getLogger("freecurrencyapi")
if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
    logger.addHandler(logging.NullHandler())


# ============================================
# Convenience Functions
# ============================================

def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a specific module.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        logging.Logger: Logger named "freecurrencyapi.<name>"

    Example:
        >>> get_logger("freecurrencyapi.api_client").name
        'freecurrencyapi.freecurrencyapi.api_client'
    """
    return logging.getLogger(f"freecurrencyapi.{name}")


# ============================================
# Log Helper Functions
# ============================================

def log_api_request(method: str, endpoint: str, params: dict = None) -> None:
    """
    Log an API request with consistent formatting.

    Args:
        method: HTTP method (e.g., "GET")
        endpoint: Endpoint path being called (e.g., "latest")
        params: Query parameters (optional)

    Example:
        >>> log_api_request("GET", "latest", {"base_currency": "USD"})
        [DEBUG] API Request: GET latest | Params: {'base_currency': 'USD'}
    """
    if params:
        logger.debug(f"API Request: {method} {endpoint} | Params: {params}")
    else:
        logger.debug(f"API Request: {method} {endpoint}")


def log_api_response(method: str, endpoint: str, status: int, response_time: float = None) -> None:
    """
    Log an API response with status and timing information.

    Args:
        method: HTTP method
        endpoint: Endpoint path
        status: HTTP status code
        response_time: Response time in seconds (optional)

    Example:
        >>> log_api_response("GET", "latest", 200, 0.342)
        [DEBUG] API Response: GET latest | Status: 200 | Time: 0.342s
    """
    time_str = f" | Time: {response_time:.3f}s" if response_time else ""
    logger.debug(f"API Response: {method} {endpoint} | Status: {status}{time_str}")
