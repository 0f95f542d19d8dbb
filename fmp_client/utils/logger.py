"""
Centralized logging configuration for the FMP client

Usage:
    from fmp_client.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Fetching profile")
    logger.error("Request failed", exc_info=True)
"""
import logging
import sys
from typing import Optional

from ..config import Config

# Define log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler installed by configure_logging
_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None):
    """
    Configure logging for the client.

    Importing the package configures nothing; applications call this (or
    configure the ``fmp_client`` logger themselves). Calling it again only
    changes the level.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to FMP_LOG_LEVEL.
    """
    global _handler

    if level is None:
        level = Config.LOG_LEVEL
    level = level.upper()

    package_logger = logging.getLogger("fmp_client")
    package_logger.setLevel(level)
    if _handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
        _handler = handler

    # Set specific loggers to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    package_logger.debug(f"Logging configured at {level} level")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_api_call(logger: logging.Logger, method: str, url: str, status: int, duration_ms: float):
    """Log an API call with consistent format"""
    logger.debug(
        f"API {method} {url} - {status} ({duration_ms:.0f}ms)",
        extra={
            "method": method,
            "url": url,
            "status": status,
            "duration_ms": duration_ms,
            "type": "api_call"
        }
    )
