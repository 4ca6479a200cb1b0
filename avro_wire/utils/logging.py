"""
Logging setup for the consumer, producer and entry point.

The codec core does not log; errors surface as exceptions to the caller.
"""
import logging
import sys
from typing import Optional

from avro_wire.config import get_config
from avro_wire.exceptions import ConfigurationError

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level '{level}'", config_key="LOG_LEVEL")
    return resolved


def setup_logger(
    name: str,
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Setup and configure a logger.

    Args:
        name: Logger name
        level: Log level (defaults to config value)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    log_level = _resolve_level(level or get_config().log_level)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger with the given name."""
    return setup_logger(name)
