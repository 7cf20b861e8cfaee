"""
Service Logger Setup

Configures standard library logging for a service from LoggingConfig.
"""

import logging
from typing import Optional

from core.config.logging_config import LoggingConfig


def setup_service_logger(
    name: str,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure and return a named logger

    Args:
        name: Logger name (usually the service name)
        config: Logging configuration, defaults to LoggingConfig.from_env()

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    # Re-running setup must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logger configured for {config.service_name} ({config.environment})")
    return logger


__all__ = ["setup_service_logger"]
