#!/usr/bin/env python3
"""
Core Module

Shared infrastructure for the session count authenticator.

COMPONENTS:
    - config/: Environment-driven configuration (session store, logging)
    - logger.py: Service logger setup

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("session_count_service")
"""

__version__ = "1.0.0"
