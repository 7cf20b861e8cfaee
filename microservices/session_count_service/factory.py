"""
Session Count Service Factory

Factory functions for creating clients with real configuration.
This is the ONLY place that reads settings.

Usage:
    from .factory import create_session_query_client
    client = create_session_query_client()
"""
from typing import Optional

import httpx

from core.config import SessionStoreConfig, get_settings

from .client import SessionQueryClient


def create_session_query_client(
    config: Optional[SessionStoreConfig] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> SessionQueryClient:
    """
    Create SessionQueryClient from configuration.

    Args:
        config: Session-store configuration, defaults to global settings
        transport: Optional httpx transport override

    Returns:
        Configured SessionQueryClient instance
    """
    config = config or get_settings()

    return SessionQueryClient(
        search_url=config.search_url,
        username=config.username,
        password=config.password,
        authentication_endpoint_url=config.authentication_endpoint_url,
        timeout=config.timeout,
        transport=transport,
    )
