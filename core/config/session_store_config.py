#!/usr/bin/env python3
"""Session-store configuration

Settings the session count authenticator needs to query the external
session-store service: the table search endpoint, the service account used
for Basic authentication, and the authentication endpoint whose login page
is swapped for the session termination enforcer page.
"""
import os
from dataclasses import dataclass

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class SessionStoreConfig:
    """Session-store endpoints and service credentials"""

    # ===========================================
    # Session Store
    # ===========================================
    # Table search endpoint of the analytics session store
    search_url: str = ""
    username: str = ""
    password: str = ""
    timeout: float = 30.0

    # ===========================================
    # Authentication Endpoint
    # ===========================================
    authentication_endpoint_url: str = "https://localhost:9443/authenticationendpoint/login.do"

    @classmethod
    def from_env(cls) -> 'SessionStoreConfig':
        """Load session-store configuration from environment variables"""
        return cls(
            search_url=os.getenv("SESSION_STORE_SEARCH_URL", ""),
            username=os.getenv("SESSION_STORE_USERNAME", ""),
            password=os.getenv("SESSION_STORE_PASSWORD", ""),
            timeout=_float(os.getenv("SESSION_STORE_TIMEOUT", ""), 30.0),
            authentication_endpoint_url=os.getenv(
                "AUTHENTICATION_ENDPOINT_URL",
                "https://localhost:9443/authenticationendpoint/login.do",
            ),
        )

    def __repr__(self) -> str:
        return (
            f"SessionStoreConfig(search_url={self.search_url!r}, username={self.username!r}, "
            f"password='***', timeout={self.timeout!r}, "
            f"authentication_endpoint_url={self.authentication_endpoint_url!r})"
        )
