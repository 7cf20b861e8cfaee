"""
Session Count Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import Identity, SessionRecords


# Custom exceptions - defined here to avoid importing the client

class SessionCountAuthError(Exception):
    """Base session count authenticator error"""
    pass


class SessionValidationError(SessionCountAuthError):
    """Session store answered with a non-200 status"""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(
            message or f"Failed to retrieve data from endpoint. Error code :{status_code}"
        )


class SessionStoreIOError(SessionCountAuthError, IOError):
    """Session store could not be reached or its response could not be read"""
    pass


class SessionStoreConfigError(SessionCountAuthError):
    """Required session-store configuration is missing"""
    pass


@runtime_checkable
class SessionQueryClientProtocol(Protocol):
    """Interface for the session-store query client"""

    def fetch_active_sessions(self, identity: Identity) -> SessionRecords:
        """Get active sessions of a user"""
        ...

    def resolve_login_page_url(self) -> str:
        """Get the session termination enforcer page URL"""
        ...
