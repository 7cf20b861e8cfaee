"""
Session Store Query Client

Synchronous client used by the session count authenticator to look up a
user's active sessions in the external session store.
"""

import logging
from typing import Optional

import httpx

from .auth_utils import (
    basic_authorization_value,
    build_query,
    resolve_login_page_url,
)
from .constants import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TAG,
)
from .models import Identity, SessionQueryRequest, SessionRecords
from .protocols import (
    SessionStoreConfigError,
    SessionStoreIOError,
    SessionValidationError,
)

logger = logging.getLogger(__name__)


class SessionQueryClient:
    """Session store HTTP client"""

    def __init__(
        self,
        search_url: str,
        username: str,
        password: str,
        authentication_endpoint_url: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize session store client

        Args:
            search_url: Table search endpoint of the session store
            username: Service account username for Basic auth
            password: Service account password for Basic auth
            authentication_endpoint_url: Authentication endpoint login page URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests to stub the store
        """
        self.search_url = search_url
        self.username = username
        self.password = password
        self.authentication_endpoint_url = authentication_endpoint_url
        self.timeout = timeout
        self._transport = transport

    def build_request(self, identity: Identity) -> httpx.Request:
        """
        Build the table search request for a user without sending it

        Args:
            identity: User whose sessions are looked up

        Returns:
            POST request carrying the query body and auth headers
        """
        if not self.search_url:
            logger.error("Session store search URL is not configured")
            raise SessionStoreConfigError("Session store search URL is not configured")

        body = SessionQueryRequest(
            query=build_query(
                identity.tenant_domain,
                identity.username,
                identity.user_store_domain
            )
        )
        return httpx.Request(
            "POST",
            self.search_url,
            json=body.to_payload(),
            headers={
                AUTHORIZATION_HEADER: basic_authorization_value(self.username, self.password),
                CONTENT_TYPE_TAG: CONTENT_TYPE_JSON,
            }
        )

    def fetch_active_sessions(self, identity: Identity) -> SessionRecords:
        """
        Retrieve active sessions of a user from the session store

        Args:
            identity: User whose sessions are looked up

        Returns:
            JSON array with one element per active session, as returned by the store

        Raises:
            SessionValidationError: Session store answered with a non-200 status
            SessionStoreIOError: Session store unreachable or response unreadable
        """
        request = self.build_request(identity)
        logger.debug(
            f"Querying active sessions for {identity.username} "
            f"({identity.user_store_domain}@{identity.tenant_domain})"
        )

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.send(request)
        except httpx.RequestError as e:
            logger.error(f"Failed to reach session store at {self.search_url}: {e}")
            raise SessionStoreIOError(f"Failed to read response from session store: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.error(f"Session store returned status {response.status_code}")
            raise SessionValidationError(response.status_code)

        try:
            sessions = response.json()
        except ValueError as e:
            logger.error(f"Session store returned malformed JSON: {e}")
            raise SessionStoreIOError(f"Malformed response from session store: {e}") from e

        if not isinstance(sessions, list):
            logger.error(f"Session store returned {type(sessions).__name__}, expected a JSON array")
            raise SessionStoreIOError("Malformed response from session store: expected a JSON array")

        logger.debug(f"Found {len(sessions)} active sessions for {identity.username}")
        return sessions

    def resolve_login_page_url(self) -> str:
        """Login page of the session count authenticator"""
        if not self.authentication_endpoint_url:
            logger.error("Authentication endpoint URL is not configured")
            raise SessionStoreConfigError("Authentication endpoint URL is not configured")
        return resolve_login_page_url(self.authentication_endpoint_url)


__all__ = ["SessionQueryClient"]
