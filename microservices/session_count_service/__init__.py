"""
Session Count Service

Session-store query client for the session count authenticator.
Looks up a user's active sessions and builds Basic-authenticated requests
against the session-store table search endpoint.
"""

__version__ = "1.0.0"
__service_name__ = "session_count_service"
