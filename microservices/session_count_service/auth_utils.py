"""
Request Utilities for Session Count Authenticator

Query string construction, Basic authorization header encoding and
login page resolution. Pure functions, no I/O.
"""

import base64

import httpx

from .constants import (
    AND_TAG,
    ATTRIBUTE_SEPARATOR,
    AUTH_TYPE_KEY,
    AUTHORIZATION_HEADER,
    LOGIN_STANDARD_PAGE,
    SESSION_TERMINATION_ENFORCER_PAGE,
    TENANT_DOMAIN_TAG,
    USER_STORE_TAG,
    USERNAME_TAG,
)


def build_query(tenant_domain: str, username: str, user_store: str) -> str:
    """
    Build the query used to search the active session table.

    Values are inserted verbatim. A value containing the attribute
    separator or the AND tag produces a query the session store will
    misread.

    Args:
        tenant_domain: Tenant domain of the user
        username: Username of the user
        user_store: User store domain of the user

    Returns:
        Query string, e.g. ``tenantDomain:t1&username:alice&userStore:PRIMARY``
    """
    clauses = [
        (TENANT_DOMAIN_TAG, tenant_domain),
        (USERNAME_TAG, username),
        (USER_STORE_TAG, user_store),
    ]
    return AND_TAG.join(f"{tag}{ATTRIBUTE_SEPARATOR}{value}" for tag, value in clauses)


def build_basic_auth_header(username: str, password: str) -> str:
    """
    Base64 encode ``username:password`` for a Basic authorization header.

    Returns:
        Encoded credentials, without the ``Basic `` prefix
    """
    credentials = f"{username}{ATTRIBUTE_SEPARATOR}{password}"
    return base64.b64encode(credentials.encode('utf-8')).decode('ascii')


def basic_authorization_value(username: str, password: str) -> str:
    """Full Authorization header value, ``Basic <credentials>``"""
    return AUTH_TYPE_KEY + build_basic_auth_header(username, password)


def set_authorization_header(
    request: httpx.Request,
    username: str,
    password: str
) -> httpx.Request:
    """
    Add a Basic Authorization header to a request built elsewhere.

    Args:
        request: Request that needs the auth header
        username: Username of the caller
        password: Password of the caller

    Returns:
        The same request, with the header set
    """
    request.headers[AUTHORIZATION_HEADER] = basic_authorization_value(username, password)
    return request


def resolve_login_page_url(authentication_endpoint_url: str) -> str:
    """
    Swap the standard login page for the session termination enforcer page.

    Every occurrence of the login page name is replaced. A URL without it
    is returned unchanged.

    Args:
        authentication_endpoint_url: Configured authentication endpoint URL

    Returns:
        Login page URL of the session count authenticator
    """
    return authentication_endpoint_url.replace(
        LOGIN_STANDARD_PAGE,
        SESSION_TERMINATION_ENFORCER_PAGE
    )
