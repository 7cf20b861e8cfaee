"""
Session Query Client Example

Looks up a user's active sessions in the configured session store.

Usage:
    SESSION_STORE_SEARCH_URL=https://localhost:9444/analytics/tables/search \
    SESSION_STORE_USERNAME=admin SESSION_STORE_PASSWORD=admin \
    python -m microservices.session_count_service.examples.session_query_example \
        --tenant carbon.super --username alice --user-store PRIMARY
"""

import argparse
import json
import sys

from core.logger import setup_service_logger
from microservices.session_count_service.factory import create_session_query_client
from microservices.session_count_service.models import Identity
from microservices.session_count_service.protocols import SessionCountAuthError


def main() -> int:
    parser = argparse.ArgumentParser(description="Query active sessions of a user")
    parser.add_argument("--tenant", default="carbon.super", help="Tenant domain")
    parser.add_argument("--username", required=True, help="Username")
    parser.add_argument("--user-store", default="PRIMARY", help="User store domain")
    args = parser.parse_args()

    logger = setup_service_logger("microservices.session_count_service")
    client = create_session_query_client()

    print(f"Login page: {client.resolve_login_page_url()}")

    identity = Identity(
        tenant_domain=args.tenant,
        username=args.username,
        user_store_domain=args.user_store,
    )
    try:
        sessions = client.fetch_active_sessions(identity)
    except SessionCountAuthError as e:
        logger.error(f"Session lookup failed: {e}")
        return 1

    print(f"✓ {len(sessions)} active sessions")
    print(json.dumps(sessions, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
