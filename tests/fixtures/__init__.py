"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - session_fixtures.py: Session count service factories
"""

# Common utilities
from .common import (
    make_username,
    make_session_id,
    make_timestamp_ms,
)

# Session count service fixtures
from .session_fixtures import (
    make_identity,
    make_session_record,
)

__all__ = [
    "make_username",
    "make_session_id",
    "make_timestamp_ms",
    "make_identity",
    "make_session_record",
]
