"""
Common/Shared Fixtures

Base factories and generators used across multiple tests.
"""
import time
import uuid
from typing import Optional


def make_username(prefix: Optional[str] = None) -> str:
    """Generate a unique username"""
    prefix = prefix or "user"
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def make_session_id() -> str:
    """Generate a unique session ID"""
    return uuid.uuid4().hex


def make_timestamp_ms() -> int:
    """Current time in epoch milliseconds"""
    return int(time.time() * 1000)
