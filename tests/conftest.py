"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers (Top-Down TDD):
    - component/  : Component tests (mocked session store)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_identity,
    make_username,
    make_session_record,
)


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    SEARCH_URL = "https://analytics.test:9444/analytics/tables/search"
    AUTHENTICATION_ENDPOINT_URL = "https://is.test:9443/authenticationendpoint/login.do"
    SERVICE_USERNAME = "admin"
    SERVICE_PASSWORD = "admin-secret"

    # Timeouts
    HTTP_TIMEOUT = 30


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_identity():
    """Generate a sample identity in the super tenant's primary user store"""
    return make_identity()


@pytest.fixture
def sample_sessions():
    """Generate two session records as the session store returns them"""
    return [make_session_record(), make_session_record()]
