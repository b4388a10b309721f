"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── golden/      🔒 Characterization (never modify)
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
    pytest tests/component/golden -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import (
    FakeMedusaAdmin,
    MockHttpClient,
    MockMedusaGateway,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )
    config.addinivalue_line(
        "markers", "golden: safety net tests - DO NOT MODIFY"
    )


# =============================================================================
# Medusa Mocks
# =============================================================================

@pytest.fixture
def mock_medusa() -> MockMedusaGateway:
    """Recording Medusa gateway"""
    return MockMedusaGateway()


@pytest.fixture
def fake_admin() -> FakeMedusaAdmin:
    """Stateful in-memory Medusa admin API"""
    return FakeMedusaAdmin()


# =============================================================================
# HTTP Client Mocks
# =============================================================================

@pytest.fixture
def mock_http_client() -> MockHttpClient:
    """Mock httpx.AsyncClient for the gateway"""
    return MockHttpClient()
