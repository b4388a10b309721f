"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (translators, app and scripts with a mocked Medusa)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict, List

import pytest

# Set testing environment BEFORE any project imports
os.environ.setdefault("ENV", "testing")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    BFF_URL = os.getenv("BFF_URL", "http://localhost:3001/api/v1")
    MEDUSA_BACKEND_URL = os.getenv("MEDUSA_BACKEND_URL", "http://localhost:9000")
    BASE_PATH = "/api/v1"


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Sample Medusa Records
# =============================================================================

@pytest.fixture
def medusa_product() -> Dict[str, Any]:
    """A Medusa storefront product as returned by /store/products"""
    return {
        "id": "prod_01",
        "title": "iPhone 15",
        "subtitle": None,
        "description": "Dynamic Island and USB-C",
        "handle": "iphone-15",
        "thumbnail": "https://cdn.example.com/iphone-15.jpg",
        "images": [{"id": "img_01", "url": "https://cdn.example.com/iphone-15-1.jpg"}],
        "options": [
            {"id": "opt_01", "title": "Storage", "values": [{"value": "128GB"}, {"value": "256GB"}]},
        ],
        "variants": [
            {
                "id": "variant_01",
                "title": "128GB",
                "sku": "IP15-128",
                "inventory_quantity": 10,
                "prices": [{"currency_code": "pkr", "amount": 37999900}],
            },
            {
                "id": "variant_02",
                "title": "256GB",
                "sku": "IP15-256",
                "calculated_price": {"currency_code": "pkr", "calculated_amount": 42999900},
            },
        ],
        "collection": {"id": "pcol_01", "title": "Phones", "handle": "phones"},
        "categories": [{"id": "pcat_01", "name": "Apple Phone", "handle": "apple-phone"}],
        "created_at": "2024-01-01T00:00:00.000Z",
        "updated_at": "2024-01-02T00:00:00.000Z",
    }


@pytest.fixture
def medusa_cart() -> Dict[str, Any]:
    """A Medusa cart with one line item"""
    return {
        "id": "cart_01",
        "email": None,
        "region_id": "reg_01",
        "currency_code": "pkr",
        "items": [
            {
                "id": "item_01",
                "title": "iPhone 15",
                "subtitle": "128GB",
                "thumbnail": None,
                "quantity": 1,
                "unit_price": 37999900,
                "subtotal": 37999900,
                "total": 37999900,
                "variant_id": "variant_01",
                "product_id": "prod_01",
            }
        ],
        "subtotal": 37999900,
        "discount_total": 0,
        "shipping_total": 0,
        "tax_total": 0,
        "total": 37999900,
        "created_at": "2024-01-01T00:00:00.000Z",
        "updated_at": "2024-01-01T00:00:00.000Z",
    }


# =============================================================================
# Assertion Helpers
# =============================================================================

class AssertionHelpers:
    """Custom assertion helpers for tests"""

    @staticmethod
    def assert_http_success(response, expected_status: int = 200):
        """Assert HTTP response is successful"""
        assert response.status_code == expected_status, \
            f"Expected {expected_status}, got {response.status_code}: {response.text}"

    @staticmethod
    def assert_has_fields(data: Dict, fields: List[str]):
        """Assert dict has required fields"""
        missing = [f for f in fields if f not in data]
        assert not missing, f"Missing fields: {missing}"

    @staticmethod
    def assert_error_body(response, status_code: int, message: str = None):
        """Assert the BFF error shape {statusCode, message, error}"""
        assert response.status_code == status_code, response.text
        body = response.json()
        assert body["statusCode"] == status_code
        assert "error" in body
        if message is not None:
            assert body["message"] == message


@pytest.fixture
def assertions() -> AssertionHelpers:
    """Provide assertion helpers"""
    return AssertionHelpers()


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "golden: safety net tests - DO NOT MODIFY")
