"""
Medusa Gateway Component Golden Tests

MedusaClient over a mocked httpx client: URL building, headers, body/query
serialization and failure normalisation.
"""
import httpx
import pytest

from core.errors import MedusaApiError, MedusaUnavailableError
from core.medusa_client import MedusaClient, MedusaGatewayProtocol

pytestmark = [pytest.mark.component, pytest.mark.golden, pytest.mark.asyncio]

BASE = "http://medusa.test:9000"


@pytest.fixture
def medusa(mock_http_client):
    return MedusaClient(BASE, publishable_key="pk_test", client=mock_http_client)


class TestMedusaRequestGolden:
    """Golden: MedusaClient.request() success paths"""

    async def test_store_request_url_headers_and_query(self, medusa, mock_http_client):
        """GOLDEN: /store prefix, publishable key, flattened query"""
        mock_http_client.set_response("GET", f"{BASE}/store/products", json_data={"products": []})

        result = await medusa.store_request("/products", query={"limit": 10, "q": None, "is_giftcard": False})

        assert result == {"products": []}
        request = mock_http_client.get_last_request()
        assert request["method"] == "GET"
        assert request["headers"]["x-publishable-api-key"] == "pk_test"
        assert request["params"] == [("limit", "10"), ("is_giftcard", "false")]
        assert "json" not in request

    async def test_admin_request_forwards_authorization(self, medusa, mock_http_client):
        mock_http_client.set_response("POST", f"{BASE}/admin/regions", json_data={"region": {"id": "reg_1"}})

        await medusa.admin_request(
            "/regions", method="post", body={"name": "Pakistan"}, headers={"Authorization": "Bearer admin"}
        )

        request = mock_http_client.get_last_request()
        assert request["method"] == "POST"
        assert request["json"] == {"name": "Pakistan"}
        assert request["headers"]["Authorization"] == "Bearer admin"

    async def test_get_never_sends_body(self, medusa, mock_http_client):
        await medusa.request("/store/carts/cart_1", body={"ignored": True})
        assert "json" not in mock_http_client.get_last_request()

    async def test_auth_prefix(self, medusa, mock_http_client):
        mock_http_client.set_response("POST", f"{BASE}/auth/customer/emailpass", json_data={"token": "jwt"})

        result = await medusa.auth_request("/customer/emailpass", method="POST", body={})

        assert result == {"token": "jwt"}

    async def test_empty_body_is_empty_dict(self, medusa, mock_http_client):
        """GOLDEN: a 2xx without JSON (e.g. 204) yields {}"""
        mock_http_client.set_response("DELETE", f"{BASE}/auth/session", status_code=204)
        assert await medusa.auth_request("/session", method="DELETE") == {}


class TestMedusaFailuresGolden:
    """Golden: every failure becomes MedusaApiError or MedusaUnavailableError"""

    async def test_non_2xx_raises_api_error(self, medusa, mock_http_client):
        mock_http_client.set_response(
            "GET", f"{BASE}/store/carts/cart_x", status_code=404,
            json_data={"type": "not_found", "message": "Cart with id: cart_x was not found"},
        )

        with pytest.raises(MedusaApiError) as exc_info:
            await medusa.store_request("/carts/cart_x")

        error = exc_info.value
        assert error.status_code == 404
        assert error.message == "Cart with id: cart_x was not found"
        assert error.error == "not_found"
        assert error.url == f"{BASE}/store/carts/cart_x"

    async def test_non_2xx_without_message(self, medusa, mock_http_client):
        mock_http_client.set_response("GET", f"{BASE}/store/products", status_code=500, text="oops")

        with pytest.raises(MedusaApiError) as exc_info:
            await medusa.store_request("/products")

        assert exc_info.value.message == "Medusa API error: 500"
        assert exc_info.value.error == "Medusa API Error"

    async def test_transport_error_raises_unavailable(self, medusa, mock_http_client):
        mock_http_client.set_error(httpx.ConnectError("connection refused"))

        with pytest.raises(MedusaUnavailableError) as exc_info:
            await medusa.store_request("/products")

        assert exc_info.value.status_code == 503
        assert exc_info.value.message == "Failed to connect to Medusa backend"


class TestMedusaLifecycleGolden:
    """Golden: health check and close"""

    async def test_health_check_up(self, medusa, mock_http_client):
        mock_http_client.set_response("GET", f"{BASE}/health", status_code=200, text="OK")
        assert await medusa.health_check() is True

    async def test_health_check_never_raises(self, medusa, mock_http_client):
        mock_http_client.set_error(httpx.ConnectTimeout("timeout"))
        assert await medusa.health_check() is False

    async def test_context_manager_closes_client(self, mock_http_client):
        async with MedusaClient(BASE, client=mock_http_client) as medusa:
            assert isinstance(medusa, MedusaGatewayProtocol)
        assert mock_http_client.closed is True
