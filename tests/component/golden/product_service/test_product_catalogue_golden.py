"""
Product Service Component Golden Tests

ProductService against a recording Medusa gateway.
"""
import pytest

from core.errors import MedusaApiError, NotFoundError, UnauthorizedError
from microservices.product_service.models import CreateProductRequest
from microservices.product_service.product_service import ProductService

pytestmark = [pytest.mark.component, pytest.mark.golden, pytest.mark.asyncio]


@pytest.fixture
def service(mock_medusa):
    return ProductService(mock_medusa)


class TestProductListGolden:
    """Golden: ProductService.get_products() and filters"""

    async def test_list_forwards_filters(self, service, mock_medusa, medusa_product):
        mock_medusa.set_response("store", "GET", "/products", {
            "products": [medusa_product], "count": 31, "offset": 20, "limit": 10,
        })

        result = await service.get_products(offset=20, limit=10, search="iphone", region_id="reg_1")

        call = mock_medusa.assert_called("store", "GET", "/products")
        assert call["query"]["q"] == "iphone"
        assert call["query"]["region_id"] == "reg_1"
        assert call["query"]["offset"] == 20
        assert result["count"] == 31
        assert result["offset"] == 20
        assert result["limit"] == 10
        assert result["products"][0]["id"] == "prod_01"

    async def test_list_defaults_when_platform_omits_paging(self, service, mock_medusa):
        mock_medusa.set_response("store", "GET", "/products", {"products": []})

        result = await service.get_products()

        assert result == {"products": [], "count": 0, "offset": 0, "limit": 20}

    async def test_by_category_and_collection(self, service, mock_medusa):
        await service.get_products_by_category("pcat_1")
        await service.get_products_by_collection("pcol_1", limit=5)

        assert mock_medusa.calls[0]["query"]["category_id"] == "pcat_1"
        assert mock_medusa.calls[1]["query"]["collection_id"] == "pcol_1"
        assert mock_medusa.calls[1]["query"]["limit"] == 5


class TestProductLookupGolden:
    """Golden: single product by id or handle"""

    async def test_get_product(self, service, mock_medusa, medusa_product):
        mock_medusa.set_response("store", "GET", "/products/prod_01", {"product": medusa_product})

        result = await service.get_product("prod_01")

        assert result["product"]["title"] == "iPhone 15"

    async def test_get_product_not_found(self, service, mock_medusa):
        """GOLDEN: platform 404 becomes NotFoundError naming the id"""
        mock_medusa.set_error("store", "GET", "/products/prod_x", MedusaApiError("nope", status_code=404))

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_product("prod_x")

        assert exc_info.value.message == "Product with ID prod_x not found"

    async def test_other_platform_errors_propagate(self, service, mock_medusa):
        mock_medusa.set_error("store", "GET", "/products/prod_x", MedusaApiError("down", status_code=500))

        with pytest.raises(MedusaApiError):
            await service.get_product("prod_x")

    async def test_get_by_handle(self, service, mock_medusa, medusa_product):
        mock_medusa.set_response("store", "GET", "/products", {"products": [medusa_product]})

        result = await service.get_product_by_handle("iphone-15")

        assert mock_medusa.last_call["query"]["handle"] == "iphone-15"
        assert mock_medusa.last_call["query"]["limit"] == 1
        assert result["product"]["handle"] == "iphone-15"

    async def test_get_by_handle_missing(self, service, mock_medusa):
        mock_medusa.set_response("store", "GET", "/products", {"products": []})

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_product_by_handle("ghost")

        assert exc_info.value.message == "Product with handle ghost not found"


class TestProductCreateGolden:
    """Golden: admin product creation"""

    REQUEST = {
        "title": "AirPods Pro",
        "options": [{"title": "Edition", "values": ["USB-C"]}],
        "variants": [{"title": "USB-C", "sku": "APP-USBC", "prices": [{"currency_code": "pkr", "amount": 1}]}],
    }

    async def test_create_requires_bearer(self, service, mock_medusa):
        """GOLDEN: rejected before any outbound call"""
        request = CreateProductRequest(**self.REQUEST)

        for authorization in (None, "", "Basic abc", "Bearer "):
            with pytest.raises(UnauthorizedError):
                await service.create_product(request, authorization)

        mock_medusa.assert_no_calls()

    async def test_create_forwards_token(self, service, mock_medusa, medusa_product):
        mock_medusa.set_response("admin", "POST", "/products", {"product": medusa_product})

        result = await service.create_product(CreateProductRequest(**self.REQUEST), "Bearer admin_jwt")

        call = mock_medusa.assert_called("admin", "POST", "/products")
        assert call["headers"] == {"Authorization": "Bearer admin_jwt"}
        assert call["body"]["variants"][0]["options"] == {"Edition": "USB-C"}
        assert result["product"]["id"] == "prod_01"
