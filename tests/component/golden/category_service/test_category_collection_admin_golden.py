"""
Category and Collection Component Golden Tests

Admin gates (bearer token, id prefixes) fire before any outbound call; the
storefront category listing needs no token.
"""
import pytest

from core.errors import BadRequestError, MedusaApiError, NotFoundError, UnauthorizedError
from microservices.category_service.category_service import CategoryService
from microservices.category_service.models import CreateCategoryRequest, UpdateCategoryRequest
from microservices.collection_service.collection_service import CollectionService
from microservices.collection_service.models import (
    CollectionProductsRequest,
    CreateCollectionRequest,
    UpdateCollectionRequest,
)

pytestmark = [pytest.mark.component, pytest.mark.golden, pytest.mark.asyncio]

TOKEN = "Bearer admin_jwt"


@pytest.fixture
def categories(mock_medusa):
    return CategoryService(mock_medusa)


@pytest.fixture
def collections(mock_medusa):
    return CollectionService(mock_medusa)


class TestCategoryListingGolden:
    """Golden: public listing and tree"""

    async def test_list_without_token_uses_store_api(self, categories, mock_medusa):
        mock_medusa.set_response("store", "GET", "/product-categories", {
            "product_categories": [{"id": "pcat_1", "name": "PriceOye"}], "count": 1,
        })

        result = await categories.list_categories(q="price")

        assert mock_medusa.last_call["api"] == "store"
        assert mock_medusa.last_call["query"]["q"] == "price"
        assert result["categories"][0]["name"] == "PriceOye"
        assert result["count"] == 1

    async def test_list_with_token_uses_admin_api(self, categories, mock_medusa):
        await categories.list_categories(TOKEN)

        assert mock_medusa.last_call["api"] == "admin"
        assert mock_medusa.last_call["headers"] == {"Authorization": TOKEN}

    async def test_tree_queries_roots_with_descendants(self, categories, mock_medusa):
        await categories.get_category_tree()

        query = mock_medusa.last_call["query"]
        assert query["parent_category_id"] == "null"
        assert query["include_descendants_tree"] is True


class TestCategoryAdminGolden:
    """Golden: category CRUD"""

    @pytest.mark.parametrize("authorization", [None, "", "Token abc", "Bearer  "])
    async def test_token_required_before_any_call(self, categories, mock_medusa, authorization):
        with pytest.raises(UnauthorizedError):
            await categories.get_category("pcat_1", authorization)
        mock_medusa.assert_no_calls()

    async def test_id_prefix_checked_before_any_call(self, categories, mock_medusa):
        with pytest.raises(BadRequestError) as exc_info:
            await categories.delete_category("cat_1", TOKEN)

        assert exc_info.value.message == "Invalid category ID format"
        mock_medusa.assert_no_calls()

    async def test_create_defaults_and_handle(self, categories, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/product-categories", {
            "product_category": {"id": "pcat_9", "name": "Smart Watches", "handle": "smart-watches"},
        })

        result = await categories.create_category(CreateCategoryRequest(name=" Smart Watches "), TOKEN)

        assert mock_medusa.last_call["body"] == {
            "name": "Smart Watches",
            "handle": "smart-watches",
            "is_active": True,
            "is_internal": False,
        }
        assert result["id"] == "pcat_9"

    async def test_create_blank_name_rejected(self, categories, mock_medusa):
        with pytest.raises(BadRequestError):
            await categories.create_category(CreateCategoryRequest(name="   "), TOKEN)
        mock_medusa.assert_no_calls()

    async def test_create_checks_parent_prefix(self, categories, mock_medusa):
        with pytest.raises(BadRequestError) as exc_info:
            await categories.create_category(
                CreateCategoryRequest(name="Phones", parent_category_id="prod_1"), TOKEN
            )
        assert exc_info.value.message == "Invalid parent category ID format"

    async def test_update_sends_only_provided_fields(self, categories, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/product-categories/pcat_1", {
            "product_category": {"id": "pcat_1"},
        })

        await categories.update_category("pcat_1", UpdateCategoryRequest(is_active=False), TOKEN)

        assert mock_medusa.last_call["body"] == {"is_active": False}

    async def test_not_found_mapped(self, categories, mock_medusa):
        mock_medusa.set_error("admin", "GET", "/product-categories/pcat_x", MedusaApiError("x", status_code=404))

        with pytest.raises(NotFoundError) as exc_info:
            await categories.get_category("pcat_x", TOKEN)

        assert exc_info.value.message == "Category with ID pcat_x not found"

    async def test_delete(self, categories, mock_medusa):
        mock_medusa.set_response("admin", "DELETE", "/product-categories/pcat_1", {
            "id": "pcat_1", "object": "product_category", "deleted": True,
        })

        result = await categories.delete_category("pcat_1", TOKEN)

        assert result == {"id": "pcat_1", "object": "product_category", "deleted": True}


class TestCollectionAdminGolden:
    """Golden: collection CRUD and product membership"""

    async def test_list_requires_bearer(self, collections, mock_medusa):
        with pytest.raises(UnauthorizedError):
            await collections.list_collections(None)
        mock_medusa.assert_no_calls()

    async def test_create(self, collections, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/collections", {
            "collection": {"id": "pcol_1", "title": "Summer Sale", "handle": "summer-sale"},
        })

        result = await collections.create_collection(
            CreateCollectionRequest(title="Summer Sale", handle="Summer Sale"), TOKEN
        )

        assert mock_medusa.last_call["body"] == {"title": "Summer Sale", "handle": "summer-sale"}
        assert result["handle"] == "summer-sale"

    async def test_not_found_mapped(self, collections, mock_medusa):
        mock_medusa.set_error(
            "admin", "GET", "/collections/pcol_doesnotexist", MedusaApiError("missing", status_code=404)
        )

        with pytest.raises(NotFoundError) as exc_info:
            await collections.get_collection("pcol_doesnotexist", TOKEN)

        assert exc_info.value.message == "Collection with ID pcol_doesnotexist not found"
        assert exc_info.value.resource_id == "pcol_doesnotexist"
        assert exc_info.value.status_code == 404

    async def test_update_partial(self, collections, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/collections/pcol_1", {"collection": {"id": "pcol_1"}})

        await collections.update_collection("pcol_1", UpdateCollectionRequest(metadata=None), TOKEN)

        assert mock_medusa.last_call["body"] == {"metadata": None}

    async def test_product_membership(self, collections, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/collections/pcol_1/products", {"collection": {"id": "pcol_1"}})

        await collections.update_collection_products(
            "pcol_1", CollectionProductsRequest(add=["prod_1"], remove=["prod_2"]), TOKEN
        )

        assert mock_medusa.last_call["body"] == {"add": ["prod_1"], "remove": ["prod_2"]}

    async def test_empty_membership_change_rejected(self, collections, mock_medusa):
        with pytest.raises(BadRequestError):
            await collections.update_collection_products("pcol_1", CollectionProductsRequest(), TOKEN)
        mock_medusa.assert_no_calls()

    async def test_bad_collection_id(self, collections, mock_medusa):
        with pytest.raises(BadRequestError) as exc_info:
            await collections.get_collection("col_1", TOKEN)
        assert exc_info.value.message == "Invalid collection ID format"
