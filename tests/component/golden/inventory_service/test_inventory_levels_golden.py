"""
Inventory Component Golden Tests
"""
import pytest

from core.errors import BadRequestError, MedusaApiError, NotFoundError, UnauthorizedError
from microservices.inventory_service.inventory_service import InventoryService
from microservices.inventory_service.models import (
    CreateLocationLevelRequest,
    UpdateInventoryItemRequest,
    UpdateLocationLevelRequest,
)

pytestmark = [pytest.mark.component, pytest.mark.golden, pytest.mark.asyncio]

TOKEN = "Bearer admin_jwt"
ITEM = {
    "id": "iitem_1",
    "sku": "IP15-128-PNK",
    "location_levels": [{"id": "ilev_1", "location_id": "sloc_1", "stocked_quantity": 100}],
}


@pytest.fixture
def inventory(mock_medusa):
    return InventoryService(mock_medusa)


class TestInventoryReadsGolden:
    """Golden: listing and lookups"""

    async def test_list_filters_by_location(self, inventory, mock_medusa):
        mock_medusa.set_response("admin", "GET", "/inventory-items", {"inventory_items": [ITEM], "count": 1})

        result = await inventory.list_items(TOKEN, sku="IP15-128-PNK", location_id="sloc_1")

        query = mock_medusa.last_call["query"]
        assert query["location_levels[location_id]"] == "sloc_1"
        assert query["sku"] == "IP15-128-PNK"
        assert query["fields"] == "*location_levels"
        assert result["inventory_items"][0]["location_levels"][0]["stocked_quantity"] == 100

    async def test_by_location_checks_prefix(self, inventory, mock_medusa):
        with pytest.raises(BadRequestError) as exc_info:
            await inventory.get_inventory_by_location("loc_1", TOKEN)
        assert exc_info.value.message == "Invalid stock location ID format"
        mock_medusa.assert_no_calls()

    async def test_by_location(self, inventory, mock_medusa):
        mock_medusa.set_response("admin", "GET", "/inventory-items", {"inventory_items": [ITEM], "count": 1})

        result = await inventory.get_inventory_by_location("sloc_1", TOKEN)

        assert mock_medusa.last_call["query"]["limit"] == 100
        assert result["count"] == 1

    async def test_get_item_requires_bearer(self, inventory, mock_medusa):
        with pytest.raises(UnauthorizedError):
            await inventory.get_item("iitem_1", "iitem_1")
        mock_medusa.assert_no_calls()

    async def test_get_item_not_found(self, inventory, mock_medusa):
        mock_medusa.set_error("admin", "GET", "/inventory-items/iitem_x", MedusaApiError("x", status_code=404))

        with pytest.raises(NotFoundError) as exc_info:
            await inventory.get_item("iitem_x", TOKEN)

        assert exc_info.value.message == "Inventory item with ID iitem_x not found"


class TestInventoryWritesGolden:
    """Golden: item updates and location levels"""

    async def test_update_item_partial(self, inventory, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/inventory-items/iitem_1", {"inventory_item": ITEM})

        await inventory.update_item("iitem_1", UpdateInventoryItemRequest(weight=0.2, title=None), TOKEN)

        assert mock_medusa.last_call["body"] == {"weight": 0.2}

    async def test_add_level(self, inventory, mock_medusa):
        mock_medusa.set_response("admin", "POST", "/inventory-items/iitem_1/location-levels", {"inventory_item": ITEM})

        await inventory.add_location_level(
            "iitem_1", CreateLocationLevelRequest(location_id="sloc_2", stocked_quantity=100), TOKEN
        )

        assert mock_medusa.last_call["body"] == {"location_id": "sloc_2", "stocked_quantity": 100}

    async def test_add_level_checks_location_prefix(self, inventory, mock_medusa):
        with pytest.raises(BadRequestError):
            await inventory.add_location_level(
                "iitem_1", CreateLocationLevelRequest(location_id="wh_2", stocked_quantity=1), TOKEN
            )
        mock_medusa.assert_no_calls()

    async def test_update_level_requires_a_field(self, inventory, mock_medusa):
        with pytest.raises(BadRequestError):
            await inventory.update_location_level("iitem_1", "sloc_1", UpdateLocationLevelRequest(), TOKEN)
        mock_medusa.assert_no_calls()

    async def test_update_level(self, inventory, mock_medusa):
        mock_medusa.set_response(
            "admin", "POST", "/inventory-items/iitem_1/location-levels/sloc_1", {"inventory_item": ITEM}
        )

        await inventory.update_location_level(
            "iitem_1", "sloc_1", UpdateLocationLevelRequest(stocked_quantity=40), TOKEN
        )

        assert mock_medusa.last_call["body"] == {"stocked_quantity": 40}

    async def test_delete_level(self, inventory, mock_medusa):
        result = await inventory.delete_location_level("iitem_1", "sloc_1", TOKEN)

        mock_medusa.assert_called("admin", "DELETE", "/inventory-items/iitem_1/location-levels/sloc_1")
        assert result == {"id": "iitem_1", "location_id": "sloc_1", "deleted": True}
