"""
Inventory Service Business Logic

Inventory items and their per-location stock levels on the Medusa admin API.
Available quantity is computed by Medusa (stocked - reserved) and only
passed through here.
"""

import logging
from typing import Optional, Dict, Any

from core.admin_service_base import AdminServiceBase
from core.errors import BadRequestError
from core.payload import provided_fields

from .models import (
    INVENTORY_ITEM_ID_PREFIX,
    STOCK_LOCATION_ID_PREFIX,
    UpdateInventoryItemRequest,
    CreateLocationLevelRequest,
    UpdateLocationLevelRequest,
)

logger = logging.getLogger(__name__)

ITEM_FIELDS = "*location_levels"


class InventoryService(AdminServiceBase):
    """Inventory translator (admin)"""

    def _check_item(self, item_id: str):
        self.check_id(item_id, INVENTORY_ITEM_ID_PREFIX, "inventory item")

    def _check_location(self, location_id: str):
        self.check_id(location_id, STOCK_LOCATION_ID_PREFIX, "stock location")

    async def list_items(
        self,
        authorization: Optional[str],
        offset: int = 0,
        limit: int = 20,
        q: Optional[str] = None,
        sku: Optional[str] = None,
        location_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        if location_id:
            self._check_location(location_id)
        response = await self.admin_call(
            "/inventory-items",
            authorization,
            query={
                "offset": offset,
                "limit": limit,
                "q": q,
                "sku": sku,
                "location_levels[location_id]": location_id,
                "fields": ITEM_FIELDS,
            },
        )
        items = response.get("inventory_items") or []
        return {
            "inventory_items": [self.transform_item(item) for item in items],
            "count": response.get("count", len(items)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    async def get_inventory_by_location(
        self, location_id: str, authorization: Optional[str]
    ) -> Dict[str, Any]:
        result = await self.list_items(authorization, limit=100, location_id=location_id)
        return {"inventory_items": result["inventory_items"], "count": result["count"]}

    async def get_item(self, item_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        self.authorize(authorization)
        self._check_item(item_id)
        response = await self.admin_call(
            f"/inventory-items/{item_id}",
            authorization,
            not_found=f"Inventory item with ID {item_id} not found",
            resource_id=item_id,
            query={"fields": ITEM_FIELDS},
        )
        return self.transform_item(response["inventory_item"])

    async def update_item(
        self, item_id: str, request: UpdateInventoryItemRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self._check_item(item_id)
        body = provided_fields(request, nullable=("metadata",))
        response = await self.admin_call(
            f"/inventory-items/{item_id}",
            authorization,
            not_found=f"Inventory item with ID {item_id} not found",
            resource_id=item_id,
            method="POST",
            body=body,
        )
        return self.transform_item(response["inventory_item"])

    async def add_location_level(
        self, item_id: str, request: CreateLocationLevelRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self._check_item(item_id)
        self._check_location(request.location_id)
        body = provided_fields(request)
        response = await self.admin_call(
            f"/inventory-items/{item_id}/location-levels",
            authorization,
            not_found=f"Inventory item with ID {item_id} not found",
            resource_id=item_id,
            method="POST",
            body=body,
        )
        logger.info(f"Added level for {item_id} at {request.location_id}")
        return self.transform_item(response["inventory_item"])

    async def update_location_level(
        self,
        item_id: str,
        location_id: str,
        request: UpdateLocationLevelRequest,
        authorization: Optional[str],
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self._check_item(item_id)
        self._check_location(location_id)
        body = provided_fields(request)
        if not body:
            raise BadRequestError("Provide stocked_quantity or incoming_quantity")
        response = await self.admin_call(
            f"/inventory-items/{item_id}/location-levels/{location_id}",
            authorization,
            not_found="Inventory item or location level not found",
            resource_id=item_id,
            method="POST",
            body=body,
        )
        return self.transform_item(response["inventory_item"])

    async def delete_location_level(
        self, item_id: str, location_id: str, authorization: Optional[str]
    ) -> Dict[str, Any]:
        self.authorize(authorization)
        self._check_item(item_id)
        self._check_location(location_id)
        await self.admin_call(
            f"/inventory-items/{item_id}/location-levels/{location_id}",
            authorization,
            not_found="Inventory item or location level not found",
            resource_id=item_id,
            method="DELETE",
        )
        logger.info(f"Deleted level for {item_id} at {location_id}")
        return {"id": item_id, "location_id": location_id, "deleted": True}

    @staticmethod
    def transform_level(level: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": level.get("id"),
            "location_id": level.get("location_id"),
            "stocked_quantity": level.get("stocked_quantity"),
            "reserved_quantity": level.get("reserved_quantity"),
            "available_quantity": level.get("available_quantity"),
            "incoming_quantity": level.get("incoming_quantity"),
            "metadata": level.get("metadata"),
        }

    @staticmethod
    def transform_item(item: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": item.get("id"),
            "sku": item.get("sku"),
            "title": item.get("title"),
            "description": item.get("description"),
            "thumbnail": item.get("thumbnail"),
            "origin_country": item.get("origin_country"),
            "hs_code": item.get("hs_code"),
            "requires_shipping": item.get("requires_shipping"),
            "material": item.get("material"),
            "weight": item.get("weight"),
            "length": item.get("length"),
            "height": item.get("height"),
            "width": item.get("width"),
            "reserved_quantity": item.get("reserved_quantity"),
            "stocked_quantity": item.get("stocked_quantity"),
            "location_levels": [
                InventoryService.transform_level(level)
                for level in item.get("location_levels") or []
            ],
            "created_at": item.get("created_at"),
            "updated_at": item.get("updated_at"),
        }
