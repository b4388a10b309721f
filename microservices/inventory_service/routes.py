"""
Inventory API Routes
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_inventory_service

from .inventory_service import InventoryService
from .models import (
    UpdateInventoryItemRequest,
    CreateLocationLevelRequest,
    UpdateLocationLevelRequest,
)

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("")
async def list_inventory_items(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    q: Optional[str] = Query(None),
    sku: Optional[str] = Query(None),
    location_id: Optional[str] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.list_items(
        authorization, offset=offset, limit=limit, q=q, sku=sku, location_id=location_id
    )


@router.get("/location/{location_id}")
async def get_inventory_by_location(
    location_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    """Inventory items stocked at one location"""
    return await service.get_inventory_by_location(location_id, authorization)


@router.get("/{item_id}")
async def get_inventory_item(
    item_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.get_item(item_id, authorization)


@router.put("/{item_id}")
async def update_inventory_item(
    item_id: str,
    request: UpdateInventoryItemRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.update_item(item_id, request, authorization)


@router.post("/{item_id}/location-levels", status_code=status.HTTP_201_CREATED)
async def add_location_level(
    item_id: str,
    request: CreateLocationLevelRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.add_location_level(item_id, request, authorization)


@router.post("/{item_id}/location-levels/{location_id}")
async def update_location_level(
    item_id: str,
    location_id: str,
    request: UpdateLocationLevelRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.update_location_level(item_id, location_id, request, authorization)


@router.delete("/{item_id}/location-levels/{location_id}")
async def delete_location_level(
    item_id: str,
    location_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.delete_location_level(item_id, location_id, authorization)
