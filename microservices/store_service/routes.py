"""
Store Administration API Routes
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_store_service

from .models import (
    UpdateStoreRequest,
    AddStoreCurrencyRequest,
    LinkChangesRequest,
    CreateSalesChannelRequest,
    UpdateSalesChannelRequest,
    CreateRegionRequest,
    UpdateRegionRequest,
    CreateStockLocationRequest,
    UpdateStockLocationRequest,
    CreateApiKeyRequest,
    UpdateApiKeyRequest,
    ApiKeyType,
)
from .store_service import StoreService, SALES_CHANNELS, REGIONS, STOCK_LOCATIONS, API_KEYS

router = APIRouter(prefix="/store", tags=["store"])


# ==================== Store ====================

@router.get("")
async def get_store(
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    """Store settings"""
    return await service.get_store(authorization)


@router.put("")
async def update_store(
    request: UpdateStoreRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.update_store(request, authorization)


@router.get("/currencies")
async def list_currencies(
    offset: int = Query(0, ge=0),
    limit: int = Query(200, ge=1, le=500),
    q: Optional[str] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_currencies(authorization, offset=offset, limit=limit, q=q)


@router.post("/currencies")
async def add_store_currency(
    request: AddStoreCurrencyRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.add_store_currency(request, authorization)


@router.delete("/currencies/{currency_code}")
async def remove_store_currency(
    currency_code: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.remove_store_currency(currency_code, authorization)


# ==================== Sales Channels ====================

@router.get("/sales-channels")
async def list_sales_channels(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    q: Optional[str] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_resources(
        SALES_CHANNELS, authorization, offset=offset, limit=limit, query={"q": q}
    )


@router.get("/sales-channels/{channel_id}")
async def get_sales_channel(
    channel_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.get_resource(SALES_CHANNELS, channel_id, authorization)


@router.post("/sales-channels", status_code=status.HTTP_201_CREATED)
async def create_sales_channel(
    request: CreateSalesChannelRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.create_resource(SALES_CHANNELS, request, authorization)


@router.put("/sales-channels/{channel_id}")
async def update_sales_channel(
    channel_id: str,
    request: UpdateSalesChannelRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.update_resource(SALES_CHANNELS, channel_id, request, authorization)


@router.delete("/sales-channels/{channel_id}")
async def delete_sales_channel(
    channel_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.delete_resource(SALES_CHANNELS, channel_id, authorization)


@router.post("/sales-channels/{channel_id}/products")
async def update_sales_channel_products(
    channel_id: str,
    request: LinkChangesRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    """Make products available (or not) in a sales channel"""
    return await service.update_links(SALES_CHANNELS, channel_id, "/products", request, authorization)


# ==================== Regions ====================

@router.get("/regions")
async def list_regions(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    q: Optional[str] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_resources(
        REGIONS, authorization, offset=offset, limit=limit, query={"q": q}
    )


@router.get("/regions/{region_id}")
async def get_region(
    region_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.get_resource(REGIONS, region_id, authorization)


@router.post("/regions", status_code=status.HTTP_201_CREATED)
async def create_region(
    request: CreateRegionRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.create_resource(REGIONS, request, authorization)


@router.put("/regions/{region_id}")
async def update_region(
    region_id: str,
    request: UpdateRegionRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.update_resource(REGIONS, region_id, request, authorization)


@router.delete("/regions/{region_id}")
async def delete_region(
    region_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.delete_resource(REGIONS, region_id, authorization)


# ==================== Stock Locations ====================

@router.get("/stock-locations")
async def list_stock_locations(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    q: Optional[str] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_resources(
        STOCK_LOCATIONS, authorization, offset=offset, limit=limit,
        query={"q": q, "fields": "*address"},
    )


@router.get("/stock-locations/{location_id}")
async def get_stock_location(
    location_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.get_resource(
        STOCK_LOCATIONS, location_id, authorization, query={"fields": "*address"}
    )


@router.post("/stock-locations", status_code=status.HTTP_201_CREATED)
async def create_stock_location(
    request: CreateStockLocationRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.create_resource(STOCK_LOCATIONS, request, authorization)


@router.put("/stock-locations/{location_id}")
async def update_stock_location(
    location_id: str,
    request: UpdateStockLocationRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.update_resource(STOCK_LOCATIONS, location_id, request, authorization)


@router.delete("/stock-locations/{location_id}")
async def delete_stock_location(
    location_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.delete_resource(STOCK_LOCATIONS, location_id, authorization)


@router.post("/stock-locations/{location_id}/sales-channels")
async def update_stock_location_sales_channels(
    location_id: str,
    request: LinkChangesRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.update_links(
        STOCK_LOCATIONS, location_id, "/sales-channels", request, authorization
    )


# ==================== API Keys ====================

@router.get("/api-keys")
async def list_api_keys(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    type: Optional[ApiKeyType] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_resources(
        API_KEYS, authorization, offset=offset, limit=limit,
        query={"type": type.value if type else None, "fields": "*sales_channels"},
    )


@router.get("/api-keys/{api_key_id}")
async def get_api_key(
    api_key_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.get_resource(
        API_KEYS, api_key_id, authorization, query={"fields": "*sales_channels"}
    )


@router.post("/api-keys", status_code=status.HTTP_201_CREATED)
async def create_api_key(
    request: CreateApiKeyRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.create_resource(API_KEYS, request, authorization)


@router.put("/api-keys/{api_key_id}")
async def update_api_key(
    api_key_id: str,
    request: UpdateApiKeyRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.update_resource(API_KEYS, api_key_id, request, authorization)


@router.delete("/api-keys/{api_key_id}")
async def delete_api_key(
    api_key_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.delete_resource(API_KEYS, api_key_id, authorization)


@router.post("/api-keys/{api_key_id}/revoke")
async def revoke_api_key(
    api_key_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    return await service.revoke_api_key(api_key_id, authorization)


@router.post("/api-keys/{api_key_id}/sales-channels")
async def update_api_key_sales_channels(
    api_key_id: str,
    request: LinkChangesRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: StoreService = Depends(get_store_service),
):
    """Scope a publishable key to sales channels"""
    return await service.update_links(
        API_KEYS, api_key_id, "/sales-channels", request, authorization
    )
