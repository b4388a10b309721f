"""
Collection API Routes
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_collection_service

from .collection_service import CollectionService
from .models import CreateCollectionRequest, UpdateCollectionRequest, CollectionProductsRequest

router = APIRouter(prefix="/collections", tags=["collections"])


@router.get("")
async def list_collections(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    q: Optional[str] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: CollectionService = Depends(get_collection_service),
):
    return await service.list_collections(authorization, offset=offset, limit=limit, q=q)


@router.get("/{collection_id}")
async def get_collection(
    collection_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: CollectionService = Depends(get_collection_service),
):
    return await service.get_collection(collection_id, authorization)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_collection(
    request: CreateCollectionRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: CollectionService = Depends(get_collection_service),
):
    return await service.create_collection(request, authorization)


@router.put("/{collection_id}")
async def update_collection(
    collection_id: str,
    request: UpdateCollectionRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: CollectionService = Depends(get_collection_service),
):
    return await service.update_collection(collection_id, request, authorization)


@router.delete("/{collection_id}")
async def delete_collection(
    collection_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: CollectionService = Depends(get_collection_service),
):
    return await service.delete_collection(collection_id, authorization)


@router.post("/{collection_id}/products")
async def update_collection_products(
    collection_id: str,
    request: CollectionProductsRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: CollectionService = Depends(get_collection_service),
):
    """Add or remove products from a collection"""
    return await service.update_collection_products(collection_id, request, authorization)
