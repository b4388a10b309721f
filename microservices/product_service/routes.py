"""
Product API Routes
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_product_service

from .models import CreateProductRequest
from .product_service import ProductService, DEFAULT_LIMIT

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(
    offset: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    search: Optional[str] = Query(None),
    collection_id: Optional[str] = Query(None, alias="collectionId"),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    region_id: Optional[str] = Query(None, alias="regionId"),
    service: ProductService = Depends(get_product_service),
):
    """List products"""
    return await service.get_products(
        offset=offset,
        limit=limit,
        search=search,
        collection_id=collection_id,
        category_id=category_id,
        region_id=region_id,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    request: CreateProductRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: ProductService = Depends(get_product_service),
):
    """Create a product (admin)"""
    return await service.create_product(request, authorization)


@router.get("/handle/{handle}")
async def get_product_by_handle(
    handle: str,
    region_id: Optional[str] = Query(None, alias="regionId"),
    service: ProductService = Depends(get_product_service),
):
    return await service.get_product_by_handle(handle, region_id=region_id)


@router.get("/category/{category_id}")
async def list_products_by_category(
    category_id: str,
    offset: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    service: ProductService = Depends(get_product_service),
):
    return await service.get_products_by_category(category_id, offset=offset, limit=limit)


@router.get("/collection/{collection_id}")
async def list_products_by_collection(
    collection_id: str,
    offset: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    service: ProductService = Depends(get_product_service),
):
    return await service.get_products_by_collection(collection_id, offset=offset, limit=limit)


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    region_id: Optional[str] = Query(None, alias="regionId"),
    service: ProductService = Depends(get_product_service),
):
    """Get a product by id"""
    return await service.get_product(product_id, region_id=region_id)
