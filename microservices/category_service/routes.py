"""
Category API Routes
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_category_service

from .category_service import CategoryService
from .models import CreateCategoryRequest, UpdateCategoryRequest

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
async def list_categories(
    offset: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    q: Optional[str] = Query(None),
    parent_category_id: Optional[str] = Query(None),
    include_descendants_tree: Optional[bool] = Query(None),
    authorization: Optional[str] = Depends(get_authorization),
    service: CategoryService = Depends(get_category_service),
):
    """List categories"""
    return await service.list_categories(
        authorization=authorization,
        offset=offset,
        limit=limit,
        q=q,
        parent_category_id=parent_category_id,
        include_descendants_tree=include_descendants_tree,
    )


@router.get("/tree")
async def get_category_tree(service: CategoryService = Depends(get_category_service)):
    """Public category tree"""
    return await service.get_category_tree()


@router.get("/{category_id}")
async def get_category(
    category_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_category(category_id, authorization)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CreateCategoryRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: CategoryService = Depends(get_category_service),
):
    return await service.create_category(request, authorization)


@router.put("/{category_id}")
async def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    authorization: Optional[str] = Depends(get_authorization),
    service: CategoryService = Depends(get_category_service),
):
    return await service.update_category(category_id, request, authorization)


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: CategoryService = Depends(get_category_service),
):
    return await service.delete_category(category_id, authorization)
