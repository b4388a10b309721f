"""
Order API Routes
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_order_service

from .order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("")
async def list_orders(
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    authorization: Optional[str] = Depends(get_authorization),
    service: OrderService = Depends(get_order_service),
):
    """Orders of the authenticated customer"""
    return await service.get_orders(authorization, offset=offset, limit=limit)


@router.get("/confirmation/{order_id}")
async def get_order_confirmation(
    order_id: str,
    service: OrderService = Depends(get_order_service),
):
    return await service.get_order_confirmation(order_id)


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    authorization: Optional[str] = Depends(get_authorization),
    service: OrderService = Depends(get_order_service),
):
    return await service.get_order(order_id, authorization)
