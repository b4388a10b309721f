"""
Cart API Routes
"""

from fastapi import APIRouter, Depends, status

from microservices.bff_service.dependencies import get_cart_service

from .cart_service import CartService
from .models import CreateCartRequest, AddLineItemRequest, UpdateLineItemRequest

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_cart(
    request: CreateCartRequest,
    service: CartService = Depends(get_cart_service),
):
    """Create a cart"""
    return await service.create_cart(request)


@router.get("/{cart_id}")
async def get_cart(cart_id: str, service: CartService = Depends(get_cart_service)):
    return await service.get_cart(cart_id)


@router.post("/{cart_id}/line-items", status_code=status.HTTP_201_CREATED)
async def add_line_item(
    cart_id: str,
    request: AddLineItemRequest,
    service: CartService = Depends(get_cart_service),
):
    """Add a variant to the cart"""
    return await service.add_line_item(cart_id, request)


@router.put("/{cart_id}/line-items/{line_item_id}")
async def update_line_item(
    cart_id: str,
    line_item_id: str,
    request: UpdateLineItemRequest,
    service: CartService = Depends(get_cart_service),
):
    return await service.update_line_item(cart_id, line_item_id, request)


@router.delete("/{cart_id}/line-items/{line_item_id}")
async def remove_line_item(
    cart_id: str,
    line_item_id: str,
    service: CartService = Depends(get_cart_service),
):
    return await service.remove_line_item(cart_id, line_item_id)
