"""
Checkout API Routes
"""

from fastapi import APIRouter, Body, Depends
from typing import Optional

from microservices.bff_service.dependencies import get_checkout_service

from .checkout_service import CheckoutService
from .models import (
    ShippingAddressRequest,
    SelectShippingOptionRequest,
    PaymentSessionRequest,
    CompleteCheckoutRequest,
)

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.get("/{cart_id}/shipping-options")
async def get_shipping_options(
    cart_id: str,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Shipping options available for the cart"""
    return await service.get_shipping_options(cart_id)


@router.post("/{cart_id}/shipping-address")
async def update_shipping_address(
    cart_id: str,
    request: ShippingAddressRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    return await service.update_shipping_address(cart_id, request)


@router.post("/{cart_id}/shipping-option")
async def select_shipping_option(
    cart_id: str,
    request: SelectShippingOptionRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    return await service.select_shipping_option(cart_id, request)


@router.post("/{cart_id}/payment-sessions")
async def initialize_payment_sessions(
    cart_id: str,
    request: Optional[PaymentSessionRequest] = Body(None),
    service: CheckoutService = Depends(get_checkout_service),
):
    request = request or PaymentSessionRequest()
    return await service.initialize_payment_sessions(cart_id, request.providerId)


@router.post("/{cart_id}/complete")
async def complete_checkout(
    cart_id: str,
    request: Optional[CompleteCheckoutRequest] = Body(None),
    service: CheckoutService = Depends(get_checkout_service),
):
    """Complete the cart and place the order"""
    return await service.complete_checkout(cart_id, request)
