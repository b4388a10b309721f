"""
Checkout Service Business Logic

Drives a cart through shipping, payment and completion on the Medusa
storefront API. Payment sessions live on the cart's payment collection.
"""

import logging
from typing import Optional, Dict, Any

from core.errors import NotFoundError, is_not_found
from core.medusa_client import MedusaGatewayProtocol
from core.payload import compact
from microservices.cart_service.cart_service import CartService

from .models import (
    DEFAULT_PAYMENT_PROVIDER,
    ShippingAddressRequest,
    SelectShippingOptionRequest,
    CompleteCheckoutRequest,
)

logger = logging.getLogger(__name__)


class CheckoutService:
    """Checkout translator"""

    def __init__(self, medusa: MedusaGatewayProtocol):
        self.medusa = medusa

    async def get_shipping_options(self, cart_id: str) -> Dict[str, Any]:
        response = await self._cart_call(
            cart_id, "/shipping-options", query={"cart_id": cart_id}
        )
        return {
            "shippingOptions": [
                self.transform_shipping_option(option)
                for option in response.get("shipping_options") or []
            ]
        }

    async def update_shipping_address(
        self, cart_id: str, request: ShippingAddressRequest
    ) -> Dict[str, Any]:
        address = compact({
            "first_name": request.firstName,
            "last_name": request.lastName,
            "address_1": request.address1,
            "address_2": request.address2,
            "city": request.city,
            "province": request.province,
            "postal_code": request.postalCode,
            "country_code": request.countryCode.lower(),
            "phone": request.phone,
        })
        response = await self._cart_call(
            cart_id,
            f"/carts/{cart_id}",
            method="POST",
            body={"shipping_address": address, "email": request.email},
        )
        return {"cart": CartService.transform_cart(response["cart"])}

    async def select_shipping_option(
        self, cart_id: str, request: SelectShippingOptionRequest
    ) -> Dict[str, Any]:
        response = await self._cart_call(
            cart_id,
            f"/carts/{cart_id}/shipping-methods",
            method="POST",
            body={"option_id": request.optionId},
        )
        return {"cart": CartService.transform_cart(response["cart"])}

    async def initialize_payment_sessions(
        self, cart_id: str, provider_id: str = DEFAULT_PAYMENT_PROVIDER
    ) -> Dict[str, Any]:
        """Create (or reuse) the cart's payment collection and open a session on it"""
        cart_response = await self._cart_call(
            cart_id, f"/carts/{cart_id}", query={"fields": "+payment_collection.id"}
        )
        payment_collection = cart_response["cart"].get("payment_collection")

        if not payment_collection:
            created = await self._cart_call(
                cart_id, "/payment-collections", method="POST", body={"cart_id": cart_id}
            )
            payment_collection = created["payment_collection"]
            logger.info(f"Created payment collection {payment_collection.get('id')} for cart {cart_id}")

        session_response = await self.medusa.store_request(
            f"/payment-collections/{payment_collection['id']}/payment-sessions",
            method="POST",
            body={"provider_id": provider_id},
        )
        sessions = (session_response.get("payment_collection") or {}).get("payment_sessions") or []

        refreshed = await self._cart_call(cart_id, f"/carts/{cart_id}")
        return {
            "cart": CartService.transform_cart(refreshed["cart"]),
            "paymentSessions": [
                {
                    "id": session.get("id"),
                    "providerId": session.get("provider_id"),
                    "status": session.get("status"),
                }
                for session in sessions
            ],
        }

    async def complete_checkout(
        self, cart_id: str, request: Optional[CompleteCheckoutRequest] = None
    ) -> Dict[str, Any]:
        """Complete the cart; returns the order, or the cart and error when Medusa refuses"""
        if request and request.paymentProviderId:
            await self.initialize_payment_sessions(cart_id, request.paymentProviderId)

        response = await self._cart_call(cart_id, f"/carts/{cart_id}/complete", method="POST")

        if response.get("type") == "order":
            order = response["order"]
            logger.info(f"Cart {cart_id} completed as order {order.get('id')}")
            return {
                "type": "order",
                "order": {
                    "id": order.get("id"),
                    "displayId": order.get("display_id"),
                    "status": order.get("status"),
                    "email": order.get("email"),
                    "total": order.get("total"),
                    "subtotal": order.get("subtotal"),
                    "shippingTotal": order.get("shipping_total"),
                    "taxTotal": order.get("tax_total"),
                    "createdAt": order.get("created_at"),
                },
            }

        error = response.get("error") or {}
        logger.warning(f"Cart {cart_id} could not be completed: {error}")
        return {
            "type": response.get("type", "cart"),
            "error": error.get("message") if isinstance(error, dict) else str(error),
            "cart": CartService.transform_cart(response.get("cart") or {}),
        }

    async def _cart_call(self, cart_id: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            return await self.medusa.store_request(path, **kwargs)
        except Exception as e:
            if is_not_found(e):
                raise NotFoundError(f"Cart with ID {cart_id} not found", cart_id) from e
            raise

    @staticmethod
    def transform_shipping_option(option: Dict[str, Any]) -> Dict[str, Any]:
        amount = option.get("amount")
        calculated = option.get("calculated_price") or {}
        if amount is None:
            amount = calculated.get("calculated_amount")
        return {
            "id": option.get("id"),
            "name": option.get("name"),
            "amount": amount,
            "priceInclTax": bool(
                option.get("is_tax_inclusive", calculated.get("is_calculated_price_tax_inclusive", False))
            ),
        }
