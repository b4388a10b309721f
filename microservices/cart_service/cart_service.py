"""
Cart Service Business Logic

Forwards cart operations to the Medusa storefront API and reshapes the
platform cart into the BFF cart DTO. All totals are computed by Medusa.
"""

import logging
from typing import Dict, Any

from core.errors import NotFoundError, is_not_found
from core.medusa_client import MedusaGatewayProtocol
from core.payload import compact

from .models import CreateCartRequest, AddLineItemRequest, UpdateLineItemRequest

logger = logging.getLogger(__name__)


class CartService:
    """Cart translator"""

    def __init__(self, medusa: MedusaGatewayProtocol):
        self.medusa = medusa

    async def create_cart(self, request: CreateCartRequest) -> Dict[str, Any]:
        body = compact({
            "region_id": request.regionId,
            "country_code": request.countryCode.lower() if request.countryCode else None,
            "sales_channel_id": request.salesChannelId,
            "email": request.email,
        })
        response = await self.medusa.store_request("/carts", method="POST", body=body)
        cart = response["cart"]
        logger.info(f"Created cart {cart.get('id')} in region {request.regionId}")
        return {"cart": self.transform_cart(cart)}

    async def get_cart(self, cart_id: str) -> Dict[str, Any]:
        response = await self._cart_call(cart_id, f"/carts/{cart_id}")
        return {"cart": self.transform_cart(response["cart"])}

    async def add_line_item(self, cart_id: str, request: AddLineItemRequest) -> Dict[str, Any]:
        response = await self._cart_call(
            cart_id,
            f"/carts/{cart_id}/line-items",
            method="POST",
            body={"variant_id": request.variantId, "quantity": request.quantity},
        )
        return {"cart": self.transform_cart(response["cart"])}

    async def update_line_item(
        self, cart_id: str, line_item_id: str, request: UpdateLineItemRequest
    ) -> Dict[str, Any]:
        response = await self._cart_call(
            cart_id,
            f"/carts/{cart_id}/line-items/{line_item_id}",
            method="POST",
            body={"quantity": request.quantity},
        )
        return {"cart": self.transform_cart(response["cart"])}

    async def remove_line_item(self, cart_id: str, line_item_id: str) -> Dict[str, Any]:
        response = await self._cart_call(
            cart_id,
            f"/carts/{cart_id}/line-items/{line_item_id}",
            method="DELETE",
        )
        # Medusa answers a line item deletion with the owning cart as "parent"
        cart = response.get("parent") or response.get("cart")
        return {"cart": self.transform_cart(cart or {})}

    async def _cart_call(self, cart_id: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            return await self.medusa.store_request(path, **kwargs)
        except Exception as e:
            if is_not_found(e):
                raise NotFoundError(f"Cart with ID {cart_id} not found", cart_id) from e
            raise

    @staticmethod
    def transform_cart(cart: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": cart.get("id"),
            "email": cart.get("email"),
            "regionId": cart.get("region_id"),
            "currencyCode": cart.get("currency_code"),
            "items": [
                {
                    "id": item.get("id"),
                    "title": item.get("title"),
                    "description": item.get("subtitle") or item.get("description"),
                    "thumbnail": item.get("thumbnail"),
                    "quantity": item.get("quantity"),
                    "unitPrice": item.get("unit_price"),
                    "subtotal": item.get("subtotal"),
                    "total": item.get("total"),
                    "variantId": item.get("variant_id"),
                    "productId": item.get("product_id"),
                }
                for item in cart.get("items") or []
            ],
            "subtotal": cart.get("subtotal"),
            "discountTotal": cart.get("discount_total"),
            "shippingTotal": cart.get("shipping_total"),
            "taxTotal": cart.get("tax_total"),
            "total": cart.get("total"),
            "createdAt": cart.get("created_at"),
            "updatedAt": cart.get("updated_at"),
        }
