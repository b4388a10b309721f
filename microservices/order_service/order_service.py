"""
Order Service Business Logic

Read-only access to customer orders on the Medusa storefront API.
"""

import logging
from typing import Optional, Dict, Any

from core.auth_dependencies import auth_headers, require_authorization
from core.errors import NotFoundError, is_not_found
from core.medusa_client import MedusaGatewayProtocol

logger = logging.getLogger(__name__)


class OrderService:
    """Order translator"""

    def __init__(self, medusa: MedusaGatewayProtocol):
        self.medusa = medusa

    async def get_orders(
        self, authorization: Optional[str], offset: int = 0, limit: int = 20
    ) -> Dict[str, Any]:
        """Orders of the authenticated customer"""
        require_authorization(authorization)
        response = await self.medusa.store_request(
            "/orders",
            headers=auth_headers(authorization),
            query={"offset": offset, "limit": limit},
        )
        orders = response.get("orders") or []
        return {
            "orders": [self.transform_order(order) for order in orders],
            "count": response.get("count", len(orders)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    async def get_order(self, order_id: str, authorization: Optional[str]) -> Dict[str, Any]:
        require_authorization(authorization)
        return await self._fetch_order(order_id, auth_headers(authorization))

    async def get_order_confirmation(self, order_id: str) -> Dict[str, Any]:
        """Order lookup for the post-checkout confirmation screen (guest friendly)"""
        return await self._fetch_order(order_id, {})

    async def _fetch_order(self, order_id: str, headers: Dict[str, str]) -> Dict[str, Any]:
        try:
            response = await self.medusa.store_request(f"/orders/{order_id}", headers=headers)
        except Exception as e:
            if is_not_found(e):
                raise NotFoundError(f"Order with ID {order_id} not found", order_id) from e
            raise
        return {"order": self.transform_order(response["order"])}

    @staticmethod
    def transform_order(order: Dict[str, Any]) -> Dict[str, Any]:
        address = order.get("shipping_address")
        return {
            "id": order.get("id"),
            "displayId": order.get("display_id"),
            "status": order.get("status"),
            "fulfillmentStatus": order.get("fulfillment_status"),
            "paymentStatus": order.get("payment_status"),
            "email": order.get("email"),
            "currencyCode": order.get("currency_code"),
            "items": [
                {
                    "id": item.get("id"),
                    "title": item.get("title"),
                    "description": item.get("subtitle") or item.get("description"),
                    "thumbnail": item.get("thumbnail"),
                    "quantity": item.get("quantity"),
                    "unitPrice": item.get("unit_price"),
                    "total": item.get("total"),
                }
                for item in order.get("items") or []
            ],
            "shippingAddress": {
                "firstName": address.get("first_name"),
                "lastName": address.get("last_name"),
                "address1": address.get("address_1"),
                "address2": address.get("address_2"),
                "city": address.get("city"),
                "province": address.get("province"),
                "postalCode": address.get("postal_code"),
                "countryCode": address.get("country_code"),
                "phone": address.get("phone"),
            } if address else None,
            "subtotal": order.get("subtotal"),
            "shippingTotal": order.get("shipping_total"),
            "taxTotal": order.get("tax_total"),
            "total": order.get("total"),
            "createdAt": order.get("created_at"),
            "updatedAt": order.get("updated_at"),
        }
