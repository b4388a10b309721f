"""
Product Service Business Logic

Translates the storefront product catalogue and admin product creation
between the BFF contract (camelCase) and the Medusa product resource.
"""

import logging
from typing import Optional, List, Dict, Any

from core.auth_dependencies import auth_headers, require_bearer_token
from core.errors import NotFoundError, is_not_found
from core.medusa_client import MedusaGatewayProtocol
from core.payload import compact, normalize_handle, resolve_variant_options

from .models import CreateProductRequest

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


class ProductService:
    """Product catalogue translator"""

    def __init__(self, medusa: MedusaGatewayProtocol):
        self.medusa = medusa

    # ====================
    # Storefront catalogue
    # ====================

    async def get_products(
        self,
        offset: int = 0,
        limit: int = DEFAULT_LIMIT,
        search: Optional[str] = None,
        collection_id: Optional[str] = None,
        category_id: Optional[str] = None,
        region_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """List published products with optional search/collection/category filters"""
        response = await self.medusa.store_request(
            "/products",
            query={
                "offset": offset,
                "limit": limit,
                "q": search,
                "collection_id": collection_id,
                "category_id": category_id,
                "region_id": region_id,
            },
        )
        products = response.get("products") or []
        return {
            "products": [self.transform_product(p) for p in products],
            "count": response.get("count", len(products)),
            "offset": response.get("offset", offset),
            "limit": response.get("limit", limit),
        }

    async def get_product(self, product_id: str, region_id: Optional[str] = None) -> Dict[str, Any]:
        try:
            response = await self.medusa.store_request(
                f"/products/{product_id}", query={"region_id": region_id}
            )
        except Exception as e:
            if is_not_found(e):
                raise NotFoundError(f"Product with ID {product_id} not found", product_id) from e
            raise
        return {"product": self.transform_product(response["product"])}

    async def get_product_by_handle(self, handle: str, region_id: Optional[str] = None) -> Dict[str, Any]:
        response = await self.medusa.store_request(
            "/products", query={"handle": handle, "limit": 1, "region_id": region_id}
        )
        products = response.get("products") or []
        if not products:
            raise NotFoundError(f"Product with handle {handle} not found", handle)
        return {"product": self.transform_product(products[0])}

    async def get_products_by_category(
        self, category_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self.get_products(offset=offset, limit=limit, category_id=category_id)

    async def get_products_by_collection(
        self, collection_id: str, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self.get_products(offset=offset, limit=limit, collection_id=collection_id)

    # ====================
    # Admin
    # ====================

    async def create_product(
        self, request: CreateProductRequest, authorization: Optional[str]
    ) -> Dict[str, Any]:
        """Create a product through the admin API"""
        require_bearer_token(authorization)
        body = self.build_create_payload(request)

        try:
            response = await self.medusa.admin_request(
                "/products", method="POST", body=body, headers=auth_headers(authorization)
            )
        except Exception as e:
            logger.error(f"Error creating product '{request.title}': {e}")
            raise

        product = response["product"]
        logger.info(f"Created product {product.get('id')} ({product.get('handle')})")
        return {"product": self.transform_product(product)}

    @staticmethod
    def build_create_payload(request: CreateProductRequest) -> Dict[str, Any]:
        """Admin create body; variant option maps resolved from explicit maps or titles"""
        options = [option.model_dump() for option in request.options]

        body = compact({
            "title": request.title,
            "subtitle": request.subtitle,
            "description": request.description,
            "handle": normalize_handle(request.handle) if request.handle else None,
            "is_giftcard": request.is_giftcard,
            "status": request.status.value,
            "thumbnail": request.thumbnail,
            "collection_id": request.collection_id,
            "shipping_profile_id": request.shipping_profile_id,
            "metadata": request.metadata,
        })
        if request.images:
            body["images"] = [{"url": url} for url in request.images]
        if request.categories:
            body["categories"] = [{"id": category_id} for category_id in request.categories]
        if request.sales_channels:
            body["sales_channels"] = [{"id": channel_id} for channel_id in request.sales_channels]
        if options:
            body["options"] = options

        variants: List[Dict[str, Any]] = []
        for variant in request.variants:
            payload = compact({
                "title": variant.title,
                "sku": variant.sku,
                "allow_backorder": variant.allow_backorder,
                "manage_inventory": variant.manage_inventory,
            })
            payload["prices"] = [price.model_dump() for price in variant.prices]
            resolved = resolve_variant_options(variant.title, options, variant.options)
            if resolved:
                payload["options"] = resolved
            variants.append(payload)
        if variants:
            body["variants"] = variants

        return body

    # ====================
    # Transforms
    # ====================

    @staticmethod
    def transform_product(product: Dict[str, Any]) -> Dict[str, Any]:
        collection = product.get("collection")
        return {
            "id": product.get("id"),
            "title": product.get("title"),
            "subtitle": product.get("subtitle"),
            "description": product.get("description"),
            "handle": product.get("handle"),
            "thumbnail": product.get("thumbnail"),
            "images": [
                {"id": image.get("id"), "url": image.get("url")}
                for image in product.get("images") or []
            ],
            "options": [
                {
                    "id": option.get("id"),
                    "title": option.get("title"),
                    "values": [value.get("value") for value in option.get("values") or []],
                }
                for option in product.get("options") or []
            ],
            "variants": [
                ProductService.transform_variant(variant)
                for variant in product.get("variants") or []
            ],
            "collection": {
                "id": collection.get("id"),
                "title": collection.get("title"),
                "handle": collection.get("handle"),
            } if collection else None,
            "categories": [
                {"id": category.get("id"), "name": category.get("name"), "handle": category.get("handle")}
                for category in product.get("categories") or []
            ],
            "createdAt": product.get("created_at"),
            "updatedAt": product.get("updated_at"),
        }

    @staticmethod
    def transform_variant(variant: Dict[str, Any]) -> Dict[str, Any]:
        prices = [
            {"currencyCode": price.get("currency_code"), "amount": price.get("amount")}
            for price in variant.get("prices") or []
        ]
        calculated = variant.get("calculated_price")
        if not prices and calculated:
            prices = [{
                "currencyCode": calculated.get("currency_code"),
                "amount": calculated.get("calculated_amount"),
            }]
        return {
            "id": variant.get("id"),
            "title": variant.get("title"),
            "sku": variant.get("sku"),
            "inventoryQuantity": variant.get("inventory_quantity"),
            "prices": prices,
        }
